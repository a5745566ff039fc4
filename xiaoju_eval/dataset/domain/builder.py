"""Dataset builder — assigns stable ids to sample bodies."""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.dataset.domain.sample import EvalSample, SampleBody


def create_dataset(
    name: str,
    samples: Sequence[SampleBody | Mapping[str, Any]],
    description: str | None = None,
) -> Dataset:
    """Build a Dataset, giving the i-th body the id ``{name}_{i}``."""
    built: list[EvalSample] = []
    for index, body in enumerate(samples):
        if isinstance(body, SampleBody):
            fields = body.model_dump()
        else:
            fields = SampleBody.model_validate(body).model_dump()
        fields["id"] = f"{name}_{index}"
        built.append(EvalSample.model_validate(fields))

    return Dataset(
        name=name,
        samples=built,
        created_at=datetime.now(UTC),
        description=description,
    )
