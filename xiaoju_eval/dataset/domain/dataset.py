"""Dataset — a named, ordered collection of EvalSamples."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from xiaoju_eval.dataset.domain.sample import EvalSample


class Dataset(BaseModel, frozen=True):
    """Immutable dataset. Sample ids are unique within one dataset."""

    name: str = Field(min_length=1)
    samples: list[EvalSample]
    created_at: datetime
    description: str | None = None

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "Dataset":
        seen: set[str] = set()
        duplicates: list[str] = []
        for sample in self.samples:
            if sample.id in seen and sample.id not in duplicates:
                duplicates.append(sample.id)
            seen.add(sample.id)
        if duplicates:
            raise ValueError(f"duplicate sample ids: {', '.join(duplicates)}")
        return self
