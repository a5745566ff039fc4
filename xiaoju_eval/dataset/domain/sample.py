"""EvalSample value objects — one labeled test case from a dataset."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SampleBody(BaseModel, frozen=True):
    """Everything about a test case except its id.

    Field names are accepted in snake_case or camelCase, so sample files
    written as ``{"expectedIntent": "create"}`` load unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    input: str
    expected_output: str | None = None
    expected_intent: str | None = None
    expected_tool_calls: list[str] | None = None
    context: dict[str, Any] | None = None
    tags: list[str] = Field(default_factory=list)


class EvalSample(SampleBody, frozen=True):
    """Immutable test case with a dataset-assigned id."""

    id: str = Field(min_length=1)
