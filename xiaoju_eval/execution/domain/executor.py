"""Executor port — the AI system under test, seen as an opaque async function."""

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExecutorResponse(BaseModel, frozen=True):
    """What the system under test produced for one input."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    output: str
    intent: str | None = None
    tool_calls: list[str] | None = None


class Executor(Protocol):
    """Structural interface for the system under test.

    ``input`` and ``context`` are passed through from the sample unchanged.
    A plain mapping with the ExecutorResponse keys is accepted as a return value.
    """

    async def __call__(
        self, input: str, context: dict[str, Any] | None
    ) -> ExecutorResponse | Mapping[str, Any]: ...
