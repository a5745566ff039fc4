"""Top-level HarnessConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from xiaoju_eval.config.domain.dataset import DatasetConfig
from xiaoju_eval.config.domain.execution import ExecutionConfig
from xiaoju_eval.config.domain.executor import ExecutorConfig


class HarnessConfig(BaseModel, frozen=True):
    """Root configuration aggregate for one evaluation run.

    ``scorers`` lists scorer names; ``None`` selects the default scorer set.
    """

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    dataset: DatasetConfig
    executor: ExecutorConfig
    scorers: list[str] | None = Field(default=None, min_length=1)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
