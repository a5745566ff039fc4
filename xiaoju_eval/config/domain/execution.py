"""Execution configuration models."""

from pydantic import BaseModel, Field

DEFAULT_CONCURRENCY = 3
DEFAULT_TIMEOUT_MS = 30_000


class ExecutionConfig(BaseModel, frozen=True):
    concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
