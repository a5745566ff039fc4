"""Dataset source configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class DatasetConfig(BaseModel, frozen=True):
    """Where the samples come from: a built-in dataset or a JSONL file."""

    builtin: str | None = Field(default=None, min_length=1)
    path: Path | None = None
    name: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "DatasetConfig":
        if (self.builtin is None) == (self.path is None):
            raise ValueError("exactly one of 'builtin' or 'path' must be set")
        return self
