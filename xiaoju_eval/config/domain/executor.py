"""Executor configuration model."""

from pydantic import BaseModel, Field


class ExecutorConfig(BaseModel, frozen=True):
    # "package.module:attribute"
    target: str = Field(min_length=3, pattern=r"^[\w.]+:[\w.]+$")
