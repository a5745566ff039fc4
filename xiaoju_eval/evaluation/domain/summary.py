"""EvalRunResult — the aggregate result of a completed evaluation run."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from xiaoju_eval.evaluation.domain.result import EvalResult

type RunId = str


class EvalRunResult(BaseModel, frozen=True):
    """Immutable summary returned when an evaluation run completes.

    ``average_scores`` only holds scorers that produced at least one value on a
    non-errored sample. ``results`` follows dataset order.
    """

    run_id: RunId = Field(min_length=1)
    dataset_name: str = Field(min_length=1)
    started_at: datetime
    ended_at: datetime
    total_samples: int = Field(ge=0)
    passed_count: int = Field(ge=0)
    failed_count: int = Field(ge=0)
    error_count: int = Field(ge=0)
    average_scores: dict[str, float]
    results: list[EvalResult]

    @model_validator(mode="after")
    def _counts_add_up(self) -> "EvalRunResult":
        counted = self.passed_count + self.failed_count + self.error_count
        if not (counted == self.total_samples == len(self.results)):
            raise ValueError(
                f"passed+failed+errored={counted}, total_samples={self.total_samples},"
                f" results={len(self.results)} must all be equal"
            )
        return self

    @property
    def elapsed_ms(self) -> int:
        return int((self.ended_at - self.started_at).total_seconds() * 1000)

    @property
    def pass_rate(self) -> float:
        """Fraction of samples that passed; 0.0 for an empty run."""
        if self.total_samples == 0:
            return 0.0
        return self.passed_count / self.total_samples
