"""EvalResult — the outcome of evaluating one sample."""

from pydantic import BaseModel, Field, model_validator

PASS_THRESHOLD = 0.6


class EvalResult(BaseModel, frozen=True):
    """Immutable record of one sample: what the executor said and how it scored.

    ``error`` is set iff the executor failed or timed out, in which case
    ``passed`` is always False.
    """

    sample_id: str = Field(min_length=1)
    actual_output: str
    actual_intent: str | None = None
    actual_tool_calls: list[str] | None = None
    scores: dict[str, float] = Field(default_factory=dict)
    passed: bool
    duration_ms: int = Field(ge=0)
    error: str | None = None

    @model_validator(mode="after")
    def _errored_never_passes(self) -> "EvalResult":
        if self.error is not None and self.passed:
            raise ValueError("an errored result cannot be marked passed")
        return self


def all_scores_pass(scores: dict[str, float]) -> bool:
    """True iff every score meets PASS_THRESHOLD; an empty map passes."""
    return all(score >= PASS_THRESHOLD for score in scores.values())
