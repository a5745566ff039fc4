"""EvalRunConfig — everything one run needs besides the executor."""

from dataclasses import dataclass, field

from xiaoju_eval.config.domain.execution import DEFAULT_CONCURRENCY, DEFAULT_TIMEOUT_MS
from xiaoju_eval.dataset.domain.dataset import Dataset
from xiaoju_eval.evaluation.domain.errors import InvalidRunConfigError
from xiaoju_eval.scoring.domain.registry import default_scorers
from xiaoju_eval.scoring.domain.scorer import Scorer


@dataclass(frozen=True)
class EvalRunConfig:
    """Input to a run. Scorer names must be unique within one run.

    Raises:
        InvalidRunConfigError: on non-positive concurrency or timeout, or
            duplicate scorer names.
    """

    dataset: Dataset
    scorers: list[Scorer] = field(default_factory=default_scorers)
    concurrency: int = DEFAULT_CONCURRENCY
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.concurrency <= 0:
            raise InvalidRunConfigError(
                f"concurrency must be >= 1, got {self.concurrency}"
            )
        if self.timeout_ms <= 0:
            raise InvalidRunConfigError(f"timeout_ms must be > 0, got {self.timeout_ms}")

        seen: set[str] = set()
        for scorer in self.scorers:
            if scorer.name in seen:
                raise InvalidRunConfigError(f"duplicate scorer name '{scorer.name}'")
            seen.add(scorer.name)

    @property
    def scorer_names(self) -> list[str]:
        return [scorer.name for scorer in self.scorers]
