"""Scorer registry — builds fresh scorer instances by name.

Nothing here is module-level mutable state: every call returns new
instances, and callers hand the resulting list to the run explicitly.
"""

from collections.abc import Iterable

from xiaoju_eval.scoring.domain.errors import ScorerNotFoundError
from xiaoju_eval.scoring.domain.scorer import Scorer
from xiaoju_eval.scoring.domain.scorers import (
    ContextScorer,
    IntentScorer,
    LengthScorer,
    RelevanceScorer,
    ToneScorer,
    ToolCallScorer,
)


def default_scorers() -> list[Scorer]:
    """The scorers a run uses when none are given. Context is opt-in."""
    return [
        IntentScorer(),
        ToolCallScorer(),
        RelevanceScorer(),
        ToneScorer(),
        LengthScorer(),
    ]


def all_scorers() -> list[Scorer]:
    """Every shipped scorer, defaults first."""
    return [*default_scorers(), ContextScorer()]


def get_scorer(name: str) -> Scorer | None:
    return next((s for s in all_scorers() if s.name == name), None)


def get_scorer_names() -> list[str]:
    """Names of the default scorer set, in run order."""
    return [s.name for s in default_scorers()]


def all_scorer_names() -> list[str]:
    return [s.name for s in all_scorers()]


def resolve_scorers(names: Iterable[str]) -> list[Scorer]:
    """Return one scorer per name, in the given order.

    Raises:
        ScorerNotFoundError: listing every unknown name, not just the first.
    """
    by_name = {s.name: s for s in all_scorers()}
    requested = list(names)
    unknown = [name for name in requested if name not in by_name]
    if unknown:
        raise ScorerNotFoundError(names=unknown, known=list(by_name))
    return [by_name[name] for name in requested]
