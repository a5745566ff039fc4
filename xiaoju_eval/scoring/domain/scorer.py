"""Scorer Protocol — structural interface for every judge of one quality axis."""

from collections.abc import Awaitable
from typing import Protocol

from xiaoju_eval.dataset.domain.sample import EvalSample
from xiaoju_eval.evaluation.domain.result import EvalResult


class Scorer(Protocol):
    """A named, stateless judge mapping (sample, result) to a score in [0, 1].

    ``name`` keys the score in EvalResult.scores and must be unique within a
    run. ``weight`` is advisory metadata only. ``score`` may be a plain or a
    coroutine function.
    """

    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def weight(self) -> float: ...

    def score(
        self, sample: EvalSample, result: EvalResult
    ) -> float | Awaitable[float]: ...
