"""Aggregator — reduces per-sample results to run-level counts and averages."""

import statistics
from dataclasses import dataclass

from xiaoju_eval.evaluation.domain.result import EvalResult


@dataclass(frozen=True)
class RunTally:
    """Counts and per-scorer averages for one run."""

    passed_count: int
    failed_count: int
    error_count: int
    average_scores: dict[str, float]


def aggregate(results: list[EvalResult], scorer_names: list[str]) -> RunTally:
    """Count outcomes and average each scorer over the non-errored results.

    A scorer with no value on any non-errored result is left out of
    ``average_scores`` rather than reported as 0.
    """
    passed_count = sum(1 for r in results if r.passed and r.error is None)
    failed_count = sum(1 for r in results if not r.passed and r.error is None)
    error_count = sum(1 for r in results if r.error is not None)

    scored = [r for r in results if r.error is None]
    average_scores: dict[str, float] = {}
    for name in scorer_names:
        values = [r.scores[name] for r in scored if name in r.scores]
        if values:
            average_scores[name] = statistics.fmean(values)

    return RunTally(
        passed_count=passed_count,
        failed_count=failed_count,
        error_count=error_count,
        average_scores=average_scores,
    )
