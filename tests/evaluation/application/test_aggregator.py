"""Tests for run-level aggregation."""

import pytest

from xiaoju_eval.evaluation.application.aggregator import aggregate
from tests.evaluation.helpers import make_result


class TestCounts:
    def test_counts_by_outcome(self) -> None:
        results = [
            make_result("a", {"intent": 1.0}, passed=True),
            make_result("b", {"intent": 0.0}, passed=False),
            make_result("c", passed=False, error="boom"),
            make_result("d", {"intent": 1.0}, passed=True),
        ]

        tally = aggregate(results=results, scorer_names=["intent"])

        assert (tally.passed_count, tally.failed_count, tally.error_count) == (2, 1, 1)

    def test_counts_sum_to_total(self) -> None:
        results = [
            make_result("a", passed=True),
            make_result("b", passed=False),
            make_result("c", passed=False, error="timeout"),
        ]

        tally = aggregate(results=results, scorer_names=[])

        assert tally.passed_count + tally.failed_count + tally.error_count == 3

    def test_empty_results(self) -> None:
        tally = aggregate(results=[], scorer_names=["intent"])

        assert (tally.passed_count, tally.failed_count, tally.error_count) == (0, 0, 0)
        assert tally.average_scores == {}


class TestAverages:
    def test_average_per_scorer(self) -> None:
        results = [
            make_result("a", {"intent": 1.0, "tone": 0.5}),
            make_result("b", {"intent": 0.0, "tone": 0.7}, passed=False),
        ]

        tally = aggregate(results=results, scorer_names=["intent", "tone"])

        assert tally.average_scores["intent"] == pytest.approx(0.5)
        assert tally.average_scores["tone"] == pytest.approx(0.6)

    def test_errored_results_are_excluded(self) -> None:
        results = [
            make_result("a", {"intent": 1.0}),
            make_result("b", passed=False, error="boom"),
        ]

        tally = aggregate(results=results, scorer_names=["intent"])

        assert tally.average_scores == {"intent": 1.0}

    def test_scorer_absent_when_every_sample_errored(self) -> None:
        results = [
            make_result("a", passed=False, error="boom"),
            make_result("b", passed=False, error="Evaluation timeout"),
        ]

        tally = aggregate(results=results, scorer_names=["intent", "toolCall"])

        assert "intent" not in tally.average_scores
        assert tally.average_scores == {}

    def test_only_configured_scorers_are_averaged(self) -> None:
        results = [make_result("a", {"intent": 1.0, "extra": 0.2})]

        tally = aggregate(results=results, scorer_names=["intent"])

        assert tally.average_scores == {"intent": 1.0}

    def test_averages_follow_scorer_order(self) -> None:
        results = [make_result("a", {"b": 1.0, "a": 1.0})]

        tally = aggregate(results=results, scorer_names=["a", "b"])

        assert list(tally.average_scores) == ["a", "b"]
