"""SampleEvaluator — runs one sample through the executor and every scorer."""

import asyncio
import inspect
import math
import time

from xiaoju_eval.dataset.domain.sample import EvalSample
from xiaoju_eval.evaluation.domain.observer import EvaluationObserver
from xiaoju_eval.evaluation.domain.result import EvalResult, all_scores_pass
from xiaoju_eval.execution.domain.executor import Executor, ExecutorResponse
from xiaoju_eval.scoring.domain.scorer import Scorer

TIMEOUT_MESSAGE = "Evaluation timeout"


class SampleEvaluator:
    """Evaluates single samples for one run.

    Only the executor call is bounded by the timeout; scorers are assumed fast.
    Executor failures become an ``error``-bearing EvalResult and scorer
    failures become a 0.0 score, so ``evaluate`` does not raise for either.
    """

    def __init__(
        self,
        run_id: str,
        executor: Executor,
        scorers: list[Scorer],
        timeout_ms: int,
        observer: EvaluationObserver,
    ) -> None:
        self._run_id = run_id
        self._executor = executor
        self._scorers = scorers
        self._timeout_seconds = timeout_ms / 1000
        self._observer = observer

    async def evaluate(self, sample: EvalSample) -> EvalResult:
        started_at = time.monotonic()
        self._observer.sample_started(run_id=self._run_id, sample_id=sample.id)

        deadline = asyncio.timeout(self._timeout_seconds)
        try:
            response = await self._execute(sample=sample, deadline=deadline)
        except TimeoutError as exc:
            # A TimeoutError raised by the executor itself is an ordinary failure.
            if deadline.expired():
                reason = TIMEOUT_MESSAGE
            else:
                reason = str(exc) or type(exc).__name__
            return self._errored(sample=sample, reason=reason, started_at=started_at)
        except Exception as exc:  # noqa: BLE001
            reason = str(exc) or type(exc).__name__
            return self._errored(sample=sample, reason=reason, started_at=started_at)

        draft = EvalResult(
            sample_id=sample.id,
            actual_output=response.output,
            actual_intent=response.intent,
            actual_tool_calls=response.tool_calls,
            scores={},
            passed=True,
            duration_ms=_elapsed_ms(started_at),
        )
        scores = await self._score(sample=sample, draft=draft)
        result = draft.model_copy(
            update={
                "scores": scores,
                "passed": all_scores_pass(scores),
                "duration_ms": _elapsed_ms(started_at),
            }
        )
        self._observer.sample_completed(
            run_id=self._run_id,
            sample_id=sample.id,
            passed=result.passed,
            duration_ms=result.duration_ms,
        )
        return result

    async def _execute(
        self, sample: EvalSample, deadline: asyncio.Timeout
    ) -> ExecutorResponse:
        # The deadline cancels the executor coroutine when it passes.
        async with deadline:
            raw = await self._executor(sample.input, sample.context)
        return ExecutorResponse.model_validate(raw)

    async def _score(self, sample: EvalSample, draft: EvalResult) -> dict[str, float]:
        """Run every scorer in order; a failing scorer records 0.0."""
        scores: dict[str, float] = {}
        for scorer in self._scorers:
            try:
                value = scorer.score(sample, draft)
                if inspect.isawaitable(value):
                    value = await value
                scores[scorer.name] = _checked_score(value)
            except Exception as exc:  # noqa: BLE001
                scores[scorer.name] = 0.0
                self._observer.scorer_failed(
                    run_id=self._run_id,
                    sample_id=sample.id,
                    scorer=scorer.name,
                    reason=f"{type(exc).__name__}: {exc}",
                )
        return scores

    def _errored(self, sample: EvalSample, reason: str, started_at: float) -> EvalResult:
        result = EvalResult(
            sample_id=sample.id,
            actual_output="",
            scores={},
            passed=False,
            duration_ms=_elapsed_ms(started_at),
            error=reason,
        )
        self._observer.sample_errored(
            run_id=self._run_id,
            sample_id=sample.id,
            reason=reason,
            duration_ms=result.duration_ms,
        )
        return result


def _checked_score(value: object) -> float:
    """Return value as a float in [0, 1], or raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"score must be a number, got {type(value).__name__}")
    score = float(value)
    if math.isnan(score) or not 0.0 <= score <= 1.0:
        raise ValueError(f"score {score} is outside [0, 1]")
    return score


def _elapsed_ms(started_at: float) -> int:
    return int((time.monotonic() - started_at) * 1000)
