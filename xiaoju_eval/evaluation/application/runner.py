"""EvaluationRunner — drives a dataset through the SampleEvaluator in batches."""

import asyncio
import itertools
import math
import time
import uuid
from datetime import UTC, datetime

from xiaoju_eval.evaluation.application.aggregator import aggregate
from xiaoju_eval.evaluation.application.evaluator import SampleEvaluator
from xiaoju_eval.evaluation.domain.observer import EvaluationObserver
from xiaoju_eval.evaluation.domain.result import EvalResult
from xiaoju_eval.evaluation.domain.run_config import EvalRunConfig
from xiaoju_eval.evaluation.domain.summary import EvalRunResult
from xiaoju_eval.execution.domain.executor import Executor


def generate_run_id() -> str:
    """Return ``eval_{epoch_ms}_{8 hex chars}``."""
    return f"eval_{time.time_ns() // 1_000_000}_{uuid.uuid4().hex[:8]}"


class EvaluationRunner:
    """Runs one evaluation: batches samples, evaluates, aggregates.

    Samples are dispatched in consecutive batches of ``config.concurrency``.
    Every sample in a batch runs concurrently and the next batch starts only
    once the whole batch has resolved, so at most ``concurrency`` executor
    calls are ever in flight. Sample failures are recorded as data; only a bug
    in the runner itself raises.
    """

    def __init__(
        self,
        config: EvalRunConfig,
        executor: Executor,
        observer: EvaluationObserver,
    ) -> None:
        self._config = config
        self._executor = executor
        self._observer = observer

    async def run(self) -> EvalRunResult:
        config = self._config
        run_id = generate_run_id()
        samples = config.dataset.samples
        scorer_names = config.scorer_names

        self._observer.evaluation_started(
            run_id=run_id,
            dataset_name=config.dataset.name,
            total_samples=len(samples),
            scorer_names=scorer_names,
            concurrency=config.concurrency,
            timeout_ms=config.timeout_ms,
        )
        started_at = datetime.now(UTC)
        started = time.monotonic()

        evaluator = SampleEvaluator(
            run_id=run_id,
            executor=self._executor,
            scorers=config.scorers,
            timeout_ms=config.timeout_ms,
            observer=self._observer,
        )

        results: list[EvalResult] = []
        total_batches = math.ceil(len(samples) / config.concurrency)
        for batch_index, batch in enumerate(
            itertools.batched(samples, config.concurrency)
        ):
            self._observer.batch_started(
                run_id=run_id,
                batch_index=batch_index,
                total_batches=total_batches,
                sample_ids=[sample.id for sample in batch],
            )
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(evaluator.evaluate(sample)) for sample in batch]
            # Appended only after the whole batch resolved, in dataset order.
            results.extend(task.result() for task in tasks)
            self._observer.batch_completed(
                run_id=run_id,
                batch_index=batch_index,
                total_batches=total_batches,
                completed=len(results),
                total=len(samples),
            )

        tally = aggregate(results=results, scorer_names=scorer_names)
        ended_at = datetime.now(UTC)

        self._observer.evaluation_completed(
            run_id=run_id,
            total_samples=len(samples),
            passed_count=tally.passed_count,
            failed_count=tally.failed_count,
            error_count=tally.error_count,
            elapsed_seconds=time.monotonic() - started,
        )

        return EvalRunResult(
            run_id=run_id,
            dataset_name=config.dataset.name,
            started_at=started_at,
            ended_at=ended_at,
            total_samples=len(samples),
            passed_count=tally.passed_count,
            failed_count=tally.failed_count,
            error_count=tally.error_count,
            average_scores=tally.average_scores,
            results=results,
        )


async def run_eval(
    config: EvalRunConfig,
    executor: Executor,
    observer: EvaluationObserver,
) -> EvalRunResult:
    """Run one evaluation; shorthand for ``EvaluationRunner(...).run()``."""
    return await EvaluationRunner(
        config=config, executor=executor, observer=observer
    ).run()
