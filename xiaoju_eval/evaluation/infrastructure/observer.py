"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_started(
        self,
        run_id: str,
        dataset_name: str,
        total_samples: int,
        scorer_names: list[str],
        concurrency: int,
        timeout_ms: int,
    ) -> None:
        self._log.info(
            "evaluation.started",
            run_id=run_id,
            dataset_name=dataset_name,
            total_samples=total_samples,
            scorer_names=scorer_names,
            concurrency=concurrency,
            timeout_ms=timeout_ms,
        )

    def evaluation_completed(
        self,
        run_id: str,
        total_samples: int,
        passed_count: int,
        failed_count: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.completed",
            run_id=run_id,
            total_samples=total_samples,
            passed_count=passed_count,
            failed_count=failed_count,
            error_count=error_count,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def batch_started(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        sample_ids: list[str],
    ) -> None:
        self._log.debug(
            "evaluation.batch.started",
            run_id=run_id,
            batch_index=batch_index,
            total_batches=total_batches,
            sample_ids=sample_ids,
        )

    def batch_completed(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        completed: int,
        total: int,
    ) -> None:
        self._log.info(
            "evaluation.progress",
            run_id=run_id,
            batch_index=batch_index,
            total_batches=total_batches,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def sample_started(self, run_id: str, sample_id: str) -> None:
        self._log.debug("evaluation.sample.started", run_id=run_id, sample_id=sample_id)

    def sample_completed(
        self,
        run_id: str,
        sample_id: str,
        passed: bool,
        duration_ms: int,
    ) -> None:
        self._log.info(
            "evaluation.sample.completed",
            run_id=run_id,
            sample_id=sample_id,
            passed=passed,
            duration_ms=duration_ms,
        )

    def sample_errored(
        self,
        run_id: str,
        sample_id: str,
        reason: str,
        duration_ms: int,
    ) -> None:
        self._log.error(
            "evaluation.sample.errored",
            run_id=run_id,
            sample_id=sample_id,
            reason=reason,
            duration_ms=duration_ms,
        )

    def scorer_failed(
        self,
        run_id: str,
        sample_id: str,
        scorer: str,
        reason: str,
    ) -> None:
        self._log.warning(
            "evaluation.scorer_failed",
            run_id=run_id,
            sample_id=sample_id,
            scorer=scorer,
            reason=reason,
        )
