"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during an evaluation run.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def evaluation_started(
        self,
        run_id: str,
        dataset_name: str,
        total_samples: int,
        scorer_names: list[str],
        concurrency: int,
        timeout_ms: int,
    ) -> None: ...

    def evaluation_completed(
        self,
        run_id: str,
        total_samples: int,
        passed_count: int,
        failed_count: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None: ...

    def batch_started(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        sample_ids: list[str],
    ) -> None: ...

    def batch_completed(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        completed: int,
        total: int,
    ) -> None: ...

    def sample_started(self, run_id: str, sample_id: str) -> None: ...

    def sample_completed(
        self,
        run_id: str,
        sample_id: str,
        passed: bool,
        duration_ms: int,
    ) -> None: ...

    def sample_errored(
        self,
        run_id: str,
        sample_id: str,
        reason: str,
        duration_ms: int,
    ) -> None: ...

    def scorer_failed(
        self,
        run_id: str,
        sample_id: str,
        scorer: str,
        reason: str,
    ) -> None: ...
