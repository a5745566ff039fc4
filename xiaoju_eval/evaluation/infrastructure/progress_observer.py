"""ProgressEvaluationObserver — renders a live outcome bar for the run on stderr."""

from __future__ import annotations

from rich.console import Console, Group
from rich.live import Live
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

# (field name, glyph, style) in the order segments are drawn.
_SEGMENTS: list[tuple[str, str, str]] = [
    ("passed", "█", "bright_green"),
    ("failed", "█", "yellow"),
    ("errored", "█", "red"),
    ("inflight", "▒", "grey50"),
]


class _OutcomeBarColumn(ProgressColumn):
    """Bar split into passed, failed, errored, in-flight and remaining cells."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        total = task.total or 0
        result = Text()
        used = 0
        if total > 0:
            for field, glyph, style in _SEGMENTS:
                cells = min(
                    int(int(task.fields.get(field, 0)) / total * self.bar_width),
                    self.bar_width - used,
                )
                result.append(glyph * cells, style=style)
                used += cells
        result.append("░" * (self.bar_width - used), style="dim white")
        return result


class ProgressEvaluationObserver:
    """Renders one progress row for the run plus a colour legend on stderr.

    Counts are tracked even when ``disabled=True`` so tests can assert on them
    without a terminal.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._counts: dict[str, int] = {}
        self._progress: Progress | None = None
        self._live: Live | None = None
        self._task_id: TaskID | None = None

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        done = (
            self._counts["passed"] + self._counts["failed"] + self._counts["errored"]
        )
        self._progress.update(self._task_id, completed=done, **self._counts)

    def _bump(self, key: str) -> None:
        if not self._counts:
            return
        self._counts[key] += 1
        self._counts["inflight"] = max(0, self._counts["inflight"] - 1)
        self._refresh()

    def evaluation_started(
        self,
        run_id: str,
        dataset_name: str,
        total_samples: int,
        scorer_names: list[str],
        concurrency: int,
        timeout_ms: int,
    ) -> None:
        self._counts = {"passed": 0, "failed": 0, "errored": 0, "inflight": 0}
        self._progress = None
        self._live = None
        self._task_id = None

        if self._disabled:
            return

        console = Console(stderr=True)
        legend = Text.assemble(
            "  Legend:  ",
            ("█", "bright_green"),
            " passed  ",
            ("█", "yellow"),
            " failed  ",
            ("█", "red"),
            " errored  ",
            ("▒", "grey50"),
            " in-flight",
        )
        self._progress = Progress(
            TextColumn("{task.description}"),
            _OutcomeBarColumn(bar_width=40),
            TextColumn("{task.completed:.0f}/{task.total:.0f}"),
            TimeElapsedColumn(),
            console=console,
            refresh_per_second=10,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=dataset_name,
            total=float(total_samples),
            **self._counts,
        )
        self._live = Live(
            Group(self._progress, Text(""), legend),
            console=console,
            refresh_per_second=10,
        )
        self._live.start()

    def evaluation_completed(
        self,
        run_id: str,
        total_samples: int,
        passed_count: int,
        failed_count: int,
        error_count: int,
        elapsed_seconds: float,
    ) -> None:
        if self._live is not None:
            self._live.stop()
        self._progress = None
        self._live = None
        self._task_id = None

    def batch_started(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        sample_ids: list[str],
    ) -> None:
        pass

    def batch_completed(
        self,
        run_id: str,
        batch_index: int,
        total_batches: int,
        completed: int,
        total: int,
    ) -> None:
        pass

    def sample_started(self, run_id: str, sample_id: str) -> None:
        if not self._counts:
            return
        self._counts["inflight"] += 1
        self._refresh()

    def sample_completed(
        self,
        run_id: str,
        sample_id: str,
        passed: bool,
        duration_ms: int,
    ) -> None:
        self._bump("passed" if passed else "failed")

    def sample_errored(
        self,
        run_id: str,
        sample_id: str,
        reason: str,
        duration_ms: int,
    ) -> None:
        self._bump("errored")

    def scorer_failed(
        self,
        run_id: str,
        sample_id: str,
        scorer: str,
        reason: str,
    ) -> None:
        pass
