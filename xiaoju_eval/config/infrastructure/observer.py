"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, version: str) -> None:
        self._log.info("config.loaded", name=name, version=version)

    def config_short_timeout_warning(self, timeout_ms: int) -> None:
        self._log.warning(
            "config.short_timeout_warning",
            timeout_ms=timeout_ms,
            message="Per-sample timeout under one second will time out most real executors",
        )
