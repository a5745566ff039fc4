"""Fake ConfigObserver for use in tests — records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    name: str
    version: str


@dataclass(frozen=True)
class ShortTimeoutWarningEvent:
    timeout_ms: int


class FakeConfigObserver:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []
        self.short_timeout_warnings: list[ShortTimeoutWarningEvent] = []

    def config_loaded(self, name: str, version: str) -> None:
        self.loaded.append(ConfigLoadedEvent(name=name, version=version))

    def config_short_timeout_warning(self, timeout_ms: int) -> None:
        self.short_timeout_warnings.append(
            ShortTimeoutWarningEvent(timeout_ms=timeout_ms)
        )
