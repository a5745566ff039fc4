"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from xiaoju_eval.config.domain.config import HarnessConfig
from xiaoju_eval.config.domain.observer import ConfigObserver
from xiaoju_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from xiaoju_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from xiaoju_eval.dataset.domain.builtin import BUILTIN_DATASETS
from xiaoju_eval.scoring.domain.registry import all_scorer_names

_SHORT_TIMEOUT_MS = 1000


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a HarnessConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> HarnessConfig:
        """
        Load, interpolate, validate, and return a HarnessConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated, or the config names
                an unknown built-in dataset or scorer (all collected first).
        """
        raw = _parse_yaml(path=path)
        missing = collect_missing_vars(raw)
        if missing:
            raise MissingEnvVarsError(missing)
        cfg = _build_config(resolved=interpolate(raw))
        _check_references(cfg=cfg)
        if cfg.execution.timeout_ms < _SHORT_TIMEOUT_MS:
            self._observer.config_short_timeout_warning(cfg.execution.timeout_ms)
        self._observer.config_loaded(name=cfg.name, version=cfg.version)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path, reason="file not found") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top level must be a mapping")
    return raw


def _build_config(resolved: Any) -> HarnessConfig:
    try:
        return HarnessConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _check_references(cfg: HarnessConfig) -> None:
    """Raise ConfigValidationError listing every unknown dataset and scorer name."""
    problems: list[str] = []
    builtin = cfg.dataset.builtin
    if builtin is not None and builtin not in BUILTIN_DATASETS:
        problems.append(f"unknown built-in dataset '{builtin}'")

    known_scorers = set(all_scorer_names())
    for name in cfg.scorers or []:
        if name not in known_scorers:
            problems.append(f"unknown scorer '{name}'")

    duplicates = sorted(
        {name for name in cfg.scorers or [] if (cfg.scorers or []).count(name) > 1}
    )
    for name in duplicates:
        problems.append(f"scorer '{name}' listed more than once")

    if problems:
        raise ConfigValidationError("; ".join(problems))
