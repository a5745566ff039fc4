"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of every referenced variable that is unset and has no
    inline default, in first-seen order.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name = match.group("name")
            if (
                match.group("default") is None
                and name not in os.environ
                and name not in missing
            ):
                missing.append(name)
    return missing


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [text for item in data for text in _strings(item)]
    if isinstance(data, dict):
        return [text for value in data.values() for text in _strings(value)]
    return []


def _substitute(match: re.Match[str]) -> str:
    default = match.group("default")
    if default is None:
        return os.environ[match.group("name")]
    return os.environ.get(match.group("name"), default)


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every variable reference substituted.

    Call `collect_missing_vars` first; an unset variable without a default
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
