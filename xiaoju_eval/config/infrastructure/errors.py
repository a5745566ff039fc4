"""Error types raised by config infrastructure."""

from pathlib import Path

from xiaoju_eval.core.errors import XiaojuEvalError


class MissingEnvVarsError(XiaojuEvalError):
    """Raised when one or more required environment variables are not set."""

    def __init__(self, missing_vars: list[str]) -> None:
        self.missing_vars = missing_vars
        var_list = ", ".join(sorted(missing_vars))
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(XiaojuEvalError):
    """Raised when the loaded config fails schema or reference validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(XiaojuEvalError):
    """Raised when the config file cannot be read or is not valid YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load config {path}: {reason}")
