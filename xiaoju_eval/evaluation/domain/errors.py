"""Error types raised when a run is configured incorrectly."""

from xiaoju_eval.core.errors import XiaojuEvalError


class InvalidRunConfigError(XiaojuEvalError):
    """Raised when an EvalRunConfig cannot describe a runnable evaluation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to configure evaluation run: {reason}")
