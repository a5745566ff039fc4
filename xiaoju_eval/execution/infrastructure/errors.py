"""Error types raised by execution infrastructure."""

from xiaoju_eval.core.errors import XiaojuEvalError


class ExecutorImportError(XiaojuEvalError):
    """Raised when a configured executor target cannot be resolved."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Failed to import executor '{target}': {reason}")
