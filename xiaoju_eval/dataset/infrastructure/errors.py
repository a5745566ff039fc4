"""Error types raised by dataset infrastructure."""

from xiaoju_eval.core.errors import XiaojuEvalError


class DatasetLoadError(XiaojuEvalError):
    """Raised when a dataset cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")
