"""Base exception class for all xiaoju-eval errors."""


class XiaojuEvalError(Exception):
    """Base class for all xiaoju-eval errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
