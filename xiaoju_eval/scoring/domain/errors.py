"""Error types raised by the scorer registry."""

from xiaoju_eval.core.errors import XiaojuEvalError


class ScorerNotFoundError(XiaojuEvalError):
    """Raised when one or more requested scorer names are unknown."""

    def __init__(self, names: list[str], known: list[str]) -> None:
        self.names = names
        super().__init__(
            f"Failed to resolve scorers: unknown {', '.join(names)}"
            f" (known: {', '.join(known)})"
        )
