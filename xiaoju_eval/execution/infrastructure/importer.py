"""Resolves ``package.module:attribute`` strings into executor callables."""

import importlib

from xiaoju_eval.execution.domain.executor import Executor
from xiaoju_eval.execution.infrastructure.errors import ExecutorImportError


def load_executor(target: str) -> Executor:
    """Import target and return the callable it names.

    Nested attributes are allowed after the colon (``pkg.mod:Client.run``).

    Raises:
        ExecutorImportError: if the module or attribute is missing, or the
            resolved object is not callable.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ExecutorImportError(target=target, reason="expected 'module:attribute'")

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ExecutorImportError(target=target, reason=str(exc)) from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise ExecutorImportError(
                target=target, reason=f"no attribute '{attr}'"
            ) from exc

    if not callable(obj):
        raise ExecutorImportError(target=target, reason="target is not callable")
    return obj  # type: ignore[return-value]
