"""Context management for structured logging.

Values bound here ride along on every log entry emitted in the current task,
which is how a file path or session id ends up on the engine's per-operation
debug lines without being passed down explicitly.
"""
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def bind_context(**kwargs: Any) -> None:
    """Bind key-value pairs to the current logging context.

    Example:
        >>> bind_context(path="src/app.py")
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the current logging context."""
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


def clear_context() -> None:
    """Clear all bound context values."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()
