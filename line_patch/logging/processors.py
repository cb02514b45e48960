"""Custom structlog processors for line_patch."""
from typing import Any

from .context import get_context


def inject_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Inject values bound via bind_context() into the log event.

    Explicit keyword arguments on the log call win over bound values.
    """
    for key, value in get_context().items():
        if key not in event_dict:
            event_dict[key] = value
    return event_dict


def add_logger_name(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add the name of the emitting logger as a 'logger' field."""
    record = event_dict.get("_record")
    if record is not None:
        event_dict["logger"] = record.name
    elif hasattr(logger, "name"):
        event_dict["logger"] = logger.name
    return event_dict


def normalize_operation_fields(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Report the operation position under one key.

    The engine logs ``index`` while ``PatchError.to_dict()`` uses
    ``operation_index``; events that carry an ``operation`` are rewritten to
    the latter so both can be filtered on the same field.
    """
    if "operation" in event_dict and "index" in event_dict:
        event_dict.setdefault("operation_index", event_dict.pop("index"))
    return event_dict
