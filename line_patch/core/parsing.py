"""Convert dict-form operations (as sent by an agent tool call) into typed ones.

The wire form uses camelCase keys with a ``type`` tag::

    {"type": "replace_range", "startLine": 2, "endLine": 4, "lines": ["x"]}

snake_case keys (``start_line``) are accepted as well.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from .errors import InvalidOperationError
from .types import (
    OPERATION_TYPES,
    DeleteContent,
    DeleteRange,
    Diff,
    InsertAfter,
    InsertBefore,
    InsertBlock,
    Operation,
    ReplaceContent,
    ReplaceRange,
)

_MISSING = object()


def _get(data: Mapping[str, Any], camel: str, snake: str, default: Any = _MISSING) -> Any:
    if camel in data:
        return data[camel]
    if snake in data:
        return data[snake]
    if default is _MISSING:
        raise InvalidOperationError(f"Missing required field '{camel}'", field=camel)
    return default


def _int(data: Mapping[str, Any], camel: str, snake: str, *, minimum: int | None = None) -> int:
    value = _get(data, camel, snake)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperationError(
            f"Field '{camel}' must be an integer, got {type(value).__name__}", field=camel
        )
    if minimum is not None and value < minimum:
        raise InvalidOperationError(f"Field '{camel}' must be >= {minimum}, got {value}", field=camel)
    return value


def _str(data: Mapping[str, Any], camel: str, snake: str) -> str:
    value = _get(data, camel, snake)
    if not isinstance(value, str):
        raise InvalidOperationError(
            f"Field '{camel}' must be a string, got {type(value).__name__}", field=camel
        )
    return value


def _lines(data: Mapping[str, Any]) -> tuple[str, ...]:
    value = _get(data, "lines", "lines")
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise InvalidOperationError("Field 'lines' must be a list of strings", field="lines")
    return tuple(value)


def _occurrence(data: Mapping[str, Any]) -> int:
    if _get(data, "occurrence", "occurrence", None) is None:
        return 1
    return _int(data, "occurrence", "occurrence", minimum=1)


_PARSERS: dict[str, Callable[[Mapping[str, Any]], Operation]] = {
    InsertBlock.type: lambda d: InsertBlock(
        line_number=_int(d, "lineNumber", "line_number"),
        lines=_lines(d),
    ),
    DeleteRange.type: lambda d: DeleteRange(
        start_line=_int(d, "startLine", "start_line"),
        end_line=_int(d, "endLine", "end_line"),
    ),
    ReplaceRange.type: lambda d: ReplaceRange(
        start_line=_int(d, "startLine", "start_line"),
        end_line=_int(d, "endLine", "end_line"),
        lines=_lines(d),
    ),
    InsertAfter.type: lambda d: InsertAfter(
        search_content=_str(d, "searchContent", "search_content"),
        content=_str(d, "content", "content"),
        occurrence=_occurrence(d),
    ),
    InsertBefore.type: lambda d: InsertBefore(
        search_content=_str(d, "searchContent", "search_content"),
        content=_str(d, "content", "content"),
        occurrence=_occurrence(d),
    ),
    ReplaceContent.type: lambda d: ReplaceContent(
        old_content=_str(d, "oldContent", "old_content"),
        new_content=_str(d, "newContent", "new_content"),
        occurrence=_occurrence(d),
    ),
    DeleteContent.type: lambda d: DeleteContent(
        content=_str(d, "content", "content"),
        occurrence=_occurrence(d),
    ),
}


def operation_from_dict(data: Mapping[str, Any]) -> Operation:
    """Build a typed operation from its dict form.

    Raises:
        InvalidOperationError: unknown ``type``, missing field, or bad value.
    """
    if not isinstance(data, Mapping):
        raise InvalidOperationError(f"Operation must be an object, got {type(data).__name__}")

    op_type = data.get("type")
    parser = _PARSERS.get(op_type) if isinstance(op_type, str) else None
    if parser is None:
        raise InvalidOperationError(
            f"Unknown operation type {op_type!r}",
            field="type",
            hint=f"Expected one of: {', '.join(OPERATION_TYPES)}",
        )

    try:
        return parser(data)
    except InvalidOperationError as e:
        e.operation = op_type
        raise


def diff_from_operations(operations: Iterable[Mapping[str, Any]]) -> Diff:
    """Parse a list of dict-form operations, tagging errors with their index."""
    parsed: list[Operation] = []
    for index, data in enumerate(operations):
        try:
            parsed.append(operation_from_dict(data))
        except InvalidOperationError as e:
            e.index = index
            raise
    return Diff(operations=parsed)


def diff_from_dict(data: Mapping[str, Any]) -> Diff:
    """Parse ``{"operations": [...]}``."""
    operations = data.get("operations") if isinstance(data, Mapping) else None
    if not isinstance(operations, list):
        raise InvalidOperationError("Diff must contain an 'operations' list", field="operations")
    return diff_from_operations(operations)


def coerce_diff(diff: Diff | Mapping[str, Any] | Iterable[Any]) -> Diff:
    """Accept a Diff, its dict form, or a list of typed or dict operations."""
    if isinstance(diff, Diff):
        return diff
    if isinstance(diff, Mapping):
        return diff_from_dict(diff)

    operation_classes = tuple(OPERATION_TYPES.values())
    parsed: list[Operation] = []
    for index, item in enumerate(diff):
        if isinstance(item, operation_classes):
            parsed.append(item)
            continue
        try:
            parsed.append(operation_from_dict(item))
        except InvalidOperationError as e:
            e.index = index
            raise
    return Diff(operations=parsed)
