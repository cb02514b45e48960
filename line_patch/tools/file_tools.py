"""Agent tools wrapping FileTool: ``rewrite_file`` and ``apply_diff``.

Both tools take JSON-compatible arguments and return a JSON string:

    {"status": "ok", "op": "apply_diff", "path": "...", "operations_applied": 2}
    {"status": "error", "error": "...", "path": "...", "total_matches": 0, ...}
"""
from __future__ import annotations

import json
from typing import Any, Callable, Optional

from ..core.errors import PatchError
from ..core.parsing import diff_from_operations
from ..core.types import OPERATION_TYPES
from ..file_tool import FileTool
from .decorators import tool

OPERATION_ITEM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {
            "type": "string",
            "enum": list(OPERATION_TYPES),
            "description": (
                "insert_block/delete_range/replace_range address lines by number; "
                "insert_after/insert_before find a line containing searchContent; "
                "replace_content/delete_content find an exact multi-line block."
            ),
        },
        "lineNumber": {
            "type": "integer",
            "description": "insert_block: line after which to insert (0 = beginning of file)",
        },
        "startLine": {"type": "integer", "description": "First line of the range (1-indexed, inclusive)"},
        "endLine": {"type": "integer", "description": "Last line of the range (1-indexed, inclusive)"},
        "lines": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Lines to insert or to replace the range with",
        },
        "searchContent": {
            "type": "string",
            "description": "Text to look for; any line containing it matches",
        },
        "content": {
            "type": "string",
            "description": "insert_after/insert_before: line to insert. delete_content: exact text to delete",
        },
        "oldContent": {"type": "string", "description": "Exact text to replace (may span lines)"},
        "newContent": {"type": "string", "description": "Replacement text (may span lines)"},
        "occurrence": {
            "type": "integer",
            "minimum": 1,
            "description": "Which match to target (1-indexed, default 1)",
        },
    },
    "required": ["type"],
}


def _make_error_response(error: PatchError, op: str, path: str) -> str:
    result: dict[str, Any] = {"status": "error", "op": op, "path": path}
    result.update(error.to_dict())
    return json.dumps(result)


def _make_success_response(op: str, path: str, **fields: Any) -> str:
    result: dict[str, Any] = {"status": "ok", "op": op, "path": path}
    result.update(fields)
    return json.dumps(result)


def create_file_tools(file_tool: Optional[FileTool] = None) -> list[Callable]:
    """Create the rewrite_file and apply_diff tool functions.

    Args:
        file_tool: FileTool to delegate to. Defaults to a local-disk FileTool.

    Returns:
        ``[rewrite_file, apply_diff]``, ready for ToolRegistry.register_tools().
    """
    file_tool = file_tool or FileTool()

    @tool(
        name="rewrite_file",
        description=(
            "Create a file or replace its entire content. Parent directories "
            "are created automatically."
        ),
        properties={
            "file_path": {"type": "string", "description": "Path of the file to write"},
            "content": {"type": "string", "description": "Complete new content of the file"},
        },
        required=["file_path", "content"],
    )
    async def rewrite_file(file_path: str, content: str) -> str:
        result = await file_tool.rewrite_file(file_path, content)
        if result.failed:
            return _make_error_response(result.error, "rewrite_file", file_path)
        return _make_success_response("rewrite_file", file_path, chars_written=len(content))

    @tool(
        name="apply_diff",
        description=(
            "Apply an ordered list of line-level edits to an existing file. "
            "Each operation sees the file as left by the previous one. If any "
            "operation fails, nothing is written."
        ),
        properties={
            "file_path": {"type": "string", "description": "Path of the file to edit"},
            "operations": {
                "type": "array",
                "items": OPERATION_ITEM_SCHEMA,
                "description": "Edits to apply in order",
            },
        },
        required=["file_path", "operations"],
    )
    async def apply_diff(file_path: str, operations: list[dict[str, Any]]) -> str:
        try:
            diff = diff_from_operations(operations)
        except PatchError as e:
            return _make_error_response(e, "apply_diff", file_path)

        result = await file_tool.apply_diff(file_path, diff)
        if result.failed:
            return _make_error_response(result.error, "apply_diff", file_path)
        return _make_success_response("apply_diff", file_path, operations_applied=len(diff))

    return [rewrite_file, apply_diff]
