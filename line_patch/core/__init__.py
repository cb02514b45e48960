"""Patch engine core: operation types, errors, matching and application."""

from .engine import PatchEngine, apply_operations
from .errors import (
    ContentNotFoundError,
    InvalidOperationError,
    InvalidRangeError,
    OutOfBoundsError,
    PatchError,
    SourceUnavailableError,
    WriteFailedError,
)
from .matching import BlockMatch, LineMatch, find_block, find_line, join_lines, split_lines
from .parsing import coerce_diff, diff_from_dict, diff_from_operations, operation_from_dict
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
    Result,
)

__all__ = [
    # Engine
    "PatchEngine",
    "apply_operations",
    # Types
    "Operation",
    "OPERATION_TYPES",
    "InsertBlock",
    "DeleteRange",
    "ReplaceRange",
    "InsertAfter",
    "InsertBefore",
    "ReplaceContent",
    "DeleteContent",
    "Diff",
    "Result",
    # Errors
    "PatchError",
    "OutOfBoundsError",
    "InvalidRangeError",
    "ContentNotFoundError",
    "SourceUnavailableError",
    "WriteFailedError",
    "InvalidOperationError",
    # Matching
    "LineMatch",
    "BlockMatch",
    "find_line",
    "find_block",
    "split_lines",
    "join_lines",
    # Parsing
    "operation_from_dict",
    "diff_from_dict",
    "diff_from_operations",
    "coerce_diff",
]
