"""
line_patch: deterministic line-level file patching.

Apply ordered edits to text files, addressed either by line number or by
searching for content, with precise failures and no partial writes.

Main exports:
    - FileTool: rewrite_file / apply_diff / preview_diff over a file backend
    - PatchEngine: the in-memory engine behind apply_diff
    - Operation types: InsertBlock, DeleteRange, ReplaceRange, InsertAfter,
      InsertBefore, ReplaceContent, DeleteContent
    - Result and the PatchError hierarchy

Example:
    >>> from line_patch import FileTool, ReplaceRange
    >>> tool = FileTool()
    >>> result = await tool.apply_diff("notes.txt", [ReplaceRange(2, 4, ["x"])])
    >>> result.ok
    True
"""

from .config import FileToolConfig
from .core import (
    ContentNotFoundError,
    DeleteContent,
    DeleteRange,
    Diff,
    InsertAfter,
    InsertBefore,
    InsertBlock,
    InvalidOperationError,
    InvalidRangeError,
    Operation,
    OutOfBoundsError,
    PatchEngine,
    PatchError,
    ReplaceContent,
    ReplaceRange,
    Result,
    SourceUnavailableError,
    WriteFailedError,
    apply_operations,
    diff_from_dict,
    operation_from_dict,
)
from .file_backends import InMemoryBackend, LocalFilesystemBackend, TextFileBackend, get_file_backend
from .file_tool import FileTool
from .tools import ToolRegistry, create_file_tools

__version__ = "0.1.0"

__all__ = [
    # File tool
    "FileTool",
    "FileToolConfig",
    # Engine
    "PatchEngine",
    "apply_operations",
    # Operations
    "Operation",
    "InsertBlock",
    "DeleteRange",
    "ReplaceRange",
    "InsertAfter",
    "InsertBefore",
    "ReplaceContent",
    "DeleteContent",
    "Diff",
    "Result",
    "operation_from_dict",
    "diff_from_dict",
    # Errors
    "PatchError",
    "OutOfBoundsError",
    "InvalidRangeError",
    "ContentNotFoundError",
    "SourceUnavailableError",
    "WriteFailedError",
    "InvalidOperationError",
    # Backends
    "TextFileBackend",
    "LocalFilesystemBackend",
    "InMemoryBackend",
    "get_file_backend",
    # Tools
    "ToolRegistry",
    "create_file_tools",
]
