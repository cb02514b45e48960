"""Data model for diffs: the seven operation variants, Diff, and Result.

Operations are frozen dataclasses forming a closed union (``Operation``).
Each carries its wire tag in the ``type`` class attribute and serialises to
the camelCase dict form accepted by the tool surface.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Optional, Sequence, TypeVar, Union

from .errors import PatchError

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Line-number operations
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class InsertBlock:
    """Insert ``lines`` after line ``line_number`` (0 inserts before the first line)."""

    type: ClassVar[str] = "insert_block"

    line_number: int
    lines: Sequence[str]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "lineNumber": self.line_number, "lines": list(self.lines)}


@dataclass(frozen=True)
class DeleteRange:
    """Delete lines ``start_line`` through ``end_line`` (1-indexed, inclusive)."""

    type: ClassVar[str] = "delete_range"

    start_line: int
    end_line: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "startLine": self.start_line, "endLine": self.end_line}


@dataclass(frozen=True)
class ReplaceRange:
    """Replace lines ``start_line`` through ``end_line`` with ``lines``."""

    type: ClassVar[str] = "replace_range"

    start_line: int
    end_line: int
    lines: Sequence[str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "lines": list(self.lines),
        }


# ---------------------------------------------------------------------------
# Content-anchored operations
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class InsertAfter:
    """Insert ``content`` as a new line after the n-th line containing ``search_content``."""

    type: ClassVar[str] = "insert_after"

    search_content: str
    content: str
    occurrence: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "searchContent": self.search_content,
            "content": self.content,
            "occurrence": self.occurrence,
        }


@dataclass(frozen=True)
class InsertBefore:
    """Insert ``content`` as a new line before the n-th line containing ``search_content``."""

    type: ClassVar[str] = "insert_before"

    search_content: str
    content: str
    occurrence: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "searchContent": self.search_content,
            "content": self.content,
            "occurrence": self.occurrence,
        }


@dataclass(frozen=True)
class ReplaceContent:
    """Replace the n-th exact run of lines equal to ``old_content`` with ``new_content``."""

    type: ClassVar[str] = "replace_content"

    old_content: str
    new_content: str
    occurrence: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "oldContent": self.old_content,
            "newContent": self.new_content,
            "occurrence": self.occurrence,
        }


@dataclass(frozen=True)
class DeleteContent:
    """Delete the n-th exact run of lines equal to ``content``."""

    type: ClassVar[str] = "delete_content"

    content: str
    occurrence: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "content": self.content, "occurrence": self.occurrence}


Operation = Union[
    InsertBlock,
    DeleteRange,
    ReplaceRange,
    InsertAfter,
    InsertBefore,
    ReplaceContent,
    DeleteContent,
]

OPERATION_TYPES: dict[str, type] = {
    cls.type: cls
    for cls in (
        InsertBlock,
        DeleteRange,
        ReplaceRange,
        InsertAfter,
        InsertBefore,
        ReplaceContent,
        DeleteContent,
    )
}


@dataclass
class Diff:
    """An ordered list of operations, applied strictly in sequence."""

    operations: list[Operation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)

    def to_dict(self) -> dict[str, Any]:
        return {"operations": [op.to_dict() for op in self.operations]}


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success/failure value returned across the public file-tool boundary.

    Exactly one of ``data`` or ``error`` is meaningful: a failed result
    always carries an error, a successful one never does (``data`` may be
    None for operations with no payload).
    """

    data: Optional[T] = None
    error: Optional[PatchError] = None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "Result[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, error: PatchError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Optional[T]:
        """Return ``data``, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.data
