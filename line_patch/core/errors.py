"""Exceptions raised while applying a diff.

Every failure is a PatchError subclass so callers can catch one type. The
file tool converts them into failed Result values at its public boundary;
inside the library they propagate as ordinary exceptions.
"""
from __future__ import annotations

from typing import Any, Optional


class PatchError(Exception):
    """Base exception for patch parsing and application errors.

    Attributes:
        message: Human-readable description.
        operation: Type tag of the failing operation (e.g. ``"delete_range"``).
        index: Zero-based position of the failing operation within its diff.
        path: File the diff was being applied to, when known.
        hint: Optional suggestion for fixing the request.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        index: Optional[int] = None,
        path: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.index = index
        self.path = path
        self.hint = hint

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message

    def details(self) -> dict[str, Any]:
        """Subclass-specific fields, merged into to_dict()."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"error": str(self), "error_type": type(self).__name__}
        if self.operation is not None:
            result["operation"] = self.operation
        if self.index is not None:
            result["operation_index"] = self.index
        if self.path is not None:
            result["path"] = self.path
        if self.hint is not None:
            result["hint"] = self.hint
        result.update(self.details())
        return result


class OutOfBoundsError(PatchError):
    """An insert position lies outside ``[0, line_count]``."""

    def __init__(self, line_number: int, line_count: int, **kwargs: Any):
        self.line_number = line_number
        self.line_count = line_count
        super().__init__(
            f"Line number {line_number} is out of bounds (file has {line_count} lines)",
            **kwargs,
        )

    def details(self) -> dict[str, Any]:
        return {"line_number": self.line_number, "line_count": self.line_count}


class InvalidRangeError(PatchError):
    """A 1-indexed inclusive range is inverted or falls outside ``[1, line_count]``."""

    def __init__(self, start_line: int, end_line: int, line_count: int, **kwargs: Any):
        self.start_line = start_line
        self.end_line = end_line
        self.line_count = line_count
        super().__init__(
            f"Range {start_line}-{end_line} is invalid (file has {line_count} lines)",
            **kwargs,
        )

    @property
    def inverted(self) -> bool:
        return self.start_line > self.end_line

    def details(self) -> dict[str, Any]:
        return {
            "start_line": self.start_line,
            "end_line": self.end_line,
            "line_count": self.line_count,
        }


class ContentNotFoundError(PatchError):
    """The requested occurrence of a search pattern does not exist.

    ``total_matches`` is the number of matches the full scan found, so a
    caller can tell "absent" (0) from "fewer occurrences than requested".
    """

    def __init__(self, search: str, occurrence: int, total_matches: int, **kwargs: Any):
        self.search = search
        self.occurrence = occurrence
        self.total_matches = total_matches
        super().__init__(
            f"Could not find occurrence {occurrence} of {search!r}. "
            f"Found {total_matches} matches total.",
            **kwargs,
        )

    def details(self) -> dict[str, Any]:
        return {
            "search": self.search,
            "occurrence": self.occurrence,
            "total_matches": self.total_matches,
        }


class SourceUnavailableError(PatchError):
    """The target file could not be read. The OS error is chained as __cause__."""

    def __init__(self, path: str, reason: str = "file does not exist or is unreadable"):
        super().__init__(f"Cannot read {path}: {reason}", path=path)


class WriteFailedError(PatchError):
    """Writing the patched content back failed. The OS or encoding error is chained as __cause__."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write {path}: {reason}", path=path)


class InvalidOperationError(PatchError):
    """An operation in dict form is malformed."""

    def __init__(self, message: str, *, field: Optional[str] = None, **kwargs: Any):
        self.field = field
        super().__init__(message, **kwargs)

    def details(self) -> dict[str, Any]:
        return {"field": self.field} if self.field else {}
