"""Sequential patch engine over an in-memory line sequence.

``PatchEngine.apply`` walks a diff in order, mutating a private copy of the
lines; each operation sees the result of the ones before it. The first
invalid operation raises a PatchError tagged with the operation type and its
index in the diff, and the caller's input is left untouched.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, assert_never

from ..logging import get_logger
from .errors import ContentNotFoundError, InvalidRangeError, OutOfBoundsError, PatchError
from .matching import find_block, find_line, join_lines, preview, split_lines
from .types import (
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

logger = get_logger(__name__)


class PatchEngine:
    """Applies diffs to line sequences.

    Args:
        line_separator: Separator used by ``apply_text`` to split and rejoin
            content, and to split multi-line search/replacement strings.
        preview_chars: Maximum length of search content quoted in errors.
    """

    def __init__(self, line_separator: str = "\n", preview_chars: int = 50):
        self.line_separator = line_separator
        self.preview_chars = preview_chars

    def apply(self, lines: Sequence[str], operations: Iterable[Operation]) -> List[str]:
        """Apply ``operations`` in order and return the new line list.

        Raises:
            PatchError: on the first operation whose preconditions fail.
        """
        current = list(lines)
        for index, operation in enumerate(operations):
            before = len(current)
            try:
                current = self._apply_one(current, operation)
            except PatchError as e:
                e.operation = operation.type
                e.index = index
                raise
            logger.debug(
                "Applied operation",
                index=index,
                operation=operation.type,
                lines_before=before,
                lines_after=len(current),
            )
        return current

    def apply_text(self, content: str, operations: Iterable[Operation] | Diff) -> Result[str]:
        """Apply operations to whole-file text, returning a Result instead of raising."""
        try:
            lines = self.apply(split_lines(content, self.line_separator), operations)
        except PatchError as e:
            return Result.failure(e)
        return Result.success(join_lines(lines, self.line_separator))

    # -- dispatch -----------------------------------------------------------

    def _apply_one(self, lines: List[str], op: Operation) -> List[str]:
        if isinstance(op, InsertBlock):
            return self._insert_block(lines, op)
        elif isinstance(op, DeleteRange):
            return self._replace_span(lines, op.start_line, op.end_line, ())
        elif isinstance(op, ReplaceRange):
            return self._replace_span(lines, op.start_line, op.end_line, op.lines)
        elif isinstance(op, InsertAfter):
            return self._insert_near(lines, op.search_content, op.content, op.occurrence, offset=1)
        elif isinstance(op, InsertBefore):
            return self._insert_near(lines, op.search_content, op.content, op.occurrence, offset=0)
        elif isinstance(op, ReplaceContent):
            return self._replace_block(lines, op.old_content, op.new_content, op.occurrence)
        elif isinstance(op, DeleteContent):
            return self._replace_block(lines, op.content, None, op.occurrence)
        else:
            assert_never(op)

    # -- line-number operations --------------------------------------------

    @staticmethod
    def _insert_block(lines: List[str], op: InsertBlock) -> List[str]:
        if op.line_number < 0 or op.line_number > len(lines):
            raise OutOfBoundsError(op.line_number, len(lines))
        lines[op.line_number:op.line_number] = list(op.lines)
        return lines

    @staticmethod
    def _replace_span(
        lines: List[str],
        start_line: int,
        end_line: int,
        replacement: Sequence[str],
    ) -> List[str]:
        if start_line < 1 or end_line > len(lines) or start_line > end_line:
            raise InvalidRangeError(start_line, end_line, len(lines))
        lines[start_line - 1:end_line] = list(replacement)
        return lines

    # -- content-anchored operations ---------------------------------------

    def _insert_near(
        self,
        lines: List[str],
        search: str,
        content: str,
        occurrence: int,
        *,
        offset: int,
    ) -> List[str]:
        match = find_line(lines, search, occurrence)
        if match.index is None:
            raise ContentNotFoundError(
                preview(search, self.preview_chars),
                occurrence,
                match.total_matches,
                hint=_not_found_hint(match.total_matches),
            )
        lines.insert(match.index + offset, content)
        return lines

    def _replace_block(
        self,
        lines: List[str],
        old_content: str,
        new_content: Optional[str],
        occurrence: int,
    ) -> List[str]:
        pattern = split_lines(old_content, self.line_separator)
        match = find_block(lines, pattern, occurrence)
        if match.index is None:
            raise ContentNotFoundError(
                preview(old_content, self.preview_chars),
                occurrence,
                match.total_matches,
                hint=_not_found_hint(match.total_matches, exact=True),
            )
        replacement = [] if new_content is None else split_lines(new_content, self.line_separator)
        lines[match.index:match.index + match.length] = replacement
        return lines


def _not_found_hint(total_matches: int, exact: bool = False) -> str:
    if total_matches:
        return f"Only {total_matches} match(es) exist; request an occurrence between 1 and {total_matches}"
    if exact:
        return "Content must match whole lines exactly, including whitespace"
    return "No line contains the search text"


def apply_operations(
    content: str,
    operations: Iterable[Operation] | Diff,
    engine: Optional[PatchEngine] = None,
) -> Result[str]:
    """Apply operations to ``content`` with a default engine.

    Example:
        >>> apply_operations("a\\nb\\nc", [DeleteRange(2, 2)]).data
        'a\\nc'
    """
    return (engine or PatchEngine()).apply_text(content, operations)
