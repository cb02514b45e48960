"""Search primitives used by the content-anchored operations.

Two matching strategies, deliberately different:

- ``find_line``: a line matches when it *contains* the needle. Used by
  insert_after / insert_before so short fragments can anchor an insert.
- ``find_block``: a run of lines matches only when every line is *equal*
  to the corresponding pattern line. Used by replace_content /
  delete_content. Matches never overlap; a hit resumes scanning after the
  whole run.

Both scan the entire sequence so ``total_matches`` is exact even when the
requested occurrence was found early.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class LineMatch:
    """Outcome of a single-line substring search."""

    index: Optional[int]  # 0-based; None when the occurrence does not exist
    total_matches: int

    @property
    def found(self) -> bool:
        return self.index is not None


@dataclass(frozen=True)
class BlockMatch:
    """Outcome of an exact multi-line search."""

    index: Optional[int]  # 0-based start of the matched run
    length: int  # number of lines in the pattern
    total_matches: int

    @property
    def found(self) -> bool:
        return self.index is not None


def split_lines(text: str, separator: str = "\n") -> List[str]:
    """Split text into lines. A trailing separator yields a final empty line."""
    return text.split(separator)


def join_lines(lines: Sequence[str], separator: str = "\n") -> str:
    return separator.join(lines)


def preview(text: str, limit: int = 50) -> str:
    """Shorten ``text`` for error messages."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def find_line(lines: Sequence[str], needle: str, occurrence: int = 1) -> LineMatch:
    """Locate the ``occurrence``-th line containing ``needle``."""
    count = 0
    found: Optional[int] = None

    for i, line in enumerate(lines):
        if needle in line:
            count += 1
            if count == occurrence:
                found = i

    return LineMatch(index=found, total_matches=count)


def _matches_at(lines: Sequence[str], pattern: Sequence[str], start: int) -> bool:
    if start + len(pattern) > len(lines):
        return False
    for offset, expected in enumerate(pattern):
        if lines[start + offset] != expected:
            return False
    return True


def find_block(lines: Sequence[str], pattern: Sequence[str], occurrence: int = 1) -> BlockMatch:
    """Locate the ``occurrence``-th non-overlapping run of lines equal to ``pattern``."""
    n = len(pattern)
    count = 0
    found: Optional[int] = None
    i = 0

    while i < len(lines):
        if n and _matches_at(lines, pattern, i):
            count += 1
            if count == occurrence:
                found = i
            i += n
        else:
            i += 1

    return BlockMatch(index=found, length=n, total_matches=count)
