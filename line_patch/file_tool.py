"""Whole-file rewrite and diff application over a text backend.

``FileTool`` is the public boundary of the library: every method returns a
``Result`` and never raises PatchError. ``apply_diff`` reads the file,
patches it entirely in memory and writes only when every operation
succeeded, so a failed diff leaves the file untouched.

Concurrent calls against the same path are not serialised. Two overlapping
``apply_diff`` calls each read the original content and the last write wins;
callers that need multi-writer safety must lock per path themselves.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from .config import FileToolConfig
from .core.engine import PatchEngine
from .core.errors import PatchError
from .core.matching import join_lines, split_lines
from .core.parsing import coerce_diff
from .core.types import Diff, Result
from .file_backends import LocalFilesystemBackend, TextFileBackend
from .logging import get_logger

logger = get_logger(__name__)

DiffLike = Diff | Mapping[str, Any] | Iterable[Any]


class FileTool:
    """Rewrite files or apply ordered line-level diffs to them.

    Args:
        backend: Storage to read and write through. Defaults to a
            LocalFilesystemBackend built from ``config``.
        config: Encoding, separator and write settings.
        engine: Patch engine; defaults to one built from ``config``.

    Example:
        >>> tool = FileTool()
        >>> result = await tool.apply_diff("app.py", [DeleteRange(3, 3)])
        >>> result.ok
        True
    """

    def __init__(
        self,
        backend: Optional[TextFileBackend] = None,
        config: Optional[FileToolConfig] = None,
        engine: Optional[PatchEngine] = None,
    ):
        self.config = config or FileToolConfig()
        self.backend = backend or LocalFilesystemBackend(
            base_path=self.config.base_path,
            encoding=self.config.encoding,
            atomic=self.config.atomic_writes,
        )
        self.engine = engine or PatchEngine(
            line_separator=self.config.line_separator,
            preview_chars=self.config.preview_chars,
        )

    async def rewrite_file(self, path: str, content: str) -> Result[None]:
        """Overwrite or create ``path`` with ``content``, creating parent directories."""
        log = logger.bind(path=path)
        try:
            await self.backend.write_text(path, content)
        except PatchError as e:
            log.warning("Rewrite failed", **e.to_dict())
            return Result.failure(e)

        log.info("Rewrote file", chars=len(content))
        return Result.success()

    async def apply_diff(self, path: str, diff: DiffLike) -> Result[None]:
        """Apply ``diff`` to ``path`` and persist the result.

        ``diff`` may be a Diff, a list of typed operations, a list of
        dict-form operations or ``{"operations": [...]}``.
        """
        result = await self._patch(path, diff)
        if result.failed:
            return Result.failure(result.error)

        new_content = result.data
        log = logger.bind(path=path)
        try:
            await self.backend.write_text(path, new_content)
        except PatchError as e:
            log.warning("Diff write failed", **e.to_dict())
            return Result.failure(e)

        log.info("Applied diff", lines=len(split_lines(new_content, self.config.line_separator)))
        return Result.success()

    async def preview_diff(self, path: str, diff: DiffLike) -> Result[str]:
        """Return the content ``apply_diff`` would write, without writing it."""
        return await self._patch(path, diff)

    async def _patch(self, path: str, diff: DiffLike) -> Result[str]:
        log = logger.bind(path=path)
        try:
            parsed = coerce_diff(diff)
            content = await self.backend.read_text(path)
            lines = split_lines(content, self.config.line_separator)
            patched = self.engine.apply(lines, parsed.operations)
        except PatchError as e:
            e.path = e.path or path
            log.warning("Diff rejected", **e.to_dict())
            return Result.failure(e)

        log.debug(
            "Diff applied in memory",
            operations=len(parsed),
            lines_before=len(lines),
            lines_after=len(patched),
        )
        return Result.success(join_lines(patched, self.config.line_separator))
