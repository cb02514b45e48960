"""In-memory text backend."""

from pathlib import PurePosixPath
from typing import Optional

from ...core.errors import SourceUnavailableError
from ..base import TextFileBackend


class InMemoryBackend(TextFileBackend):
    """Keeps files in a dict keyed by normalized path.

    Useful for tests and for previewing diffs against content that never
    touches disk. Directories are implicit, so writes never fail.
    """

    def __init__(self, files: Optional[dict[str, str]] = None):
        self.files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self.files[self._key(path)] = content

    @staticmethod
    def _key(path: str) -> str:
        return str(PurePosixPath(path))

    async def read_text(self, path: str) -> str:
        try:
            return self.files[self._key(path)]
        except KeyError as e:
            raise SourceUnavailableError(path, "file does not exist") from e

    async def write_text(self, path: str, content: str) -> None:
        self.files[self._key(path)] = content

    async def exists(self, path: str) -> bool:
        return self._key(path) in self.files
