"""Local filesystem text backend."""

import os
import tempfile
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from ...core.errors import SourceUnavailableError, WriteFailedError
from ...logging import get_logger
from ..base import TextFileBackend

logger = get_logger(__name__)


class LocalFilesystemBackend(TextFileBackend):
    """Read and write text files on the local disk.

    Files are opened with ``newline=""`` so line endings pass through
    untouched; an empty diff therefore round-trips a file byte for byte.
    """

    def __init__(
        self,
        base_path: Optional[str | Path] = None,
        encoding: str = "utf-8",
        atomic: bool = True,
    ):
        """Initialize local filesystem backend.

        Args:
            base_path: Directory relative paths resolve against. Absolute
                paths are used as given. None means the current directory.
            encoding: Text encoding for reads and writes.
            atomic: Write through a temp file in the target directory and
                ``os.replace`` it over the destination.
        """
        self.base_path = Path(base_path) if base_path is not None else None
        self.encoding = encoding
        self.atomic = atomic

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        if self.base_path is not None and not p.is_absolute():
            return self.base_path / p
        return p

    async def read_text(self, path: str) -> str:
        file_path = self._resolve(path)
        try:
            async with aiofiles.open(file_path, "r", encoding=self.encoding, newline="") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise SourceUnavailableError(path, "file does not exist") from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(path, str(e)) from e

    async def write_text(self, path: str, content: str) -> None:
        file_path = self._resolve(path)
        try:
            await aiofiles.os.makedirs(file_path.parent, exist_ok=True)
            if self.atomic:
                await self._write_atomic(file_path, content)
            else:
                # encode before opening so an unencodable edit does not truncate the file
                data = content.encode(self.encoding)
                async with aiofiles.open(file_path, "wb") as f:
                    await f.write(data)
        except (OSError, UnicodeError) as e:
            raise WriteFailedError(path, str(e)) from e

        logger.debug("Wrote file", path=str(file_path), chars=len(content), backend="local")

    async def _write_atomic(self, file_path: Path, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=str(file_path.parent), prefix=".line_patch_", suffix=".tmp")
        os.close(fd)
        try:
            async with aiofiles.open(tmp_name, "w", encoding=self.encoding, newline="") as f:
                await f.write(content)
            # mkstemp creates 0600; keep the existing mode or use 0644 for new files
            mode = file_path.stat().st_mode & 0o777 if file_path.exists() else 0o644
            os.chmod(tmp_name, mode)
            await aiofiles.os.replace(tmp_name, file_path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    async def exists(self, path: str) -> bool:
        return await aiofiles.os.path.isfile(self._resolve(path))
