"""Base abstraction for the text storage the file tool reads from and writes to.

The patch engine never touches storage itself. The file tool reads a whole
file through a backend, patches it in memory and hands the result back for
writing, so a backend only needs whole-file text I/O.

Users can implement custom backends (remote workspaces, sandboxes, ...) by
subclassing TextFileBackend.
"""

from abc import ABC, abstractmethod
from typing import Any, Self


class TextFileBackend(ABC):
    """Abstract async whole-file text storage.

    Implementations must raise ``SourceUnavailableError`` from read_text
    when the file is missing or unreadable, and ``WriteFailedError`` from
    write_text on failure, chaining the underlying exception.

    Example::

        class SandboxBackend(TextFileBackend):
            async def read_text(self, path):
                ...
    """

    # -- Lifecycle ----------------------------------------------------------

    async def connect(self) -> None:
        """Initialize connections or resources. Override if needed."""
        pass

    async def close(self) -> None:
        """Cleanup connections or resources. Override if needed."""
        pass

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    # -- Abstract operations ------------------------------------------------

    @abstractmethod
    async def read_text(self, path: str) -> str:
        """Return the full text of ``path``.

        Raises:
            SourceUnavailableError: the file does not exist or cannot be read.
        """
        ...

    @abstractmethod
    async def write_text(self, path: str, content: str) -> None:
        """Replace (or create) ``path`` with ``content``.

        Missing parent directories are created first.

        Raises:
            WriteFailedError: the content could not be written.
        """
        ...

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Return True if ``path`` refers to an existing file."""
        ...
