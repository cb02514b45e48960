"""Text file backend implementations."""

from .local import LocalFilesystemBackend
from .memory import InMemoryBackend

__all__ = [
    "LocalFilesystemBackend",
    "InMemoryBackend",
]
