"""Text storage backends used by the file tool."""

from .backends import InMemoryBackend, LocalFilesystemBackend
from .base import TextFileBackend
from .registry import FILE_BACKENDS, FileBackendType, get_file_backend

__all__ = [
    "TextFileBackend",
    "LocalFilesystemBackend",
    "InMemoryBackend",
    "FileBackendType",
    "get_file_backend",
    "FILE_BACKENDS",
]
