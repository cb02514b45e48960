"""File backend registry and factory function."""

from typing import Literal

from .backends import InMemoryBackend, LocalFilesystemBackend
from .base import TextFileBackend

FileBackendType = Literal["local", "memory"]

FILE_BACKENDS: dict[str, type[TextFileBackend]] = {
    "local": LocalFilesystemBackend,
    "memory": InMemoryBackend,
}


def get_file_backend(name: str, **kwargs) -> TextFileBackend:
    """Create a file backend by name.

    Args:
        name: Backend name ("local", "memory")
        **kwargs: Passed to the backend constructor

    Raises:
        ValueError: If the backend name is not recognized

    Example:
        >>> backend = get_file_backend("local", base_path="/srv/workspace")
        >>> backend = get_file_backend("memory", files={"a.txt": "hello"})
    """
    if name not in FILE_BACKENDS:
        raise ValueError(
            f"Unknown file backend: {name}. "
            f"Available backends: {', '.join(FILE_BACKENDS.keys())}"
        )
    return FILE_BACKENDS[name](**kwargs)
