"""Tests for the text file backends and their registry."""
import asyncio
import os
import stat

import pytest

from line_patch.core.errors import SourceUnavailableError
from line_patch.file_backends import (
    FILE_BACKENDS,
    InMemoryBackend,
    LocalFilesystemBackend,
    get_file_backend,
)


class TestLocalFilesystemBackend:
    def test_write_then_read(self, tmp_path):
        backend = LocalFilesystemBackend(base_path=tmp_path)

        async def run():
            await backend.write_text("notes.txt", "hello\n")
            return await backend.read_text("notes.txt")

        assert asyncio.run(run()) == "hello\n"

    def test_absolute_path_ignores_base(self, tmp_path):
        backend = LocalFilesystemBackend(base_path=tmp_path / "elsewhere")
        target = tmp_path / "abs.txt"
        asyncio.run(backend.write_text(str(target), "abs"))
        assert target.read_text() == "abs"

    def test_preserves_crlf(self, tmp_path):
        target = tmp_path / "crlf.txt"
        target.write_bytes(b"a\r\nb\r\n")
        backend = LocalFilesystemBackend()
        assert asyncio.run(backend.read_text(str(target))) == "a\r\nb\r\n"

    def test_non_atomic_write(self, tmp_path):
        backend = LocalFilesystemBackend(base_path=tmp_path, atomic=False)
        asyncio.run(backend.write_text("sub/plain.txt", "data"))
        assert (tmp_path / "sub" / "plain.txt").read_text() == "data"

    def test_atomic_write_leaves_no_temp_files(self, tmp_path):
        backend = LocalFilesystemBackend(base_path=tmp_path)
        asyncio.run(backend.write_text("clean.txt", "x"))
        assert sorted(p.name for p in tmp_path.iterdir()) == ["clean.txt"]

    def test_atomic_write_keeps_mode(self, tmp_path):
        target = tmp_path / "script.sh"
        target.write_text("echo hi\n")
        os.chmod(target, 0o755)
        backend = LocalFilesystemBackend(base_path=tmp_path)
        asyncio.run(backend.write_text("script.sh", "echo bye\n"))
        assert stat.S_IMODE(target.stat().st_mode) == 0o755

    def test_missing_file_raises_source_unavailable(self, tmp_path):
        backend = LocalFilesystemBackend(base_path=tmp_path)
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(backend.read_text("missing.txt"))
        assert exc_info.value.path == "missing.txt"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_undecodable_file(self, tmp_path):
        (tmp_path / "binary.bin").write_bytes(b"\xff\xfe\x00bad")
        backend = LocalFilesystemBackend(base_path=tmp_path)
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(backend.read_text("binary.bin"))
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_exists(self, tmp_path):
        (tmp_path / "here.txt").write_text("x")
        backend = LocalFilesystemBackend(base_path=tmp_path)
        assert asyncio.run(backend.exists("here.txt"))
        assert not asyncio.run(backend.exists("gone.txt"))
        assert not asyncio.run(backend.exists("."))

    def test_async_context_manager(self, tmp_path):
        async def run():
            async with LocalFilesystemBackend(base_path=tmp_path) as backend:
                await backend.write_text("ctx.txt", "ok")
                return await backend.read_text("ctx.txt")

        assert asyncio.run(run()) == "ok"


class TestInMemoryBackend:
    def test_round_trip(self):
        backend = InMemoryBackend()
        asyncio.run(backend.write_text("a/b.txt", "content"))
        assert asyncio.run(backend.read_text("a/b.txt")) == "content"
        assert asyncio.run(backend.exists("a/b.txt"))

    def test_paths_are_normalized(self):
        backend = InMemoryBackend({"./dir//file.txt": "x"})
        assert asyncio.run(backend.read_text("dir/file.txt")) == "x"

    def test_missing(self):
        with pytest.raises(SourceUnavailableError) as exc_info:
            asyncio.run(InMemoryBackend().read_text("nope"))
        assert isinstance(exc_info.value.__cause__, KeyError)


class TestRegistry:
    def test_known_backends(self):
        assert set(FILE_BACKENDS) == {"local", "memory"}

    def test_get_local_with_kwargs(self, tmp_path):
        backend = get_file_backend("local", base_path=tmp_path, atomic=False)
        assert isinstance(backend, LocalFilesystemBackend)
        assert backend.base_path == tmp_path
        assert backend.atomic is False

    def test_get_memory(self):
        backend = get_file_backend("memory", files={"x": "y"})
        assert isinstance(backend, InMemoryBackend)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown file backend"):
            get_file_backend("s3")
