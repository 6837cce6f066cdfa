"""Tests for the local-directory cache backend."""

import os
import threading
from pathlib import Path

import pytest

from product_lookup.core.exceptions import CacheLookupError, CacheWriteError
from product_lookup.infrastructure.cache.file_cache import FileCache


@pytest.mark.asyncio
async def test_missing_key_returns_none(tmp_path: Path) -> None:
    cache = FileCache(str(tmp_path))

    assert await cache.get("B000X") is None


@pytest.mark.asyncio
async def test_put_writes_one_file_named_after_key(tmp_path: Path) -> None:
    cache = FileCache(str(tmp_path))
    body = b'{"ASIN":"B000X","Title":"Example Widget"}'

    await cache.put("B000X", body)

    assert (tmp_path / "B000X").read_bytes() == body
    assert await cache.get("B000X") == body
    assert sorted(os.listdir(tmp_path)) == ["B000X"]


@pytest.mark.asyncio
async def test_put_replaces_longer_content(tmp_path: Path) -> None:
    cache = FileCache(str(tmp_path))

    await cache.put("B000X", b'{"Title":"A much longer title than the next one"}')
    await cache.put("B000X", b'{"Title":"Short"}')

    assert await cache.get("B000X") == b'{"Title":"Short"}'


@pytest.mark.asyncio
async def test_reads_existing_file_verbatim(tmp_path: Path) -> None:
    (tmp_path / "B000X").write_bytes(b'{"ASIN":"B000X"}\n')
    cache = FileCache(str(tmp_path))

    assert await cache.get("B000X") == b'{"ASIN":"B000X"}\n'


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["../escape", "a/b", ".", ".."])
async def test_keys_outside_directory_are_rejected(tmp_path: Path, key: str) -> None:
    cache = FileCache(str(tmp_path / "cache"))
    (tmp_path / "cache").mkdir()

    with pytest.raises(CacheLookupError):
        await cache.get(key)
    with pytest.raises(CacheWriteError):
        await cache.put(key, b"{}")

    assert not (tmp_path / "escape").exists()


@pytest.mark.asyncio
async def test_unreadable_entry_is_lookup_error(tmp_path: Path) -> None:
    (tmp_path / "B000X").mkdir()
    cache = FileCache(str(tmp_path))

    with pytest.raises(CacheLookupError):
        await cache.get("B000X")


@pytest.mark.asyncio
async def test_missing_directory_is_write_error(tmp_path: Path) -> None:
    cache = FileCache(str(tmp_path / "does-not-exist"))

    with pytest.raises(CacheWriteError):
        await cache.put("B000X", b"{}")


@pytest.mark.asyncio
async def test_missing_directory_reads_as_absent(tmp_path: Path) -> None:
    cache = FileCache(str(tmp_path / "does-not-exist"))

    assert await cache.get("B000X") is None


@pytest.mark.asyncio
async def test_failed_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    (tmp_path / "B000X").mkdir()
    (tmp_path / "B000X" / "occupied").write_text("x")
    cache = FileCache(str(tmp_path))

    with pytest.raises(CacheWriteError):
        await cache.put("B000X", b"{}")

    assert sorted(os.listdir(tmp_path)) == ["B000X"]


def test_describe(tmp_path: Path) -> None:
    assert FileCache(str(tmp_path)).describe() == f"file ({tmp_path})"


@pytest.mark.asyncio
async def test_read_runs_off_loop_and_maps_errors(tmp_path: Path, monkeypatch) -> None:
    loop_thread = threading.get_ident()
    seen = []

    def denied(self):
        seen.append(threading.get_ident())
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", denied)
    cache = FileCache(str(tmp_path))

    with pytest.raises(CacheLookupError, match="Permission denied"):
        await cache.get("B000X")

    assert seen and seen[0] != loop_thread


@pytest.mark.asyncio
async def test_write_runs_off_loop_and_maps_errors(tmp_path: Path, monkeypatch) -> None:
    loop_thread = threading.get_ident()
    seen = []

    def denied(src, dst):
        seen.append(threading.get_ident())
        raise PermissionError(13, "Permission denied", str(dst))

    monkeypatch.setattr(os, "replace", denied)
    cache = FileCache(str(tmp_path))

    with pytest.raises(CacheWriteError, match="Permission denied"):
        await cache.put("B000X", b"{}")

    assert seen and seen[0] != loop_thread
    assert os.listdir(tmp_path) == []
