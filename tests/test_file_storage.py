from __future__ import annotations

from pathlib import Path

import pytest

from fsdocs.storage.files import ByteStorage, FileStorage


def test_file_storage_satisfies_protocol() -> None:
    assert isinstance(FileStorage(), ByteStorage)


@pytest.mark.asyncio
async def test_file_storage_write_and_read(tmp_path: Path) -> None:
    storage = FileStorage()
    target = tmp_path / "notes" / "sample.md"
    await storage.write_text(target, "content")
    assert target.read_text(encoding="utf-8") == "content"
    assert await storage.read_text(target) == "content"
    assert await storage.exists(target)
    assert await storage.is_directory(tmp_path / "notes")
    assert not await storage.is_directory(target)


@pytest.mark.asyncio
async def test_file_storage_create_exclusive(tmp_path: Path) -> None:
    storage = FileStorage()
    target = tmp_path / "claim.txt"
    assert await storage.create_exclusive(target, "first")
    assert not await storage.create_exclusive(target, "second")
    assert target.read_text(encoding="utf-8") == "first"


@pytest.mark.asyncio
async def test_file_storage_remove_and_list(tmp_path: Path) -> None:
    storage = FileStorage()
    await storage.ensure_directory(tmp_path / "a" / "b")
    await storage.ensure_directory(tmp_path / "a" / "b")
    (tmp_path / "a" / "file.txt").write_text("x", encoding="utf-8")

    assert sorted(await storage.list_entries(tmp_path / "a")) == ["b", "file.txt"]

    with pytest.raises(OSError):
        await storage.remove_empty_directory(tmp_path / "a")

    await storage.remove_empty_directory(tmp_path / "a" / "b")
    await storage.remove_file(tmp_path / "a" / "file.txt")
    assert await storage.list_entries(tmp_path / "a") == []
