"""Async helpers for reading and writing documents on the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


@runtime_checkable
class ByteStorage(Protocol):
    """Path-addressed durable storage the document store is built on."""

    async def ensure_directory(self, path: Path) -> None: ...

    async def exists(self, path: Path) -> bool: ...

    async def is_directory(self, path: Path) -> bool: ...

    async def read_text(self, path: Path) -> str: ...

    async def write_text(self, path: Path, content: str) -> None: ...

    async def create_exclusive(self, path: Path, content: str) -> bool: ...

    async def remove_file(self, path: Path) -> None: ...

    async def remove_empty_directory(self, path: Path) -> None: ...

    async def list_entries(self, path: Path) -> list[str]: ...


class FileStorage:
    """Local filesystem implementation of :class:`ByteStorage`.

    Paths are used exactly as given; confinement is the caller's job.
    """

    encoding = "utf-8"

    async def ensure_directory(self, path: Path) -> None:
        await aiofiles.os.makedirs(path, exist_ok=True)

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(path)

    async def is_directory(self, path: Path) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def read_text(self, path: Path) -> str:
        async with aiofiles.open(path, "r", encoding=self.encoding) as fh:
            return await fh.read()

    async def write_text(self, path: Path, content: str) -> None:
        await self.ensure_directory(path.parent)
        async with aiofiles.open(path, "w", encoding=self.encoding) as fh:
            await fh.write(content)
        logger.debug("Wrote %d characters to %s", len(content), path)

    async def create_exclusive(self, path: Path, content: str) -> bool:
        """Write ``content`` only if ``path`` does not exist yet."""
        await self.ensure_directory(path.parent)
        try:
            async with aiofiles.open(path, "x", encoding=self.encoding) as fh:
                await fh.write(content)
        except FileExistsError:
            return False
        logger.debug("Created %s exclusively", path)
        return True

    async def remove_file(self, path: Path) -> None:
        await aiofiles.os.remove(path)

    async def remove_empty_directory(self, path: Path) -> None:
        # rmdir refuses non-empty directories
        await aiofiles.os.rmdir(path)

    async def list_entries(self, path: Path) -> list[str]:
        return await aiofiles.os.listdir(path)
