"""Document CRUD operations confined to a store root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from ..config import Settings, get_settings
from ..errors import DirectoryNotEmpty, FileNotFound, PathPolicyViolation
from ..storage.files import ByteStorage, FileStorage
from .content import sanitize
from .models import ConfinementMode, check_base_name, check_extension
from .naming import DEFAULT_MAX_SUFFIX, NameResolver
from .paths import PathGuard

logger = logging.getLogger(__name__)


class DocumentStore:
    """Create, read, update, delete and list text documents.

    Every call validates its path through :class:`PathGuard` first, so a
    failing check never touches the filesystem. Nothing is cached; each
    operation asks the storage for the current state.
    """

    def __init__(
        self,
        root: Optional[Path | str] = None,
        *,
        mode: ConfinementMode = ConfinementMode.STRICT,
        storage: Optional[ByteStorage] = None,
        absolute_results: bool = False,
        exclusive_create: bool = False,
        max_suffix: int = DEFAULT_MAX_SUFFIX,
    ) -> None:
        self._guard = PathGuard(root, mode, absolute_results=absolute_results)
        self._storage = storage or FileStorage()
        self._names = NameResolver(self._storage, max_suffix=max_suffix)
        self._exclusive_create = exclusive_create
        if self._guard.root is not None:
            self._guard.root.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DocumentStore":
        settings = settings or get_settings()
        return cls(
            settings.root_dir if settings.confinement.confined else None,
            mode=settings.confinement,
            absolute_results=settings.absolute_results,
            exclusive_create=settings.exclusive_create,
            max_suffix=settings.max_suffix,
        )

    @property
    def root(self) -> Optional[Path]:
        return self._guard.root

    @property
    def mode(self) -> ConfinementMode:
        return self._guard.mode

    # ------------------------------------------------------------------ utils
    async def _existing(self, path: Path | str) -> Path:
        target = self._guard.check(path)
        if not await self._storage.exists(target):
            raise FileNotFound(f"No such file or directory: {path}", path=path)
        return target

    async def _save(
        self,
        directory: Path,
        base_name: str,
        extension: str,
        content: Any,
        replace: bool,
    ) -> Path:
        check_extension(extension)
        check_base_name(base_name)
        text = sanitize(content, extension)

        if self._exclusive_create:
            target = await self._names.reserve_name(directory, base_name, extension, text, replace=replace)
        else:
            target = await self._names.resolve_name(directory, base_name, extension, replace=replace)
            await self._storage.write_text(target, text)
        logger.info("Saved document %s", target)
        return self._guard.display(target)

    # ------------------------------------------------------------------- API
    async def create(
        self,
        directory: Path | str,
        base_name: str,
        extension: str,
        content: Any = "",
        replace: bool = False,
    ) -> Path:
        """Write a new document and return where it landed.

        Without ``replace`` an existing document of the same name gets a
        numeric suffix (``name_1.ext``) instead of being overwritten.
        """
        save_dir = self._guard.check(directory)
        return await self._save(save_dir, base_name, extension, content, replace)

    async def read(self, path: Path | str) -> str | list[str]:
        """Return a document's text, or the entry names if ``path`` is a directory."""
        target = await self._existing(path)
        if await self._storage.is_directory(target):
            return sorted(await self._storage.list_entries(target))
        return await self._storage.read_text(target)

    async def update(self, path: Path | str, content: Any) -> Path:
        """Overwrite an existing document, keeping its directory, name and extension."""
        target = await self._existing(path)
        return await self._save(target.parent, target.stem, target.suffix, content, replace=True)

    async def delete(self, path: Path | str) -> Path:
        """Remove a file, or a directory only when it is empty. The root itself is never removed."""
        target = await self._existing(path)
        if target == self._guard.root:
            raise PathPolicyViolation(
                f"Refusing to delete the store root: {path}",
                path=path,
                code="ERR_DELETE_ROOT",
            )
        if await self._storage.is_directory(target):
            entries = await self._storage.list_entries(target)
            if entries:
                raise DirectoryNotEmpty(
                    f"Refusing to delete non-empty directory {path} ({len(entries)} entries).",
                    path=path,
                )
            await self._storage.remove_empty_directory(target)
        else:
            await self._storage.remove_file(target)
        logger.info("Deleted %s", target)
        return self._guard.display(target)

    async def list(self, directory: Path | str) -> list[str]:
        """List the entries directly inside ``directory``."""
        target = await self._existing(directory)
        return sorted(await self._storage.list_entries(target))
