"""Collision-free file naming."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import NameResolutionExhausted
from ..storage.files import ByteStorage
from .models import DocumentPath

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUFFIX = 10_000


class NameResolver:
    """Pick the on-disk path for a new or replaced document.

    Without ``replace`` an existing file is never overwritten: candidates
    ``name.ext``, ``name_1.ext``, ``name_2.ext``... are probed in order and
    the first free one wins, so gaps left by deletions are reused.
    """

    def __init__(self, storage: ByteStorage, max_suffix: int = DEFAULT_MAX_SUFFIX) -> None:
        if max_suffix < 1:
            raise ValueError("max_suffix must be at least 1")
        self.storage = storage
        self.max_suffix = max_suffix

    async def resolve_name(self, directory: Path, base_name: str, extension: str, replace: bool = False) -> Path:
        target = DocumentPath(directory=directory, base_name=base_name, extension=extension)
        first = target.candidate()
        if replace or not await self.storage.exists(first):
            return first

        for counter in range(1, self.max_suffix + 1):
            candidate = target.candidate(counter)
            if not await self.storage.exists(candidate):
                logger.debug("%s is taken, using %s", first.name, candidate.name)
                return candidate
        raise self._exhausted(first)

    async def reserve_name(
        self,
        directory: Path,
        base_name: str,
        extension: str,
        content: str,
        replace: bool = False,
    ) -> Path:
        """Like :meth:`resolve_name`, but claim the name by creating it exclusively.

        The returned path already holds ``content``; two concurrent callers
        never get the same path back.
        """
        target = DocumentPath(directory=directory, base_name=base_name, extension=extension)
        first = target.candidate()
        if replace:
            await self.storage.write_text(first, content)
            return first

        for counter in range(0, self.max_suffix + 1):
            candidate = target.candidate(counter)
            if await self.storage.create_exclusive(candidate, content):
                return candidate
        raise self._exhausted(first)

    def _exhausted(self, first: Path) -> NameResolutionExhausted:
        logger.warning("No free name for %s within %d suffixes", first, self.max_suffix)
        return NameResolutionExhausted(
            f"No free name for {first.name} after {self.max_suffix} attempts.",
            path=first,
        )
