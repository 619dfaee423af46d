"""Path validation and confinement for document store operations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from ..errors import InvalidRootPath, PathPolicyViolation
from .models import ConfinementMode, PathRequirement

logger = logging.getLogger(__name__)

_MODE_REQUIREMENTS = {
    ConfinementMode.STRICT: PathRequirement.MUST_BE_RELATIVE,
    ConfinementMode.PERMISSIVE: PathRequirement.ANY,
    ConfinementMode.ROOTLESS: PathRequirement.MUST_BE_ABSOLUTE,
}


class PathGuard:
    """Enforce one confinement policy before any filesystem access.

    ``strict`` confines every path to the root and rejects absolute paths,
    ``permissive`` confines relative paths but lets absolute paths through,
    and ``rootless`` has no root at all and demands absolute paths.
    """

    def __init__(
        self,
        root: Optional[Path | str] = None,
        mode: ConfinementMode = ConfinementMode.STRICT,
        *,
        absolute_results: bool = False,
    ) -> None:
        self.mode = ConfinementMode(mode)
        self.absolute_results = absolute_results
        if root is None:
            if self.mode.confined:
                raise InvalidRootPath(f"A root directory is required in {self.mode.value} mode.")
            self.root: Optional[Path] = None
            return
        root = Path(root)
        if not root.is_absolute():
            raise InvalidRootPath(f"Root directory must be absolute: {root}", path=root)
        self.root = root.resolve()

    @property
    def requirement(self) -> PathRequirement:
        return _MODE_REQUIREMENTS[self.mode]

    def validate(self, path: Path | str, requirement: Optional[PathRequirement] = None) -> Path:
        """Check ``path`` against ``requirement`` (the mode's own by default)."""
        requirement = requirement or self.requirement
        path = Path(path)
        if requirement is PathRequirement.MUST_BE_RELATIVE and path.is_absolute():
            logger.warning("Rejected absolute path %s", path)
            raise PathPolicyViolation(
                f"Absolute paths are not allowed: {path}",
                path=path,
                code="ERR_ABSOLUTE_FILEPATH_NOT_ALLOWED",
            )
        if requirement is PathRequirement.MUST_BE_ABSOLUTE and not path.is_absolute():
            logger.warning("Rejected relative path %s", path)
            raise PathPolicyViolation(
                f"Relative paths are not allowed: {path}",
                path=path,
                code="ERR_RELATIVE_FILEPATH_NOT_ALLOWED",
            )
        return path

    def resolve(self, path: Path | str) -> Path:
        """Join a relative path onto the root; absolute paths pass through normalised.

        Normalisation is lexical, so a symlink names the link itself. Links
        are only followed to reject targets that leave the root.
        """
        path = Path(path)
        if path.is_absolute():
            return Path(os.path.normpath(path))
        if self.root is None:
            raise PathPolicyViolation(
                f"Relative paths are not allowed: {path}",
                path=path,
                code="ERR_RELATIVE_FILEPATH_NOT_ALLOWED",
            )
        candidate = Path(os.path.normpath(self.root / path))
        if not (candidate.is_relative_to(self.root) and candidate.resolve().is_relative_to(self.root)):
            logger.warning("Rejected path %s escaping %s", path, self.root)
            raise PathPolicyViolation(
                f"Invalid path; must reside under {self.root}: {path}",
                path=path,
                code="ERR_PATH_OUTSIDE_ROOT",
            )
        return candidate

    def check(self, path: Path | str) -> Path:
        """Validate then resolve; the result is used as-is by the caller."""
        return self.resolve(self.validate(path))

    def display(self, path: Path) -> Path:
        """Render a resolved path the way callers get it back."""
        if self.root is not None and not self.absolute_results and path.is_relative_to(self.root):
            return path.relative_to(self.root)
        return path
