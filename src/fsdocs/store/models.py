"""Document path models and path policy enums based on Pydantic."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ..errors import PathPolicyViolation, UnsupportedFileType

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".md", ".json", ".txt", ".csv")


class ConfinementMode(str, Enum):
    """How a store confines the paths callers hand it."""

    STRICT = "strict"
    PERMISSIVE = "permissive"
    ROOTLESS = "rootless"

    @property
    def confined(self) -> bool:
        return self is not ConfinementMode.ROOTLESS


class PathRequirement(str, Enum):
    MUST_BE_RELATIVE = "must_be_relative"
    MUST_BE_ABSOLUTE = "must_be_absolute"
    ANY = "any"


def check_extension(extension: str) -> str:
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileType(
            f"Unsupported file type {extension!r}; expected one of {', '.join(SUPPORTED_EXTENSIONS)}."
        )
    return extension


def check_base_name(base_name: str) -> str:
    if not base_name or base_name in {".", ".."} or "/" in base_name or "\\" in base_name:
        raise PathPolicyViolation(
            f"Invalid document name {base_name!r}; must be a non-empty single path segment.",
            code="ERR_INVALID_BASE_NAME",
        )
    return base_name


class DocumentPath(BaseModel):
    """A document location split into directory, base name and extension."""

    directory: Path = Field(description="Absolute directory holding the document.")
    base_name: str = Field(description="File name without extension or collision suffix.")
    extension: str = Field(description="One of the supported extensions, dot included.")

    @field_validator("base_name")
    @classmethod
    def _validate_base_name(cls, value: str) -> str:
        return check_base_name(value)

    @field_validator("extension")
    @classmethod
    def _validate_extension(cls, value: str) -> str:
        return check_extension(value)

    @classmethod
    def parse(cls, path: Path) -> "DocumentPath":
        """Split an existing document path into its parts."""
        return cls(directory=path.parent, base_name=path.stem, extension=path.suffix)

    def filename(self, counter: int = 0) -> str:
        """Render ``<base_name><ext>``, or ``<base_name>_<counter><ext>`` when counter is set."""
        if counter:
            return f"{self.base_name}_{counter}{self.extension}"
        return f"{self.base_name}{self.extension}"

    def candidate(self, counter: int = 0) -> Path:
        return self.directory / self.filename(counter)
