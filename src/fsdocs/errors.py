"""Exception hierarchy for the document store."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DocumentStoreError(Exception):
    """Base class for every error raised by the document store."""

    code = "ERR_DOCUMENT_STORE"

    def __init__(self, message: str, *, path: Optional[Path | str] = None, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
        if code is not None:
            self.code = code


class InvalidRootPath(DocumentStoreError, ValueError):
    """The store root does not satisfy the confinement policy."""

    code = "ERR_FILEPATH_NOT_ABSOLUTE"


class PathPolicyViolation(DocumentStoreError, ValueError):
    """A caller-supplied path breaks the relative/absolute or containment policy."""

    code = "ERR_ABSOLUTE_FILEPATH_NOT_ALLOWED"


class UnsupportedFileType(DocumentStoreError, ValueError):
    code = "ERR_FILETYPE_NOT_SUPPORTED"


class FileNotFound(DocumentStoreError, FileNotFoundError):
    code = "ERR_FILE_NOT_EXISTS"


class DirectoryNotEmpty(DocumentStoreError, OSError):
    code = "ERR_DELETE_DIR_WITH_CONTENTS"


class NameResolutionExhausted(DocumentStoreError, RuntimeError):
    """No free name was found within the configured suffix bound."""

    code = "ERR_NAME_RESOLUTION_EXHAUSTED"
