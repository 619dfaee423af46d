"""Turn document content into the text written to disk."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


def sanitize(content: Any, extension: str) -> str:
    """Render content as text: bytes decode as UTF-8, ``.json`` values are dumped as JSON, ``None`` is empty."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, (bytes, bytearray)):
        return bytes(content).decode("utf-8")
    if extension == ".json":
        if isinstance(content, BaseModel):
            return content.model_dump_json()
        return json.dumps(content)
    return str(content)
