from __future__ import annotations

import json

from pydantic import BaseModel

from fsdocs.store.content import sanitize


class Note(BaseModel):
    title: str
    tags: list[str]


def test_strings_pass_through() -> None:
    assert sanitize("plain", ".txt") == "plain"
    assert sanitize('{"raw": true}', ".json") == '{"raw": true}'


def test_json_objects_are_serialised() -> None:
    payload = {"test": ["json", "is", "ok"], "what": None, "something": False}
    assert json.loads(sanitize(payload, ".json")) == payload
    assert json.loads(sanitize([1, 2, 3], ".json")) == [1, 2, 3]


def test_pydantic_models_dump_as_json() -> None:
    text = sanitize(Note(title="t", tags=["a"]), ".json")
    assert json.loads(text) == {"title": "t", "tags": ["a"]}


def test_other_content_is_stringified() -> None:
    assert sanitize(42, ".txt") == "42"
    assert sanitize({"a": 1}, ".md") == "{'a': 1}"
    assert sanitize(b"bytes", ".csv") == "bytes"
    assert isinstance(sanitize(lambda: None, ".txt"), str)
    assert sanitize(None, ".md") == ""
