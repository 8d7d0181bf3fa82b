"""Parse YUIDoc ``data.json`` text into a :class:`DocSchema`."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from yuidts.errors import SchemaError
from yuidts.types import DocSchema


def parse(text: str) -> DocSchema:
    """Parse a YUIDoc JSON document.

    Only ``classes`` and ``classitems`` are read; every other top-level key
    (``project``, ``files``, ``modules`` ...) is ignored.

    Raises:
        SchemaError: If the text is not JSON or does not describe classes
            and class items.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Documentation schema is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SchemaError("Documentation schema must be a JSON object")

    try:
        return DocSchema.model_validate(
            {"classes": data.get("classes") or {}, "classitems": data.get("classitems") or []}
        )
    except ValidationError as e:
        raise SchemaError(f"Documentation schema does not match the YUIDoc layout: {e}") from e


def parse_file(path: str | Path) -> DocSchema:
    """Parse a YUIDoc JSON file from disk."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaError(f"Cannot read documentation schema {path}: {e}") from e
    return parse(text)
