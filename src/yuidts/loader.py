"""Load documentation schemas from disk or over HTTP."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx

from yuidts.errors import SchemaError
from yuidts.parser import parse
from yuidts.types import DocSchema


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


async def fetch_schema(url: str, *, client: httpx.AsyncClient | None = None) -> DocSchema:
    """Fetch and parse a ``data.json`` document from a URL, e.g. ``https://p5js.org/reference/data.json``."""
    should_close = client is None
    client = client or httpx.AsyncClient(follow_redirects=True)
    try:
        resp = await client.get(url)
        resp.raise_for_status()
        return parse(resp.text)
    finally:
        if should_close:
            await client.aclose()


async def read_schema(path: str | Path) -> DocSchema:
    """Read and parse a ``data.json`` file without blocking the event loop."""
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except OSError as e:
        raise SchemaError(f"Cannot read documentation schema {path}: {e}") from e
    return parse(text)


async def load_schema(source: str | Path, *, client: httpx.AsyncClient | None = None) -> DocSchema:
    """Load a schema from a filesystem path or an ``http(s)`` URL.

    Combines :func:`fetch_schema` and :func:`read_schema`.
    """
    if is_url(source):
        return await fetch_schema(str(source), client=client)
    return await read_schema(source)
