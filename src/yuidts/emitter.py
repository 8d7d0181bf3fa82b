"""Line-oriented writer for TypeScript declaration files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable

_TAG_RE = re.compile(r"<[^>]+>")

INDENT = "    "


@runtime_checkable
class DeclarationSink(Protocol):
    """Where rendered declarations go.

    The indent level decides both the leading whitespace of emitted lines
    and whether a declaration is written in its top-level ``declare`` form.
    """

    def __call__(self, line: str) -> None: ...

    def indent(self) -> None: ...

    def dedent(self) -> None: ...

    def section_break(self) -> None: ...

    def description(self, text: str) -> None: ...

    def set_current_source_file(self, path: str) -> None: ...

    @property
    def indent_level(self) -> int: ...

    @property
    def current_source_file(self) -> str: ...

    def close(self) -> None: ...


class Emitter:
    """A :class:`DeclarationSink` that collects lines and writes them on close.

    Usage::

        emit = Emitter("out/p5.d.ts")
        emit("declare class p5 {")
        emit.indent()
        emit("frameCount: number;")
        emit.dedent()
        emit("}")
        emit.close()
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._lines: list[str] = []
        self._level = 0
        self._source_file = ""

    def __call__(self, line: str) -> None:
        for part in line.split("\n"):
            self._lines.append(INDENT * self._level + part if part else "")

    def indent(self) -> None:
        self._level += 1

    def dedent(self) -> None:
        if self._level == 0:
            raise ValueError("Cannot dedent below level 0")
        self._level -= 1

    def section_break(self) -> None:
        """Insert a blank line unless the previous line is already blank."""
        if self._lines and self._lines[-1] != "":
            self._lines.append("")

    def description(self, text: str) -> None:
        """Emit ``text`` as a JSDoc comment, dropping HTML markup."""
        lines = [line.rstrip() for line in _TAG_RE.sub("", text or "").strip().splitlines()]
        if not lines:
            return
        self("/**")
        for line in lines:
            self(f" * {line}".rstrip())
        self(" */")

    def set_current_source_file(self, path: str) -> None:
        self._source_file = path

    @property
    def indent_level(self) -> int:
        return self._level

    @property
    def current_source_file(self) -> str:
        return self._source_file

    @property
    def path(self) -> Path | None:
        return self._path

    def getvalue(self) -> str:
        """Return everything emitted so far."""
        return "\n".join(self._lines) + "\n"

    def close(self) -> None:
        """Write the collected text to the target path, if there is one."""
        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(self.getvalue(), encoding="utf-8")
