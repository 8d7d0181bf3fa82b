"""Intermediate model shared by both rendered declaration files."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

# Values usable as TypeScript literal types: 'text', -1.5, true
_LITERAL_TYPE_RE = re.compile(r"^(?:'(?:[^'\\]|\\.)*'|-?\d+(?:\.\d+)?|true|false)$")


class MethodDecl(BaseModel):
    """One overload of a method or constructor."""

    kind: Literal["method"] = "method"
    name: str = Field(description="Method name.")
    params: list[str] = Field(default_factory=list, description="Rendered params, e.g. 'x?: number'.")
    return_type: str = Field(default="void", description="Rendered return type.")
    is_constructor: bool = Field(default=False, description="Whether this is a constructor.")
    static: bool = Field(default=False, description="Whether the method is static.")
    description: str = Field(default="", description="Free-text description.")
    file: str = Field(default="", description="Source file.")
    line: int | None = Field(default=None, description="Source line of the overload.")
    errors: list[str] = Field(default_factory=list, description="Validation errors; non-empty means commented out.")

    def signature(self) -> str:
        """Return the signature without any ``declare`` qualifier or semicolon."""
        params = ", ".join(self.params)
        if self.is_constructor:
            return f"constructor({params})"
        return f"{self.name}({params}): {self.return_type}"


class PropertyDecl(BaseModel):
    """A documented property."""

    kind: Literal["property"] = "property"
    name: str = Field(description="Property name.")
    type: str = Field(default="any", description="Rendered type.")
    value: str | None = Field(default=None, description="Rendered default value, if any.")
    final: bool = Field(default=False, description="Whether the property is constant.")
    description: str = Field(default="", description="Free-text description.")
    file: str = Field(default="", description="Source file.")
    valid: bool = Field(default=True, description="Whether the name is a valid JS symbol.")

    @property
    def literal(self) -> bool:
        """Whether the value is written as the property's type, e.g. ``LEFT: 'left'``."""
        return self.final and self.value is not None and bool(_LITERAL_TYPE_RE.match(self.value))

    def signature(self) -> str:
        """Return ``name: type`` without any ``declare`` qualifier or semicolon.

        Ambient declarations cannot carry initializers, so a constant's value
        becomes its literal type and any other default is left to :meth:`doc`.
        """
        return f"{self.name}: {self.value if self.literal else self.type}"

    def doc(self) -> str:
        """Return the description, with the default appended when the signature does not show it."""
        if self.value is None or self.literal:
            return self.description
        default = f"(default: {self.value})"
        return f"{self.description}\n\n{default}" if self.description else default


class UnsupportedDecl(BaseModel):
    """A documented item of a kind that has no declaration form."""

    kind: Literal["unsupported"] = "unsupported"
    name: str = Field(description="Item name.")
    itemtype: str = Field(description="YUIDoc item type, e.g. 'event'.")
    file: str = Field(default="", description="Source file.")


MemberDecl = Annotated[Union[MethodDecl, PropertyDecl, UnsupportedDecl], Field(discriminator="kind")]


class AliasBlock(BaseModel):
    """Members of a documented class that are flattened onto the root."""

    class_name: str = Field(description="Documented class name, e.g. 'p5.dom'.")
    members: list[MemberDecl] = Field(default_factory=list)


class ClassDecl(BaseModel):
    """A subclass declared inside the root namespace."""

    class_name: str = Field(description="Documented class name, e.g. 'p5.Vector'.")
    name: str = Field(description="Name inside the namespace, e.g. 'Vector'.")
    extends: str | None = Field(default=None, description="Parent class as written in the extends clause.")
    file: str = Field(default="", description="Source file.")
    members: list[MemberDecl] = Field(default_factory=list, description="Constructor first, then documented items.")


class DeclarationModel(BaseModel):
    """Everything needed to render both declaration files."""

    root_name: str
    aliases: list[AliasBlock] = Field(default_factory=list)
    classes: list[ClassDecl] = Field(default_factory=list)
    constants: dict[str, list[str]] = Field(default_factory=dict, description="Synthesized constant types.")
    unknown_types: dict[str, str] = Field(default_factory=dict, description="Unresolved token to first file seen.")

    def iter_members(self) -> Iterator[MemberDecl]:
        """Yield every member, root aliases first."""
        for block in self.aliases:
            yield from block.members
        for cls in self.classes:
            yield from cls.members


class Diagnostic(BaseModel):
    """A recoverable problem found while building declarations."""

    file: str = Field(default="")
    line: int | None = Field(default=None)
    member: str = Field(default="")
    message: str


class GenerationReport(BaseModel):
    """Outcome of a generation run that completed."""

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    unknown_types: dict[str, str] = Field(default_factory=dict)
    constants: dict[str, list[str]] = Field(default_factory=dict)
    outputs: list[Path] = Field(default_factory=list, description="Files written.")

    @classmethod
    def from_model(cls, model: DeclarationModel, outputs: list[Path] | None = None) -> GenerationReport:
        diagnostics: list[Diagnostic] = []
        for member in model.iter_members():
            if isinstance(member, MethodDecl):
                diagnostics.extend(
                    Diagnostic(file=member.file, line=member.line, member=member.name, message=error)
                    for error in member.errors
                )
            elif isinstance(member, PropertyDecl) and not member.valid:
                message = f'"{member.name}" is not a valid JS symbol name'
                diagnostics.append(Diagnostic(file=member.file, member=member.name, message=message))
        return cls(
            diagnostics=diagnostics,
            unknown_types=dict(model.unknown_types),
            constants={name: list(values) for name, values in model.constants.items()},
            outputs=outputs or [],
        )

    @property
    def ok(self) -> bool:
        """Whether the run found nothing to report."""
        return not self.diagnostics and not self.unknown_types

    def format_diagnostics(self, root_dir: str | Path | None = None) -> list[str]:
        """Return one line per diagnostic, then one per unknown type.

        File paths are joined onto ``root_dir`` when one is given.
        """
        base = Path(root_dir) if root_dir is not None else None

        def where(file: str) -> str:
            return (base / file).as_posix() if base is not None and file else file

        lines = []
        for d in self.diagnostics:
            location = where(d.file) + (f":{d.line}" if d.line is not None else "")
            lines.append(f"{location}, {d.message}")
        for token, file in self.unknown_types.items():
            lines.append(f"MISSING: {token} ({where(file)})")
        return lines
