"""Pydantic models for the YUIDoc ``data.json`` documentation schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Param(BaseModel):
    """A single documented parameter."""

    name: str = Field(default="", description="Parameter name.")
    type: str | None = Field(default=None, description="Raw documentation type token, e.g. 'Number|String'.")
    optional: bool = Field(default=False, description="Whether the parameter may be omitted.")
    description: str = Field(default="", description="Free-text description.")


class ReturnInfo(BaseModel):
    """The documented return value of a signature."""

    type: str | None = Field(default=None, description="Raw documentation type token.")
    description: str = Field(default="", description="Free-text description.")


class Signature(BaseModel):
    """One parameter/return variant of a method or constructor."""

    model_config = ConfigDict(populate_by_name=True)

    params: list[Param] = Field(default_factory=list, description="Ordered parameters.")
    return_: ReturnInfo | None = Field(default=None, alias="return", description="Return value, if documented.")
    static: bool = Field(default=False, description="Whether the method is static.")
    chainable: bool = Field(default=False, description="Whether the method returns its owning instance.")
    line: int | None = Field(default=None, description="Source line, for diagnostics.")


class _Documented(Signature):
    file: str = Field(default="", description="Source file the entry was documented in.")
    description: str = Field(default="", description="Free-text description.")
    is_constructor: bool = Field(default=False, description="Whether the entry documents a constructor.")
    overloads: list[Signature] | None = Field(default=None, description="Signature variants, if more than one.")

    @field_validator("file")
    @classmethod
    def _normalize_separators(cls, value: str) -> str:
        return value.replace("\\", "/")

    @property
    def signatures(self) -> list[Signature]:
        """Return the overloads, or the entry itself when it has none."""
        return list(self.overloads) if self.overloads else [self]


class ClassDescriptor(_Documented):
    """A documented class, e.g. ``p5.Vector``."""

    name: str = Field(default="", description="Dotted class name.")
    extends: str | None = Field(default=None, description="Parent class name.")


class ClassItem(_Documented):
    """A method, property or other member belonging to a documented class."""

    name: str = Field(default="", description="Member name.")
    class_: str = Field(default="", alias="class", description="Name of the owning class.")
    itemtype: str = Field(default="", description="'method', 'property', or another YUIDoc item type.")
    type: str | None = Field(default=None, description="Property type token.")
    default: str | None = Field(default=None, description="Default value as a literal, if any.")
    final: bool = Field(default=False, description="Whether the property is constant.")

    @field_validator("default", mode="before")
    @classmethod
    def _stringify_default(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class DocSchema(BaseModel):
    """A parsed documentation schema."""

    classes: dict[str, ClassDescriptor] = Field(default_factory=dict, description="Class name to descriptor.")
    classitems: list[ClassItem] = Field(default_factory=list, description="All members, in documentation order.")

    @model_validator(mode="after")
    def _name_classes(self) -> DocSchema:
        for key, descriptor in self.classes.items():
            if not descriptor.name:
                descriptor.name = key
        return self

    def items_for(self, class_name: str) -> list[ClassItem]:
        """Return the named items belonging to a class, in documentation order."""
        return [item for item in self.classitems if item.class_ == class_name and item.name]

    @property
    def class_names(self) -> list[str]:
        """Return all class names."""
        return list(self.classes)
