"""Exceptions raised when a generation run cannot continue."""

from __future__ import annotations


class YuidtsError(Exception):
    """Base class for all yuidts errors."""


class SchemaError(YuidtsError):
    """The documentation schema is structurally invalid.

    Raised for class names that are neither a root alias nor a namespaced
    subclass, for classes used as constructors without being documented as
    one, and for input documents that cannot be read or parsed.  No output is
    written once this is raised.
    """


class ConfigError(YuidtsError):
    """A generator configuration file could not be loaded."""
