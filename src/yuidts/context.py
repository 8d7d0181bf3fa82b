"""State owned by a single generation run."""

from __future__ import annotations

from collections.abc import Iterable

from yuidts.config import GeneratorConfig


class GenerationContext:
    """Registries written while walking one schema.

    ``constants`` maps each synthesized constant type name to its values in
    first-registration order.  ``unknown_types`` maps each type token that
    could not be resolved to the source file it was first seen in.
    """

    def __init__(self, config: GeneratorConfig, known_classes: Iterable[str] = ()) -> None:
        self.config = config
        self.known_classes: frozenset[str] = frozenset(known_classes)
        self.constants: dict[str, list[str]] = {}
        self.unknown_types: dict[str, str] = {}
        self.source_file: str = ""

    def is_known_class(self, token: str) -> bool:
        """Whether ``token`` names a documented subclass, with or without the root prefix."""
        pattern = self.config.subclass_pattern
        if pattern.match(token) and token in self.known_classes:
            return True
        qualified = f"{self.config.root_name}.{token}"
        return bool(pattern.match(qualified)) and qualified in self.known_classes

    def register_constant(self, name: str, values: list[str]) -> None:
        self.constants[name] = list(values)

    def record_unknown(self, token: str) -> None:
        self.unknown_types.setdefault(token, self.source_file)
