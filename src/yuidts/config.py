"""Generator configuration.

The defaults describe the p5.js documentation set; other YUIDoc-documented
libraries can be targeted by loading a JSON file with :func:`load_config`.
"""

from __future__ import annotations

import re
from functools import cached_property
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from yuidts.errors import ConfigError

_DEFAULT_PRIMITIVE_TYPES: dict[str, str] = {
    "Object": "any",
    "Any": "any",
    "Number": "number",
    "Integer": "number",
    "String": "string",
    "Constant": "any",
    "undefined": "undefined",
    "Null": "null",
    "Array": "any[]",
    "Boolean": "boolean",
    "*": "any",
    "Void": "void",
    "Function": "() => any",
}


class ConstantOverride(BaseModel):
    """A hand-curated constant set for a parameter the heuristic cannot read."""

    member: str = Field(description="Owning method name, e.g. 'endShape'.")
    param: str = Field(description="Parameter name, e.g. 'mode'.")
    values: list[str] = Field(description="Constant names the parameter accepts.")


class GeneratorConfig(BaseModel):
    """Settings for one generation run."""

    root_name: str = Field(default="p5", description="Name of the root class and namespace.")
    root_token: str = Field(default="P5", description="Documentation type token that refers to the root class.")
    aliases: list[str] = Field(
        default_factory=lambda: ["p5", "p5.dom", "p5.sound"],
        description="Documented classes whose members belong directly to the root class.",
    )
    external_types: list[str] = Field(
        default_factory=lambda: ["HTMLCanvasElement", "Float32Array", "Event"],
        description="Host-platform types passed through untouched.",
    )
    primitive_types: dict[str, str] = Field(
        default_factory=lambda: dict(_DEFAULT_PRIMITIVE_TYPES),
        description="Documentation type token to TypeScript type.",
    )
    fallback_type: str = Field(default="any", description="Type used when a token cannot be resolved.")
    constant_token: str = Field(default="Constant", description="Token marking a parameter that takes a constant.")
    constant_overrides: list[ConstantOverride] = Field(
        default_factory=lambda: [ConstantOverride(member="endShape", param="mode", values=["CLOSE"])],
        description="Constant sets that bypass description matching.",
    )
    reserved_param_names: dict[str, str] = Field(
        default_factory=lambda: {"class": "theClass"},
        description="Parameter names that are reserved words, and their replacements.",
    )

    @cached_property
    def type_map(self) -> dict[str, str]:
        """Return the primitive map extended with the root class token."""
        return {**self.primitive_types, self.root_token: self.root_name}

    @cached_property
    def subclass_pattern(self) -> re.Pattern[str]:
        """Return the pattern matching ``<root>.<Name>`` and capturing ``Name``."""
        return re.compile(rf"^{re.escape(self.root_name)}\.([^.]+)$")

    def override_for(self, member: str, param: str) -> list[str] | None:
        """Look up a constant override by member and parameter name."""
        for override in self.constant_overrides:
            if override.member == member and override.param == param:
                return override.values
        return None

    @property
    def module_filename(self) -> str:
        return f"{self.root_name}.d.ts"

    @property
    def global_mode_filename(self) -> str:
        return f"{self.root_name}.global-mode.d.ts"


def load_config(path: str | Path) -> GeneratorConfig:
    """Load a :class:`GeneratorConfig` from a JSON file.

    Keys missing from the file keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or does not validate.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
        return GeneratorConfig.model_validate_json(text)
    except (OSError, ValidationError) as e:
        raise ConfigError(f"Cannot load config from {path}: {e}") from e
