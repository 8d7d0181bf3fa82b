"""yuidts — Generate TypeScript declaration files from YUIDoc documentation."""

# Generation
from yuidts.codegen import build, generate, render_global_mode, render_module
from yuidts.config import GeneratorConfig, load_config
from yuidts.constants import infer_constant
from yuidts.context import GenerationContext
from yuidts.declarations import DeclarationModel, GenerationReport
from yuidts.emitter import DeclarationSink, Emitter
from yuidts.errors import ConfigError, SchemaError, YuidtsError

# Loading
from yuidts.loader import load_schema
from yuidts.parser import parse, parse_file
from yuidts.translate import translate_type
from yuidts.types import ClassDescriptor, ClassItem, DocSchema, Param, Signature
from yuidts.validate import validate_member

__all__ = [
    # Types
    "ClassDescriptor",
    "ClassItem",
    "DocSchema",
    "Param",
    "Signature",
    # Loading
    "load_schema",
    "parse",
    "parse_file",
    # Generation
    "DeclarationModel",
    "DeclarationSink",
    "Emitter",
    "GenerationContext",
    "GenerationReport",
    "GeneratorConfig",
    "build",
    "generate",
    "infer_constant",
    "load_config",
    "render_global_mode",
    "render_module",
    "translate_type",
    "validate_member",
    # Errors
    "ConfigError",
    "SchemaError",
    "YuidtsError",
]
