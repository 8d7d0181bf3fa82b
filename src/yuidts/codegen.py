"""Generate TypeScript declarations from a YUIDoc documentation schema.

Generation runs in two phases.  :func:`build` walks the schema once,
translating types, inferring constant types and validating signatures into
a :class:`~yuidts.declarations.DeclarationModel`.  The renderers then write
that model out as two files:

- ``<root>.d.ts``: a ``declare class <root>`` holding every member of the
  root alias classes, followed by a ``declare namespace <root>`` with one
  class per documented subclass.
- ``<root>.global-mode.d.ts``: the root members again as free-standing
  declarations, for sketches that use the library's globals, followed by the
  synthesized constant types.
"""

from __future__ import annotations

import logging
from pathlib import Path

from yuidts.config import GeneratorConfig
from yuidts.constants import infer_constant
from yuidts.context import GenerationContext
from yuidts.declarations import (
    AliasBlock,
    ClassDecl,
    DeclarationModel,
    GenerationReport,
    MemberDecl,
    MethodDecl,
    PropertyDecl,
    UnsupportedDecl,
)
from yuidts.emitter import DeclarationSink, Emitter
from yuidts.errors import SchemaError
from yuidts.translate import translate_param, translate_type
from yuidts.types import ClassDescriptor, ClassItem, DocSchema, Signature
from yuidts.validate import is_js_symbol, validate_member

logger = logging.getLogger(__name__)


def generate(
    schema: DocSchema,
    out_dir: str | Path,
    config: GeneratorConfig | None = None,
) -> GenerationReport:
    """Write both declaration files for ``schema`` into ``out_dir``.

    Raises:
        SchemaError: If the schema has a class that cannot be declared.  No
            file is written in that case.
    """
    config = config or GeneratorConfig()
    model = build(schema, config)

    out = Path(out_dir)
    module_emit = Emitter(out / config.module_filename)
    render_module(model, module_emit)
    module_emit.close()

    global_emit = Emitter(out / config.global_mode_filename)
    render_global_mode(model, global_emit)
    global_emit.close()

    report = GenerationReport.from_model(model, outputs=[module_emit.path, global_emit.path])
    logger.info(
        "Generated %d aliases, %d classes, %d constant types (%d diagnostics, %d unknown types)",
        len(model.aliases),
        len(model.classes),
        len(model.constants),
        len(report.diagnostics),
        len(report.unknown_types),
    )
    return report


# ---------------------------------------------------------------------------
# Building the declaration model
# ---------------------------------------------------------------------------


def build(schema: DocSchema, config: GeneratorConfig | None = None) -> DeclarationModel:
    """Translate and validate a schema into a :class:`DeclarationModel`.

    Parameters typed as constants are rewritten in place on ``schema``.

    Raises:
        SchemaError: If a class name is neither a root alias nor
            ``<root>.<Name>``, or a subclass is not documented as a
            constructor.
    """
    config = config or GeneratorConfig()
    alias_names, subclass_names = partition_classes(schema, config)
    ctx = GenerationContext(config, known_classes=schema.class_names)

    aliases = [
        AliasBlock(class_name=name, members=_build_items(ctx, schema, name, owner_type=config.root_name))
        for name in alias_names
    ]
    classes = [_build_subclass(ctx, schema, name) for name in subclass_names]

    return DeclarationModel(
        root_name=config.root_name,
        aliases=aliases,
        classes=classes,
        constants=ctx.constants,
        unknown_types=ctx.unknown_types,
    )


def partition_classes(schema: DocSchema, config: GeneratorConfig) -> tuple[list[str], list[str]]:
    """Split class names into root aliases and namespaced subclasses."""
    aliases: list[str] = []
    subclasses: list[str] = []
    for name in schema.class_names:
        if name in config.aliases:
            aliases.append(name)
        elif config.subclass_pattern.match(name):
            subclasses.append(name)
        else:
            raise SchemaError(
                f"{name} is documented as a class but is neither an alias of "
                f"{config.root_name} nor a {config.root_name}.<Name> subclass"
            )
    return aliases, subclasses


def _build_subclass(ctx: GenerationContext, schema: DocSchema, class_name: str) -> ClassDecl:
    config = ctx.config
    info = schema.classes[class_name]
    short_name = config.subclass_pattern.match(class_name).group(1)

    extends = info.extends
    if extends:
        m = config.subclass_pattern.match(extends)
        if m:
            extends = m.group(1)

    ctx.source_file = info.file
    members = _build_constructor(ctx, info)
    members.extend(_build_items(ctx, schema, class_name, owner_type=class_name))
    return ClassDecl(class_name=class_name, name=short_name, extends=extends or None, file=info.file, members=members)


def _build_constructor(ctx: GenerationContext, info: ClassDescriptor) -> list[MemberDecl]:
    if not info.is_constructor:
        raise SchemaError(f"{info.name} is not a constructor")
    return _build_method(ctx, info, owner_type=info.name)


def _build_items(ctx: GenerationContext, schema: DocSchema, class_name: str, owner_type: str) -> list[MemberDecl]:
    members: list[MemberDecl] = []
    for item in schema.items_for(class_name):
        ctx.source_file = item.file
        if item.itemtype == "method":
            members.extend(_build_method(ctx, item, owner_type))
        elif item.itemtype == "property":
            members.append(_build_property(ctx, item))
        else:
            logger.debug("Skipping %s %r in %s", item.itemtype, item.name, item.file)
            members.append(UnsupportedDecl(name=item.name, itemtype=item.itemtype, file=item.file))
    return members


def _build_method(ctx: GenerationContext, item: ClassItem | ClassDescriptor, owner_type: str) -> list[MethodDecl]:
    return [_build_overload(ctx, item, overload, owner_type) for overload in item.signatures]


def _build_overload(
    ctx: GenerationContext,
    item: ClassItem | ClassDescriptor,
    overload: Signature,
    owner_type: str,
) -> MethodDecl:
    for param in overload.params:
        infer_constant(ctx, item.name, param)

    errors = validate_member(ctx, item, overload)
    params = [translate_param(ctx, param) for param in overload.params]

    if overload.chainable:
        return_type = owner_type
    elif overload.return_ is not None:
        return_type = translate_type(ctx, overload.return_.type, ctx.config.fallback_type)
    else:
        return_type = "void"

    return MethodDecl(
        name=item.name,
        params=params,
        return_type=return_type,
        is_constructor=item.is_constructor,
        static=overload.static,
        description=item.description,
        file=item.file,
        line=overload.line,
        errors=errors,
    )


def _build_property(ctx: GenerationContext, item: ClassItem) -> PropertyDecl:
    if not is_js_symbol(item.name):
        return PropertyDecl(name=item.name, file=item.file, valid=False)

    ts_type = translate_type(ctx, item.type, ctx.config.fallback_type)
    return PropertyDecl(
        name=item.name,
        type=ts_type,
        value=property_value(item, ts_type),
        final=item.final,
        description=item.description,
        file=item.file,
    )


def property_value(item: ClassItem, ts_type: str) -> str | None:
    """Resolve the display value of a property: a literal for strings, verbatim otherwise.

    Constant strings without a documented default are assumed to hold their
    own name in kebab case, so ``final`` ``String`` property ``LEFT_ARROW``
    gets ``'left-arrow'``.
    """
    value = item.default
    if item.final and not value and ts_type == "string":
        value = item.name.lower().replace("_", "-")
    if not value:
        return None
    return quote(value) if ts_type == "string" else value


def quote(value: str) -> str:
    """Return ``value`` as a single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_module(model: DeclarationModel, emit: DeclarationSink) -> None:
    """Render ``<root>.d.ts``: the root class, then the namespace of subclasses."""
    emit(f"declare class {model.root_name} {{")
    emit.indent()
    for block in model.aliases:
        _render_alias_block(block, emit)
    emit.dedent()
    emit("}\n")

    emit(f"declare namespace {model.root_name} {{")
    emit.indent()
    for cls in model.classes:
        _render_class(cls, emit)
    emit.dedent()
    emit("}\n")


def render_global_mode(model: DeclarationModel, emit: DeclarationSink) -> None:
    """Render ``<root>.global-mode.d.ts``: root members as globals, then constant types."""
    emit(f'///<reference path="{model.root_name}.d.ts" />\n')
    for block in model.aliases:
        _render_alias_block(block, emit)
    _render_constants(model.constants, emit)


def _render_alias_block(block: AliasBlock, emit: DeclarationSink) -> None:
    emit.section_break()
    emit(f"// Properties from {block.class_name}")
    emit.section_break()
    for member in block.members:
        _render_member(member, emit)


def _render_class(cls: ClassDecl, emit: DeclarationSink) -> None:
    emit.set_current_source_file(cls.file)
    extends = f" extends {cls.extends}" if cls.extends else ""
    emit(f"class {cls.name}{extends} {{")
    emit.indent()
    for member in cls.members:
        _render_member(member, emit)
    emit.dedent()
    emit("}")


def _render_constants(constants: dict[str, list[str]], emit: DeclarationSink) -> None:
    if not constants:
        return
    emit.section_break()
    emit("// Constants")
    emit.section_break()
    for name, values in constants.items():
        union = " | ".join(f"typeof {value}" for value in values)
        emit(f"type {name} = {union};")


def _render_member(member: MemberDecl, emit: DeclarationSink) -> None:
    emit.set_current_source_file(member.file)
    if isinstance(member, MethodDecl):
        _render_method(member, emit)
    elif isinstance(member, PropertyDecl):
        _render_property(member, emit)
    else:
        emit(f'// Not annotated: {member.itemtype} "{member.name}"')


def _render_method(method: MethodDecl, emit: DeclarationSink) -> None:
    if emit.indent_level == 0:
        decl = f"declare function {method.signature()};"
    else:
        decl = ("static " if method.static else "") + method.signature() + ";"

    if method.errors:
        emit.section_break()
        emit(f"// Invalid declaration of {method.name}() in {method.file}, line {method.line}:")
        emit("//")
        for error in method.errors:
            emit(f"//   {error}")
        emit("//")
        emit(f"// {decl}")
        emit("")
        return

    emit.description(method.description)
    emit(decl)


def _render_property(prop: PropertyDecl, emit: DeclarationSink) -> None:
    if not prop.valid:
        emit.section_break()
        emit(f'// Property "{prop.name}", defined in {prop.file}, is not a valid JS symbol name')
        emit.section_break()
        return

    if emit.indent_level == 0:
        keyword = "const" if prop.final else "var"
        emit.description(prop.doc())
        emit(f"declare {keyword} {prop.signature()};")
    elif not prop.final:
        emit.description(prop.doc())
        emit(f"{prop.signature()};")
