"""Structural checks run on each method signature before it is emitted."""

from __future__ import annotations

import re

from yuidts.context import GenerationContext
from yuidts.translate import translate_type
from yuidts.types import ClassDescriptor, ClassItem, Signature

JS_SYMBOL_RE = re.compile(r"^[$A-Z_][0-9A-Z_$]*$", re.IGNORECASE)


def is_js_symbol(name: str) -> bool:
    return bool(JS_SYMBOL_RE.match(name))


def validate_member(ctx: GenerationContext, member: ClassItem | ClassDescriptor, overload: Signature) -> list[str]:
    """Validate one overload of a member and return a list of errors.

    Returns an empty list if the overload can be declared as-is.

    Checks:
        - The member name is a valid JS symbol (constructors are exempt).
        - No required param follows an optional one.
        - No param name is repeated.
        - Every param name is a valid JS symbol.
        - Every param type resolves.
        - The return type, if documented, resolves.
    """
    errors: list[str] = []

    if not member.is_constructor and not is_js_symbol(member.name):
        errors.append(f'"{member.name}" is not a valid JS symbol name')

    seen_names: set[str] = set()
    optional_found = False
    for param in overload.params:
        if param.optional:
            optional_found = True
        elif optional_found:
            errors.append(f'required param "{param.name}" follows an optional param')

        if param.name in seen_names:
            errors.append(f'param "{param.name}" is defined multiple times')
        seen_names.add(param.name)

        if not is_js_symbol(param.name):
            errors.append(f'param "{param.name}" is not a valid JS symbol name')

        if not translate_type(ctx, param.type):
            errors.append(f'param "{param.name}" has invalid type: {param.type}')

    if overload.return_ is not None and not translate_type(ctx, overload.return_.type):
        errors.append(f"return has invalid type: {overload.return_.type}")

    return errors
