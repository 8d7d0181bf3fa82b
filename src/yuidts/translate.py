"""Translate YUIDoc type tokens into TypeScript type expressions."""

from __future__ import annotations

import re

from yuidts.context import GenerationContext
from yuidts.types import Param

# Matches a whole `Function(T1, T2)` token
_FUNCTION_RE = re.compile(r"^Function\((.*)\)$", re.IGNORECASE)


def translate_type(ctx: GenerationContext, token: str | None, fallback: str | None = None) -> str | None:
    """Translate a documentation type token.

    Compound tokens are handled structurally: ``T[]`` becomes an array of the
    translated element, ``Function(A, B)`` an anonymous function type and
    ``A|B`` a union of the translated members.  Simple tokens resolve through
    the primitive map, the external type allowlist, the documented classes
    and the synthesized constants, in that order.

    Unknown tokens never raise: they are recorded on ``ctx`` against the
    current source file and ``fallback`` is returned instead.  With a
    ``None`` fallback, a compound token with an unresolvable part resolves
    to ``None`` as a whole.

    Example::

        >>> translate_type(ctx, "Number|String[]", "any")
        'number|string[]'
        >>> translate_type(ctx, "Function(Number, Frobnicator)", "any")
        '(p1: number, p2: any) => any'
    """
    if token is None:
        return fallback
    if token == "":
        return ""

    token = token.strip()
    if not token:
        return ""

    if len(token) > 2 and token.endswith("[]"):
        element = translate_type(ctx, token[:-2], fallback)
        if element is None:
            return None
        if "=>" in element:
            element = f"({element})"
        return element + "[]"

    parts = _split_top_level(token, "|")
    if len(parts) > 1:
        translated = [translate_type(ctx, part, fallback) for part in parts]
        if any(t is None for t in translated):
            return None
        return "|".join(f"({t})" if "=>" in t else t for t in translated)

    m = _FUNCTION_RE.match(token)
    if m:
        return _function_type(ctx, m.group(1))

    config = ctx.config
    if token in config.type_map:
        return config.type_map[token]
    if token in config.external_types:
        return token
    if ctx.is_known_class(token):
        return token
    if token in ctx.constants:
        return token

    ctx.record_unknown(token)
    return fallback


def translate_param(ctx: GenerationContext, param: Param) -> str:
    """Render a parameter as ``name[?]: type``."""
    name = ctx.config.reserved_param_names.get(param.name, param.name)
    optional = "?" if param.optional else ""
    return f"{name}{optional}: {translate_type(ctx, param.type, ctx.config.fallback_type)}"


def _function_type(ctx: GenerationContext, arg_list: str) -> str:
    arg_types = [arg for arg in _split_top_level(arg_list, ",") if arg.strip()]
    args = [f"p{i}: {translate_type(ctx, arg, 'any')}" for i, arg in enumerate(arg_types, start=1)]
    return f"({', '.join(args)}) => any"


def _split_top_level(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, ignoring separators inside parentheses."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == sep and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts
