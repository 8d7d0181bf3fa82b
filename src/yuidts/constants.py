"""Infer named constant types from parameter descriptions.

YUIDoc documents parameters that take one of the library's constants with
the bare type ``Constant``, listing the accepted names only in prose::

    @param {Constant} horizAlign horizontal alignment, either LEFT,
                                 RIGHT or CENTER

This module recovers the list (``LEFT, RIGHT, CENTER``), invents a type name
for it (``HORIZ_ALIGN``) and rewrites the parameter to use that name.  The
matching is best-effort; parameters it cannot read keep the ``Constant``
token and translate to the fallback type.
"""

from __future__ import annotations

import re

from yuidts.context import GenerationContext
from yuidts.types import Param

# Matches "either A, B or C"
_EITHER_RE = re.compile(r"\b[Ee]ither\s+((?:[A-Z][A-Z0-9_]*\b\s*,?\s*(?:or\b)?\s*)+)")

_CONSTANT_NAME_RE = re.compile(r"\b[A-Z][A-Z0-9_]*\b")

_MARKUP_RE = re.compile(r"<[^>]+>|`")

_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_words(name: str) -> list[str]:
    """Split a camelCase name into lowercase words.

    >>> split_words("horizAlign")
    ['horiz', 'align']
    """
    return [word.lower() for word in _WORD_BOUNDARY_RE.split(name) if word]


def extract_constant_names(description: str) -> list[str]:
    """Return the constant names listed after "either" in a description.

    Names keep their order of appearance; repeats are dropped.  Returns an
    empty list when the description has no such phrase.
    """
    m = _EITHER_RE.search(_MARKUP_RE.sub("", description or ""))
    if not m:
        return []
    names: list[str] = []
    for name in _CONSTANT_NAME_RE.findall(m.group(1)):
        if name not in names:
            names.append(name)
    return names


def synthesize_type_name(member_name: str, param_name: str) -> str:
    """Derive the constant type name for a member's parameter.

    - A multi-word parameter, or any parameter of a ``create*`` member, names
      the type by itself: ``textAlign(horizAlign)`` gives ``HORIZ_ALIGN``.
    - A parameter repeating the member's last word defers to the member:
      ``rectMode(mode)`` gives ``RECT_MODE``.
    - Otherwise the member's first word qualifies the parameter:
      ``blendMode(type)`` gives ``BLEND_TYPE``.
    """
    param_words = split_words(param_name)
    member_words = split_words(member_name)

    if len(param_words) > 1 or (member_words and member_words[0] == "create"):
        name = "_".join(param_words)
    elif member_words and param_words and member_words[-1] == param_words[-1]:
        name = "_".join(member_words)
    else:
        first = member_words[0] if member_words else ""
        last = param_words[-1] if param_words else ""
        name = f"{first}_{last}"
    return name.upper()


def infer_constant(ctx: GenerationContext, member_name: str, param: Param) -> str | None:
    """Give a ``Constant`` parameter a synthesized type, if one can be read.

    Overrides from the configuration win over the description.  On a match,
    the type is registered on ``ctx`` and ``param.type`` is rewritten to its
    name, which is returned.  Returns ``None`` and leaves ``param`` untouched
    otherwise.
    """
    config = ctx.config
    if param.type is None or param.type.strip() != config.constant_token:
        return None

    values = config.override_for(member_name, param.name)
    if values is None:
        values = extract_constant_names(param.description)
    if not values:
        return None

    type_name = synthesize_type_name(member_name, param.name)
    ctx.register_constant(type_name, values)
    param.type = type_name
    return type_name
