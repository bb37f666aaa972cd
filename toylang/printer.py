"""Rendering literals as the text that ``print`` shows."""

from __future__ import annotations

import math
import sys
from typing import Callable

from toylang.literal import MAX_STRING_LENGTH, Literal, LiteralType

_IDENTIFIER_LIMIT = 255
_FUNCTION_KINDS = frozenset(
    {LiteralType.FUNCTION, LiteralType.FUNCTION_NATIVE, LiteralType.FUNCTION_HOOK}
)
_TYPE_NAMES = {
    LiteralType.NULL: "null",
    LiteralType.BOOLEAN: "bool",
    LiteralType.INTEGER: "int",
    LiteralType.FLOAT: "float",
    LiteralType.STRING: "string",
    LiteralType.FUNCTION: "function",
    LiteralType.FUNCTION_NATIVE: "native",
    LiteralType.IDENTIFIER: "identifier",
    LiteralType.TYPE: "type",
    LiteralType.OPAQUE: "opaque",
    LiteralType.ANY: "any",
}


def _format_float(value: float) -> str:
    if math.isfinite(value) and value - int(value) == 0:
        return f"{value:.1f}"
    return format(value, "g")


def _format_type(literal: Literal) -> str:
    type_of = literal.value
    subtypes = literal.subtypes
    if type_of == LiteralType.ARRAY:
        body = "[" + "".join(format_literal(sub) for sub in subtypes) + "]"
    elif type_of == LiteralType.DICTIONARY:
        body = "[" + "".join(
            format_literal(key) + ":" + format_literal(value)
            for key, value in zip(subtypes[0::2], subtypes[1::2])
        ) + "]"
    elif type_of in _TYPE_NAMES:
        body = _TYPE_NAMES[type_of]
    else:
        raise TypeError(f"Unrecognized literal type in print type: {int(type_of)}")
    const = " const" if literal.constant else ""
    return f"<{body}{const}>"


def format_literal(literal: Literal, quotes: str = "") -> str:
    """Return the printed form of a literal.

    ``quotes`` wraps strings; members of arrays and dictionaries are always
    quoted with double quotes.
    """
    kind = literal.type
    if kind == LiteralType.NULL:
        return "null"
    if kind == LiteralType.BOOLEAN:
        return "true" if literal.value else "false"
    if kind == LiteralType.INTEGER:
        return str(literal.value)
    if kind == LiteralType.FLOAT:
        return _format_float(literal.value)
    if kind == LiteralType.STRING:
        return f"{quotes}{literal.value}{quotes}"[: MAX_STRING_LENGTH - 1]
    if kind == LiteralType.ARRAY:
        return "[" + ",".join(format_literal(item, '"') for item in literal.value) + "]"
    if kind == LiteralType.DICTIONARY:
        dictionary = literal.value
        body = ",".join(
            format_literal(key, '"') + ":" + format_literal(value, '"')
            for key, value in dictionary.items()
        )
        if len(dictionary) == 0:
            body += ":"
        return f"[{body}]"
    if kind in _FUNCTION_KINDS:
        return "(function)"
    if kind == LiteralType.IDENTIFIER:
        return literal.value[:_IDENTIFIER_LIMIT]
    if kind == LiteralType.TYPE:
        return _format_type(literal)
    if kind in (LiteralType.TYPE_INTERMEDIATE, LiteralType.FUNCTION_INTERMEDIATE):
        return "Unprintable literal found"
    if kind == LiteralType.OPAQUE:
        return "(opaque)"
    if kind == LiteralType.ANY:
        return "(any)"
    raise TypeError(f"Unrecognized literal type in print: {int(kind)}")


def print_literal(
    literal: Literal, print_fn: Callable[[str], object] | None = None
) -> None:
    """Pass the printed form of a literal to ``print_fn`` (stdout by default)."""
    output = print_fn if print_fn is not None else sys.stdout.write
    output(format_literal(literal))