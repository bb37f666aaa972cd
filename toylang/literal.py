"""Literal values: the tagged values that flow through the interpreter."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable

MAX_STRING_LENGTH = 4096
"""Longest string a literal may hold, in bytes."""

MAX_SUBTYPES = 255
"""Most subtypes a type literal can carry."""

_UINT_MASK = 0xFFFFFFFF
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619


class LiteralType(IntEnum):
    """Kind of value a literal holds; the numbering is part of the bytecode."""

    NULL = 0
    BOOLEAN = 1
    INTEGER = 2
    FLOAT = 3
    STRING = 4
    ARRAY = 5
    DICTIONARY = 6
    FUNCTION = 7
    IDENTIFIER = 8
    TYPE = 9
    OPAQUE = 10
    ANY = 11

    # meta-level kinds, used internally only
    TYPE_INTERMEDIATE = 12
    ARRAY_INTERMEDIATE = 13
    DICTIONARY_INTERMEDIATE = 14
    FUNCTION_INTERMEDIATE = 15
    FUNCTION_ARG_REST = 16
    FUNCTION_NATIVE = 17
    FUNCTION_HOOK = 18
    INDEX_BLANK = 19


def hash_string(text: str) -> int:
    """Hash a string's UTF-8 bytes the way identifiers and strings are hashed."""
    value = _FNV_OFFSET
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * signed) & _UINT_MASK
        value ^= _FNV_PRIME
    return value


def hash_uint(value: int) -> int:
    """Mix the bits of an unsigned 32-bit integer."""
    x = value & _UINT_MASK
    x = (((x >> 16) ^ x) * 0x45D9F3B) & _UINT_MASK
    x = (((x >> 16) ^ x) * 0x45D9F3B) & _UINT_MASK
    return (x >> 16) ^ x


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


@dataclass(eq=False)
class Literal:
    """A tagged value.

    ``value`` holds the payload: a bool, int, float, str (strings and
    identifier names), an array or dictionary object, a callable, opaque
    user data, or, for type literals, the ``LiteralType`` being described.
    """

    type: LiteralType
    value: Any = None
    constant: bool = False
    subtypes: list[Literal] = field(default_factory=list)
    tag: int = 0
    scope: Any = None
    identifier_hash: int = 0

    @property
    def type_of(self) -> LiteralType:
        """The kind a type literal describes."""
        if self.type != LiteralType.TYPE:
            raise TypeError("only type literals describe a kind")
        return self.value

    def push_subtype(self, subtype: Literal) -> int:
        """Append an inner type to a type literal; return its index."""
        if self.type != LiteralType.TYPE:
            raise TypeError("subtypes can only be pushed onto type literals")
        if len(self.subtypes) >= MAX_SUBTYPES:
            raise OverflowError("too many subtypes in a type literal")
        self.subtypes.append(subtype)
        return len(self.subtypes) - 1

    def is_truthy(self) -> bool:
        """Everything but ``false`` is truthy; null is reported and counts as false."""
        if self.type == LiteralType.NULL:
            sys.stderr.write("Null is neither true nor false\n")
            return False
        if self.type == LiteralType.BOOLEAN:
            return bool(self.value)
        return True


def to_null() -> Literal:
    """A null literal."""
    return Literal(LiteralType.NULL)


def to_boolean(value: bool) -> Literal:
    """A boolean literal."""
    return Literal(LiteralType.BOOLEAN, bool(value))


def to_integer(value: int) -> Literal:
    """An integer literal, wrapped to 32-bit signed range."""
    return Literal(LiteralType.INTEGER, _wrap_int32(int(value)))


def to_float(value: float) -> Literal:
    """A float literal, stored at single precision."""
    return Literal(LiteralType.FLOAT, _to_float32(value))


def to_string(value: str) -> Literal:
    """A string literal."""
    if not isinstance(value, str):
        raise TypeError("string literals hold str values")
    return Literal(LiteralType.STRING, value)


def to_array(array: Any) -> Literal:
    """An array literal wrapping the given array."""
    return Literal(LiteralType.ARRAY, array)


def to_dictionary(dictionary: Any) -> Literal:
    """A dictionary literal wrapping the given dictionary."""
    return Literal(LiteralType.DICTIONARY, dictionary)


def to_identifier(name: str) -> Literal:
    """An identifier literal with its hash precomputed."""
    if not isinstance(name, str):
        raise TypeError("identifier literals hold str names")
    return Literal(LiteralType.IDENTIFIER, name, identifier_hash=hash_string(name))


def to_type(type_of: LiteralType, constant: bool) -> Literal:
    """A type literal describing ``type_of``, with no subtypes yet."""
    return Literal(LiteralType.TYPE, LiteralType(type_of), constant=bool(constant))


def to_opaque(value: Any, tag: int) -> Literal:
    """An opaque literal carrying user data and an integer tag."""
    return Literal(LiteralType.OPAQUE, value, tag=tag)


def to_function_native(fn: Callable[..., Any]) -> Literal:
    """A literal wrapping a native function."""
    return Literal(LiteralType.FUNCTION_NATIVE, fn)


def to_function_hook(fn: Callable[..., Any]) -> Literal:
    """A literal wrapping an import hook."""
    return Literal(LiteralType.FUNCTION_HOOK, fn)


def to_index_blank() -> Literal:
    """The blank index marker, as in ``arr[:]``."""
    return Literal(LiteralType.INDEX_BLANK)