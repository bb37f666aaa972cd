"""Copying, comparing and hashing literals."""

from __future__ import annotations

import struct

from toylang.literal import Literal, LiteralType, hash_string, hash_uint

_UINT_MASK = 0xFFFFFFFF

_PLAIN = frozenset(
    {
        LiteralType.NULL,
        LiteralType.BOOLEAN,
        LiteralType.INTEGER,
        LiteralType.FLOAT,
        LiteralType.STRING,
        LiteralType.IDENTIFIER,
        LiteralType.FUNCTION,
        LiteralType.OPAQUE,
        LiteralType.FUNCTION_INTERMEDIATE,
        LiteralType.FUNCTION_NATIVE,
        LiteralType.FUNCTION_HOOK,
        LiteralType.INDEX_BLANK,
    }
)
_CONTAINERS = frozenset(
    {
        LiteralType.ARRAY,
        LiteralType.DICTIONARY,
        LiteralType.ARRAY_INTERMEDIATE,
        LiteralType.DICTIONARY_INTERMEDIATE,
        LiteralType.TYPE_INTERMEDIATE,
    }
)
_SEQUENCES = frozenset(
    {
        LiteralType.ARRAY,
        LiteralType.ARRAY_INTERMEDIATE,
        LiteralType.DICTIONARY_INTERMEDIATE,
        LiteralType.TYPE_INTERMEDIATE,
    }
)
_NUMBERS = frozenset({LiteralType.INTEGER, LiteralType.FLOAT})
_FUNCTIONS = frozenset(
    {LiteralType.FUNCTION, LiteralType.FUNCTION_NATIVE, LiteralType.FUNCTION_HOOK}
)
_UNHASHABLE = _FUNCTIONS | {LiteralType.TYPE, LiteralType.OPAQUE, LiteralType.ANY}


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def copy_literal(literal: Literal) -> Literal:
    """Return an independent copy of a literal.

    Arrays, dictionaries and types are copied deeply; function bodies,
    native callables and opaque data are shared.
    """
    kind = literal.type
    if kind in _PLAIN:
        return Literal(
            kind,
            literal.value,
            constant=literal.constant,
            tag=literal.tag,
            scope=literal.scope,
            identifier_hash=literal.identifier_hash,
        )
    if kind in _CONTAINERS:
        return Literal(kind, literal.value.copy())
    if kind == LiteralType.TYPE:
        return Literal(
            LiteralType.TYPE,
            literal.value,
            constant=literal.constant,
            subtypes=[copy_literal(sub) for sub in literal.subtypes],
        )
    raise TypeError(f"Can't copy that literal type: {int(kind)}")


def _dictionaries_equal(lhs, rhs) -> bool:
    for key, value in lhs.items():
        if not rhs.exists(key):
            return False
        if not literals_are_equal(value, rhs.get(key)):
            return False
    return True


def literals_are_equal(lhs: Literal, rhs: Literal) -> bool:
    """Compare two literals; integers and floats compare by value."""
    if lhs.type != rhs.type:
        if lhs.type in _NUMBERS and rhs.type in _NUMBERS:
            return lhs.value == rhs.value
        return False

    kind = lhs.type
    if kind in (LiteralType.NULL, LiteralType.ANY):
        return True
    if kind in (
        LiteralType.BOOLEAN,
        LiteralType.INTEGER,
        LiteralType.FLOAT,
        LiteralType.STRING,
    ):
        return lhs.value == rhs.value
    if kind in _SEQUENCES:
        left, right = list(lhs.value), list(rhs.value)
        if len(left) != len(right):
            return False
        return all(literals_are_equal(a, b) for a, b in zip(left, right))
    if kind == LiteralType.DICTIONARY:
        return _dictionaries_equal(lhs.value, rhs.value)
    if kind in _FUNCTIONS:
        return False
    if kind == LiteralType.IDENTIFIER:
        if lhs.identifier_hash != rhs.identifier_hash:
            return False
        return lhs.value == rhs.value
    if kind == LiteralType.TYPE:
        if lhs.value != rhs.value or lhs.constant != rhs.constant:
            return False
        if len(lhs.subtypes) != len(rhs.subtypes):
            return False
        if lhs.value in (LiteralType.ARRAY, LiteralType.DICTIONARY):
            return all(
                literals_are_equal(a, b) for a, b in zip(lhs.subtypes, rhs.subtypes)
            )
        return True
    if kind in (LiteralType.OPAQUE, LiteralType.INDEX_BLANK):
        return False
    if kind == LiteralType.FUNCTION_INTERMEDIATE:
        raise TypeError("Can't compare intermediate functions")
    raise TypeError(f"Unrecognized literal type in equality: {int(kind)}")


def hash_literal(literal: Literal) -> int:
    """Return a signed 32-bit hash; -1 for kinds that cannot be hashed."""
    kind = literal.type
    if kind == LiteralType.NULL:
        return 0
    if kind == LiteralType.BOOLEAN:
        return 1 if literal.value else 0
    if kind == LiteralType.INTEGER:
        return _signed32(hash_uint(literal.value & _UINT_MASK))
    if kind == LiteralType.FLOAT:
        (bits,) = struct.unpack("<I", struct.pack("<f", literal.value))
        return _signed32(hash_uint(bits))
    if kind == LiteralType.STRING:
        return _signed32(hash_string(literal.value))
    if kind == LiteralType.ARRAY:
        total = sum(hash_literal(item) for item in literal.value)
        return _signed32(hash_uint(total & _UINT_MASK))
    if kind == LiteralType.DICTIONARY:
        total = sum(
            hash_literal(key) + hash_literal(value)
            for key, value in literal.value.items()
        )
        return _signed32(hash_uint(total & _UINT_MASK))
    if kind == LiteralType.IDENTIFIER:
        return _signed32(literal.identifier_hash)
    if kind in _UNHASHABLE:
        return -1
    raise TypeError(f"Unrecognized literal type in hash: {int(kind)}")