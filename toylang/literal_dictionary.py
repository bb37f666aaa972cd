"""An open-addressing hash map from literals to literals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from toylang.literal import Literal, LiteralType, to_boolean, to_null
from toylang.operations import copy_literal, hash_literal, literals_are_equal

MAX_LOAD = 0.75
"""Fraction of the slots that may be in use before the table grows."""

_UINT_MASK = 0xFFFFFFFF
_FUNCTION_KINDS = frozenset(
    {LiteralType.FUNCTION, LiteralType.FUNCTION_NATIVE, LiteralType.FUNCTION_HOOK}
)


def _grow_capacity(capacity: int) -> int:
    return 8 if capacity < 8 else capacity * 2


@dataclass
class _Entry:
    key: Literal = field(default_factory=to_null)
    value: Literal = field(default_factory=to_null)


def _find_entry(
    entries: list[_Entry], key: Literal, hash_value: int, must_exist: bool
) -> _Entry | None:
    """Probe for ``key``; without ``must_exist`` an empty slot also matches."""
    capacity = len(entries)
    if not capacity:
        return None

    start = (hash_value & _UINT_MASK) % capacity
    index = (start + 1) % capacity
    while index != start:
        entry = entries[index]
        if entry.key.type == LiteralType.NULL:
            # an empty key is either a free slot or a tombstone
            if entry.value.type == LiteralType.NULL and not must_exist:
                return entry
        elif literals_are_equal(key, entry.key):
            return entry
        index = (index + 1) % capacity
    return None


def _check_key(key: Literal, action: str) -> None:
    if key.type == LiteralType.NULL:
        raise TypeError(f"Dictionaries can't have null keys ({action})")
    if key.type in _FUNCTION_KINDS:
        raise TypeError(f"Dictionaries can't have function keys ({action})")
    if key.type == LiteralType.OPAQUE:
        raise TypeError(f"Dictionaries can't have opaque keys ({action})")


class LiteralDictionary:
    """A key-value map of literals; keys and values are stored as private copies."""

    def __init__(self, pairs: Iterable[tuple[Literal, Literal]] = ()) -> None:
        self._entries: list[_Entry] = []
        self._count = 0
        self._contains = 0  # live entries plus tombstones
        for key, value in pairs:
            self.set(key, value)

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._entries)

    def _resize(self, capacity: int) -> None:
        fresh = [_Entry() for _ in range(capacity)]
        for old in self._entries:
            if old.key.type == LiteralType.NULL:
                continue
            slot = _find_entry(fresh, to_null(), hash_literal(old.key), False)
            slot.key = old.key
            slot.value = old.value
        self._entries = fresh

    def set(self, key: Literal, value: Literal) -> None:
        """Insert or overwrite the value stored under ``key``."""
        _check_key(key, "set")

        if self._contains + 1 > len(self._entries) * MAX_LOAD:
            self._resize(_grow_capacity(len(self._entries)))

        entry = _find_entry(self._entries, key, hash_literal(key), False)
        added = entry.key.type == LiteralType.NULL
        entry.key = copy_literal(key)
        entry.value = copy_literal(value)

        if added:
            self._contains += 1
            self._count += 1

    def get(self, key: Literal) -> Literal:
        """Return a copy of the value under ``key``, or a null literal."""
        _check_key(key, "get")
        entry = _find_entry(self._entries, key, hash_literal(key), True)
        if entry is None:
            return to_null()
        return copy_literal(entry.value)

    def remove(self, key: Literal) -> None:
        """Remove the pair stored under ``key``, if there is one."""
        _check_key(key, "remove")
        entry = _find_entry(self._entries, key, hash_literal(key), True)
        if entry is not None:
            entry.key = to_null()
            entry.value = to_boolean(True)  # tombstone
            self._count -= 1

    def exists(self, key: Literal) -> bool:
        """Return True if a pair is stored under ``key``."""
        entry = _find_entry(self._entries, key, hash_literal(key), False)
        return entry is not None and not (
            entry.key.type == LiteralType.NULL and entry.value.type == LiteralType.NULL
        )

    def items(self) -> Iterator[tuple[Literal, Literal]]:
        """Yield the stored (key, value) pairs in slot order."""
        for entry in self._entries:
            if entry.key.type != LiteralType.NULL:
                yield entry.key, entry.value

    def copy(self) -> LiteralDictionary:
        """Return a deep copy with the same capacity."""
        duplicate = LiteralDictionary()
        duplicate._entries = [_Entry() for _ in range(len(self._entries))]
        for key, value in self.items():
            duplicate.set(key, value)
        return duplicate

    def __len__(self) -> int:
        return self._count