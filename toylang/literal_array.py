"""A growable sequence of literals that owns copies of what it holds."""

from __future__ import annotations

from typing import Iterable, Iterator

from toylang.literal import Literal, LiteralType, to_null
from toylang.operations import copy_literal, literals_are_equal


class LiteralArray:
    """An ordered list of literals; every stored literal is a private copy."""

    def __init__(self, literals: Iterable[Literal] = ()) -> None:
        self._literals: list[Literal] = []
        for literal in literals:
            self.push(literal)

    def push(self, literal: Literal) -> int:
        """Append a copy of ``literal``; return the index it was stored at."""
        self._literals.append(copy_literal(literal))
        return len(self._literals) - 1

    def pop(self) -> Literal:
        """Remove and return the last literal, or a null literal when empty."""
        if not self._literals:
            return to_null()
        return self._literals.pop()

    def _index(self, index: Literal) -> int:
        if index.type != LiteralType.INTEGER:
            raise TypeError("array indices must be integer literals")
        return index.value

    def set(self, index: Literal, value: Literal) -> None:
        """Replace the literal at an integer-literal index with a copy of ``value``."""
        idx = self._index(index)
        if not 0 <= idx < len(self._literals):
            raise IndexError(f"array index {idx} out of range")
        self._literals[idx] = copy_literal(value)

    def get(self, index: Literal) -> Literal:
        """Return a copy of the literal at ``index``, or null if there is none."""
        if index.type != LiteralType.INTEGER:
            return to_null()
        idx = index.value
        if not 0 <= idx < len(self._literals):
            return to_null()
        return copy_literal(self._literals[idx])

    def find(self, literal: Literal) -> int:
        """Return the index of the first equal literal of the same kind, or -1."""
        for position, candidate in enumerate(self._literals):
            if candidate.type == literal.type and literals_are_equal(
                candidate, literal
            ):
                return position
        return -1

    def copy(self) -> LiteralArray:
        """Return a deep copy of this array."""
        return LiteralArray(self._literals)

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self._literals)