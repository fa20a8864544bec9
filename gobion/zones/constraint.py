"""Difference-bound relations and constraints between clocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Clock = int

# The index of the reference (zero) clock within a DBM.
REFERENCE: Clock = 0

# The encoded value of the unbounded relation, the smallest machine integer.
_INFINITY_ENCODED = -(1 << 63)


class Strictness(enum.IntEnum):
    """Whether a bound is strict (<) or weak (≤)."""

    STRICT = 0
    WEAK = 1

    def __str__(self) -> str:
        return "<" if self is Strictness.STRICT else "≤"


STRICT = Strictness.STRICT
WEAK = Strictness.WEAK


@dataclass(frozen=True, order=True)
class Relation:
    """A bound ``i - j ~ n`` packed into one integer.

    The least significant bit holds the strictness and the remaining bits the
    limit, so strict bounds order below weak bounds with the same limit. The
    natural ordering compares the packed integers, in which infinity is the
    smallest value; ``lt``, ``le``, ``gt`` and ``ge`` treat it as the largest.
    """

    encoded: int

    def is_infinity(self) -> bool:
        return self.encoded == _INFINITY_ENCODED

    def is_zero(self) -> bool:
        return self.encoded == int(WEAK)

    def negation(self) -> "Relation":
        """Negate the limit and flip the strictness; infinity cannot be negated."""
        if self.is_infinity():
            raise ValueError("Infinity cannot be negated")
        return Relation(1 - self.encoded)

    def add(self, rhs: "Relation") -> "Relation":
        """Sum the limits and keep the tighter of the two strictnesses."""
        if self.is_infinity() or rhs.is_infinity():
            return INFINITY
        lhs_bits, rhs_bits = self.encoded, rhs.encoded
        return Relation((lhs_bits + rhs_bits) - ((lhs_bits & WEAK) | (rhs_bits & WEAK)))

    def limit(self) -> int:
        """The ``n`` of ``i - j ~ n``."""
        return self.encoded >> 1

    def strictness(self) -> Strictness:
        """The ``~`` of ``i - j ~ n``."""
        return Strictness(self.encoded & WEAK)

    def gt(self, rhs: "Relation") -> bool:
        if rhs.is_infinity() and not self.is_infinity():
            return False
        if self.is_infinity() and not rhs.is_infinity():
            return True
        return self.encoded > rhs.encoded

    def ge(self, rhs: "Relation") -> bool:
        return self == rhs or self.gt(rhs)

    def lt(self, rhs: "Relation") -> bool:
        if not rhs.is_infinity() and self.is_infinity():
            return False
        if not self.is_infinity() and rhs.is_infinity():
            return True
        return self.encoded < rhs.encoded

    def le(self, rhs: "Relation") -> bool:
        return self == rhs or self.lt(rhs)

    def __str__(self) -> str:
        if self.is_infinity():
            return "∞"
        return f"({self.limit()}, {self.strictness()})"


INFINITY = Relation(_INFINITY_ENCODED)
ZERO = Relation(int(WEAK))


def relation(limit: int, strictness: Strictness) -> Relation:
    """Build the relation with the given limit and strictness."""
    return Relation((limit << 1) | int(strictness))


def infinity() -> Relation:
    """The unbounded relation."""
    return INFINITY


def zero() -> Relation:
    """The relation (0, ≤)."""
    return ZERO


@dataclass(frozen=True)
class Constraint:
    """The constraint ``i - j ~ n`` between two clocks."""

    i: Clock
    j: Clock
    relation: Relation

    def source(self) -> Clock:
        return self.i

    def destination(self) -> Clock:
        return self.j