"""Concrete boolean, integer and rational values with solver-style operations."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Bool:
    """A concrete boolean value."""

    value: bool

    def not_(self) -> "Bool":
        return Bool(not self.value)

    def and_(self, rhs: "Bool") -> "Bool":
        return Bool(self.value and rhs.value)

    def or_(self, rhs: "Bool") -> "Bool":
        return Bool(self.value or rhs.value)

    def xor(self, rhs: "Bool") -> "Bool":
        return Bool(self.value != rhs.value)

    def eq(self, rhs: "Bool") -> "Bool":
        return Bool(self.value == rhs.value)


def _truncated_quotient(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def _truncated_modulus(lhs: int, rhs: int) -> int:
    return lhs - rhs * _truncated_quotient(lhs, rhs)


@dataclass(frozen=True)
class Int:
    """A concrete integer value; division truncates toward zero."""

    value: int

    def minus(self) -> "Int":
        return Int(-self.value)

    def add(self, rhs: "Int") -> "Int":
        return Int(self.value + rhs.value)

    def multiply(self, rhs: "Int") -> "Int":
        return Int(self.value * rhs.value)

    def subtract(self, rhs: "Int") -> "Int":
        return Int(self.value - rhs.value)

    def divide(self, rhs: "Int") -> "Int":
        return Int(_truncated_quotient(self.value, rhs.value))

    def modulus(self, rhs: "Int") -> "Int":
        """Remainder of truncated division; takes the sign of the dividend."""
        return Int(_truncated_modulus(self.value, rhs.value))

    def remainder(self, rhs: "Int") -> "Int":
        """Remainder adjusted to take the sign of the divisor."""
        remainder = _truncated_modulus(self.value, rhs.value)
        if (remainder < 0 < rhs.value) or (remainder > 0 > rhs.value):
            remainder += rhs.value
        return Int(remainder)

    def power(self, rhs: "Int") -> "Int":
        """Floating-point power truncated to an integer."""
        return Int(int(math.pow(self.value, rhs.value)))

    def lt(self, rhs: "Int") -> Bool:
        return Bool(self.value < rhs.value)

    def le(self, rhs: "Int") -> Bool:
        return Bool(self.value <= rhs.value)

    def gt(self, rhs: "Int") -> Bool:
        return Bool(self.value > rhs.value)

    def ge(self, rhs: "Int") -> Bool:
        return Bool(self.value >= rhs.value)

    def divides(self, rhs: "Int") -> Bool:
        """True when ``rhs`` divides this value without remainder."""
        return Bool(_truncated_modulus(self.value, rhs.value) == 0)


@dataclass(frozen=True)
class Real:
    """A rational value given as numerator over denominator."""

    numerator: int
    denominator: int