"""Overflow-checked integer arithmetic on a fixed-width signed range.

Python integers never wrap, so the range is enforced explicitly: every
primitive checks its operands against the bounds *before* computing,
and division truncates toward zero the way fixed-width hardware does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from argcalc.errors import DivisionByZero, IntegerOverflow
from argcalc.models import OperatorKind


@dataclass(frozen=True)
class IntBounds:
    """Inclusive [minimum, maximum] of a two's complement integer."""

    minimum: int
    maximum: int

    @classmethod
    def for_bits(cls, bits: int) -> IntBounds:
        if bits < 2:
            raise ValueError(f"integer width must be at least 2 bits, got {bits}")
        return cls(minimum=-(1 << (bits - 1)), maximum=(1 << (bits - 1)) - 1)

    @property
    def bits(self) -> int:
        return self.maximum.bit_length() + 1

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


INT64 = IntBounds.for_bits(64)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (C semantics, not floor)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def checked_add(a: int, b: int, bounds: IntBounds = INT64) -> int:
    if (b > 0 and a > bounds.maximum - b) or (b < 0 and a < bounds.minimum - b):
        raise IntegerOverflow("+", a, b)
    return a + b


def checked_subtract(a: int, b: int, bounds: IntBounds = INT64) -> int:
    if (b > 0 and a < bounds.minimum + b) or (b < 0 and a > bounds.maximum + b):
        raise IntegerOverflow("-", a, b)
    return a - b


def checked_multiply(a: int, b: int, bounds: IntBounds = INT64) -> int:
    """Multiply, rejecting products outside ``bounds``.

    Each sign combination is checked with a division against the
    opposite operand, so the out-of-range product is never formed.
    """
    lo, hi = bounds.minimum, bounds.maximum
    if a > 0:
        if b > 0:
            overflow = a > _trunc_div(hi, b)
        else:
            overflow = b < _trunc_div(lo, a)
    elif b > 0:
        overflow = a < _trunc_div(lo, b)
    else:
        overflow = a != 0 and b < _trunc_div(hi, a)
    if overflow:
        raise IntegerOverflow("*", a, b)
    return a * b


def checked_divide(a: int, b: int, bounds: IntBounds = INT64) -> int:
    """Truncating division. MIN / -1 is the one quotient that overflows."""
    if b == 0:
        raise DivisionByZero(a)
    if a == bounds.minimum and b == -1:
        raise IntegerOverflow("/", a, b)
    return _trunc_div(a, b)


_PRIMITIVES: dict[OperatorKind, Callable[[int, int, IntBounds], int]] = {
    OperatorKind.ADD: checked_add,
    OperatorKind.SUBTRACT: checked_subtract,
    OperatorKind.MULTIPLY: checked_multiply,
    OperatorKind.DIVIDE: checked_divide,
}


def apply(kind: OperatorKind, a: int, b: int, bounds: IntBounds = INT64) -> int:
    """Apply the checked primitive for ``kind`` to (a, b)."""
    return _PRIMITIVES[kind](a, b, bounds)
