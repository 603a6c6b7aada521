"""Fatal error taxonomy for argcalc.

Nothing here is recovered locally: every CalcError ends the run with a
single-line diagnostic. Each kind also derives from the closest builtin
so callers can catch e.g. ZeroDivisionError without knowing argcalc.
"""

from __future__ import annotations


class CalcError(Exception):
    """Base class for every argcalc failure."""


class AllocationFailure(CalcError, MemoryError):
    """Storage for a stage container could not be obtained."""

    def __init__(self, what: str) -> None:
        super().__init__(f"Couldn't allocate {what}")
        self.what = what


class NumberOutOfRange(CalcError, ValueError):
    """A numeric word does not fit the configured signed integer range."""

    def __init__(self, word: str, reason: str = "too large") -> None:
        super().__init__(f'number "{word}" is {reason}')
        self.word = word
        self.reason = reason


class MismatchedBrackets(CalcError, ValueError):
    """A closing bracket with no opener, or an opener never closed."""

    def __init__(self, message: str = "Mismatched brackets") -> None:
        super().__init__(message)


class UnderflowError(CalcError, ValueError):
    """Operators and operands do not balance."""

    def __init__(self, message: str = "Inconsistent number of operators") -> None:
        super().__init__(message)


class IntegerOverflow(CalcError, OverflowError):
    """An arithmetic result falls outside the signed integer range."""

    def __init__(self, operator: str, left: int, right: int) -> None:
        super().__init__(f"Integer overflow: {left} {operator} {right}")
        self.operator = operator
        self.left = left
        self.right = right


class DivisionByZero(CalcError, ZeroDivisionError):
    """Division with a zero right-hand side."""

    def __init__(self, left: int) -> None:
        super().__init__(f"Division by zero: {left} / 0")
        self.left = left
