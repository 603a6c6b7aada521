"""argcalc: integer infix calculator for command-line words.

Evaluates an expression like ``( 1 + 2 ) * 3`` supplied as separate
arguments: the words are tokenized, rewritten to postfix with the
shunting yard, and evaluated with overflow-checked 64-bit arithmetic.

Usage:
    argcalc 2 + 3 '*' 4              # prints "14 "
    python -m argcalc '(' 1 + 2 ')' '*' 3

Library:
    >>> from argcalc import calculate
    >>> calculate(["8", "-", "3", "-", "2"])
    3
"""

from argcalc.engine import calculate, evaluate
from argcalc.errors import (
    AllocationFailure,
    CalcError,
    DivisionByZero,
    IntegerOverflow,
    MismatchedBrackets,
    NumberOutOfRange,
    UnderflowError,
)

__all__ = [
    "calculate",
    "evaluate",
    "CalcError",
    "AllocationFailure",
    "DivisionByZero",
    "IntegerOverflow",
    "MismatchedBrackets",
    "NumberOutOfRange",
    "UnderflowError",
]
