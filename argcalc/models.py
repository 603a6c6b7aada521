"""Data models for the argcalc expression engine.

Token variants, operator kinds and the Evaluation record, the typed
structures that flow through tokenizer → shunting yard → RPN evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

# Rank of the group-open marker on the operator stack. Lower than every
# real operator so it always bounds a pop run.
SENTINEL = -1


class OperatorKind(str, Enum):
    """Binary operators, valued by their surface symbol."""

    SUBTRACT = "-"
    ADD = "+"
    DIVIDE = "/"
    MULTIPLY = "*"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def tier(self) -> int:
        """Binding level: 1 for + and -, 2 for * and /."""
        return (self.precedence + 1) // 2


_PRECEDENCE: dict[OperatorKind, int] = {
    OperatorKind.SUBTRACT: 1,
    OperatorKind.ADD: 2,
    OperatorKind.DIVIDE: 3,
    OperatorKind.MULTIPLY: 4,
}


@dataclass(frozen=True)
class Number:
    """A literal operand."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Operator:
    """A binary operator token."""

    kind: OperatorKind

    @property
    def precedence(self) -> int:
        return self.kind.precedence

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class LeftGroup:
    """Opening delimiter, spelled ( or {."""

    @property
    def precedence(self) -> int:
        return SENTINEL

    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightGroup:
    """Closing delimiter, spelled ) or }."""

    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, LeftGroup, RightGroup]

# Single-character symbols and the token each one stands for.
# Braces are aliases for parentheses.
SYMBOLS: dict[str, Token] = {
    "+": Operator(OperatorKind.ADD),
    "-": Operator(OperatorKind.SUBTRACT),
    "*": Operator(OperatorKind.MULTIPLY),
    "/": Operator(OperatorKind.DIVIDE),
    "(": LeftGroup(),
    ")": RightGroup(),
    "{": LeftGroup(),
    "}": RightGroup(),
}


@dataclass
class Evaluation:
    """Everything one run of the engine produced.

    ``result`` is None when the input held no expression (too few words,
    or words that yield no tokens).
    """

    words: list[str]
    tokens: list[Token] = field(default_factory=list)
    postfix: list[Token] = field(default_factory=list)
    result: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.result is None
