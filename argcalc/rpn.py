"""Postfix (RPN) evaluation over a local operand stack."""

from __future__ import annotations

from typing import Iterable, Optional

from argcalc.arithmetic import INT64, IntBounds, apply
from argcalc.errors import UnderflowError
from argcalc.models import Number, Operator, Token


def _pop(stack: list[int]) -> int:
    if not stack:
        raise UnderflowError()
    return stack.pop()


def evaluate_postfix(postfix: Iterable[Token], bounds: IntBounds = INT64) -> Optional[int]:
    """Evaluate a postfix sequence.

    Returns:
        The single remaining value, or None for an empty sequence.

    Raises:
        UnderflowError: an operator finds fewer than two operands, or more
            than one value is left at the end.
        IntegerOverflow, DivisionByZero: from the checked primitives.
    """
    stack: list[int] = []

    for token in postfix:
        if isinstance(token, Number):
            stack.append(token.value)
        elif isinstance(token, Operator):
            # Most recent push is the right-hand side.
            right = _pop(stack)
            left = _pop(stack)
            stack.append(apply(token.kind, left, right, bounds))
        else:
            raise TypeError(f"Not a postfix token: {token!r}")

    if not stack:
        return None
    if len(stack) > 1:
        raise UnderflowError(
            f"Inconsistent number of operators: {len(stack)} values left on the stack"
        )
    return stack[0]
