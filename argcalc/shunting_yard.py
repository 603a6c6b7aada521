"""Infix → postfix conversion (shunting yard).

The operator stack is local to each call and holds only Operator tokens
and LeftGroup markers. All operators here are left-associative, so an
operator pops everything on the stack that binds at least as tightly
before being pushed itself.
"""

from __future__ import annotations

from typing import Iterable

from argcalc.errors import MismatchedBrackets
from argcalc.models import LeftGroup, Number, Operator, RightGroup, Token


def _pops_before(top: Operator | LeftGroup, incoming: Operator) -> bool:
    """Whether ``top`` must leave the stack before ``incoming`` is pushed."""
    if isinstance(top, LeftGroup):
        return False
    return top.kind.tier >= incoming.kind.tier


def to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Rewrite an infix token sequence into postfix order.

    The input is read once, front to back, and left untouched, so the
    same sequence always converts to the same postfix list.

    Raises:
        MismatchedBrackets: a closing bracket has no opener on the stack,
            or an opener is still on the stack when input runs out.
    """
    output: list[Token] = []
    stack: list[Operator | LeftGroup] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while stack and _pops_before(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
        elif isinstance(token, LeftGroup):
            stack.append(token)
        elif isinstance(token, RightGroup):
            while stack and not isinstance(stack[-1], LeftGroup):
                output.append(stack.pop())
            if not stack:
                raise MismatchedBrackets("Mismatched brackets: unexpected ')'")
            stack.pop()
        else:
            raise TypeError(f"Not a token: {token!r}")

    while stack:
        top = stack.pop()
        if isinstance(top, LeftGroup):
            raise MismatchedBrackets("Mismatched brackets: unclosed '('")
        output.append(top)

    return output
