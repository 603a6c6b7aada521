"""Turn raw words into the infix token sequence.

Classification is per whole word:

    "42"    → Number(42)
    "("     → LeftGroup
    "(1+2"  → LeftGroup, Operator(+)   (digits beside symbols are dropped)
    "abc"   → nothing

A word is a number only when every character is an ASCII decimal digit.
Otherwise each recognized symbol in it yields its own token and every
other character is ignored.
"""

from __future__ import annotations

from typing import Iterable

from argcalc.arithmetic import INT64, IntBounds
from argcalc.errors import NumberOutOfRange
from argcalc.models import SYMBOLS, Number, Token

# At least this many expression words (program name excluded) are needed
# before anything is tokenized.
MIN_WORDS = 2

_DIGITS = frozenset("0123456789")


def _is_numeric(word: str) -> bool:
    return bool(word) and all(ch in _DIGITS for ch in word)


def parse_number(word: str, bounds: IntBounds = INT64) -> Number:
    """Parse an all-digit word as a base-10 literal within ``bounds``.

    Over-long words are rejected by length first, so int() never sees
    more digits than the widest value in range.
    """
    digits = word.lstrip("0") or "0"
    if len(digits) > len(str(bounds.maximum)):
        raise NumberOutOfRange(word, "too large")
    value = int(digits, 10)
    if value > bounds.maximum:
        raise NumberOutOfRange(word, "too large")
    if value < bounds.minimum:
        raise NumberOutOfRange(word, "too small")
    return Number(value)


def tokenize_word(word: str, bounds: IntBounds = INT64) -> list[Token]:
    """Tokens contributed by a single word."""
    if _is_numeric(word):
        return [parse_number(word, bounds)]
    return [SYMBOLS[ch] for ch in word if ch in SYMBOLS]


def tokenize(words: Iterable[str], bounds: IntBounds = INT64) -> list[Token]:
    """Tokenize expression words in order.

    Args:
        words: Expression words, without any leading program name.
        bounds: Signed range numeric words must fit.

    Returns:
        The infix token sequence; empty when fewer than MIN_WORDS words
        were supplied.
    """
    words = list(words)
    if len(words) < MIN_WORDS:
        return []

    tokens: list[Token] = []
    for word in words:
        tokens.extend(tokenize_word(word, bounds))
    return tokens
