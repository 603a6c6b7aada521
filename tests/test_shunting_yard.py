"""Tests for infix → postfix conversion."""

import pytest

from argcalc.errors import MismatchedBrackets
from argcalc.models import LeftGroup, Number, Operator, RightGroup
from argcalc.shunting_yard import to_postfix
from argcalc.tokenizer import tokenize


def rpn(*words: str) -> str:
    """Postfix of the given words, rendered space-separated."""
    return " ".join(str(t) for t in to_postfix(tokenize(words)))


# --- Precedence (3 tests) ---

def test_multiply_binds_tighter_than_add():
    assert rpn("2", "+", "3", "*", "4") == "2 3 4 * +"


def test_grouping_overrides_precedence():
    assert rpn("(", "2", "+", "3", ")", "*", "4") == "2 3 + 4 *"


def test_braces_group_like_parentheses():
    assert rpn("{", "1", "+", "2", "}", "*", "3") == rpn("(", "1", "+", "2", ")", "*", "3")


# --- Associativity (3 tests) ---

def test_subtraction_chain_is_left_associative():
    assert rpn("8", "-", "3", "-", "2") == "8 3 - 2 -"


def test_mixed_additive_chain_is_left_associative():
    assert rpn("1", "-", "2", "+", "3") == "1 2 - 3 +"


def test_mixed_multiplicative_chain_is_left_associative():
    assert rpn("8", "/", "4", "*", "2") == "8 4 / 2 *"


# --- Output shape (3 tests) ---

def test_no_grouping_tokens_in_output():
    postfix = to_postfix(tokenize(["(", "(", "1", ")", "+", "{", "2", "}", ")"]))
    assert all(isinstance(t, (Number, Operator)) for t in postfix)
    assert len(postfix) == 3


def test_conversion_is_repeatable():
    tokens = tokenize(["(", "1", "+", "2", ")", "*", "3", "-", "4", "/", "2"])
    snapshot = list(tokens)
    first = to_postfix(tokens)
    second = to_postfix(tokens)
    assert first == second
    assert tokens == snapshot


def test_accepts_any_iterable():
    assert to_postfix(iter(tokenize(["1", "+", "2"]))) == to_postfix(tokenize(["1", "+", "2"]))


# --- Malformed brackets (3 tests) ---

def test_unclosed_group():
    with pytest.raises(MismatchedBrackets):
        to_postfix(tokenize(["(", "1", "+", "2"]))


@pytest.mark.parametrize("words", [
    [")", "1"],
    ["1", "+", "2", ")"],
    ["(", "1", ")", ")"],
])
def test_unexpected_close(words):
    with pytest.raises(MismatchedBrackets):
        to_postfix(tokenize(words))


def test_rejects_non_tokens():
    with pytest.raises(TypeError):
        to_postfix([Number(1), "+"])
