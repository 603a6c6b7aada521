"""Tests for word tokenization."""

import pytest

from argcalc.arithmetic import IntBounds
from argcalc.errors import NumberOutOfRange
from argcalc.models import LeftGroup, Number, Operator, OperatorKind, RightGroup
from argcalc.tokenizer import MIN_WORDS, tokenize, tokenize_word

ADD = Operator(OperatorKind.ADD)
SUB = Operator(OperatorKind.SUBTRACT)
MUL = Operator(OperatorKind.MULTIPLY)
DIV = Operator(OperatorKind.DIVIDE)


# --- Whole words (4 tests) ---

def test_simple_expression():
    assert tokenize(["1", "+", "2"]) == [Number(1), ADD, Number(2)]


def test_all_symbols():
    assert tokenize(["+", "-", "*", "/", "(", ")"]) == [
        ADD, SUB, MUL, DIV, LeftGroup(), RightGroup(),
    ]


def test_braces_alias_parentheses():
    assert tokenize(["{", "}"]) == tokenize(["(", ")"])


def test_leading_zeros():
    assert tokenize(["007", "+", "0"]) == [Number(7), ADD, Number(0)]


# --- Mixed words (4 tests) ---

def test_symbol_run_in_one_word():
    assert tokenize(["(*", ")"]) == [LeftGroup(), MUL, RightGroup()]


def test_digits_beside_symbols_are_dropped():
    """'(1+2' is classified per whole word: only its symbols become tokens."""
    assert tokenize(["(1+2", "3"]) == [LeftGroup(), ADD, Number(3)]


def test_signed_word_is_not_a_number():
    assert tokenize_word("-5") == [SUB]


@pytest.mark.parametrize("word", ["abc", "1a", "1.5", "", " ", "١٢"])
def test_non_numeric_words_without_symbols_yield_nothing(word):
    assert tokenize_word(word) == []


# --- Minimum input (2 tests) ---

def test_min_words_is_two():
    assert MIN_WORDS == 2


@pytest.mark.parametrize("words", [[], ["5"], ["1+2"]])
def test_too_few_words_yield_no_tokens(words):
    assert tokenize(words) == []


# --- Range (5 tests) ---

def test_int64_max_fits():
    assert tokenize(["9223372036854775807", "+"]) == [Number(2**63 - 1), ADD]


def test_number_out_of_range():
    with pytest.raises(NumberOutOfRange) as exc:
        tokenize(["9223372036854775808", "+", "1"])
    assert exc.value.word == "9223372036854775808"
    assert str(exc.value) == 'number "9223372036854775808" is too large'


def test_number_out_of_range_narrow_bounds():
    with pytest.raises(ValueError):
        tokenize(["128", "+", "1"], IntBounds.for_bits(8))


def test_huge_number_is_out_of_range():
    word = "9" * 5000
    with pytest.raises(NumberOutOfRange) as exc:
        tokenize([word, "+", "1"])
    assert exc.value.reason == "too large"


def test_long_run_of_leading_zeros_still_parses():
    assert tokenize(["0" * 5000 + "42", "+"]) == [Number(42), ADD]
