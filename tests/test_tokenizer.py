import pytest

from core import (
    Tokenizer, UnexpectedCharacterError, UnrecognizedWordError,
    OPEN_PAREN, CLOSE_PAREN, ARG_SEPARATOR
)
from conftest import ADD, SUB, NEG, MAX, TEN, num


@pytest.fixture
def tokenizer(calc_vocabulary):
    return Tokenizer(calc_vocabulary)


def test_whitespace_insensitive(tokenizer):
    assert tokenizer.tokenize("2+3") == tokenizer.tokenize("2 + 3")
    assert tokenizer.tokenize("2+3") == [num(2), ADD, num(3)]


def test_empty_and_blank_input(tokenizer):
    assert tokenizer.tokenize("") == []
    assert tokenizer.tokenize("   \t") == []


def test_multi_digit_values(tokenizer):
    assert tokenizer.tokenize("123") == [num(123)]


def test_minus_is_unary_or_binary_by_position(tokenizer):
    assert tokenizer.tokenize("-3") == [NEG, num(3)]
    assert tokenizer.tokenize("2-3") == [num(2), SUB, num(3)]
    assert tokenizer.tokenize("-3 - -4") == [NEG, num(3), SUB, NEG, num(4)]
    assert tokenizer.tokenize("(1)-2") == [OPEN_PAREN, num(1), CLOSE_PAREN, SUB, num(2)]


def test_function_call(tokenizer):
    assert tokenizer.tokenize("max(1, 2)") == [
        MAX, OPEN_PAREN, num(1), ARG_SEPARATOR, num(2), CLOSE_PAREN
    ]


def test_word_value_sets_after_value(tokenizer):
    assert tokenizer.tokenize("ten+1") == [TEN, ADD, num(1)]


def test_binary_operator_where_value_expected(tokenizer):
    with pytest.raises(UnexpectedCharacterError) as e:
        tokenizer.tokenize("* 2")
    assert e.value.position == 0


def test_open_paren_after_value(tokenizer):
    with pytest.raises(UnexpectedCharacterError) as e:
        tokenizer.tokenize("2 (3)")
    assert e.value.position == 2


def test_unknown_word(tokenizer):
    with pytest.raises(UnrecognizedWordError) as e:
        tokenizer.tokenize("2 + foo")
    assert e.value.position == 4


def test_value_literal_only_read_where_value_expected(tokenizer):
    # 值之后的数字按单词处理，词表不认识
    with pytest.raises(UnrecognizedWordError):
        tokenizer.tokenize("12 34")
