"""端到端：字符串 -> 结果"""
import threading

import pytest

from core import (
    ErrorKind, EvaluationResult, ExpressionSyntaxError, MalformedExpressionError,
    MismatchedParenthesesError, UnexpectedCharacterError, UnrecognizedWordError
)


def test_precedence(calc):
    assert calc.evaluate("2 + 3 * 4") == calc.evaluate("2 + (3 * 4)") == 14


def test_right_associativity(calc):
    assert calc.evaluate("2 ^ 2 ^ 3") == calc.evaluate("2 ^ (2 ^ 3)") == 256
    assert calc.evaluate("(2 ^ 2) ^ 3") == 64


def test_left_associativity(calc):
    assert calc.evaluate("10 - 4 - 3") == 3
    assert calc.evaluate("8 / 2 / 2") == 2


def test_parenthesis_override(calc):
    assert calc.evaluate("(2 + 3) * 4") == 20
    assert calc.evaluate("(2 + 3) * 4") != calc.evaluate("2 + 3 * 4")


def test_unary_and_binary_minus(calc):
    assert calc.evaluate("-3 - -4") == 1
    assert calc.evaluate("-(2 + 3)") == -5


def test_whitespace_insensitive(calc):
    assert calc.tokenize("2+3") == calc.tokenize("2 + 3")
    assert calc.evaluate("2+3") == calc.evaluate(" 2 +   3 ") == 5


def test_function_arity(calc):
    assert calc.evaluate("max(3, 4)") == 4
    assert calc.evaluate("max(1 + 1, max(3, 2 * 2)) * 2") == 8
    with pytest.raises(MalformedExpressionError):
        calc.evaluate("max(3)")
    with pytest.raises(MalformedExpressionError):
        calc.evaluate("max(3,4,5)")


def test_zero_arity_function(calc):
    assert calc.evaluate("seven") == 7
    assert calc.evaluate("seven() + 1") == 8
    assert calc.evaluate("(seven) * 2") == 14


def test_bare_zero_arity_function_before_operator(calc):
    # 函数之后仍处于期待值的位置，二元运算符不合法
    with pytest.raises(UnexpectedCharacterError) as e:
        calc.evaluate("seven + 1")
    assert e.value.position == 6


@pytest.mark.parametrize("expression", ["(2 + 3", "2 + 3)", "((1)", "1, 2"])
def test_mismatched_parentheses(calc, expression):
    with pytest.raises(MismatchedParenthesesError):
        calc.evaluate(expression)


@pytest.mark.parametrize("expression", ["", "2 +", "(2 + )", "max", "max 1"])
def test_malformed(calc, expression):
    with pytest.raises(MalformedExpressionError):
        calc.evaluate(expression)


def test_error_kinds(calc):
    cases = {
        "* 2": ErrorKind.UNEXPECTED_CHARACTER,
        "2 + nope": ErrorKind.UNRECOGNIZED_WORD,
        "(2": ErrorKind.MISMATCHED_PARENTHESES,
        "2 +": ErrorKind.MALFORMED_EXPRESSION,
    }
    for expression, kind in cases.items():
        with pytest.raises(ExpressionSyntaxError) as e:
            calc.evaluate(expression)
        assert e.value.kind == kind


def test_error_classes(calc):
    with pytest.raises(UnexpectedCharacterError):
        calc.evaluate("2 * * 3")
    with pytest.raises(UnrecognizedWordError):
        calc.evaluate("two")


def test_try_evaluate(calc):
    result = calc.try_evaluate("1 + 2")
    assert isinstance(result, EvaluationResult)
    assert result.ok and result.value == 3
    assert result.unwrap() == 3

    failed = calc.try_evaluate("(1 + 2")
    assert not failed.ok
    assert isinstance(failed.error, MismatchedParenthesesError)
    with pytest.raises(MismatchedParenthesesError):
        failed.unwrap()


def test_evaluator_is_reusable_across_threads(calc):
    results = {}

    def worker(n):
        results[n] = calc.evaluate(f"{n} * 2 + 1")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == {n: n * 2 + 1 for n in range(20)}
