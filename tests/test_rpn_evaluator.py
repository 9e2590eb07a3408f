import pytest

from core import RPNEvaluator, Token, MalformedExpressionError, OPEN_PAREN
from conftest import ADD, SUB, MAX, num


def test_operand_order():
    # 后入栈的是右操作数
    assert RPNEvaluator.run([num(2), num(3), SUB]) == -1


def test_function_argument_order():
    pair = Token.function('pair', 3, lambda a, b, c: (a, b, c))
    assert RPNEvaluator.run([num(1), num(2), num(3), pair]) == (1, 2, 3)


def test_nested():
    assert RPNEvaluator.run([num(1), num(2), ADD, num(5), MAX]) == 5


def test_operator_underflow():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.run([num(2), ADD])


def test_function_underflow():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.run([num(1), MAX])


def test_leftover_values():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.run([num(1), num(2)])


def test_empty():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.run([])


def test_parenthesis_is_not_postfix():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.run([num(1), OPEN_PAREN])
