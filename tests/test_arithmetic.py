import math

import numpy as np
import pandas as pd
import pytest

from core import MalformedExpressionError, UnrecognizedWordError
from vocab import evaluate_arithmetic, Operators


@pytest.mark.parametrize("expression, expected", [
    ("1 + 2 * 3", 7.0),
    ("(1 + 2) * 3", 9.0),
    ("2 ^ 3 ^ 2", 512.0),
    ("(2 ^ 3) ^ 2", 64.0),
    ("-3 - -4", 1.0),
    ("-2 ^ 2", 4.0),  # 一元负号绑定最紧
    ("1.5 * 2", 3.0),
    ("10 / 4", 2.5),
    ("max(3, 4)", 4.0),
    ("min(3, 4)", 3.0),
    ("hypot(3, 4)", 5.0),
    ("clamp(15, 0, 10)", 10.0),
    ("clamp(-5, 0, 10)", 0.0),
    ("sqrt(16) + abs(-2)", 6.0),
    ("+5", 5.0),
])
def test_scalar_expressions(expression, expected):
    assert evaluate_arithmetic(expression) == pytest.approx(expected)


def test_constants_are_case_insensitive():
    assert evaluate_arithmetic("pi") == pytest.approx(math.pi)
    assert evaluate_arithmetic("PI / 2") == pytest.approx(math.pi / 2)
    assert evaluate_arithmetic("log(e)") == pytest.approx(1.0)
    assert evaluate_arithmetic("tau") == pytest.approx(2 * math.pi)


def test_division_by_zero_uses_default():
    assert evaluate_arithmetic("1 / 0") == 0.0


def test_variables():
    assert evaluate_arithmetic("x * 2 + y", {"x": 3, "y": 1}) == pytest.approx(7.0)
    # 变量覆盖同名常量
    assert evaluate_arithmetic("e + 1", {"e": 1}) == pytest.approx(2.0)
    assert evaluate_arithmetic("x2 - x1", {"x1": 1.0, "x2": 5.0}) == pytest.approx(4.0)


def test_series_variables():
    x = pd.Series([1.0, 2.0, 3.0])
    result = evaluate_arithmetic("x * 2 + 1", {"x": x})
    pd.testing.assert_series_equal(result, pd.Series([3.0, 5.0, 7.0]), check_names=False)


def test_series_division_by_zero():
    variables = {"a": pd.Series([1.0, 2.0]), "b": pd.Series([0.0, 4.0])}
    result = evaluate_arithmetic("a / b", variables)
    pd.testing.assert_series_equal(result, pd.Series([0.0, 0.5]), check_names=False)


def test_series_function_with_scalar():
    result = evaluate_arithmetic("max(x, 2)", {"x": pd.Series([1.0, 3.0])})
    pd.testing.assert_series_equal(result, pd.Series([2.0, 3.0]), check_names=False)


def test_numpy_array_variables():
    result = evaluate_arithmetic("sqrt(x)", {"x": np.array([1.0, 4.0, 9.0])})
    np.testing.assert_allclose(result, [1.0, 2.0, 3.0])


def test_invalid_number():
    with pytest.raises(UnrecognizedWordError):
        evaluate_arithmetic("1.2.3 + 1")


def test_unknown_word():
    with pytest.raises(UnrecognizedWordError):
        evaluate_arithmetic("foo + 1")


def test_wrong_arity():
    with pytest.raises(MalformedExpressionError):
        evaluate_arithmetic("hypot(3)")


def test_align_operands():
    series = pd.Series([1.0, 2.0], index=['a', 'b'])
    left, right = Operators._align_operands(series, 3.0)
    pd.testing.assert_index_equal(right.index, series.index)
    left, right = Operators._align_operands(np.array([1.0, 2.0]), series)
    assert isinstance(left, pd.Series)


def test_safe_divide_scalar():
    assert Operators.safe_divide(1.0, 0.0, default_value=-1.0) == -1.0
    assert Operators.safe_divide(1.0, 4.0) == 0.25
