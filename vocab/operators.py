"""vocab/operators.py"""
import numpy as np
import pandas as pd
import logging

from config.config import ARITHMETIC_CONFIG

logger = logging.getLogger(__name__)


def _is_scalar(operand):
    return isinstance(operand, (int, float, np.number)) and not isinstance(operand, bool)


class Operators:
    """算术词表的所有数值运算，操作数可以是标量、NumPy数组或Series"""

    @staticmethod
    def _align_operands(operand1, operand2):
        """对齐两个操作数的形状"""
        if _is_scalar(operand1) and isinstance(operand2, (pd.Series, np.ndarray)):
            if isinstance(operand2, pd.Series):
                operand1 = pd.Series(operand1, index=operand2.index)
            else:
                operand1 = np.full(len(operand2), operand1, dtype=float)
        elif _is_scalar(operand2) and isinstance(operand1, (pd.Series, np.ndarray)):
            if isinstance(operand1, pd.Series):
                operand2 = pd.Series(operand2, index=operand1.index)
            else:
                operand2 = np.full(len(operand1), operand2, dtype=float)
        elif isinstance(operand1, pd.Series) and isinstance(operand2, np.ndarray):
            operand2 = pd.Series(operand2, index=operand1.index)
        elif isinstance(operand2, pd.Series) and isinstance(operand1, np.ndarray):
            operand1 = pd.Series(operand1, index=operand2.index)
        return operand1, operand2

    @staticmethod
    def safe_divide(x, y, default_value=None):
        """安全除法，除数为0时返回 default_value"""
        if default_value is None:
            default_value = ARITHMETIC_CONFIG["division_default"]
        if _is_scalar(x) and _is_scalar(y):
            if y == 0:
                logger.debug(f"Division by zero, using {default_value}")
                return float(default_value)
            return float(x) / float(y)
        if isinstance(x, pd.Series):
            # 将无穷大也替换为 default_value
            with np.errstate(divide='ignore', invalid='ignore'):
                return x.div(y).replace([np.inf, -np.inf], default_value).fillna(default_value)
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        return np.divide(x, y, out=np.full_like(x, default_value, dtype=float), where=y != 0)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return Operators.safe_divide(operand1, operand2)

    @staticmethod
    def power(operand1, operand2):
        """负数的非整数次幂得到 NaN"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        if isinstance(operand1, (pd.Series, np.ndarray)):
            base = operand1.astype(float)
        else:
            base = np.float64(operand1)
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return np.power(base, operand2)

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        return -operand

    @staticmethod
    def pos(operand):
        return operand

    @staticmethod
    def sqrt(operand):
        with np.errstate(invalid='ignore'):
            return np.sqrt(operand)

    @staticmethod
    def abs(operand):
        return np.abs(operand)

    @staticmethod
    def log(operand):
        """自然对数，非正数得到 NaN/-inf"""
        with np.errstate(invalid='ignore', divide='ignore'):
            return np.log(operand)

    @staticmethod
    def exp(operand):
        with np.errstate(over='ignore'):
            return np.exp(operand)

    @staticmethod
    def sin(operand):
        return np.sin(operand)

    @staticmethod
    def cos(operand):
        return np.cos(operand)

    @staticmethod
    def tan(operand):
        return np.tan(operand)

    # 多参数函数====================

    @staticmethod
    def max(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return np.maximum(operand1, operand2)

    @staticmethod
    def min(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return np.minimum(operand1, operand2)

    @staticmethod
    def hypot(operand1, operand2):
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        return np.hypot(operand1, operand2)

    @staticmethod
    def clamp(operand, lower, upper):
        """clamp(x, lo, hi)：先取下限再取上限"""
        return Operators.min(Operators.max(operand, lower), upper)
