"""
复变函数词表：表达式解析为 ComplexFunction，之后再代入变量求值。

    fn = evaluate_complex("2 + i * sin(x)")
    fn(x=math.pi)  # 约等于 2，建议再 round_complex

支持 + - * / ^ 与括号；常量 i、pi/π、tau/τ、e；其余不认识的单词都是变量。
不支持省略乘号（如 2i）。
"""
import logging
import re

from core import Associativity, Evaluator, Token, Vocabulary, OPEN_PAREN, CLOSE_PAREN
from config.config import COMPLEX_CONFIG
from utils.complex_math import I, PI, TAU, E
from vocab import complex_function as cf

logger = logging.getLogger(__name__)

_PRECEDENCE = COMPLEX_CONFIG["precedence"]
_POWER_ASSOCIATIVITY = (Associativity.RIGHT if COMPLEX_CONFIG["power_right_associative"]
                        else Associativity.LEFT)

_NUMBER = re.compile(r'(\d+\.?\d*|\.\d+)([eE]\d+)?')

PLUS = Token.operator('+', _PRECEDENCE['+'], Associativity.LEFT, lambda left, right: left + right)
MINUS = Token.operator('-', _PRECEDENCE['-'], Associativity.LEFT, lambda left, right: left - right)
MULTIPLY = Token.operator('*', _PRECEDENCE['*'], Associativity.LEFT, lambda left, right: left * right)
DIVIDE = Token.operator('/', _PRECEDENCE['/'], Associativity.LEFT, lambda left, right: left / right)
POWER = Token.operator('^', _PRECEDENCE['^'], _POWER_ASSOCIATIVITY, lambda left, right: left ** right)

UNARY_MINUS = Token.function('neg', 1, cf.Negate)
UNARY_PLUS = Token.function('pos', 1, lambda argument: argument)
SQRT = Token.function('sqrt', 1, cf.Sqrt)

_FUNCTION_CLASSES = {
    'im': cf.Im, 're': cf.Re, 'arg': cf.Arg, 'abs': cf.Abs, 'conj': cf.Conj,
    'log': cf.Log, 'ln': cf.Log, 'exp': cf.Exp,
    'sin': cf.Sin, 'asin': cf.Asin, 'cos': cf.Cos, 'acos': cf.Acos, 'tan': cf.Tan, 'atan': cf.Atan,
    'sinh': cf.Sinh, 'asinh': cf.Asinh, 'cosh': cf.Cosh, 'acosh': cf.Acosh,
    'tanh': cf.Tanh, 'atanh': cf.Atanh,
}
FUNCTIONS = {name: Token.function(name, 1, cls) for name, cls in _FUNCTION_CLASSES.items()}
FUNCTIONS['sqrt'] = SQRT

CONSTANTS = {
    'i': I,
    'pi': PI, 'π': PI,
    'tau': TAU, 'τ': TAU,
    'e': E,
}

_AFTER_VALUE_CHARS = {'+': PLUS, '-': MINUS, '*': MULTIPLY, '/': DIVIDE, '^': POWER, ')': CLOSE_PAREN}
_OTHER_CHARS = {'+': UNARY_PLUS, '-': UNARY_MINUS, '(': OPEN_PAREN, '√': SQRT}


def _constant(name, value):
    return Token.value(name, cf.Constant(complex(value)))


class ComplexVocabulary(Vocabulary):
    """数字按单词读取（支持 1e5 这样的指数写法），不使用值字面量扫描"""

    def parse_after_value_char(self, char):
        return _AFTER_VALUE_CHARS.get(char)

    def parse_other_char(self, char):
        return _OTHER_CHARS.get(char)

    def parse_word(self, word):
        lowered = word.lower()
        if lowered in CONSTANTS:
            return _constant(lowered, CONSTANTS[lowered])
        if lowered in FUNCTIONS:
            return FUNCTIONS[lowered]
        # 只接受数字拼写，inf / nan 之类仍是变量
        if _NUMBER.fullmatch(word):
            return _constant(word, float(word))
        logger.debug(f"Treating '{word}' as a variable")
        return Token.value(word, cf.Variable(word))


COMPLEX_EVALUATOR = Evaluator(ComplexVocabulary())


def evaluate_complex(expression: str) -> cf.ComplexFunction:
    return COMPLEX_EVALUATOR.evaluate(expression)
