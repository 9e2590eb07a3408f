"""算术词表：+ - * / ^，一元正负号，函数与命名常量，变量可以是Series"""
import logging
import math
from typing import Dict, Optional

from core import (
    Associativity, Evaluator, Token, UnrecognizedWordError, Vocabulary,
    OPEN_PAREN, CLOSE_PAREN, ARG_SEPARATOR
)
from config.config import ARITHMETIC_CONFIG
from vocab.operators import Operators

logger = logging.getLogger(__name__)

_PRECEDENCE = ARITHMETIC_CONFIG["precedence"]
_POWER_ASSOCIATIVITY = (Associativity.RIGHT if ARITHMETIC_CONFIG["power_right_associative"]
                        else Associativity.LEFT)

PLUS = Token.operator('+', _PRECEDENCE['+'], Associativity.LEFT, Operators.add)
MINUS = Token.operator('-', _PRECEDENCE['-'], Associativity.LEFT, Operators.sub)
MULTIPLY = Token.operator('*', _PRECEDENCE['*'], Associativity.LEFT, Operators.mul)
DIVIDE = Token.operator('/', _PRECEDENCE['/'], Associativity.LEFT, Operators.div)
POWER = Token.operator('^', _PRECEDENCE['^'], _POWER_ASSOCIATIVITY, Operators.power)

# 一元前缀操作符以函数Token表示
UNARY_MINUS = Token.function('neg', 1, Operators.neg)
UNARY_PLUS = Token.function('pos', 1, Operators.pos)

FUNCTIONS = {
    name: Token.function(name, arity, getattr(Operators, name))
    for name, arity in ARITHMETIC_CONFIG["functions"].items()
}

CONSTANTS = {
    'pi': Token.value('pi', math.pi),
    'e': Token.value('e', math.e),
    'tau': Token.value('tau', math.tau),
}

_AFTER_VALUE_CHARS = {
    '+': PLUS, '-': MINUS, '*': MULTIPLY, '/': DIVIDE, '^': POWER,
    ')': CLOSE_PAREN, ',': ARG_SEPARATOR,
}
_OTHER_CHARS = {'-': UNARY_MINUS, '+': UNARY_PLUS, '(': OPEN_PAREN}


class ArithmeticVocabulary(Vocabulary):
    """
    Args:
        variables: 变量名 -> 值（标量、数组或Series），在分词时绑定
    """

    def __init__(self, variables: Optional[Dict] = None):
        self.variables = dict(variables or {})

    def is_value_char(self, char):
        return char in ARITHMETIC_CONFIG["value_chars"]

    def parse_value(self, text):
        try:
            number = float(text)
        except ValueError:
            raise UnrecognizedWordError(f"Invalid number '{text}'")
        return Token.value(text, number)

    def parse_after_value_char(self, char):
        return _AFTER_VALUE_CHARS.get(char)

    def parse_other_char(self, char):
        return _OTHER_CHARS.get(char)

    def parse_word(self, word):
        # 变量优先，允许覆盖同名常量
        if word in self.variables:
            return Token.value(word, self.variables[word])
        lowered = word.lower()
        if lowered in FUNCTIONS:
            return FUNCTIONS[lowered]
        if lowered in CONSTANTS:
            return CONSTANTS[lowered]
        logger.debug(f"Unknown word: {word}")
        raise UnrecognizedWordError(f"Unrecognised word '{word}'")


def evaluate_arithmetic(expression: str, variables: Optional[Dict] = None):
    return Evaluator(ArithmeticVocabulary(variables)).evaluate(expression)
