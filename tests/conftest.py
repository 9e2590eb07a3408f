import operator

import pytest

from core import (
    Associativity, Evaluator, Token, Vocabulary, OPEN_PAREN, CLOSE_PAREN, ARG_SEPARATOR
)

# 测试用的整数计算器词表，只依赖 core
ADD = Token.operator('+', 0, Associativity.LEFT, operator.add)
SUB = Token.operator('-', 0, Associativity.LEFT, operator.sub)
MUL = Token.operator('*', 1, Associativity.LEFT, operator.mul)
DIV = Token.operator('/', 1, Associativity.LEFT, operator.truediv)
POW = Token.operator('^', 2, Associativity.RIGHT, operator.pow)
NEG = Token.function('neg', 1, operator.neg)
MAX = Token.function('max', 2, max)
SEVEN = Token.function('seven', 0, lambda: 7)
TEN = Token.value('ten', 10)


def num(n):
    return Token.value(str(n), n)


class CalcVocabulary(Vocabulary):
    """) 同时出现在两个分类里，以支持 seven()"""

    def is_value_char(self, char):
        return char.isdigit()

    def parse_value(self, text):
        return num(int(text))

    def parse_after_value_char(self, char):
        return {'+': ADD, '-': SUB, '*': MUL, '/': DIV, '^': POW,
                ')': CLOSE_PAREN, ',': ARG_SEPARATOR}.get(char)

    def parse_other_char(self, char):
        return {'-': NEG, '(': OPEN_PAREN, ')': CLOSE_PAREN}.get(char)

    def parse_word(self, word):
        # 未知单词返回 None，由分词器报错
        return {'max': MAX, 'seven': SEVEN, 'ten': TEN}.get(word)


@pytest.fixture
def calc():
    return Evaluator(CalcVocabulary())


@pytest.fixture
def calc_vocabulary():
    return CalcVocabulary()
