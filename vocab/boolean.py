"""布尔逻辑词表：& | ! true false"""
from core import (
    Associativity, Evaluator, Token, UnrecognizedWordError, Vocabulary, OPEN_PAREN, CLOSE_PAREN
)
from config.config import BOOLEAN_CONFIG

# 0 为优先级，& 与 | 同级，从左到右
AND = Token.operator('&', BOOLEAN_CONFIG["precedence"], Associativity.LEFT, lambda left, right: left and right)
OR = Token.operator('|', BOOLEAN_CONFIG["precedence"], Associativity.LEFT, lambda left, right: left or right)
NOT = Token.function('!', 1, lambda operand: not operand)  # 一元前缀操作符
TRUE = Token.value('true', True)
FALSE = Token.value('false', False)


class BooleanVocabulary(Vocabulary):

    def parse_after_value_char(self, char):
        if char == BOOLEAN_CONFIG["and_char"]:
            return AND
        if char == BOOLEAN_CONFIG["or_char"]:
            return OR
        if char == ')':
            return CLOSE_PAREN
        return None

    def parse_other_char(self, char):
        if char == BOOLEAN_CONFIG["not_char"]:
            return NOT
        if char == '(':
            return OPEN_PAREN
        return None

    def parse_word(self, word):
        lowered = word.lower()
        if lowered in BOOLEAN_CONFIG["true_words"]:
            return TRUE
        if lowered in BOOLEAN_CONFIG["false_words"]:
            return FALSE
        raise UnrecognizedWordError(f"Unrecognised word '{word}'")


BOOLEAN_EVALUATOR = Evaluator(BooleanVocabulary())


def evaluate_boolean(expression: str) -> bool:
    return BOOLEAN_EVALUATOR.evaluate(expression)
