"""表达式语法错误 - 统一的错误分类"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    UNEXPECTED_CHARACTER = "unexpected_character"
    UNRECOGNIZED_WORD = "unrecognized_word"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    MALFORMED_EXPRESSION = "malformed_expression"


class ExpressionSyntaxError(Exception):
    """所有求值错误的基类，直接抛给 evaluate 的调用方"""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str = "Syntax error", position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position  # 输入字符串中的下标（可能未知）

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class UnexpectedCharacterError(ExpressionSyntaxError):
    kind = ErrorKind.UNEXPECTED_CHARACTER


class UnrecognizedWordError(ExpressionSyntaxError):
    kind = ErrorKind.UNRECOGNIZED_WORD


class MismatchedParenthesesError(ExpressionSyntaxError):
    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self, message: str = "Mismatched parentheses", position: Optional[int] = None):
        super().__init__(message, position)


class MalformedExpressionError(ExpressionSyntaxError):
    kind = ErrorKind.MALFORMED_EXPRESSION
