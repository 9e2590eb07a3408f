"""核心模块 - Token系统、分词器、调度场转换和RPN求值器"""
from .exceptions import (
    ErrorKind, ExpressionSyntaxError, UnexpectedCharacterError, UnrecognizedWordError,
    MismatchedParenthesesError, MalformedExpressionError
)
from .token_system import (
    TokenType, Associativity, Token, OPEN_PAREN, CLOSE_PAREN, ARG_SEPARATOR,
    PAREN_PRECEDENCE, FUNCTION_PRECEDENCE
)
from .tokenizer import Vocabulary, Tokenizer
from .shunting_yard import ShuntingYard
from .rpn_evaluator import RPNEvaluator
from .evaluator import Evaluator, EvaluationResult

__all__ = [
    'ErrorKind', 'ExpressionSyntaxError', 'UnexpectedCharacterError', 'UnrecognizedWordError',
    'MismatchedParenthesesError', 'MalformedExpressionError',
    'TokenType', 'Associativity', 'Token', 'OPEN_PAREN', 'CLOSE_PAREN', 'ARG_SEPARATOR',
    'PAREN_PRECEDENCE', 'FUNCTION_PRECEDENCE',
    'Vocabulary', 'Tokenizer', 'ShuntingYard', 'RPNEvaluator',
    'Evaluator', 'EvaluationResult'
]
