"""调度场算法：中缀Token序列 -> 后缀（RPN）Token序列"""
import logging
from typing import List

from core.exceptions import MalformedExpressionError, MismatchedParenthesesError
from core.token_system import Associativity, Token, TokenType

logger = logging.getLogger(__name__)


class _ParenFrame:
    """一对括号内部的参数计数"""

    def __init__(self):
        self.separators = 0
        self.has_content = False

    @property
    def arg_count(self):
        if self.separators == 0 and not self.has_content:
            return 0
        return self.separators + 1


class ShuntingYard:
    """输出序列中不含括号和参数分隔符"""

    @staticmethod
    def to_postfix(tokens: List[Token]) -> List[Token]:
        op_stack = []  # 操作符/函数/左括号
        output = []
        frames = []  # 与 op_stack 中的左括号一一对应

        for token in tokens:
            if token.type != TokenType.ARG_SEPARATOR and not token.is_close and frames:
                frames[-1].has_content = True

            if token.type == TokenType.VALUE:
                output.append(token)

            elif token.type == TokenType.OPERATOR:
                ShuntingYard._add_operator(token, op_stack, output)

            elif token.type == TokenType.FUNCTION:
                op_stack.append(token)

            elif token.type == TokenType.ARG_SEPARATOR:
                ShuntingYard._pop_until_open(op_stack, output)
                frames[-1].separators += 1

            elif token.is_open:
                op_stack.append(token)
                frames.append(_ParenFrame())

            elif token.is_close:
                ShuntingYard._pop_until_open(op_stack, output)
                op_stack.pop()
                frame = frames.pop()
                if op_stack and op_stack[-1].type == TokenType.FUNCTION:
                    function = op_stack.pop()
                    if frame.arg_count != function.arity:
                        raise MalformedExpressionError(
                            f"Function '{function.name}' expects {function.arity} arguments, "
                            f"got {frame.arg_count}")
                    output.append(function)

            else:
                raise MalformedExpressionError(f"Unknown token: {token!r}")

        while op_stack:
            token = op_stack.pop()
            if token.type == TokenType.PARENTHESIS:
                raise MismatchedParenthesesError()
            output.append(token)

        logger.debug(f"Postfix: {' '.join(t.name for t in output)}")
        return output

    @staticmethod
    def _add_operator(op, op_stack, output):
        # 括号为最低优先级，不会被比较弹出；函数为最高优先级，会在此被弹出（一元前缀操作符）
        while op_stack:
            top = op_stack[-1]
            if top.precedence > op.precedence or (
                    top.precedence == op.precedence and op.associativity == Associativity.LEFT):
                output.append(op_stack.pop())
            else:
                break
        op_stack.append(op)

    @staticmethod
    def _pop_until_open(op_stack, output):
        """弹出到左括号为止（不含左括号）"""
        while True:
            if not op_stack:
                raise MismatchedParenthesesError()
            if op_stack[-1].is_open:
                return
            output.append(op_stack.pop())
