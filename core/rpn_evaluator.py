"""RPN表达式求值器 - 基于值栈的后缀序列求值"""
import logging
from typing import List

from core.exceptions import MalformedExpressionError
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def run(postfix: List[Token]):
        """
        Args:
            postfix: 后缀Token序列（只含VALUE/OPERATOR/FUNCTION）
        Returns:
            结果（类型由词表决定）
        Raises:
            MalformedExpressionError: 操作数不足，或结束时栈中不是恰好一个值
        """
        stack = []

        for token in postfix:
            if token.type == TokenType.VALUE:
                stack.append(token())

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise MalformedExpressionError(f"Insufficient operands for '{token.name}'")
                # 后入栈的是右操作数
                right = stack.pop()
                left = stack.pop()
                stack.append(token(left, right))

            elif token.type == TokenType.FUNCTION:
                if len(stack) < token.arity:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise MalformedExpressionError(
                        f"Function '{token.name}' expects {token.arity} arguments, got {len(stack)}")
                args = [stack.pop() for _ in range(token.arity)][::-1]
                stack.append(token(*args))

            else:
                raise MalformedExpressionError(f"Unexpected {token.type.value} token in postfix sequence")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            if not stack:
                raise MalformedExpressionError("Empty expression")
            raise MalformedExpressionError(f"Expected a single result, {len(stack)} values left over")

        return stack[0]
