"""求值入口：字符串 -> Token -> 后缀序列 -> 结果"""
import logging
from typing import List

from core.exceptions import ExpressionSyntaxError
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYard
from core.token_system import Token
from core.tokenizer import Tokenizer, Vocabulary

logger = logging.getLogger(__name__)


class EvaluationResult:
    """try_evaluate 的返回值：value 与 error 二选一"""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return f"EvaluationResult(value={self.value!r})"
        return f"EvaluationResult(error={self.error!r})"


class Evaluator:
    """
    组合分词、调度场和后缀求值。
    实例在构造后不再修改，所有中间状态都在单次调用内，可跨线程复用。
    """

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary
        self.tokenizer = Tokenizer(vocabulary)

    def tokenize(self, expression: str) -> List[Token]:
        return self.tokenizer.tokenize(expression)

    def to_postfix(self, expression: str) -> List[Token]:
        return ShuntingYard.to_postfix(self.tokenize(expression))

    def evaluate(self, expression: str):
        """
        Raises:
            ExpressionSyntaxError 的四个子类之一
        """
        postfix = self.to_postfix(expression)
        return RPNEvaluator.run(postfix)

    def try_evaluate(self, expression: str) -> EvaluationResult:
        """不抛出语法错误，失败体现在返回值中"""
        try:
            return EvaluationResult(value=self.evaluate(expression))
        except ExpressionSyntaxError as e:
            logger.debug(f"Failed to evaluate '{expression[:50]}': {e}")
            return EvaluationResult(error=e)
