"""字符串 -> Token序列。词表（字符分类和单词解析）由使用方提供"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from core.exceptions import UnexpectedCharacterError, UnrecognizedWordError
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)


class Vocabulary(ABC):
    """
    使用方需要实现的回调集合。
    两个字符分类函数在任一状态下都必须互不冲突，歧义属于词表配置错误。
    """

    def is_value_char(self, char: str) -> bool:
        """该字符是否属于值字面量（如数字）。默认没有值字面量，全部走单词解析"""
        return False

    def parse_value(self, text: str) -> Token:
        """把一段连续的值字面量字符解析为VALUE Token"""
        raise UnrecognizedWordError(f"Invalid token '{text}'")

    @abstractmethod
    def parse_after_value_char(self, char: str) -> Optional[Token]:
        """
        出现在值或右括号之后的特殊字符：二元操作符、右括号、参数分隔符。
        判断标准：它放在一个常量后面是否说得通？
        """

    @abstractmethod
    def parse_other_char(self, char: str) -> Optional[Token]:
        """
        出现在表达式开头、操作符/函数/左括号之后的特殊字符：一元前缀操作符（FUNCTION Token）、左括号。
        判断标准：它放在表达式开头是否说得通？
        """

    @abstractmethod
    def parse_word(self, word: str) -> Token:
        """把不含特殊字符和空白的单词解析为Token（命名常量、变量、函数...）"""


class Tokenizer:

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    def tokenize(self, text: str) -> List[Token]:
        """
        单次从左到右扫描，不回溯。
        after_value 为真时（刚输出值或右括号）优先使用 parse_after_value_char，否则优先 parse_other_char；
        同一个字符（如 '-'）因此可以既是二元减法又是一元取负。
        """
        vocab = self.vocabulary
        tokens = []
        after_value = False
        i = 0
        n = len(text)

        while i < n:
            char = text[i]

            if char.isspace():
                i += 1
                continue

            # 值字面量，只在期待值的位置读取
            if not after_value and vocab.is_value_char(char):
                start = i
                while i < n and vocab.is_value_char(text[i]):
                    i += 1
                token = self._resolve(vocab.parse_value, text[start:i], start)
                if token.type != TokenType.VALUE:
                    raise UnrecognizedWordError(f"Invalid token '{text[start:i]}'", position=start)
                tokens.append(token)
                after_value = True
                continue

            after = vocab.parse_after_value_char(char)
            other = vocab.parse_other_char(char)
            expected, opposite = (after, other) if after_value else (other, after)

            if expected is not None:
                tokens.append(expected)
                after_value = expected.closes_value
                i += 1
                continue

            if opposite is not None:
                # 字符合法，但只能出现在另一种位置
                logger.debug(f"Char '{char}' at {i} is only valid {'before' if after_value else 'after'} a value")
                raise UnexpectedCharacterError(f"Char '{char}' unexpected", position=i)

            # 单词：连续的非空白、非特殊字符
            start = i
            while i < n and not self._is_boundary(text[i]):
                i += 1
            token = self._resolve(vocab.parse_word, text[start:i], start)
            tokens.append(token)
            after_value = token.closes_value

        logger.debug(f"Tokenized {len(text)} chars into {len(tokens)} tokens")
        return tokens

    def _is_boundary(self, char: str) -> bool:
        vocab = self.vocabulary
        return (char.isspace()
                or vocab.parse_after_value_char(char) is not None
                or vocab.parse_other_char(char) is not None)

    @staticmethod
    def _resolve(parse, text, position):
        """调用使用方的解析回调，补全错误位置"""
        try:
            token = parse(text)
        except UnrecognizedWordError as e:
            if e.position is None:
                e.position = position
            raise
        if token is None:
            raise UnrecognizedWordError(f"Unrecognised word '{text}'", position=position)
        return token
