"""core/token_system.py"""
from enum import Enum

from core.exceptions import MalformedExpressionError

# 括号/函数专用的哨兵优先级，普通操作符不能使用
PAREN_PRECEDENCE = -2 ** 31
FUNCTION_PRECEDENCE = 2 ** 31 - 1


class TokenType(Enum):
    VALUE = "value"  # 常量/变量，直接产生结果
    OPERATOR = "operator"  # 二元操作符
    FUNCTION = "function"  # 固定参数个数的函数（含一元前缀操作符）
    PARENTHESIS = "parenthesis"  # ( 或 )
    ARG_SEPARATOR = "arg_separator"  # 函数参数分隔符


class Associativity(Enum):
    """同优先级操作符的结合方向：2 / 2 / 2 = (2 / 2) / 2，2 ^ 2 ^ 2 = 2 ^ (2 ^ 2)"""
    LEFT = "left"
    RIGHT = "right"


def _same_value(a, b):
    if a is b:
        return True
    if isinstance(a, (bool, int, float, complex, str)) and isinstance(b, (bool, int, float, complex, str)):
        return a == b
    return False


class Token:
    """
    表达式中的一个单元。创建后只读，五种类型见 TokenType。
    请使用 Token.value / Token.operator / Token.function 或模块级的括号常量创建。
    """

    def __init__(self, token_type, name, value=None, func=None, precedence=None,
                 associativity=None, arity=0, is_open=False):
        self._type = token_type
        self._name = name
        self._value = value
        self._func = func
        self._precedence = precedence
        self._associativity = associativity
        self._arity = arity
        self._is_open = is_open

    # ---------- 工厂方法 ----------

    @classmethod
    def value(cls, name, value=None, func=None):
        """值Token：给定常量 value，或给定无参 func 在求值时生成结果"""
        return cls(TokenType.VALUE, name, value=value, func=func)

    @classmethod
    def operator(cls, name, precedence, associativity, func):
        if isinstance(precedence, bool) or not isinstance(precedence, int):
            raise ValueError(f"Operator precedence must be an int, got {precedence!r}")
        if not PAREN_PRECEDENCE < precedence < FUNCTION_PRECEDENCE:
            raise ValueError(f"Operator precedence {precedence} collides with a reserved sentinel")
        if not isinstance(associativity, Associativity):
            raise ValueError(f"Unknown associativity: {associativity!r}")
        return cls(TokenType.OPERATOR, name, func=func, precedence=precedence,
                   associativity=associativity, arity=2)

    @classmethod
    def function(cls, name, arity, func):
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise ValueError(f"Function arity must be a non-negative int, got {arity!r}")
        return cls(TokenType.FUNCTION, name, func=func, precedence=FUNCTION_PRECEDENCE, arity=arity)

    # ---------- 只读属性 ----------

    @property
    def type(self):
        return self._type

    @property
    def name(self):
        return self._name

    @property
    def precedence(self):
        if self._type == TokenType.PARENTHESIS:
            return PAREN_PRECEDENCE
        return self._precedence

    @property
    def associativity(self):
        return self._associativity

    @property
    def arity(self):
        return self._arity

    @property
    def is_open(self):
        return self._type == TokenType.PARENTHESIS and self._is_open

    @property
    def is_close(self):
        return self._type == TokenType.PARENTHESIS and not self._is_open

    @property
    def closes_value(self):
        """值或右括号之后，下一个字符应当是二元操作符/右括号/分隔符"""
        return self._type == TokenType.VALUE or self.is_close

    # ---------- 求值 ----------

    def __call__(self, *operands):
        if self._type == TokenType.VALUE:
            if operands:
                raise TypeError(f"Value token '{self._name}' takes no operands")
            return self._func() if self._func is not None else self._value

        if self._type == TokenType.OPERATOR:
            if len(operands) != 2:
                raise MalformedExpressionError(
                    f"Operator '{self._name}' expects 2 operands, got {len(operands)}")
            return self._func(operands[0], operands[1])

        if self._type == TokenType.FUNCTION:
            if len(operands) != self._arity:
                raise MalformedExpressionError(
                    f"Function '{self._name}' expects {self._arity} arguments, got {len(operands)}")
            return self._func(*operands)

        raise TypeError(f"{self._type.value} token '{self._name}' cannot be invoked")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self._type == other._type
                and self._name == other._name
                and self._precedence == other._precedence
                and self._associativity == other._associativity
                and self._arity == other._arity
                and self._is_open == other._is_open
                and self._func is other._func
                and _same_value(self._value, other._value))

    def __hash__(self):
        return hash((self._type, self._name))

    def __repr__(self):
        return f"Token({self._type.value}, {self._name!r})"


# 结构Token，无状态，全局共享
OPEN_PAREN = Token(TokenType.PARENTHESIS, '(', is_open=True)
CLOSE_PAREN = Token(TokenType.PARENTHESIS, ')', is_open=False)
ARG_SEPARATOR = Token(TokenType.ARG_SEPARATOR, ',')
