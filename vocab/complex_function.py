"""复变函数表达式树：用变量绑定求值，得到一个复数"""
from typing import Dict, Optional

from utils.complex_math import (
    ZERO, has_nan, format_complex, c_pow, c_divide, c_sqrt, c_log, c_exp, c_tan,
    c_sin, c_cos, c_asin, c_acos, c_atan, c_sinh, c_cosh, c_tanh, c_asinh, c_acosh, c_atanh,
    c_abs, c_arg
)


class VariableError(Exception):
    """求值时遇到未绑定的变量"""


class ComplexFunction:
    """
    所有节点的基类。
    fn({'x': 1j}) 或 fn(x=1j) 求值；+ - * / ** 和一元负号在两个 ComplexFunction 之间构造新的树。
    """

    def __call__(self, variables: Optional[Dict[str, complex]] = None, **kwargs) -> complex:
        bindings = dict(variables or {})
        bindings.update(kwargs)
        # 显式转换为 complex
        bindings = {name: complex(value) for name, value in bindings.items()}
        return self.evaluate(bindings)

    def evaluate(self, bindings: Dict[str, complex]) -> complex:
        raise NotImplementedError

    @property
    def arguments(self):
        return ()

    @property
    def variables(self):
        names = set()
        for argument in self.arguments:
            names |= argument.variables
        return names

    def evaluable(self, names) -> bool:
        """给定这些变量名能否求值"""
        return all(argument.evaluable(names) for argument in self.arguments)

    @property
    def has_nan(self) -> bool:
        return any(argument.has_nan for argument in self.arguments)

    def _key(self):
        return self.arguments

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(a) for a in self._key())})"

    # 运算符只接受 ComplexFunction，数字需要先显式包装为 Constant

    def __add__(self, other):
        if not isinstance(other, ComplexFunction):
            return NotImplemented
        return Add(self, other)

    def __sub__(self, other):
        if not isinstance(other, ComplexFunction):
            return NotImplemented
        return Subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, ComplexFunction):
            return NotImplemented
        return Multiply(self, other)

    def __truediv__(self, other):
        if not isinstance(other, ComplexFunction):
            return NotImplemented
        return Divide(self, other)

    def __pow__(self, other):
        if not isinstance(other, ComplexFunction):
            return NotImplemented
        return Power(self, other)

    def __neg__(self):
        return Negate(self)


class Constant(ComplexFunction):

    def __init__(self, value: complex):
        self.value = complex(value)

    def evaluate(self, bindings):
        return self.value

    @property
    def has_nan(self):
        return has_nan(self.value)

    def _key(self):
        return (self.value,)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        # NaN 常量视为相等
        if self.has_nan and other.has_nan:
            return True
        return self.value == other.value

    def __hash__(self):
        return hash(('Constant', 'nan')) if self.has_nan else hash(('Constant', self.value))

    def __str__(self):
        return format_complex(self.value)


class Variable(ComplexFunction):

    def __init__(self, name: str):
        self.name = name

    def evaluate(self, bindings):
        if self.name not in bindings:
            raise VariableError(f"Variable '{self.name}' is not defined")
        return bindings[self.name]

    @property
    def variables(self):
        return {self.name}

    def evaluable(self, names):
        return self.name in names

    def _key(self):
        return (self.name,)

    def __str__(self):
        return self.name


class BinaryFunction(ComplexFunction):
    symbol = '?'

    def __init__(self, left: ComplexFunction, right: ComplexFunction):
        self.left = left
        self.right = right

    @staticmethod
    def apply(left, right):
        raise NotImplementedError

    def evaluate(self, bindings):
        return self.apply(self.left.evaluate(bindings), self.right.evaluate(bindings))

    @property
    def arguments(self):
        return (self.left, self.right)

    def __str__(self):
        return f"({self.left} {self.symbol} {self.right})"


class Add(BinaryFunction):
    symbol = '+'
    apply = staticmethod(lambda left, right: left + right)


class Subtract(BinaryFunction):
    symbol = '-'
    apply = staticmethod(lambda left, right: left - right)


class Multiply(BinaryFunction):
    symbol = '*'
    apply = staticmethod(lambda left, right: left * right)


class Divide(BinaryFunction):
    symbol = '/'
    apply = staticmethod(c_divide)


class Power(BinaryFunction):
    symbol = '^'
    apply = staticmethod(c_pow)


class UnaryFunction(ComplexFunction):
    label = '?'

    def __init__(self, argument: ComplexFunction):
        self.argument = argument

    @staticmethod
    def apply(value):
        raise NotImplementedError

    def evaluate(self, bindings):
        return self.apply(self.argument.evaluate(bindings))

    @property
    def arguments(self):
        return (self.argument,)

    def __str__(self):
        return f"{self.label}({self.argument})"


class Negate(UnaryFunction):
    # ZERO - value 不会产生 -0.0 虚部，log/sqrt 的分支因此不变
    apply = staticmethod(lambda value: ZERO - value)

    def __str__(self):
        return f"(-{self.argument})"


class Conj(UnaryFunction):
    label = 'conj'
    apply = staticmethod(lambda value: value.conjugate())


class Re(UnaryFunction):
    label = 're'
    apply = staticmethod(lambda value: complex(value.real, 0))


class Im(UnaryFunction):
    label = 'im'
    apply = staticmethod(lambda value: complex(value.imag, 0))


class Abs(UnaryFunction):
    label = 'abs'
    apply = staticmethod(c_abs)


class Arg(UnaryFunction):
    label = 'arg'
    apply = staticmethod(c_arg)


class Sqrt(UnaryFunction):
    label = '√'
    apply = staticmethod(c_sqrt)


class Log(UnaryFunction):
    label = 'log'
    apply = staticmethod(c_log)


class Exp(UnaryFunction):
    label = 'exp'
    apply = staticmethod(c_exp)


class Sin(UnaryFunction):
    label = 'sin'
    apply = staticmethod(c_sin)


class Cos(UnaryFunction):
    label = 'cos'
    apply = staticmethod(c_cos)


class Tan(UnaryFunction):
    label = 'tan'
    apply = staticmethod(c_tan)


class Asin(UnaryFunction):
    label = 'asin'
    apply = staticmethod(c_asin)


class Acos(UnaryFunction):
    label = 'acos'
    apply = staticmethod(c_acos)


class Atan(UnaryFunction):
    label = 'atan'
    apply = staticmethod(c_atan)


class Sinh(UnaryFunction):
    label = 'sinh'
    apply = staticmethod(c_sinh)


class Cosh(UnaryFunction):
    label = 'cosh'
    apply = staticmethod(c_cosh)


class Tanh(UnaryFunction):
    label = 'tanh'
    apply = staticmethod(c_tanh)


class Asinh(UnaryFunction):
    label = 'asinh'
    apply = staticmethod(c_asinh)


class Acosh(UnaryFunction):
    label = 'acosh'
    apply = staticmethod(c_acosh)


class Atanh(UnaryFunction):
    label = 'atanh'
    apply = staticmethod(c_atanh)
