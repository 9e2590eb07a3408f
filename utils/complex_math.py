"""utils/complex_math.py"""
import math

import numpy as np

from config.config import COMPLEX_CONFIG

I = complex(0, 1)
ZERO = complex(0, 0)
ONE = complex(1, 0)
E = complex(math.e, 0)
PI = complex(math.pi, 0)
TAU = complex(math.tau, 0)
NAN = complex(math.nan, math.nan)


def has_nan(z):
    return math.isnan(z.real) or math.isnan(z.imag)


def round_complex(z, precision=None):
    """实部虚部分别保留 precision 位小数，inf/NaN 原样返回"""
    if precision is None:
        precision = COMPLEX_CONFIG["round_precision"]
    return complex(_round_part(z.real, precision), _round_part(z.imag, precision))


def _round_part(v, precision):
    if math.isinf(v) or math.isnan(v):
        return v
    return float(np.round(v, precision))


def c_pow(base, exponent):
    """0^0 = NaN，0^z = 0，其余 exp(log(base) * exponent)"""
    base = complex(base)
    exponent = complex(exponent)
    if base == ZERO:
        return NAN if exponent == ZERO else ZERO
    with np.errstate(all='ignore'):
        return complex(np.exp(np.log(np.complex128(base)) * exponent))


def c_sqrt(z):
    return c_pow(z, 0.5)


def c_log(z):
    with np.errstate(all='ignore'):
        return complex(np.log(np.complex128(z)))


def c_tan(z):
    # 极点处分母四舍五入后为0，返回 NaN
    z = complex(z)
    with np.errstate(all='ignore'):
        exponential = complex(np.exp(np.complex128(2 * I * z)))
    bottom = I * (exponential + 1)
    if round_complex(bottom) == ZERO:
        return NAN
    return (exponential - 1) / bottom


def c_divide(left, right):
    """除数为0时返回 NaN 而不是抛出 ZeroDivisionError"""
    left = complex(left)
    right = complex(right)
    if right == ZERO:
        return NAN
    return left / right


def _numpy_unary(ufunc):
    def apply(z):
        with np.errstate(all='ignore'):
            return complex(ufunc(np.complex128(z)))
    apply.__name__ = ufunc.__name__
    return apply


c_exp = _numpy_unary(np.exp)
c_sin = _numpy_unary(np.sin)
c_cos = _numpy_unary(np.cos)
c_asin = _numpy_unary(np.arcsin)
c_acos = _numpy_unary(np.arccos)
c_atan = _numpy_unary(np.arctan)
c_sinh = _numpy_unary(np.sinh)
c_cosh = _numpy_unary(np.cosh)
c_asinh = _numpy_unary(np.arcsinh)
c_acosh = _numpy_unary(np.arccosh)


def c_tanh(z):
    """tanh(z) = -i tan(iz)，极点处同 c_tan 返回 NaN"""
    return -I * c_tan(I * complex(z))


def c_atanh(z):
    return -I * c_atan(I * complex(z))


def c_abs(z):
    return complex(abs(complex(z)), 0)


def c_arg(z):
    z = complex(z)
    return complex(math.atan2(z.imag, z.real), 0)


def format_complex(z):
    """2.0 + 3.0i / 2.0 - i / -i / 4.5"""
    re, im = z.real, z.imag
    if re == 0 and im == 0:
        return "0.0"
    if re == 0:
        if im == 1:
            return "i"
        if im == -1:
            return "-i"
        return f"{im!r}i"
    if im == 0:
        return repr(re)
    if im == 1:
        return f"{re!r} + i"
    if im == -1:
        return f"{re!r} - i"
    if im < 0:
        return f"{re!r} - {-im!r}i"
    return f"{re!r} + {im!r}i"
