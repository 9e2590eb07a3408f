"""工具模块"""
from .complex_math import round_complex, format_complex, c_pow, c_tan

__all__ = ['round_complex', 'format_complex', 'c_pow', 'c_tan']
