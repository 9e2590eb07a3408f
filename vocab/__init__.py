"""词表模块 - 布尔、算术（含Series）和复变函数"""
from .boolean import BooleanVocabulary, evaluate_boolean
from .operators import Operators
from .arithmetic import ArithmeticVocabulary, evaluate_arithmetic
from .frame_evaluator import FrameEvaluator
from .complex_function import ComplexFunction, VariableError
from .complex_vocab import ComplexVocabulary, evaluate_complex

__all__ = [
    'BooleanVocabulary', 'evaluate_boolean',
    'Operators', 'ArithmeticVocabulary', 'evaluate_arithmetic', 'FrameEvaluator',
    'ComplexFunction', 'VariableError', 'ComplexVocabulary', 'evaluate_complex'
]
