import pandas as pd
import numpy as np
import logging
from typing import Union, Dict, Optional, Any, Iterable

from core import Evaluator, ExpressionSyntaxError
from vocab.arithmetic import ArithmeticVocabulary

logger = logging.getLogger(__name__)


class FrameEvaluator:
    """在DataFrame上求值算术公式，列名即变量名，结果总是与数据索引对齐的Series"""

    def __init__(self, on_error: str = 'raise'):
        """
        Args:
            on_error: 'raise' 直接抛出语法错误；'nan' 记录日志并返回NaN Series
        """
        if on_error not in ('raise', 'nan'):
            raise ValueError(f"on_error must be 'raise' or 'nan', got {on_error!r}")
        self.on_error = on_error

    def evaluate(self, formula: str, data: Union[pd.DataFrame, Dict]) -> pd.Series:
        """
        Args:
            formula: 中缀公式，如 "(close - open) / open"
            data: 数据（DataFrame或字典）
        Returns:
            评估结果的Series
        """
        data_dict = self._prepare_data(data)
        try:
            result = Evaluator(ArithmeticVocabulary(data_dict)).evaluate(formula)
        except ExpressionSyntaxError as e:
            if self.on_error == 'raise':
                raise
            logger.error(f"Error evaluating formula '{formula[:50]}': {e}")
            return self._create_nan_series(data)

        series_result = self._convert_to_series(result, data)
        # inf 统一视为缺失
        return series_result.replace([np.inf, -np.inf], np.nan)

    def evaluate_many(self, formulas: Union[Dict[str, str], Iterable[str]],
                      data: Union[pd.DataFrame, Dict]) -> pd.DataFrame:
        """多个公式一次求值，每个公式一列（列名为字典键或公式本身）"""
        if not isinstance(formulas, dict):
            formulas = {formula: formula for formula in formulas}
        columns = {name: self.evaluate(formula, data) for name, formula in formulas.items()}
        return pd.DataFrame(columns, index=self._get_index(data))

    def _prepare_data(self, data: Union[pd.DataFrame, Dict]) -> Dict[str, pd.Series]:
        """
        准备数据为字典格式 - 保持Series引用不变，避免重复创建
        """
        if isinstance(data, pd.DataFrame):
            return {col: data[col] for col in data.columns}

        if isinstance(data, dict):
            ref_index = self._get_index(data)
            prepared = {}
            for key, value in data.items():
                if isinstance(value, pd.Series):
                    prepared[key] = value  # 直接引用，不复制
                elif np.isscalar(value):
                    prepared[key] = value  # 标量由操作符自行广播
                else:
                    prepared[key] = pd.Series(value, index=ref_index)
            return prepared

        raise TypeError(f"Unsupported data type: {type(data)}")

    @staticmethod
    def _get_index(data: Union[pd.DataFrame, Dict]) -> Optional[pd.Index]:
        if isinstance(data, pd.DataFrame):
            return data.index
        if isinstance(data, dict):
            for value in data.values():
                if isinstance(value, pd.Series):
                    return value.index
            for value in data.values():
                if isinstance(value, (np.ndarray, list)):
                    return pd.RangeIndex(len(value))
        return None

    def _convert_to_series(self, result: Any, original_data: Union[pd.DataFrame, Dict]) -> pd.Series:
        """
        将评估结果转换为Series，标量广播到整个索引
        """
        if isinstance(result, pd.Series):
            return result

        index = self._get_index(original_data)
        if isinstance(result, np.ndarray):
            return pd.Series(result, index=index)
        if index is not None:
            return pd.Series(result, index=index, dtype=float)
        return pd.Series([result], dtype=float)

    def _create_nan_series(self, data: Union[pd.DataFrame, Dict]) -> pd.Series:
        """创建NaN Series作为错误返回值"""
        index = self._get_index(data)
        if index is not None:
            return pd.Series(np.nan, index=index)
        return pd.Series([np.nan])
