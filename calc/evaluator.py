import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from rpn import ExpressionError, InfixExpression, InvalidToken, PostfixExpression
from utils.metrics import summarize_results, to_result_series

logger = logging.getLogger(__name__)

Formula = Union[str, Sequence[str]]

_NOTATIONS = {
    'infix': InfixExpression,
    'postfix': PostfixExpression,
}


class ExpressionEvaluator:

    def __init__(self, cache_size=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        self.cache_size = cache_size
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    def evaluate(self, formula: Formula, notation: str = 'infix') -> float:
        """
        Args:
            formula: token字符串列表，或以空白分隔token的规范字符串
            notation: 'infix' 或 'postfix'
        Returns:
            float结果（除零时为inf/nan）
        Raises:
            InvalidToken: 公式中有无法识别的token
            MalformedExpression: 表达式结构不合法
        """
        token_names = self._split_tokens(formula)
        cache_key = (notation, token_names)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for formula: {' '.join(token_names)[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = self._parse_tokens(token_names, notation).evaluate()
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def to_postfix(self, formula: Formula) -> str:
        """中缀公式的规范后缀字符串"""
        infix = self._parse_tokens(self._split_tokens(formula), 'infix')
        return infix.to_postfix().to_string()

    def evaluate_batch(self, formulas: Iterable[Formula], notation: str = 'infix') -> pd.Series:
        """
        批量求值，单个公式失败时记为NaN而不中断
        Returns:
            以公式规范字符串为索引的float Series
        """
        index: List[str] = []
        values: List[float] = []
        for formula in formulas:
            token_names = self._split_tokens(formula)
            try:
                label = self._parse_tokens(token_names, notation).to_string()
            except InvalidToken:
                # 无法解析时退回原始token文本
                label = EVALUATOR_CONFIG['separator'].join(token_names)
            try:
                value = self.evaluate(token_names, notation)
            except ExpressionError as e:
                logger.warning(f"Error evaluating formula '{label[:50]}': {e}")
                value = np.nan
            index.append(label)
            values.append(value)

        results = to_result_series(values, index)
        summary = summarize_results(results)
        logger.info(
            f"Evaluated {summary['total']} formulas: {summary['finite']} finite, "
            f"{summary['infinite']} infinite, {summary['nan']} NaN"
        )
        return results

    @staticmethod
    def _split_tokens(formula: Formula) -> Tuple[str, ...]:
        if isinstance(formula, str):
            return tuple(formula.split())
        return tuple(str(name) for name in formula)

    @staticmethod
    def _parse_tokens(token_names: Sequence[str], notation: str):
        if notation not in _NOTATIONS:
            raise ValueError(f"Unknown notation: {notation!r}")

        expression = _NOTATIONS[notation]()
        for name in token_names:
            if not expression.append(name):
                logger.warning(f"Unknown token: {name}")
                raise InvalidToken(f"unknown token {name!r}")
        return expression
