"""求值模块 - 带缓存的表达式求值和批量求值"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
