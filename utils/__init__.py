"""工具模块"""
from .metrics import summarize_results, to_result_series

__all__ = ['summarize_results', 'to_result_series']
