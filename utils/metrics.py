"""utils/metrics.py"""
import numpy as np
import pandas as pd


def summarize_results(results):
    """统计批量求值结果：有限值、无穷值、NaN的数量，以及有限值的均值/最小/最大"""
    arr = np.asarray(getattr(results, 'values', results), dtype=float).ravel()

    finite = arr[np.isfinite(arr)]
    summary = {
        'total': int(arr.size),
        'finite': int(finite.size),
        'infinite': int(np.isinf(arr).sum()),
        'nan': int(np.isnan(arr).sum()),
    }
    if finite.size == 0:
        summary.update(mean=np.nan, min=np.nan, max=np.nan)
    else:
        summary.update(mean=float(finite.mean()), min=float(finite.min()), max=float(finite.max()))
    return summary


def to_result_series(values, index):
    """把求值结果组装为float Series；index为公式的规范字符串"""
    return pd.Series(values, index=pd.Index(index, name='formula'), dtype=float, name='result')
