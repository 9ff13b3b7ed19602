"""utils/formatting.py"""
import numpy as np


def format_number(value):
    """数值显示：整数值不带小数点，inf/nan 原样输出"""
    value = float(value)
    if not np.isfinite(value):
        return repr(value)
    # 极大或极小的数用科学计数法，避免一长串零
    if value == 0 or 1e-4 <= abs(value) < 1e16:
        return np.format_float_positional(value, unique=True, trim='-')
    return repr(value)


def format_result(result, error_prefix="Error: "):
    """把 EvaluationResult 转成一行输出文本"""
    if result.ok:
        return format_number(result.value)
    return f"{error_prefix}{result.error.message}"
