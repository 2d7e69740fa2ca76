"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    把求值结果格式化为显示文本：NaN / Infinity / 整数不带小数点
    |v| 在 [1e-6, 1e21) 内用定点表示，否则用 '1e-7'、'1.5e+21' 形式的科学计数法
    """
    value = float(value)
    if np.isnan(value):
        return 'NaN'
    if np.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=1)
