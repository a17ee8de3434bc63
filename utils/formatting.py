"""utils/formatting.py"""
import numpy as np

# 十进制指数超出 [-4, 21) 时使用科学计数法
MIN_POSITIONAL_EXP = -4
MAX_POSITIONAL_EXP = 21


def format_result(value) -> str:
    """最短可还原的文本表示；整数值不带 .0"""
    value = float(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    scientific = np.format_float_scientific(value, trim='-')
    exponent = int(scientific.split('e')[1])
    if exponent < MIN_POSITIONAL_EXP or exponent >= MAX_POSITIONAL_EXP:
        return scientific
    return np.format_float_positional(value, trim='-')
