"""批量计算模块 - 从文件读取表达式，结果汇总为DataFrame"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core import Calculator, CalculatorError

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'result', 'error', 'error_kind']


def load_expressions(file_path, column=None):
    """
    加载表达式列表。

    Parameters:
    - file_path: CSV 文件（按列读取）或纯文本文件（每行一个表达式）
    - column: CSV 中表达式所在列，默认取 BATCH_CONFIG

    Returns:
    - 表达式字符串列表
    """
    column = column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 保持原文，不让pandas把 "1" 之类解析成数字
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in frame.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = frame[column].tolist()
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            expressions = [line.strip() for line in f if line.strip()]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, calculator=None) -> pd.DataFrame:
    """逐条计算；CalculatorError 记录到结果表中而不是抛出"""
    calculator = calculator or Calculator()
    rows = []
    for expression in expressions:
        try:
            value = calculator.evaluate(expression)
            rows.append({'expression': expression, 'result': value,
                         'error': None, 'error_kind': None})
        except CalculatorError as e:
            logger.debug(f"Expression '{expression[:50]}' failed: {e}")
            rows.append({'expression': expression, 'result': np.nan,
                         'error': str(e), 'error_kind': e.kind.name})

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    results['result'] = results['result'].astype(float)
    failed = int(results['error'].notna().sum())
    logger.info(f"Evaluated {len(results)} expressions, {failed} failed")
    return results


def save_results(results: pd.DataFrame, output_path=None):
    output_path = output_path or BATCH_CONFIG['output_path']
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
