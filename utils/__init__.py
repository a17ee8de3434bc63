"""工具模块"""
from .formatting import format_result
from .batch import load_expressions, evaluate_expressions, save_results

__all__ = ['format_result', 'load_expressions', 'evaluate_expressions', 'save_results']
