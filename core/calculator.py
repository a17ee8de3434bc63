"""core/calculator.py"""
import logging
import threading
from collections import OrderedDict

from config.config import CALC_CONFIG
from core.infix_evaluator import InfixEvaluator
from core.token_system import Tokenizer

logger = logging.getLogger(__name__)


def calc(expression: str) -> float:
    """解析并计算表达式；失败时抛出 CalculatorError 子类"""
    tokens = Tokenizer.tokenize(expression, blank_chars=CALC_CONFIG['blank_chars'])
    return InfixEvaluator.evaluate(tokens)


class Calculator:

    def __init__(self, cache_size=None):
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = CALC_CONFIG['cache_size'] if cache_size is None else cache_size
        self._result_cache = OrderedDict()
        self._lock = threading.Lock()
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def hits(self):
        return self._cache_hits

    @property
    def misses(self):
        return self._cache_misses

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        with self._lock:
            self._result_cache.clear()
            logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
            self._cache_hits = 0
            self._cache_misses = 0

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            计算结果；错误不缓存，原样抛出
        """
        with self._lock:
            if expression in self._result_cache:
                # 移到末尾（最近使用）
                self._result_cache.move_to_end(expression)
                self._cache_hits += 1
                logger.debug(f"Cache hit for expression: {expression[:50]}")
                return self._result_cache[expression]
            self._cache_misses += 1

        result = calc(expression)

        if self.cache_size > 0:
            with self._lock:
                self._result_cache[expression] = result
                self._manage_cache()
        return result
