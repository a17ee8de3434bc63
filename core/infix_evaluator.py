"""中缀表达式求值器 - 双栈算符优先法，规约调用统一的Operators类"""
import logging
import re

import numpy as np

from core.errors import EmptyExpressionError, InvalidTokenError, UnclosedParenthesesError
from core.operators import Operators
from core.token_system import Operator, TokenType

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)

# 操作符栈中的括号屏障
LEFT_PAREN = '('


class InfixEvaluator:
    """评估中缀Token序列的值"""

    @staticmethod
    def parse_number(text):
        if not NUMBER_PATTERN.fullmatch(text):
            raise InvalidTokenError(text)
        return np.float64(text)

    @staticmethod
    def _reduce(operands, operators):
        top = operators.pop()
        if top == LEFT_PAREN:
            raise UnclosedParenthesesError()
        Operators.apply(top, operands)

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: Tokenizer 输出的Token序列
        Returns:
            float 结果
        """
        operands = []
        operators = []

        for token in token_sequence:
            if token.type == TokenType.LEFT_PAREN:
                operators.append(LEFT_PAREN)

            elif token.type == TokenType.RIGHT_PAREN:
                while operators and operators[-1] != LEFT_PAREN:
                    InfixEvaluator._reduce(operands, operators)
                # 右括号先于左括号出现时这里找不到屏障
                if not operators:
                    raise UnclosedParenthesesError()
                operators.pop()

            elif token.type == TokenType.OPERATOR:
                op = Operator.from_symbol(token.value)
                # 同级也先规约：所有操作符左结合（包括 ^）
                while (operators and operators[-1] != LEFT_PAREN
                       and operators[-1].priority >= op.priority):
                    InfixEvaluator._reduce(operands, operators)
                operators.append(op)

            else:
                operands.append(InfixEvaluator.parse_number(token.value))

        while operators:
            InfixEvaluator._reduce(operands, operators)

        if not operands:
            raise EmptyExpressionError()
        if len(operands) > 1:
            logger.warning(f"Stack has {len(operands)} operands after evaluation, expected 1; "
                           f"returning the first")

        return float(operands[0])


def evaluate(token_sequence):
    return InfixEvaluator.evaluate(token_sequence)
