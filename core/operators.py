"""core/operators.py"""
import logging

import numpy as np

from core.errors import (
    DivisionByZeroError,
    NegativeBaseError,
    NotEnoughOperandsError,
    UnknownOperatorError,
    ZeroBaseError,
)
from core.token_system import Operator

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================
    @staticmethod
    def add(num1, num2):
        """加法操作符"""
        return num1 + num2

    @staticmethod
    def sub(num1, num2):
        """减法操作符"""
        return num1 - num2

    @staticmethod
    def mul(num1, num2):
        """乘法操作符"""
        return num1 * num2

    @staticmethod
    def div(num1, num2):
        """除法操作符，除数为0直接报错（不做安全替换）"""
        if num2 == 0:
            raise DivisionByZeroError(num1, num2)
        return num1 / num2

    @staticmethod
    def pow(num1, num2):
        """
        幂运算:
        - 0 的非正数次幂报错
        - 负数的非整数次幂报错
        """
        if num1 == 0 and num2 <= 0:
            raise ZeroBaseError(num1, num2)
        if num1 < 0 and np.trunc(num2) != num2:
            raise NegativeBaseError(num1, num2)
        return np.power(num1, num2)

    # 规约========================================
    @staticmethod
    def apply(operator, operands):
        """
        弹出两个操作数和一个操作符，计算后把结果压回操作数栈
        Args:
            operator: Operator 成员
            operands: 操作数栈（原地修改）
        """
        if len(operands) < 2:
            # 只剩一个操作数时，减号按一元取负处理
            if operands and operator is Operator.SUB:
                operands[-1] = -operands[-1]
                logger.debug(f"Unary minus fallback applied, operand now {operands[-1]}")
                return
            raise NotEnoughOperandsError(operator)

        op_method = BINARY_OPERATIONS.get(operator)
        if op_method is None:
            raise UnknownOperatorError(operator)

        num2 = operands.pop()
        num1 = operands.pop()

        # 溢出按IEEE语义得到inf，不发警告
        with np.errstate(over='ignore', invalid='ignore'):
            result = np.float64(op_method(num1, num2))
        operands.append(result)


BINARY_OPERATIONS = {
    Operator.ADD: Operators.add,
    Operator.SUB: Operators.sub,
    Operator.MUL: Operators.mul,
    Operator.DIV: Operators.div,
    Operator.POW: Operators.pow,
}

if set(BINARY_OPERATIONS) != set(Operator):
    raise RuntimeError("every Operator needs an operation")
