"""core/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    EMPTY_EXPRESSION = "empty_expression"
    UNCLOSED_PARENTHESES = "unclosed_parentheses"
    INVALID_TOKEN = "invalid_token"
    NOT_ENOUGH_OPERANDS = "not_enough_operands"
    UNKNOWN_OPERATOR = "unknown_operator"
    DIVISION_BY_ZERO = "division_by_zero"
    ZERO_BASE = "zero_base"
    NEGATIVE_BASE = "negative_base"


class CalculatorError(Exception):
    """所有计算错误的基类，kind 用于前端分类展示"""
    kind = None
    message = "calculation error"

    def __str__(self):
        return self.message


class EmptyExpressionError(CalculatorError):
    kind = ErrorKind.EMPTY_EXPRESSION
    message = "empty expression"


class UnclosedParenthesesError(CalculatorError):
    kind = ErrorKind.UNCLOSED_PARENTHESES
    message = "unclosed parentheses"


class InvalidTokenError(CalculatorError):
    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self):
        return f"invalid token: {self.token}"


class NotEnoughOperandsError(CalculatorError):
    kind = ErrorKind.NOT_ENOUGH_OPERANDS

    def __init__(self, operator):
        super().__init__(operator)
        self.operator = operator

    def __str__(self):
        return f"not enough operands for {self.operator}"


class UnknownOperatorError(CalculatorError):
    kind = ErrorKind.UNKNOWN_OPERATOR

    def __init__(self, operator):
        super().__init__(operator)
        self.operator = operator

    def __str__(self):
        return f"unknown operator: {self.operator}"


class _OperandsError(CalculatorError):
    """携带两个操作数的数值错误"""
    symbol = "?"

    def __init__(self, num1, num2):
        super().__init__(num1, num2)
        self.num1 = float(num1)
        self.num2 = float(num2)

    def __str__(self):
        return f"{self.message}: {self.num1:f}{self.symbol}{self.num2:f}"


class DivisionByZeroError(_OperandsError):
    kind = ErrorKind.DIVISION_BY_ZERO
    message = "division by zero"
    symbol = "/"


class ZeroBaseError(_OperandsError):
    kind = ErrorKind.ZERO_BASE
    message = "zero to a non-positive exponent"
    symbol = "^"


class NegativeBaseError(_OperandsError):
    kind = ErrorKind.NEGATIVE_BASE
    message = "negative base to a non-integer exponent"
    symbol = "^"
