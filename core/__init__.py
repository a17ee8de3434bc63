"""核心模块 - Token系统、中缀求值器和操作符"""
from .errors import (
    ErrorKind, CalculatorError, EmptyExpressionError, UnclosedParenthesesError,
    InvalidTokenError, NotEnoughOperandsError, UnknownOperatorError,
    DivisionByZeroError, ZeroBaseError, NegativeBaseError
)
from .token_system import (
    TokenType, Token, Operator, PRIORITY, TOKEN_DEFINITIONS, Tokenizer, tokenize
)
from .operators import Operators
from .infix_evaluator import InfixEvaluator, evaluate
from .calculator import Calculator, calc

__all__ = [
    'ErrorKind', 'CalculatorError', 'EmptyExpressionError', 'UnclosedParenthesesError',
    'InvalidTokenError', 'NotEnoughOperandsError', 'UnknownOperatorError',
    'DivisionByZeroError', 'ZeroBaseError', 'NegativeBaseError',
    'TokenType', 'Token', 'Operator', 'PRIORITY', 'TOKEN_DEFINITIONS', 'Tokenizer', 'tokenize',
    'Operators', 'InfixEvaluator', 'evaluate', 'Calculator', 'calc'
]
