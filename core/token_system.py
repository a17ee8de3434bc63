"""core/token_system.py"""
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

import numpy as np

from core.errors import EmptyExpressionError, UnclosedParenthesesError, UnknownOperatorError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量（保留原文，求值时再解析）
    OPERATOR = "operator"  # 二元操作符
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str

    def __str__(self):
        return self.value


# 优先级表（只读，进程内共享）
PRIORITY = MappingProxyType({
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
})


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'

    @property
    def priority(self):
        return PRIORITY[self.value]

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None

    def __str__(self):
        return self.value


# 常数按十进制展开直接拼进字面量
E_DIGITS = repr(float(np.e))
PI_DIGITS = repr(float(np.pi))

BLANK_CHARS = " \t"

# 单字符Token定义
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, '+'),
    '*': Token(TokenType.OPERATOR, '*'),
    '/': Token(TokenType.OPERATOR, '/'),
    '^': Token(TokenType.OPERATOR, '^'),
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),
}
MINUS_TOKEN = Token(TokenType.OPERATOR, '-')


class Tokenizer:

    @staticmethod
    def tokenize(expression, blank_chars=BLANK_CHARS):
        """
        将表达式文本切分为Token序列
        Args:
            expression: 原始表达式文本
            blank_chars: 跳过的空白字符（不会打断正在累积的数字）
        Returns:
            校验通过的Token列表
        """
        tokens = []
        literal = []
        prev = None  # 上一个非空白字符

        def flush():
            if literal:
                tokens.append(Token(TokenType.NUMBER, ''.join(literal)))
                literal.clear()

        i = 0
        n = len(expression)
        while i < n:
            ch = expression[i]

            if ch in blank_chars:
                i += 1
                continue

            if ch in TOKEN_DEFINITIONS:
                flush()
                tokens.append(TOKEN_DEFINITIONS[ch])
            elif ch == '-':
                flush()
                # 首字符、左括号或操作符之后的减号是数字的符号
                # 首字符按原始位置判断，前导空白之后的减号是二元减号
                if i == 0 or prev == '(' or prev in PRIORITY:
                    literal.append(ch)
                else:
                    tokens.append(MINUS_TOKEN)
            elif ch == 'e':
                literal.append(E_DIGITS)
            elif ch == 'p':
                literal.append(PI_DIGITS)
                if i + 1 < n and expression[i + 1] == 'i':
                    i += 1
            else:
                literal.append(ch)

            prev = ch
            i += 1

        flush()

        Tokenizer.verify_tokens(tokens)
        logger.debug(f"Tokenized {len(tokens)} tokens: {' '.join(str(t) for t in tokens)[:80]}")
        return tokens

    @staticmethod
    def verify_tokens(tokens):
        """只检查非空和括号总数平衡（不检查前缀中右括号先出现的情况）"""
        if not tokens:
            raise EmptyExpressionError()

        open_brackets = 0
        for token in tokens:
            if token.type == TokenType.LEFT_PAREN:
                open_brackets += 1
            elif token.type == TokenType.RIGHT_PAREN:
                open_brackets -= 1

        if open_brackets != 0:
            raise UnclosedParenthesesError()


def tokenize(expression):
    return Tokenizer.tokenize(expression)
