import dataclasses
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.errors import EmptyExpressionError, UnclosedParenthesesError, UnknownOperatorError
from core.token_system import (
    E_DIGITS,
    PI_DIGITS,
    PRIORITY,
    Operator,
    Token,
    Tokenizer,
    TokenType,
)


def number(text):
    return Token(TokenType.NUMBER, text)


def op(symbol):
    return Token(TokenType.OPERATOR, symbol)


LPAREN = Token(TokenType.LEFT_PAREN, '(')
RPAREN = Token(TokenType.RIGHT_PAREN, ')')


class TestTokenizer(unittest.TestCase):
    def test_simple_expression(self):
        self.assertEqual(Tokenizer.tokenize("2 + 3"), [number("2"), op("+"), number("3")])

    def test_blanks_do_not_split_numbers(self):
        self.assertEqual(Tokenizer.tokenize("1 2\t3"), [number("123")])

    def test_parentheses_and_operators(self):
        tokens = Tokenizer.tokenize("(1.5*2)^3/4")
        self.assertEqual(tokens, [
            LPAREN, number("1.5"), op("*"), number("2"), RPAREN,
            op("^"), number("3"), op("/"), number("4"),
        ])

    def test_leading_minus_is_sign(self):
        self.assertEqual(Tokenizer.tokenize("-5 + 3"), [number("-5"), op("+"), number("3")])

    def test_minus_after_leading_blank_is_binary(self):
        self.assertEqual(Tokenizer.tokenize(" -2 ^ 2"), [op("-"), number("2"), op("^"), number("2")])

    def test_minus_after_paren_is_sign(self):
        self.assertEqual(Tokenizer.tokenize("( -4)"), [LPAREN, number("-4"), RPAREN])

    def test_minus_after_operator_is_sign(self):
        self.assertEqual(Tokenizer.tokenize("2 * -3"), [number("2"), op("*"), number("-3")])
        self.assertEqual(Tokenizer.tokenize("3 - -2"), [number("3"), op("-"), number("-2")])
        self.assertEqual(Tokenizer.tokenize("0 ^ -1"), [number("0"), op("^"), number("-1")])

    def test_minus_after_number_is_binary(self):
        self.assertEqual(Tokenizer.tokenize("5 - 3"), [number("5"), op("-"), number("3")])
        self.assertEqual(Tokenizer.tokenize("(1)-3"), [LPAREN, number("1"), RPAREN, op("-"), number("3")])

    def test_constants_are_substituted_textually(self):
        self.assertEqual(Tokenizer.tokenize("e"), [number(E_DIGITS)])
        self.assertEqual(Tokenizer.tokenize("p"), [number(PI_DIGITS)])
        self.assertEqual(Tokenizer.tokenize("2*pi"), [number("2"), op("*"), number(PI_DIGITS)])
        self.assertEqual(Tokenizer.tokenize("2e"), [number("2" + E_DIGITS)])
        self.assertEqual(Tokenizer.tokenize("-e"), [number("-" + E_DIGITS)])

    def test_other_characters_go_into_literal(self):
        self.assertEqual(Tokenizer.tokenize("2 + abc"), [number("2"), op("+"), number("abc")])
        self.assertEqual(Tokenizer.tokenize("2\n"), [number("2\n")])

    def test_empty_expression(self):
        for text in ("", "   ", " \t "):
            with self.assertRaises(EmptyExpressionError):
                Tokenizer.tokenize(text)

    def test_unbalanced_parentheses(self):
        for text in ("(2 + 3", "2 + 3)", "((1)"):
            with self.assertRaises(UnclosedParenthesesError):
                Tokenizer.tokenize(text)

    def test_balance_check_counts_only(self):
        # 只检查总数，右括号在前也能通过分词
        self.assertEqual(Tokenizer.tokenize(")("), [RPAREN, LPAREN])


class TestTokenTypes(unittest.TestCase):
    def test_token_is_immutable(self):
        token = number("1")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            token.value = "2"

    def test_priority_table(self):
        self.assertEqual(dict(PRIORITY), {'+': 1, '-': 1, '*': 2, '/': 2, '^': 3})
        with self.assertRaises(TypeError):
            PRIORITY['%'] = 2

    def test_operator_priority(self):
        self.assertEqual(Operator.ADD.priority, Operator.SUB.priority)
        self.assertLess(Operator.SUB.priority, Operator.MUL.priority)
        self.assertEqual(Operator.MUL.priority, Operator.DIV.priority)
        self.assertLess(Operator.DIV.priority, Operator.POW.priority)

    def test_from_symbol(self):
        self.assertIs(Operator.from_symbol('^'), Operator.POW)
        with self.assertRaises(UnknownOperatorError) as ctx:
            Operator.from_symbol('%')
        self.assertEqual(str(ctx.exception), "unknown operator: %")


if __name__ == "__main__":
    unittest.main()
