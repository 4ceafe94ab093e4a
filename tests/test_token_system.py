import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.token_system import Token, TokenType, tokenize


def kinds(tokens):
    return [(t.type, t.text) for t in tokens]


class TestTokenize(unittest.TestCase):
    def test_full_expression(self):
        tokens = tokenize("(3/4 + 1/2) * 2")
        self.assertEqual(kinds(tokens), [
            (TokenType.LEFT_PAREN, "("),
            (TokenType.OPERAND, "3/4"),
            (TokenType.OPERATOR, "+"),
            (TokenType.OPERAND, "1/2"),
            (TokenType.RIGHT_PAREN, ")"),
            (TokenType.OPERATOR, "*"),
            (TokenType.OPERAND, "2"),
        ])

    def test_fraction_literal_is_one_token(self):
        self.assertEqual(kinds(tokenize("1/0")), [(TokenType.OPERAND, "1/0")])

    def test_spaced_slash_is_operator(self):
        self.assertEqual(kinds(tokenize("1 / 0")), [
            (TokenType.OPERAND, "1"),
            (TokenType.OPERATOR, "/"),
            (TokenType.OPERAND, "0"),
        ])

    def test_trailing_slash_kept_in_operand(self):
        self.assertEqual(kinds(tokenize("5/(")), [
            (TokenType.OPERAND, "5/"),
            (TokenType.LEFT_PAREN, "("),
        ])

    def test_decimals(self):
        self.assertEqual(kinds(tokenize("3.5-.25")), [
            (TokenType.OPERAND, "3.5"),
            (TokenType.OPERATOR, "-"),
            (TokenType.OPERAND, ".25"),
        ])

    def test_malformed_operand_kept_verbatim(self):
        self.assertEqual(kinds(tokenize("1.2.3/4/5")), [(TokenType.OPERAND, "1.2.3/4/5")])

    def test_unknown_symbol_is_operator(self):
        self.assertEqual(kinds(tokenize("2 % 3")), [
            (TokenType.OPERAND, "2"),
            (TokenType.OPERATOR, "%"),
            (TokenType.OPERAND, "3"),
        ])

    def test_whitespace_only(self):
        self.assertEqual(tokenize(" \t "), [])
        self.assertEqual(tokenize(""), [])

    def test_returns_list(self):
        self.assertIsInstance(tokenize("1+1"), list)

    def test_token_equality(self):
        self.assertEqual(Token(TokenType.OPERATOR, "+"), Token(TokenType.OPERATOR, "+"))
        self.assertNotEqual(Token(TokenType.OPERATOR, "+"), Token(TokenType.OPERAND, "+"))


if __name__ == "__main__":
    unittest.main()
