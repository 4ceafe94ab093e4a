"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    OPERAND = "operand"  # 操作数（小数或分数字面量）
    OPERATOR = "operator"  # 操作符
    LEFT_PAREN = "left_paren"  # (
    RIGHT_PAREN = "right_paren"  # )


class Token:
    def __init__(self, token_type, text):
        self.type = token_type
        self.text = text

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


OPERAND_START_CHARS = frozenset('0123456789.')
OPERAND_CHARS = OPERAND_START_CHARS | {'/'}

PAREN_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
}


def tokenize(text):
    """
    从左到右单次扫描，将表达式切分为Token列表
    Args:
        text: 中缀表达式字符串
    Returns:
        Token列表（完整物化，不是惰性生成器）
    """
    tokens = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch in OPERAND_START_CHARS:
            # 数字、小数点、斜杠的最长连续串作为一个操作数
            start = i
            while i < n and text[i] in OPERAND_CHARS:
                i += 1
            tokens.append(Token(TokenType.OPERAND, text[start:i]))
            continue

        if ch in PAREN_TOKENS:
            tokens.append(Token(PAREN_TOKENS[ch], ch))
        else:
            # 其他单字符一律视为操作符，合法性留给求值阶段判断
            tokens.append(Token(TokenType.OPERATOR, ch))
        i += 1

    return tokens
