"""中缀表达式求值器 - 双栈（操作数栈 + 操作符栈）算符优先法"""
import logging

from config.config import EVALUATOR_CONFIG
from core.exceptions import (
    ArithmeticOverflowError,
    MalformedExpressionError,
    MismatchedParenthesesError,
    OperandParseError,
)
from core.operators import apply_operator, get_priority
from core.rational import Rational
from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """评估中缀Token序列的值，边扫描边归约，不构建语法树"""

    @staticmethod
    def parse_operand(text, decimal_scale=None):
        """
        将操作数文本解析为Rational
        含 "/" 时按第一个 "/" 拆分为分子、分母（精确）；
        否则按小数解析并量化到 1/decimal_scale（有损）。
        """
        if decimal_scale is None:
            decimal_scale = EVALUATOR_CONFIG["decimal_scale"]

        if '/' in text:
            left, right = text.split('/', 1)
            try:
                numerator = int(left)
                denominator = int(right)
            except ValueError:
                raise OperandParseError(text) from None
            return Rational(numerator, denominator)

        try:
            value = float(text)
        except ValueError:
            raise OperandParseError(text) from None
        try:
            scaled = round(value * decimal_scale)
        except OverflowError:
            raise ArithmeticOverflowError(f"decimal literal {text} is too large") from None
        return Rational(scaled, decimal_scale)

    @staticmethod
    def _reduce(operands, operators):
        """弹出一个操作符和两个操作数，计算后结果入栈"""
        op = operators.pop()
        if len(operands) < 2:
            raise MalformedExpressionError(f"insufficient operands for {op!r}")
        right = operands.pop()
        left = operands.pop()
        result = apply_operator(left, right, op)
        logger.debug(f"Reduced {left} {op} {right} -> {result}")
        operands.append(result)

    @staticmethod
    def evaluate(token_sequence, strict_parentheses=None, decimal_scale=None):
        """
        评估中缀表达式
        Args:
            token_sequence: tokenize() 产生的Token列表
            strict_parentheses: 结尾残留 "(" 是否报错，默认读取配置
            decimal_scale: 小数量化精度，默认读取配置
        Returns:
            Rational结果
        """
        if strict_parentheses is None:
            strict_parentheses = EVALUATOR_CONFIG["strict_parentheses"]

        operands = []
        operators = []

        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                operands.append(ExpressionEvaluator.parse_operand(token.text, decimal_scale))

            elif token.type == TokenType.OPERATOR:
                op = token.text
                priority = get_priority(op)
                while operators and operators[-1] != '(' and get_priority(operators[-1]) >= priority:
                    ExpressionEvaluator._reduce(operands, operators)
                operators.append(op)

            elif token.type == TokenType.LEFT_PAREN:
                operators.append('(')

            elif token.type == TokenType.RIGHT_PAREN:
                while operators and operators[-1] != '(':
                    ExpressionEvaluator._reduce(operands, operators)
                if not operators:
                    raise MismatchedParenthesesError()
                operators.pop()

        # 输入结束，归约剩余操作符
        while operators:
            if operators[-1] == '(':
                if strict_parentheses:
                    raise MismatchedParenthesesError()
                logger.debug("Discarding unmatched '(' at end of input")
                operators.pop()
                continue
            ExpressionEvaluator._reduce(operands, operators)

        if len(operands) == 0:
            raise MalformedExpressionError("empty expression")
        if len(operands) > 1:
            logger.debug(f"Operand stack after evaluation: {[str(x) for x in operands]}")
            raise MalformedExpressionError(f"{len(operands)} values left, expected 1")

        result = operands[0]
        logger.debug(f"Evaluation result: {result}")
        return result


def evaluate_expression(text, **kwargs):
    """字符串 -> Token -> Rational"""
    tokens = tokenize(text)
    logger.debug(f"Tokens: {tokens}")
    return ExpressionEvaluator.evaluate(tokens, **kwargs)
