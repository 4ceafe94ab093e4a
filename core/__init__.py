"""核心模块 - 分数类型、Token系统、求值器和操作符"""
from .rational import Rational, gcd
from .token_system import TokenType, Token, tokenize
from .operators import Operators, OPERATOR_PRIORITY, get_priority, apply_operator
from .evaluator import ExpressionEvaluator, evaluate_expression
from .exceptions import (
    CalculatorError, DivisionByZeroError, MismatchedParenthesesError,
    InvalidOperatorError, OperandParseError, MalformedExpressionError,
    ArithmeticOverflowError
)

__all__ = [
    'Rational', 'gcd', 'TokenType', 'Token', 'tokenize',
    'Operators', 'OPERATOR_PRIORITY', 'get_priority', 'apply_operator',
    'ExpressionEvaluator', 'evaluate_expression',
    'CalculatorError', 'DivisionByZeroError', 'MismatchedParenthesesError',
    'InvalidOperatorError', 'OperandParseError', 'MalformedExpressionError',
    'ArithmeticOverflowError'
]
