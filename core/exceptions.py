"""
计算器相关的自定义异常
"""


class CalculatorError(Exception):
    """计算器基础异常"""
    pass


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """分母为0或除数为0"""

    def __init__(self, message="Division by zero"):
        super().__init__(message)


class MismatchedParenthesesError(CalculatorError):
    """括号不匹配"""

    def __init__(self, message="Mismatched parentheses"):
        super().__init__(message)


class InvalidOperatorError(CalculatorError):
    """不支持的操作符"""

    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Invalid operator: {operator}")


class OperandParseError(CalculatorError, ValueError):
    """操作数文本无法解析为整数或小数"""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid number: {text}")


class MalformedExpressionError(CalculatorError):
    """表达式结构错误（栈下溢、空表达式、多余操作数）"""

    def __init__(self, detail):
        super().__init__(f"Malformed expression: {detail}")


class ArithmeticOverflowError(CalculatorError, OverflowError):
    """分子或分母超出定长整数范围"""

    def __init__(self, detail):
        super().__init__(f"Arithmetic overflow: {detail}")
