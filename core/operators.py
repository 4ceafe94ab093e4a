"""core/operators.py"""
import logging

from core.exceptions import InvalidOperatorError

logger = logging.getLogger(__name__)

# 操作符优先级；未列出的字符优先级为0，永远不会触发出栈
OPERATOR_PRIORITY = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}


class Operators:
    """所有二元操作符的静态方法集合"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return operand1.add(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return operand1.subtract(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return operand1.multiply(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除数为0时抛出DivisionByZeroError"""
        return operand1.divide(operand2)


SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}


def get_priority(op):
    return OPERATOR_PRIORITY.get(op, 0)


def apply_operator(left, right, op):
    """
    将操作符应用到两个操作数上
    Args:
        left: 左操作数（第二个出栈）
        right: 右操作数（第一个出栈）
        op: 操作符字符
    """
    op_method = SYMBOL_TO_METHOD.get(op)
    if op_method is None:
        logger.debug(f"Unknown binary operator: {op!r}")
        raise InvalidOperatorError(op)
    return op_method(left, right)
