"""core/rational.py"""
import logging
import operator
from functools import lru_cache

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.exceptions import DivisionByZeroError, ArithmeticOverflowError

logger = logging.getLogger(__name__)


def gcd(a, b):
    """欧几里得算法求最大公约数（输入取绝对值）"""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


@lru_cache(maxsize=None)
def integer_bounds(dtype_name):
    """定长整数类型的 (min, max)，每个类型名只计算一次"""
    info = np.iinfo(np.dtype(dtype_name))
    return int(info.min), int(info.max)


def _check_range(value, what):
    """检查值是否落在配置的定长整数范围内"""
    dtype_name = EVALUATOR_CONFIG["integer_dtype"]
    low, high = integer_bounds(dtype_name)
    if value < low or value > high:
        raise ArithmeticOverflowError(
            f"{what} {value} outside {dtype_name} range [{low}, {high}]"
        )


class Rational:
    """
    精确分数，构造后始终为最简形式且分母为正。
    中间乘积使用 Python 大整数，约分后再检查定长范围。
    分子、分母只接受整数（含 numpy 整数），浮点数会抛出 TypeError。
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator, denominator=1):
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise DivisionByZeroError()

        divisor = gcd(numerator, denominator)
        if divisor == 0:
            # 只有分子为0时才会出现
            numerator, denominator = 0, 1
        else:
            numerator //= divisor
            denominator //= divisor

        # 符号统一放在分子上
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if numerator == 0:
            denominator = 1

        _check_range(numerator, "numerator")
        _check_range(denominator, "denominator")

        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    # 算术运算========================================
    def add(self, other):
        """加法"""
        return Rational(self._numerator * other._denominator + other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def subtract(self, other):
        """减法"""
        return Rational(self._numerator * other._denominator - other._numerator * self._denominator,
                        self._denominator * other._denominator)

    def multiply(self, other):
        """乘法"""
        return Rational(self._numerator * other._numerator,
                        self._denominator * other._denominator)

    def divide(self, other):
        """除法，除数分子为0时报错"""
        if other._numerator == 0:
            raise DivisionByZeroError()
        return Rational(self._numerator * other._denominator,
                        self._denominator * other._numerator)

    def to_display_value(self):
        """转换为浮点数，仅用于显示"""
        return self._numerator / self._denominator

    # Python 运算符========================================
    def __add__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return self.divide(other)

    def __float__(self):
        return self.to_display_value()

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return NotImplemented
        return (self._numerator, self._denominator) == (other._numerator, other._denominator)

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __repr__(self):
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"
