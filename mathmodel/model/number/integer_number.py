"""
IntegerNumber - exact integer kind.

Backed by a Python int, so there is no overflow: values grow as needed. Only the
conversion to a float (promotion to RealNumber, roots) is bounded and raises
OverflowError beyond the float range.
"""

from fractions import Fraction
import logging
from typing import Optional

from ...exceptions import DivisionByZeroError, UnknownOperandError
from ...functions import CalcUtil
from ...mutable import mutator
from ...names import DEFAULT_DECIMAL_THRESHOLD
from .number import ComparableNumber, NumberKind, is_integer
from .rational_number import RationalNumber
from .real_number import RealNumber
from .complex_number import ComplexNumber

LOG = logging.getLogger(__name__)


class IntegerNumber(ComparableNumber):

    kind = NumberKind.INTEGER

    def __init__(self, value, decimal_threshold: Optional[int] = None):
        """
        Args:
            value: int or IntegerNumber (copy)
            decimal_threshold: exactness threshold used by root(), default 8
        """
        if isinstance(value, IntegerNumber):
            self._value = value._value
            self._decimal_threshold = value._decimal_threshold
        elif is_integer(value):
            self._value = value
            self._decimal_threshold = DEFAULT_DECIMAL_THRESHOLD
        else:
            raise UnknownOperandError(type(value).__name__)
        if decimal_threshold is not None:
            self._decimal_threshold = decimal_threshold

    @classmethod
    def value_of(cls, value, decimal_threshold: Optional[int] = None) -> 'IntegerNumber':
        """Create from int, IntegerNumber, or an integral Fraction/float/RationalNumber"""
        if isinstance(value, IntegerNumber) or is_integer(value):
            return cls(value, decimal_threshold)
        if isinstance(value, RationalNumber):
            value = value.to_fraction()
        if isinstance(value, Fraction) and value.denominator == 1:
            return cls(value.numerator, decimal_threshold)
        if isinstance(value, float) and value.is_integer():
            return cls(int(value), decimal_threshold)
        raise UnknownOperandError(f"{value!r} is not an integer")

    @property
    def decimal_threshold(self) -> int:
        return self._decimal_threshold

    def clone(self) -> 'IntegerNumber':
        return IntegerNumber(self)

    def value(self) -> int:
        return self._value

    def zero(self) -> 'IntegerNumber':
        return IntegerNumber(0, self._decimal_threshold)

    def is_zero(self) -> bool:
        return self._value == 0

    def _value_of(self, value) -> 'IntegerNumber':
        return IntegerNumber.value_of(value, self._decimal_threshold)

    def promote(self, kind: NumberKind):
        self._check_promotion(kind)
        if kind == NumberKind.INTEGER:
            return self
        if kind == NumberKind.RATIONAL:
            return RationalNumber(self._value, decimal_threshold=self._decimal_threshold)
        if kind == NumberKind.REAL:
            return RealNumber(float(self._value))
        return ComplexNumber(complex(self._value))

    @mutator
    def negative(self) -> 'IntegerNumber':
        self._value = -self._value
        return self

    @mutator
    def add(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "add").add(number)
        self._value += number._value
        return self

    @mutator
    def multiply_with(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "multiply_with").multiply_with(number)
        self._value *= number._value
        return self

    @mutator
    def divide_by(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "divide_by").divide_by(number)
        if number._value == 0:
            raise DivisionByZeroError(f"{self._value} / 0")
        if self._value % number._value:
            return self._promote_to(NumberKind.RATIONAL, "divide_by").divide_by(number)
        self._value //= number._value
        return self

    @mutator
    def square(self) -> 'IntegerNumber':
        self._value *= self._value
        return self

    @mutator
    def root(self, nth: int):
        CalcUtil.check_root_degree(nth)
        if self._value < 0 and nth % 2 == 0:
            return self._promote_to(NumberKind.COMPLEX, f"root({nth})").root(nth)
        exact, root = CalcUtil.exact_root(abs(self._value), nth, self._decimal_threshold)
        if self._value < 0:
            root = -root
        if exact:
            self._value = root
            return self
        LOG.debug("root(%d) of %s is not exact, promoting to REAL", nth, self)
        return RealNumber(root)

    def _equals_same_kind(self, number: 'IntegerNumber') -> bool:
        return self._value == number._value

    def _order_key(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"IntegerNumber({self._value})"
