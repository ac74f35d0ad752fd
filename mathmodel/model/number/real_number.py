"""
RealNumber - inexact real kind backed by a Python float.
"""

from fractions import Fraction

from ...exceptions import DivisionByZeroError, UnknownOperandError
from ...functions import CalcUtil
from ...mutable import mutator
from .number import ComparableNumber, Number, NumberKind, is_integer
from .complex_number import ComplexNumber


class RealNumber(ComparableNumber):

    kind = NumberKind.REAL

    def __init__(self, value):
        """
        Args:
            value: int, float, Fraction, or a Number of kind INTEGER, RATIONAL or REAL
        """
        if isinstance(value, Number):
            if value.kind > self.kind:
                raise UnknownOperandError(f"cannot create RealNumber from {type(value).__name__}")
            value = value.value()
        if not (is_integer(value) or isinstance(value, (float, Fraction))):
            raise UnknownOperandError(type(value).__name__)
        self._value = float(value)

    @classmethod
    def value_of(cls, value) -> 'RealNumber':
        if isinstance(value, str):
            try:
                return cls(float(Fraction(value.strip())))
            except (ValueError, ZeroDivisionError) as e:
                raise UnknownOperandError(f"invalid real number: {value!r}") from e
        return cls(value)

    def clone(self) -> 'RealNumber':
        return RealNumber(self._value)

    def value(self) -> float:
        return self._value

    def zero(self) -> 'RealNumber':
        return RealNumber(0.0)

    def is_zero(self) -> bool:
        return self._value == 0.0

    def promote(self, kind: NumberKind):
        self._check_promotion(kind)
        if kind == NumberKind.REAL:
            return self
        return ComplexNumber(complex(self._value))

    @mutator
    def negative(self) -> 'RealNumber':
        self._value = -self._value
        return self

    @mutator
    def add(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "add").add(number)
        self._value += float(number.value())
        return self

    @mutator
    def multiply_with(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "multiply_with").multiply_with(number)
        self._value *= float(number.value())
        return self

    @mutator
    def divide_by(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "divide_by").divide_by(number)
        if number.is_zero():
            raise DivisionByZeroError(f"{self._value} / 0")
        self._value /= float(number.value())
        return self

    @mutator
    def reciprocal(self) -> 'RealNumber':
        if self._value == 0.0:
            raise DivisionByZeroError("reciprocal of 0")
        self._value = 1.0 / self._value
        return self

    @mutator
    def square(self) -> 'RealNumber':
        self._value *= self._value
        return self

    @mutator
    def root(self, nth: int):
        """Real nth root; even roots of negative values return a ComplexNumber"""
        CalcUtil.check_root_degree(nth)
        if self._value < 0:
            if nth % 2 == 0:
                return self._promote_to(NumberKind.COMPLEX, f"root({nth})").root(nth)
            self._value = -CalcUtil.nth_root(-self._value, nth)
        else:
            self._value = CalcUtil.nth_root(self._value, nth)
        return self

    def _equals_same_kind(self, number: 'RealNumber') -> bool:
        return self._value == number._value

    def _order_key(self) -> float:
        return self._value

    def __float__(self) -> float:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"RealNumber({self._value!r})"
