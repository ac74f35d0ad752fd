"""
ComplexNumber - inexact complex kind backed by a Python complex.

The least exact kind: every operand is lifted into it, nothing promotes it
further, and a vanishing imaginary part does not turn it back into a RealNumber.
Complex numbers have no order, so this kind is not comparable.
"""

import cmath
from fractions import Fraction

from ...exceptions import DivisionByZeroError, UnknownOperandError
from ...functions import CalcUtil
from ...mutable import mutator
from .number import Number, NumberKind, is_integer


class ComplexNumber(Number):

    kind = NumberKind.COMPLEX

    def __init__(self, real, imag=0.0):
        """
        Args:
            real: complex, float, int, Fraction or any Number (copy/projection)
            imag: imaginary part added to real
        """
        if isinstance(real, Number):
            real = real.value()
        for part in (real, imag):
            if not (is_integer(part) or isinstance(part, (float, complex, Fraction))):
                raise UnknownOperandError(type(part).__name__)
        self._value = complex(real) + complex(imag) * 1j

    @classmethod
    def value_of(cls, value) -> 'ComplexNumber':
        if isinstance(value, str):
            try:
                return cls(complex(value.replace(" ", "").replace("i", "j")))
            except ValueError as e:
                raise UnknownOperandError(f"invalid complex number: {value!r}") from e
        return cls(value)

    @property
    def real(self) -> float:
        return self._value.real

    @property
    def imag(self) -> float:
        return self._value.imag

    def clone(self) -> 'ComplexNumber':
        return ComplexNumber(self._value)

    def value(self) -> complex:
        return self._value

    def zero(self) -> 'ComplexNumber':
        return ComplexNumber(0j)

    def is_zero(self) -> bool:
        return self._value == 0

    def promote(self, kind: NumberKind) -> 'ComplexNumber':
        self._check_promotion(kind)
        return self

    @mutator
    def negative(self) -> 'ComplexNumber':
        self._value = -self._value
        return self

    @mutator
    def add(self, number) -> 'ComplexNumber':
        self._value += complex(self._operand(number).value())
        return self

    @mutator
    def multiply_with(self, number) -> 'ComplexNumber':
        self._value *= complex(self._operand(number).value())
        return self

    @mutator
    def divide_by(self, number) -> 'ComplexNumber':
        number = self._operand(number)
        if number.is_zero():
            raise DivisionByZeroError(f"{self} / 0")
        self._value /= complex(number.value())
        return self

    @mutator
    def reciprocal(self) -> 'ComplexNumber':
        if self.is_zero():
            raise DivisionByZeroError("reciprocal of 0")
        self._value = 1 / self._value
        return self

    @mutator
    def square(self) -> 'ComplexNumber':
        self._value *= self._value
        return self

    @mutator
    def root(self, nth: int) -> 'ComplexNumber':
        """Principal nth root"""
        CalcUtil.check_root_degree(nth)
        if self._value != 0:
            if nth == 2:
                self._value = cmath.sqrt(self._value)
            else:
                self._value = cmath.exp(cmath.log(self._value) / nth)
        return self

    def norm_squared(self):
        """Squared modulus re^2 + im^2 as RealNumber"""
        from .real_number import RealNumber
        return RealNumber(self._value.real ** 2 + self._value.imag ** 2)

    def _equals_same_kind(self, number: 'ComplexNumber') -> bool:
        return self._value == number._value

    def __complex__(self) -> complex:
        return self._value

    def __str__(self) -> str:
        imag = self._value.imag
        op = "-" if imag < 0 else "+"
        return f"{self._value.real} {op} {abs(imag)}i"

    def __repr__(self) -> str:
        return f"ComplexNumber({self._value!r})"
