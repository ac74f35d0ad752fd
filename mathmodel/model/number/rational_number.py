"""
RationalNumber - exact rational kind.

A rational value is stored as sign ``s`` in {-1, 0, 1}, numerator ``n >= 0`` and
denominator ``d > 0``. After every operation the triple is canonical: zero is
always (0, 0, 1) and otherwise gcd(n, d) == 1. Reduction happens eagerly after
each add/multiply, so equality can compare the triples directly.

Operations against RealNumber or ComplexNumber operands promote this value to
the operand's kind and return the promoted result; roots that are not integral
(within ``decimal_threshold`` decimal digits) return a RealNumber.
"""

from fractions import Fraction
import logging
from typing import Optional

from ...exceptions import DivisionByZeroError, UnknownOperandError
from ...functions import CalcUtil, Denominator
from ...mutable import mutator
from ...names import DEFAULT_DECIMAL_THRESHOLD
from .number import ComparableNumber, Number, NumberKind, is_integer, sign
from .real_number import RealNumber
from .complex_number import ComplexNumber

LOG = logging.getLogger(__name__)


class RationalNumber(ComparableNumber):
    """
    Exact fraction with separately stored sign.

        >>> str(RationalNumber(7, 2))
        '3 1/2'
        >>> RationalNumber(4, 9).square_root() == RationalNumber(2, 3)
        True
    """

    kind = NumberKind.RATIONAL

    def __init__(self, n, d: Optional[int] = None, s=None, decimal_threshold: Optional[int] = None):
        """
        Supported signatures:
        - RationalNumber(n) - integer value, d = 1
        - RationalNumber(n, d) - sign derived from the signs of n and d
        - RationalNumber(n, d, s) - magnitudes of n and d with explicit sign s
        - RationalNumber(rational) - copy constructor

        Args:
            n: int, IntegerNumber or RationalNumber
            d: denominator, must not be 0
            s: optional sign override, only its sign is used
            decimal_threshold: exactness threshold used by root(), default 8

        Raises:
            DivisionByZeroError: if d == 0
            UnknownOperandError: if n (or d) is not an integer
        """
        if isinstance(n, RationalNumber):
            self._s, self._n, self._d = n._s, n._n, n._d
            self._decimal_threshold = n._decimal_threshold
        else:
            if isinstance(n, Number) and n.kind == NumberKind.INTEGER:
                n = n.value()
            if not is_integer(n):
                raise UnknownOperandError(type(n).__name__)
            if d is None:
                d = 1
            elif not is_integer(d):
                raise UnknownOperandError(type(d).__name__)
            if d == 0:
                raise DivisionByZeroError(f"{n}/0")
            s = sign(n) * sign(d) if s is None else sign(s)
            self._decimal_threshold = DEFAULT_DECIMAL_THRESHOLD
            self._set(s, abs(n), abs(d))
        if decimal_threshold is not None:
            self._decimal_threshold = decimal_threshold

    @classmethod
    def value_of(cls, value, decimal_threshold: Optional[int] = None) -> 'RationalNumber':
        """
        Factory method creating a RationalNumber from various types.

        Accepts RationalNumber, IntegerNumber, int, Fraction, float (approximated
        with Fraction.limit_denominator) and strings "n/d" or "n".
        """
        if isinstance(value, RationalNumber):
            return cls(value, decimal_threshold=decimal_threshold)
        if isinstance(value, Number) and value.kind == NumberKind.INTEGER:
            return cls(value.value(), decimal_threshold=decimal_threshold)
        if is_integer(value):
            return cls(value, decimal_threshold=decimal_threshold)
        if isinstance(value, float):
            value = Fraction(value).limit_denominator()
        elif isinstance(value, str):
            try:
                value = Fraction(value.strip())
            except ZeroDivisionError as e:
                raise DivisionByZeroError(value) from e
            except ValueError as e:
                raise UnknownOperandError(f"invalid fraction format: {value!r}") from e
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator, decimal_threshold=decimal_threshold)
        raise UnknownOperandError(type(value).__name__)

    # Accessors
    @property
    def sign(self) -> int:
        return self._s

    @property
    def numerator(self) -> int:
        """Numerator magnitude (>= 0)"""
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    @property
    def decimal_threshold(self) -> int:
        return self._decimal_threshold

    def clone(self) -> 'RationalNumber':
        return RationalNumber(self)

    def value(self) -> float:
        if not self._s:
            return 0.0
        return self._s * self.absolute_value()

    def absolute_value(self) -> float:
        if not self._s:
            return 0.0
        return self._n / self._d

    def to_fraction(self) -> Fraction:
        return Fraction(self._s * self._n, self._d)

    def zero(self) -> 'RationalNumber':
        return RationalNumber(0, decimal_threshold=self._decimal_threshold)

    def is_zero(self) -> bool:
        return not self._s

    def _value_of(self, value) -> 'RationalNumber':
        return RationalNumber.value_of(value, decimal_threshold=self._decimal_threshold)

    def promote(self, kind: NumberKind):
        self._check_promotion(kind)
        if kind == NumberKind.RATIONAL:
            return self
        if kind == NumberKind.REAL:
            return RealNumber(self.value())
        return ComplexNumber(complex(self.value()))

    # Canonical form
    def _set(self, s: int, n: int, d: int) -> None:
        if not s or not n:
            self._s, self._n, self._d = 0, 0, 1
        else:
            self._s, self._n, self._d = s, n, d
            self._reduce()

    def _reduce(self) -> None:
        if self._s:
            gcd = Denominator.gcd(self._n, self._d)
            if gcd > 1:
                self._n //= gcd
                self._d //= gcd

    # Arithmetic
    @mutator
    def negative(self) -> 'RationalNumber':
        self._s = -self._s
        return self

    @mutator
    def add(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "add").add(number)
        number = number.promote(NumberKind.RATIONAL)
        if not self._s:
            self._s, self._n, self._d = number._s, number._n, number._d
        elif number._s:
            lcm = Denominator.lcm(self._d, number._d)
            summand1 = self._n * (lcm // self._d)
            summand2 = number._n * (lcm // number._d)
            if self._s == number._s:
                self._set(self._s, summand1 + summand2, lcm)
            else:
                n = summand1 - summand2 if self._s == 1 else summand2 - summand1
                self._set(sign(n), abs(n), lcm)
        return self

    @mutator
    def multiply_with(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "multiply_with").multiply_with(number)
        number = number.promote(NumberKind.RATIONAL)
        self._set(self._s * number._s, self._n * number._n, self._d * number._d)
        return self

    @mutator
    def divide_by(self, number):
        number = self._operand(number)
        if number.kind > self.kind:
            return self._promote_for(number, "divide_by").divide_by(number)
        return self.multiply_with(number.promote(NumberKind.RATIONAL).reciprocal_())

    @mutator
    def reciprocal(self) -> 'RationalNumber':
        """
        Swap numerator and denominator.

        Raises:
            DivisionByZeroError: if this value is zero
        """
        if not self._s:
            raise DivisionByZeroError("reciprocal of 0")
        self._n, self._d = self._d, self._n
        return self

    @mutator
    def square(self) -> 'RationalNumber':
        if self._s:
            self._s = 1
            self._n *= self._n
            self._d *= self._d
        return self

    @mutator
    def root(self, nth: int):
        """
        nth root of numerator and denominator.

        Stays rational if both roots are integral within decimal_threshold
        digits, otherwise returns RealNumber(root(n) / root(d)). Even roots of
        negative values return a ComplexNumber.
        """
        CalcUtil.check_root_degree(nth)
        if not self._s:
            return self
        if self._s < 0 and nth % 2 == 0:
            return self._promote_to(NumberKind.COMPLEX, f"root({nth})").root(nth)
        exact_n, n = CalcUtil.exact_root(self._n, nth, self._decimal_threshold)
        exact_d, d = CalcUtil.exact_root(self._d, nth, self._decimal_threshold)
        if exact_n and exact_d:
            self._set(self._s, n, d)
            return self
        LOG.debug("root(%d) of %s is not exact, promoting to REAL", nth, self)
        return RealNumber(self._s * n / d)

    # Comparison
    def _equals_same_kind(self, number: 'RationalNumber') -> bool:
        if not self._s and not number._s:
            return True
        return self._n == number._n and self._d == number._d and self._s == number._s

    def _order_key(self) -> Fraction:
        return self.to_fraction()

    def __float__(self) -> float:
        return self.value()

    def __str__(self) -> str:
        if not self._s:
            return "0"

        whole = self._n // self._d
        mod = self._n % self._d

        result = ""
        if self._s < 0:
            result += "- "
        if whole:
            result += str(whole)
        if whole and mod:
            result += " "
        if mod:
            result += f"{mod}/{self._d}"
        return result

    def __repr__(self) -> str:
        return f"RationalNumber({self._n}, {self._d}, {self._s})"
