"""
Number contract - the arithmetic interface shared by all number kinds.

The family of kinds is closed and ordered by exactness:

    INTEGER < RATIONAL < REAL < COMPLEX

Binary operations dispatch on the ``kind`` tag of the operand. An operand of a
less exact kind promotes the receiver to that kind first (the promoted value is
returned, the receiver is left untouched); an operand of a more exact kind is
lifted into the receiver's kind. Values are never demoted.

Mutating operations return their result, which is the receiver unless a
promotion happened. Always continue with the returned value:

    >>> x = x.add(y)
"""

from abc import abstractmethod
from enum import IntEnum
import logging

from ...exceptions import UnknownOperandError
from ...mutable import Mutable, mutator

LOG = logging.getLogger(__name__)


class NumberKind(IntEnum):
    """Tags of the number kinds, ordered from most to least exact"""
    INTEGER = 1
    RATIONAL = 2
    REAL = 3
    COMPLEX = 4


def is_integer(value) -> bool:
    """True for plain Python ints (bool excluded)"""
    return isinstance(value, int) and not isinstance(value, bool)


def sign(value) -> int:
    """Return -1, 0 or 1"""
    return (value > 0) - (value < 0)


class Number(Mutable):
    """
    Abstract number. Concrete kinds set ``kind`` and implement the arithmetic.
    """

    kind: NumberKind = None

    # Conversion
    @abstractmethod
    def value(self):
        """Native numeric projection (int, float or complex)"""
        pass

    @abstractmethod
    def promote(self, kind: NumberKind) -> 'Number':
        """
        Return this value converted to the given kind.

        Returns self when kind equals this kind.

        Raises:
            ValueError: if kind is more exact than this kind
        """
        pass

    @abstractmethod
    def zero(self) -> 'Number':
        """Zero of the same kind (and configuration)"""
        pass

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    def coerce(self, value) -> 'Number':
        """
        Convert a raw value into a Number of this kind and configuration.

        Used by containers for cell values. Floats are inexact and are only
        accepted by the inexact kinds.

        Raises:
            UnknownOperandError: for a float coerced into INTEGER or RATIONAL
        """
        if isinstance(value, float) and self.kind <= NumberKind.RATIONAL:
            raise UnknownOperandError(f"inexact value {value!r} cannot be stored as {self.kind.name}")
        return self._value_of(value)

    def _value_of(self, value) -> 'Number':
        return type(self).value_of(value)

    # Arithmetic
    @mutator
    @abstractmethod
    def negative(self) -> 'Number':
        pass

    @mutator
    @abstractmethod
    def add(self, number) -> 'Number':
        pass

    @mutator
    def subtract(self, number) -> 'Number':
        return self.add(self._operand(number).negative_())

    @mutator
    @abstractmethod
    def multiply_with(self, number) -> 'Number':
        pass

    @mutator
    @abstractmethod
    def divide_by(self, number) -> 'Number':
        pass

    @mutator
    @abstractmethod
    def square(self) -> 'Number':
        pass

    @mutator
    def square_root(self) -> 'Number':
        return self.root(2)

    @mutator
    @abstractmethod
    def root(self, nth: int) -> 'Number':
        pass

    def norm_squared(self) -> 'Number':
        """Squared absolute value; never modifies this value"""
        return self.square_()

    # Equality
    def equals(self, number) -> bool:
        """
        Equality against another Number or a plain int.

        Same kinds compare their canonical representation, exact kinds are
        lifted to the more exact one of both, everything else compares the
        projected values.

        Raises:
            UnknownOperandError: for anything that is neither a Number nor an int
        """
        number = self._operand(number)
        if number.kind == self.kind:
            return self._equals_same_kind(number)
        if max(self.kind, number.kind) <= NumberKind.RATIONAL:
            kind = max(self.kind, number.kind)
            return self.promote(kind)._equals_same_kind(number.promote(kind))
        return self.value() == number.value()

    @abstractmethod
    def _equals_same_kind(self, number: 'Number') -> bool:
        pass

    # Helpers for the concrete kinds
    def _operand(self, number) -> 'Number':
        """Validate an operand, wrapping plain ints into IntegerNumber"""
        if isinstance(number, Number):
            return number
        if is_integer(number):
            from .integer_number import IntegerNumber
            return IntegerNumber(number)
        raise UnknownOperandError(type(number).__name__)

    def _promote_for(self, number: 'Number', operation: str) -> 'Number':
        LOG.debug("promoting %s to %s for %s with %s", type(self).__name__, number.kind.name, operation,
                  type(number).__name__)
        return self.promote(number.kind)

    def _promote_to(self, kind: NumberKind, operation: str) -> 'Number':
        LOG.debug("promoting %s to %s for %s", type(self).__name__, kind.name, operation)
        return self.promote(kind)

    def _check_promotion(self, kind: NumberKind) -> None:
        if kind < self.kind:
            raise ValueError(f"cannot demote {self.kind.name} to {kind.name}")

    # Python operator overloading for convenience, all non-mutating
    def __add__(self, other):
        return self.add_(other)

    def __radd__(self, other):
        return self.add_(other)

    def __sub__(self, other):
        return self.subtract_(other)

    def __rsub__(self, other):
        return self.negative_().add(other)

    def __mul__(self, other):
        return self.multiply_with_(other)

    def __rmul__(self, other):
        return self.multiply_with_(other)

    def __truediv__(self, other):
        return self.divide_by_(other)

    def __neg__(self):
        return self.negative_()

    def __eq__(self, other):
        if not isinstance(other, Number) and not is_integer(other):
            return NotImplemented
        return self.equals(other)

    __hash__ = None


class ComparableNumber(Number):
    """Number kinds with a total order (Integer, Rational, Real)"""

    @abstractmethod
    def _order_key(self):
        """Exact Python value used for ordering"""
        pass

    def compare_to(self, number) -> int:
        """
        Compare to another comparable number: -1 if less, 0 if equal, 1 if greater

        Raises:
            UnknownOperandError: if number has no order (e.g. ComplexNumber)
        """
        number = self._operand(number)
        if not isinstance(number, ComparableNumber):
            raise UnknownOperandError(f"{type(number).__name__} is not comparable")
        return sign(self._order_key() - number._order_key())

    def __lt__(self, other):
        return self.compare_to(other) < 0

    def __le__(self, other):
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        return self.compare_to(other) > 0

    def __ge__(self, other):
        return self.compare_to(other) >= 0
