"""
NumberOperations - factory and operator dispatch for the number kinds.

Provides operator-code based evaluation (used by expression front ends) on top of
the Number contract. All operations are non-destructive: operands are never
modified.
"""

import logging
from typing import Iterable, Optional, Union

from ...exceptions import UnknownOperandError, UnknownOperatorError
from ...names import ADD, SUBTRACT, MULTIPLY, DIVIDE, NEGATE, SQUARE, SQUARE_ROOT, NORM_SQUARED
from .number import Number, NumberKind
from .integer_number import IntegerNumber
from .rational_number import RationalNumber
from .real_number import RealNumber
from .complex_number import ComplexNumber

LOG = logging.getLogger(__name__)

KIND_CLASSES = {
    NumberKind.INTEGER: IntegerNumber,
    NumberKind.RATIONAL: RationalNumber,
    NumberKind.REAL: RealNumber,
    NumberKind.COMPLEX: ComplexNumber,
}


class NumberOperations:
    """
    Singleton providing factory methods and operator dispatch for Numbers.
    """

    _instance = None

    BINARY_OPERATORS = {
        ADD: "add",
        SUBTRACT: "subtract",
        MULTIPLY: "multiply_with",
        DIVIDE: "divide_by",
    }

    UNARY_OPERATORS = {
        NEGATE: "negative",
        SQUARE: "square",
        SQUARE_ROOT: "square_root",
    }

    def __new__(cls):
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super(NumberOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance"""
        return cls()

    # Factory methods
    def number_class(self, kind: NumberKind) -> type:
        """Return the class implementing the given kind"""
        return KIND_CLASSES[NumberKind(kind)]

    def value_of(self, value, kind: NumberKind = NumberKind.RATIONAL) -> Number:
        """Create a Number of the given kind from a Number, int, float, Fraction, complex or string"""
        if isinstance(value, Number):
            return value.clone().promote(kind)
        return self.number_class(kind).value_of(value)

    # Operator dispatch
    def calculate(self, operator: str, left: Number, right: Optional[Union[Number, int]] = None) -> Number:
        """
        Evaluate ``left <operator> right`` (binary) or ``<operator> left`` (unary).

        Args:
            operator: one of '+', '-', '*', '/', 'neg', 'sqr', 'sqrt', 'norm2'

        Raises:
            UnknownOperatorError: if operator is not recognized
            UnknownOperandError: if an operand is not a Number (or int)
        """
        if not isinstance(left, Number):
            raise UnknownOperandError(type(left).__name__)
        if operator in self.BINARY_OPERATORS:
            if right is None:
                raise UnknownOperandError(f"operator {operator} requires two operands")
            LOG.debug("calculating %s %s %s", left, operator, right)
            return getattr(left, self.BINARY_OPERATORS[operator] + "_")(right)
        if operator in self.UNARY_OPERATORS:
            return getattr(left, self.UNARY_OPERATORS[operator] + "_")()
        if operator == NORM_SQUARED:
            return left.norm_squared()
        raise UnknownOperatorError(str(operator))

    def add(self, num_a: Number, num_b: Number) -> Number:
        return num_a.add_(num_b)

    def subtract(self, num_a: Number, num_b: Number) -> Number:
        return num_a.subtract_(num_b)

    def multiply(self, num_a: Number, num_b: Number) -> Number:
        return num_a.multiply_with_(num_b)

    def divide(self, num_a: Number, num_b: Number) -> Number:
        return num_a.divide_by_(num_b)

    def root(self, number: Number, nth: int) -> Number:
        return number.root_(nth)

    def sum(self, numbers: Iterable[Number], zero: Optional[Number] = None) -> Number:
        """
        Sum of all numbers, starting from ``zero`` (default: IntegerNumber(0)).
        The result takes the least exact kind among the summands.
        """
        result = zero.clone() if zero is not None else IntegerNumber(0)
        for number in numbers:
            result = result.add(number)
        return result

    def compare(self, num_a: Number, num_b: Number) -> int:
        """-1, 0 or 1; both numbers must be comparable"""
        if not hasattr(num_a, "compare_to"):
            raise UnknownOperandError(f"{type(num_a).__name__} is not comparable")
        return num_a.compare_to(num_b)
