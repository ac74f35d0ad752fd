"""
Number kinds and the arithmetic contract they share.
"""

from .number import Number, ComparableNumber, NumberKind
from .integer_number import IntegerNumber
from .rational_number import RationalNumber
from .real_number import RealNumber
from .complex_number import ComplexNumber
from .number_wrapper import NumberWrapper
from .number_operations import NumberOperations

__all__ = [
    'Number',
    'ComparableNumber',
    'NumberKind',
    'IntegerNumber',
    'RationalNumber',
    'RealNumber',
    'ComplexNumber',
    'NumberWrapper',
    'NumberOperations',
]
