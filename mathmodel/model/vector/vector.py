"""
Vector - dense sequence of Numbers of one kind.
"""

import functools
from typing import List, Optional

import numpy as np

from ...exceptions import DimensionMismatchError, IndexOutOfRangeError
from ...mutable import mutator
from ..number import Number, NumberWrapper, RationalNumber, RealNumber
from ..number.number import is_integer
from .vector_interface import VectorInterface


def infer_zero(values) -> Number:
    """Kind of the first Number in values, RealNumber for raw floats, else RationalNumber"""
    zero = next((v for v in values if isinstance(v, Number)), None)
    if zero is not None:
        return zero
    if any(isinstance(v, float) for v in values):
        return RealNumber(0.0)
    return RationalNumber(0)


class Vector(VectorInterface):
    """
    Dense vector. Entries are stored as private copies; get() and iteration
    return snapshots, __call__ returns a NumberWrapper for in-place replacement.
    """

    def __init__(self, *args, zero: Optional[Number] = None):
        """
        Supported signatures:
        - Vector() - empty vector
        - Vector(size) - zero vector
        - Vector(vector) - copy constructor
        - Vector(values) - from a list of Numbers or raw values

        Args:
            zero: zero of the number kind; raw values are converted with its
                  kind (floats only into inexact kinds). Defaults to the zero of
                  the first Number in values, RealNumber(0.0) for raw floats,
                  else RationalNumber(0).
        """
        if len(args) == 0:
            self._init_values([], zero)
        elif len(args) == 1 and is_integer(args[0]):
            if args[0] < 0:
                raise ValueError(f"negative vector size: {args[0]}")
            zero = zero if zero is not None else RationalNumber(0)
            self._zero = zero.zero()
            self._values = [self._zero.clone() for _ in range(args[0])]
        elif len(args) == 1 and isinstance(args[0], VectorInterface):
            self._zero = args[0].get_zero()
            self._values = args[0].to_list()
        elif len(args) == 1 and isinstance(args[0], (list, tuple)):
            self._init_values(args[0], zero)
        else:
            raise ValueError(f"Invalid constructor arguments: {args}")

    def _init_values(self, values, zero: Optional[Number]):
        if zero is None:
            zero = infer_zero(values)
        self._zero = zero.zero()
        self._values = [self._convert(v) for v in values]

    def _convert(self, value) -> Number:
        if isinstance(value, Number):
            return value.clone()
        return self._zero.coerce(value)

    def _check_index(self, i: int) -> None:
        if not is_integer(i) or not 0 <= i < len(self._values):
            raise IndexOutOfRangeError(f"index {i} not in [0, {len(self._values)})")

    def _check_size(self, vector: VectorInterface) -> None:
        if vector.get_size() != self.get_size():
            raise DimensionMismatchError(f"vector sizes don't match: {self.get_size()} vs {vector.get_size()}")

    # Core interface methods
    def clone(self) -> 'Vector':
        return Vector(self)

    def __call__(self, i: int) -> NumberWrapper:
        self._check_index(i)
        return NumberWrapper(functools.partial(self.get, i), functools.partial(self.set, i))

    def get_size(self) -> int:
        return len(self._values)

    def get_zero(self) -> Number:
        return self._zero.clone()

    def get(self, i: int) -> Number:
        self._check_index(i)
        return self._values[i].clone()

    def to_list(self) -> List[Number]:
        return [value.clone() for value in self._values]

    def to_numpy(self, dtype=None) -> np.ndarray:
        """Projected values as a 1-D numpy array"""
        return np.array([value.value() for value in self._values], dtype=dtype)

    def __iter__(self):
        return iter(self.to_list())

    # Write operations
    @mutator
    def set(self, i: int, number) -> 'Vector':
        self._check_index(i)
        self._values[i] = self._convert(number)
        return self

    @mutator
    def append(self, number) -> 'Vector':
        self._values.append(self._convert(number))
        return self

    @mutator
    def remove(self, i: int) -> 'Vector':
        self._check_index(i)
        del self._values[i]
        return self

    @mutator
    def multiply_with_scalar(self, number) -> 'Vector':
        self._values = [value.multiply_with_(number) for value in self._values]
        return self

    @mutator
    def add_vector(self, vector: VectorInterface) -> 'Vector':
        self._check_size(vector)
        self._values = [value.add_(other) for value, other in zip(self._values, vector.to_list())]
        return self

    # Products
    def dot_product(self, vector: VectorInterface) -> Number:
        """Sum of the entry-wise products"""
        self._check_size(vector)
        result = self._zero.clone()
        for value, other in zip(self._values, vector.to_list()):
            result = result.add(value.multiply_with_(other))
        return result

    def norm_squared(self) -> Number:
        """Sum of the entries' norm_squared()"""
        result = self._zero.clone()
        for value in self._values:
            result = result.add(value.norm_squared())
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorInterface):
            return NotImplemented
        if self.get_size() != other.get_size():
            return False
        return all(a.equals(b) for a, b in zip(self._values, other.to_list()))

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._values) + "]"

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"
