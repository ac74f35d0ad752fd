"""
VectorInterface - contract for dense number sequences.

A vector carries no orientation; operations that need one (e.g. matrix-vector
multiplication) take it as an argument.
"""

from abc import abstractmethod
from typing import List

from ...mutable import Mutable, mutator
from ..number import Number, NumberWrapper


class VectorInterface(Mutable):

    @abstractmethod
    def clone(self) -> 'VectorInterface':
        """Create a deep copy of this vector"""
        pass

    @abstractmethod
    def __call__(self, i: int) -> NumberWrapper:
        """Handle suited to safely manipulate entry i"""
        pass

    @abstractmethod
    def get_size(self) -> int:
        pass

    @abstractmethod
    def get_zero(self) -> Number:
        """Zero of the vector's number kind"""
        pass

    @abstractmethod
    def get(self, i: int) -> Number:
        """Snapshot of entry i"""
        pass

    @abstractmethod
    def to_list(self) -> List[Number]:
        """Snapshots of all entries"""
        pass

    @mutator
    @abstractmethod
    def set(self, i: int, number: Number) -> 'VectorInterface':
        pass

    @mutator
    @abstractmethod
    def append(self, number: Number) -> 'VectorInterface':
        pass

    @mutator
    @abstractmethod
    def remove(self, i: int) -> 'VectorInterface':
        pass

    @mutator
    @abstractmethod
    def multiply_with_scalar(self, number: Number) -> 'VectorInterface':
        pass

    @mutator
    @abstractmethod
    def add_vector(self, vector: 'VectorInterface') -> 'VectorInterface':
        pass

    @abstractmethod
    def dot_product(self, vector: 'VectorInterface') -> Number:
        pass

    @abstractmethod
    def norm_squared(self) -> Number:
        pass

    def __len__(self) -> int:
        return self.get_size()
