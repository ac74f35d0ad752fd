"""
MatrixInterface - contract for dense matrices over any number kind.

Every mutating method modifies the matrix in place and returns it, so calls can
be chained. Its ``_`` counterpart (e.g. ``transpose_()``) works on a clone and
leaves the receiver untouched.
"""

from abc import abstractmethod
from typing import List, Tuple

from ...mutable import Mutable, mutator
from ..number import Number, NumberWrapper
from ..vector import VectorInterface


class MatrixInterface(Mutable):

    @abstractmethod
    def clone(self) -> 'MatrixInterface':
        """Create a deep copy of this matrix"""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass

    @abstractmethod
    def __call__(self, i: int, j: int) -> NumberWrapper:
        """
        Will return the NumberWrapper, suitable to safely manipulate the matrix entry.
        Call read() on it to receive the actual Number.
        """
        pass

    # Dimensions
    @abstractmethod
    def get_row_count(self) -> int:
        pass

    @abstractmethod
    def get_column_count(self) -> int:
        pass

    def get_dims(self) -> Tuple[int, int]:
        """(rows, cols)"""
        return self.get_row_count(), self.get_column_count()

    @abstractmethod
    def get_zero(self) -> Number:
        """Zero of the matrix's number kind"""
        pass

    # Read access
    @abstractmethod
    def get(self, i: int, j: int) -> Number:
        """
        Will return a snapshot of the actual Number, __call__() will return the
        NumberWrapper suited to safely manipulate the matrix entry
        """
        pass

    @abstractmethod
    def get_row(self, i: int) -> VectorInterface:
        pass

    @abstractmethod
    def get_col(self, j: int) -> VectorInterface:
        pass

    @abstractmethod
    def get_number_rows(self) -> List[List[Number]]:
        """Snapshots of all entries as a 2D list"""
        pass

    # Linear algebra
    @mutator
    @abstractmethod
    def transpose(self) -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def multiply_with_scalar(self, number: Number) -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def add_matrix(self, matrix: 'MatrixInterface') -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def multiply_with_matrix(self, matrix: 'MatrixInterface') -> 'MatrixInterface':
        pass

    @abstractmethod
    def multiply_with_vector(self, vector: VectorInterface, transposed: bool = False) -> VectorInterface:
        """
        Matrix-vector product M * v, or v * M (vector as row) if transposed.
        """
        pass

    # Write access
    @mutator
    @abstractmethod
    def set(self, i: int, j: int, number: Number) -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def set_row(self, i: int, vector: VectorInterface) -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def set_col(self, j: int, vector: VectorInterface) -> 'MatrixInterface':
        pass

    # Structure
    @mutator
    @abstractmethod
    def append_row(self, vector: VectorInterface) -> 'MatrixInterface':
        pass

    @mutator
    @abstractmethod
    def append_col(self, vector: VectorInterface) -> 'MatrixInterface':
        pass

    @mutator
    def remove_row(self, i: int) -> 'MatrixInterface':
        return self.remove_rows(i)

    @mutator
    def remove_col(self, j: int) -> 'MatrixInterface':
        return self.remove_cols(j)

    @mutator
    @abstractmethod
    def remove_rows(self, *indices: int) -> 'MatrixInterface':
        """Remove all given rows; indices refer to the matrix before removal"""
        pass

    @mutator
    @abstractmethod
    def remove_cols(self, *indices: int) -> 'MatrixInterface':
        """Remove all given columns; indices refer to the matrix before removal"""
        pass

    @mutator
    @abstractmethod
    def trim(self, m: int, n: int) -> 'MatrixInterface':
        """Truncate or zero-pad to exactly m rows and n columns"""
        pass
