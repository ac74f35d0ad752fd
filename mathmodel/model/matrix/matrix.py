"""
Matrix - dense matrix over any number kind.

The matrix is stored as one flat list of Numbers in row-major order. All entries
share one kind, chosen at construction through its zero; the kind is not checked
per cell, keeping it homogeneous is up to the producer of the values.
"""

import functools
import logging
from typing import List, Optional

import numpy as np

from ...exceptions import DimensionMismatchError, IndexOutOfRangeError, UnknownOperandError
from ...mutable import mutator
from ..number import Number, NumberWrapper, RationalNumber
from ..number.number import is_integer
from ..vector import Vector, VectorInterface
from ..vector.vector import infer_zero
from .matrix_interface import MatrixInterface

LOG = logging.getLogger(__name__)


class Matrix(MatrixInterface):
    """
    Dense matrix generic over the Number contract. Arithmetic only goes through
    the Number operations, so no kind is special-cased here.
    """

    def __init__(self, *args, zero: Optional[Number] = None, rows_in_dim1: bool = True):
        """
        Initialize matrix with various input types.

        Supported signatures:
        - Matrix() - empty 0x0 matrix
        - Matrix(rows, cols) - zero matrix
        - Matrix(matrix) - copy constructor
        - Matrix(data, rows_in_dim1=True) - from 2D data of Numbers or raw values

        Args:
            zero: zero of the number kind. Raw values are converted into its
                  kind (floats only into inexact kinds). Defaults to the zero of
                  the first Number in data, RealNumber(0.0) for raw floats, else
                  RationalNumber(0).
            rows_in_dim1: if False, data[i][j] is column i, row j
        """
        if len(args) == 0:
            self._init_zero_matrix(0, 0, zero)
        elif len(args) == 2 and is_integer(args[0]) and is_integer(args[1]):
            self._init_zero_matrix(args[0], args[1], zero)
        elif len(args) == 1 and isinstance(args[0], MatrixInterface):
            self._init_from_matrix(args[0])
        elif len(args) == 1 and isinstance(args[0], (list, tuple)):
            self._init_from_2d_data(args[0], rows_in_dim1, zero)
        else:
            raise ValueError(f"Invalid constructor arguments: {args}")

    def _init_zero_matrix(self, row_count: int, col_count: int, zero: Optional[Number]):
        """Initialize as zero matrix with given dimensions"""
        if row_count < 0:
            raise ValueError(f"negative row count: {row_count}")
        if col_count < 0:
            raise ValueError(f"negative column count: {col_count}")
        self._zero = (zero if zero is not None else RationalNumber(0)).zero()
        self._row_count = row_count
        self._column_count = col_count
        self._values = [self._zero.clone() for _ in range(row_count * col_count)]

    def _init_from_matrix(self, mx: MatrixInterface):
        """Initialize from another matrix (copy constructor)"""
        self._zero = mx.get_zero()
        self._row_count, self._column_count = mx.get_dims()
        self._values = [value for row in mx.get_number_rows() for value in row]

    def _init_from_2d_data(self, data, rows_in_dim1: bool, zero: Optional[Number]):
        """Initialize from 2D data array"""
        lengths = {len(line) for line in data}
        if len(lengths) > 1:
            raise DimensionMismatchError(f"ragged data, found line lengths {sorted(lengths)}")
        if zero is None:
            zero = infer_zero([v for line in data for v in line])
        self._zero = zero.zero()

        outer = len(data)
        inner = lengths.pop() if lengths else 0
        if rows_in_dim1:
            self._row_count, self._column_count = outer, inner
            self._values = [self._convert(data[row][col]) for row in range(outer) for col in range(inner)]
        else:
            self._row_count, self._column_count = inner, outer
            self._values = [self._convert(data[col][row]) for row in range(inner) for col in range(outer)]

    def _convert(self, value) -> Number:
        if isinstance(value, Number):
            return value.clone()
        return self._zero.coerce(value)

    # Index checks, all raise before anything is modified
    def _check_row(self, i: int) -> None:
        if not is_integer(i) or not 0 <= i < self._row_count:
            raise IndexOutOfRangeError(f"row {i} not in [0, {self._row_count})")

    def _check_col(self, j: int) -> None:
        if not is_integer(j) or not 0 <= j < self._column_count:
            raise IndexOutOfRangeError(f"column {j} not in [0, {self._column_count})")

    def _check_vector(self, vector: VectorInterface, size: int, what: str) -> None:
        if not isinstance(vector, VectorInterface):
            raise UnknownOperandError(type(vector).__name__)
        if vector.get_size() != size:
            raise DimensionMismatchError(f"{what} needs a vector of size {size}, got {vector.get_size()}")

    def _index(self, i: int, j: int) -> int:
        return i * self._column_count + j

    # Core interface methods
    def clone(self) -> 'Matrix':
        """Create deep copy of this matrix"""
        return Matrix(self)

    def __call__(self, i: int, j: int) -> NumberWrapper:
        self._check_row(i)
        self._check_col(j)
        return NumberWrapper(functools.partial(self.get, i, j), functools.partial(self.set, i, j))

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def get_zero(self) -> Number:
        return self._zero.clone()

    def get(self, i: int, j: int) -> Number:
        self._check_row(i)
        self._check_col(j)
        return self._values[self._index(i, j)].clone()

    def get_row(self, i: int) -> Vector:
        self._check_row(i)
        start = self._index(i, 0)
        return Vector(self._values[start:start + self._column_count], zero=self._zero)

    def get_col(self, j: int) -> Vector:
        self._check_col(j)
        return Vector(self._values[j::self._column_count], zero=self._zero)

    def get_number_rows(self) -> List[List[Number]]:
        """Get all rows as 2D list of Numbers"""
        return [[self._values[self._index(row, col)].clone() for col in range(self._column_count)]
                for row in range(self._row_count)]

    def to_numpy(self, dtype=None) -> np.ndarray:
        """Projected values as a 2-D numpy array of shape (rows, cols)"""
        values = np.array([value.value() for value in self._values], dtype=dtype)
        return values.reshape(self._row_count, self._column_count)

    # Linear algebra
    @mutator
    def transpose(self) -> 'Matrix':
        rows, cols = self._row_count, self._column_count
        self._values = [self._values[row * cols + col] for col in range(cols) for row in range(rows)]
        self._row_count, self._column_count = cols, rows
        return self

    @mutator
    def multiply_with_scalar(self, number) -> 'Matrix':
        self._values = [value.multiply_with_(number) for value in self._values]
        self._zero = self._zero.multiply_with(number).zero()
        return self

    @mutator
    def add_matrix(self, matrix: MatrixInterface) -> 'Matrix':
        if not isinstance(matrix, MatrixInterface):
            raise UnknownOperandError(type(matrix).__name__)
        if self.get_dims() != matrix.get_dims():
            raise DimensionMismatchError(
                f"Matrix dimensions don't match: {self._row_count}x{self._column_count} vs "
                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        others = [value for row in matrix.get_number_rows() for value in row]
        self._values = [value.add_(other) for value, other in zip(self._values, others)]
        self._zero = self._zero.add(matrix.get_zero()).zero()
        return self

    @mutator
    def multiply_with_matrix(self, matrix: MatrixInterface) -> 'Matrix':
        """Replace this matrix by the product this * matrix"""
        if not isinstance(matrix, MatrixInterface):
            raise UnknownOperandError(type(matrix).__name__)
        if self._column_count != matrix.get_row_count():
            raise DimensionMismatchError(
                f"cannot multiply {self._row_count}x{self._column_count} with "
                f"{matrix.get_row_count()}x{matrix.get_column_count()}")
        columns = [matrix.get_col(col) for col in range(matrix.get_column_count())]
        values = []
        for row in range(self._row_count):
            row_vector = self.get_row(row)
            values.extend(row_vector.dot_product(column) for column in columns)
        self._values = values
        self._column_count = len(columns)
        self._zero = self._zero.multiply_with(matrix.get_zero()).zero()
        return self

    def multiply_with_vector(self, vector: VectorInterface, transposed: bool = False) -> Vector:
        """
        Matrix-vector product.

        Args:
            vector: vector of size cols (or rows if transposed)
            transposed: treat vector as a row multiplying this matrix from the left

        Returns:
            New Vector of size rows (or cols if transposed)
        """
        if transposed:
            self._check_vector(vector, self._row_count, "v * M")
            return Vector([vector.dot_product(self.get_col(col)) for col in range(self._column_count)],
                          zero=self._zero)
        self._check_vector(vector, self._column_count, "M * v")
        return Vector([self.get_row(row).dot_product(vector) for row in range(self._row_count)], zero=self._zero)

    # Write access
    @mutator
    def set(self, i: int, j: int, number) -> 'Matrix':
        self._check_row(i)
        self._check_col(j)
        self._values[self._index(i, j)] = self._convert(number)
        return self

    @mutator
    def set_row(self, i: int, vector: VectorInterface) -> 'Matrix':
        self._check_row(i)
        self._check_vector(vector, self._column_count, "set_row")
        start = self._index(i, 0)
        self._values[start:start + self._column_count] = vector.to_list()
        return self

    @mutator
    def set_col(self, j: int, vector: VectorInterface) -> 'Matrix':
        self._check_col(j)
        self._check_vector(vector, self._row_count, "set_col")
        for row, value in enumerate(vector.to_list()):
            self._values[self._index(row, j)] = value
        return self

    # Structure
    @mutator
    def append_row(self, vector: VectorInterface) -> 'Matrix':
        if not isinstance(vector, VectorInterface):
            raise UnknownOperandError(type(vector).__name__)
        if self._row_count == 0 and self._column_count == 0:
            self._column_count = vector.get_size()
        self._check_vector(vector, self._column_count, "append_row")
        self._values.extend(vector.to_list())
        self._row_count += 1
        return self

    @mutator
    def append_col(self, vector: VectorInterface) -> 'Matrix':
        if not isinstance(vector, VectorInterface):
            raise UnknownOperandError(type(vector).__name__)
        if self._row_count == 0 and self._column_count == 0:
            self._row_count = vector.get_size()
        self._check_vector(vector, self._row_count, "append_col")
        column = vector.to_list()
        values = []
        for row in range(self._row_count):
            start = self._index(row, 0)
            values.extend(self._values[start:start + self._column_count])
            values.append(column[row])
        self._values = values
        self._column_count += 1
        return self

    @mutator
    def remove_rows(self, *indices: int) -> 'Matrix':
        for i in indices:
            self._check_row(i)
        drop = set(indices)
        LOG.debug("removing rows %s from %dx%d matrix", sorted(drop), self._row_count, self._column_count)
        self._values = [
            self._values[self._index(row, col)]
            for row in range(self._row_count) if row not in drop
            for col in range(self._column_count)
        ]
        self._row_count -= len(drop)
        return self

    @mutator
    def remove_cols(self, *indices: int) -> 'Matrix':
        for j in indices:
            self._check_col(j)
        drop = set(indices)
        LOG.debug("removing columns %s from %dx%d matrix", sorted(drop), self._row_count, self._column_count)
        self._values = [
            self._values[self._index(row, col)]
            for row in range(self._row_count)
            for col in range(self._column_count) if col not in drop
        ]
        self._column_count -= len(drop)
        return self

    @mutator
    def trim(self, m: int, n: int) -> 'Matrix':
        if not is_integer(m) or m < 0:
            raise ValueError(f"invalid row count: {m!r}")
        if not is_integer(n) or n < 0:
            raise ValueError(f"invalid column count: {n!r}")
        LOG.debug("trimming %dx%d matrix to %dx%d", self._row_count, self._column_count, m, n)
        self._values = [
            self._values[self._index(row, col)]
            if row < self._row_count and col < self._column_count else self._zero.clone()
            for row in range(m)
            for col in range(n)
        ]
        self._row_count, self._column_count = m, n
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatrixInterface):
            return NotImplemented
        if self.get_dims() != other.get_dims():
            return False
        others = [value for row in other.get_number_rows() for value in row]
        return all(a.equals(b) for a, b in zip(self._values, others))

    __hash__ = None

    # String representation
    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", "", "", "", ", ")

    def __repr__(self) -> str:
        return f"Matrix({self._row_count}x{self._column_count} {self})"

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", "", " ", " ", ",")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str, row_postfix: str, row_separator: str,
                          col_prefix: str, col_postfix: str, col_separator: str) -> str:
        """Internal string formatting method"""
        result = [prefix]

        for row in range(self._row_count):
            if row > 0:
                result.append(row_separator)
            result.append(row_prefix)

            for col in range(self._column_count):
                if col > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(self._values[self._index(row, col)]))
                result.append(col_postfix)

            result.append(row_postfix)

        result.append(postfix)
        return ''.join(result)
