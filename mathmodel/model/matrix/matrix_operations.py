"""
MatrixOperations - operator dispatch for matrices.

The MatrixOperations is similar to NumberOperations, but for matrices. All
operations are non-destructive and return new matrices (or vectors).
"""

from typing import List, Optional

from ...exceptions import UnknownOperandError, UnknownOperatorError
from ...names import ADD, SUBTRACT, MULTIPLY, TRANSPOSE
from ..number import Number
from ..number.number import is_integer
from ..vector import Vector, VectorInterface
from .matrix_interface import MatrixInterface
from .matrix import Matrix


class MatrixOperations:
    """
    Singleton providing factory methods and operator dispatch for matrices.
    """

    _instance = None

    def __init__(self):
        """Private constructor - use instance() method"""
        pass

    @classmethod
    def instance(cls) -> 'MatrixOperations':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # Matrix creation methods
    def create_matrix(self, rows: int, cols: int, zero: Optional[Number] = None) -> Matrix:
        """Create zero matrix with given dimensions"""
        return Matrix(rows, cols, zero=zero)

    def create_matrix_from_data(self, values: List[List], rows_in_first_dim: bool = True,
                                zero: Optional[Number] = None) -> Matrix:
        """Create matrix from 2D data array"""
        return Matrix(values, rows_in_dim1=rows_in_first_dim, zero=zero)

    def create_identity(self, size: int, zero: Optional[Number] = None) -> Matrix:
        """Create size x size identity matrix"""
        matrix = Matrix(size, size, zero=zero)
        for i in range(size):
            matrix(i, i).update(lambda value: value.add(1))
        return matrix

    def create_vector(self, values: List, zero: Optional[Number] = None) -> Vector:
        """Create vector from data array"""
        return Vector(list(values), zero=zero)

    # Operator dispatch
    def calculate(self, operator: str, matrix: MatrixInterface, operand=None):
        """
        Evaluate ``matrix <operator> operand``, or ``matrix^T`` for operator 'T'.

        '*' multiplies with a scalar (Number or int), a vector (M * v) or another
        matrix, depending on the operand type.

        Raises:
            UnknownOperatorError: if operator is not recognized
            UnknownOperandError: if the operand type does not fit the operator
        """
        if not isinstance(matrix, MatrixInterface):
            raise UnknownOperandError(type(matrix).__name__)
        if operator == TRANSPOSE:
            return matrix.transpose_()
        if operator == ADD:
            return self.add_matrix(matrix, operand)
        if operator == SUBTRACT:
            return self.subtract_matrix(matrix, operand)
        if operator == MULTIPLY:
            if isinstance(operand, Number) or is_integer(operand):
                return matrix.multiply_with_scalar_(operand)
            if isinstance(operand, VectorInterface):
                return matrix.multiply_with_vector(operand)
            if isinstance(operand, MatrixInterface):
                return matrix.multiply_with_matrix_(operand)
            raise UnknownOperandError(type(operand).__name__)
        raise UnknownOperatorError(str(operator))

    # Basic matrix operations
    def transpose(self, matrix: MatrixInterface) -> MatrixInterface:
        """Return transposed matrix"""
        return matrix.transpose_()

    def negate(self, matrix: MatrixInterface) -> MatrixInterface:
        """Return negated matrix"""
        return matrix.multiply_with_scalar_(-1)

    def add_matrix(self, matrix_a: MatrixInterface, matrix_b: MatrixInterface) -> MatrixInterface:
        """Add two matrices element-wise"""
        return matrix_a.add_matrix_(matrix_b)

    def subtract_matrix(self, matrix_a: MatrixInterface, matrix_b: MatrixInterface) -> MatrixInterface:
        """Subtract matrix_b from matrix_a element-wise"""
        if not isinstance(matrix_b, MatrixInterface):
            raise UnknownOperandError(type(matrix_b).__name__)
        return matrix_a.add_matrix_(self.negate(matrix_b))

    def multiply_scalar(self, matrix: MatrixInterface, value) -> MatrixInterface:
        """Multiply all matrix elements by scalar value"""
        return matrix.multiply_with_scalar_(value)

    def multiply_matrix(self, matrix_a: MatrixInterface, matrix_b: MatrixInterface) -> MatrixInterface:
        """Multiply two matrices (matrix multiplication)"""
        return matrix_a.multiply_with_matrix_(matrix_b)
