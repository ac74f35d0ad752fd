"""Operator-code dispatch for numbers and matrices, and the error hierarchy."""
import pytest
from mathmodel import (MathError, DimensionMismatchError, DivisionByZeroError, IndexOutOfRangeError,
                       UnknownOperandError, UnknownOperatorError, ComplexNumber, IntegerNumber, Matrix,
                       MatrixOperations, NumberKind, NumberOperations, RationalNumber, RealNumber, Vector)


@pytest.fixture
def ops():
    return NumberOperations.instance()


@pytest.fixture
def matrix_ops():
    return MatrixOperations.instance()


# =============================================================================
# NumberOperations
# =============================================================================


def test_number_operations_is_singleton():
    assert NumberOperations.instance() is NumberOperations()


@pytest.mark.parametrize("operator, expected", [
    ("+", RationalNumber(5, 6)),
    ("-", RationalNumber(1, 6)),
    ("*", RationalNumber(1, 6)),
    ("/", RationalNumber(3, 2)),
])
def test_calculate_binary(ops, half, third, operator, expected):
    assert ops.calculate(operator, half, third) == expected
    assert half == RationalNumber(1, 2)
    assert third == RationalNumber(1, 3)


def test_calculate_unary(ops):
    x = RationalNumber(4, 9)
    assert ops.calculate("neg", x) == RationalNumber(-4, 9)
    assert ops.calculate("sqr", x) == RationalNumber(16, 81)
    assert ops.calculate("sqrt", x) == RationalNumber(2, 3)
    assert ops.calculate("norm2", ComplexNumber(3, 4)) == RealNumber(25.0)
    assert x == RationalNumber(4, 9)


def test_calculate_errors(ops, half):
    with pytest.raises(UnknownOperatorError, match="Unknown Operator: %"):
        ops.calculate("%", half, half)
    with pytest.raises(UnknownOperandError):
        ops.calculate("+", half)
    with pytest.raises(UnknownOperandError):
        ops.calculate("+", "a", half)
    with pytest.raises(DivisionByZeroError):
        ops.calculate("/", half, RationalNumber(0))


def test_value_of(ops):
    assert ops.value_of("3/4") == RationalNumber(3, 4)
    assert isinstance(ops.value_of(2.5, NumberKind.REAL), RealNumber)
    assert isinstance(ops.value_of(RationalNumber(1, 2), NumberKind.REAL), RealNumber)
    assert ops.value_of("1+2i", NumberKind.COMPLEX) == ComplexNumber(1, 2)
    assert ops.number_class(NumberKind.INTEGER) is IntegerNumber
    with pytest.raises(ValueError):
        ops.value_of(RealNumber(0.5), NumberKind.RATIONAL)


def test_sum_takes_least_exact_kind(ops):
    exact = ops.sum([RationalNumber(1, 2), RationalNumber(1, 3), RationalNumber(1, 6)])
    assert isinstance(exact, RationalNumber)
    assert exact == 1
    inexact = ops.sum([RationalNumber(1, 2), RealNumber(0.25)])
    assert isinstance(inexact, RealNumber)
    assert ops.sum([]) == 0


def test_helpers(ops, half, third):
    assert ops.add(half, third) == RationalNumber(5, 6)
    assert ops.divide(half, third) == RationalNumber(3, 2)
    assert ops.root(RationalNumber(8, 27), 3) == RationalNumber(2, 3)
    assert ops.compare(IntegerNumber(2), RationalNumber(5, 2)) == -1
    with pytest.raises(UnknownOperandError):
        ops.compare(ComplexNumber(1), half)


# =============================================================================
# MatrixOperations
# =============================================================================


def test_matrix_operations_is_singleton():
    assert MatrixOperations.instance() is MatrixOperations.instance()


def test_factories(matrix_ops):
    assert matrix_ops.create_identity(2) == Matrix([[1, 0], [0, 1]])
    assert matrix_ops.create_matrix(2, 1) == Matrix([[0], [0]])
    assert matrix_ops.create_matrix_from_data([[1, 2]], rows_in_first_dim=False) == Matrix([[1], [2]])
    assert matrix_ops.create_vector((1, 2)) == Vector([1, 2])
    assert isinstance(matrix_ops.create_identity(1, zero=RealNumber(0.0)).get(0, 0), RealNumber)


def test_matrix_calculate(matrix_ops, matrix_2x2, ones_2):
    assert matrix_ops.calculate("T", matrix_2x2) == Matrix([[1, 3], [2, 4]])
    assert matrix_ops.calculate("+", matrix_2x2, matrix_2x2) == Matrix([[2, 4], [6, 8]])
    assert matrix_ops.calculate("-", matrix_2x2, matrix_2x2) == Matrix(2, 2)
    assert matrix_ops.calculate("*", matrix_2x2, 2) == Matrix([[2, 4], [6, 8]])
    assert matrix_ops.calculate("*", matrix_2x2, ones_2) == Vector([3, 7])
    identity = matrix_ops.create_identity(2)
    assert matrix_ops.calculate("*", matrix_2x2, identity) == matrix_2x2
    assert matrix_2x2 == Matrix([[1, 2], [3, 4]])


def test_matrix_calculate_errors(matrix_ops, matrix_2x2):
    with pytest.raises(UnknownOperatorError):
        matrix_ops.calculate("^", matrix_2x2, matrix_2x2)
    with pytest.raises(UnknownOperandError):
        matrix_ops.calculate("*", matrix_2x2, "x")
    with pytest.raises(UnknownOperandError):
        matrix_ops.calculate("T", "x")
    with pytest.raises(UnknownOperandError):
        matrix_ops.calculate("-", matrix_2x2, 1)
    with pytest.raises(DimensionMismatchError):
        matrix_ops.calculate("+", matrix_2x2, Matrix(1, 1))


def test_negate_and_multiply(matrix_ops, matrix_2x2):
    assert matrix_ops.negate(matrix_2x2) == Matrix([[-1, -2], [-3, -4]])
    assert matrix_ops.multiply_scalar(matrix_2x2, RationalNumber(1, 2)).get(1, 1) == 2
    assert matrix_ops.multiply_matrix(matrix_2x2, matrix_2x2) == Matrix([[7, 10], [15, 22]])
    assert matrix_ops.transpose(matrix_2x2).get(0, 1) == 3
    assert matrix_ops.subtract_matrix(matrix_2x2, Matrix([[1, 1], [1, 1]])) == Matrix([[0, 1], [2, 3]])


# =============================================================================
# Errors
# =============================================================================


@pytest.mark.parametrize("error, builtin", [
    (DivisionByZeroError, ZeroDivisionError),
    (UnknownOperandError, TypeError),
    (UnknownOperatorError, ValueError),
    (DimensionMismatchError, ValueError),
    (IndexOutOfRangeError, IndexError),
])
def test_errors_derive_from_builtins(error, builtin):
    assert issubclass(error, MathError)
    assert issubclass(error, builtin)


def test_error_messages():
    assert str(DivisionByZeroError("1/0")) == "Division By Zero: 1/0"
    assert str(UnknownOperandError()) == "Unknown Operand"
