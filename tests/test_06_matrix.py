"""Matrix construction, structure changes, products and cell access."""
import logging
import numpy as np
import pytest
from mathmodel import (DimensionMismatchError, IndexOutOfRangeError, UnknownOperandError, ComplexNumber, Matrix,
                       RationalNumber, RealNumber, Vector)


# =============================================================================
# Construction and read access
# =============================================================================


def test_construction(matrix_2x2):
    assert matrix_2x2.get_dims() == (2, 2)
    assert str(matrix_2x2) == "{ [1, 2] [3, 4] }"
    assert matrix_2x2.to_multiline_string() == "{\n [ 1 , 2 ]\n [ 3 , 4 ]\n}\n"
    assert Matrix().get_dims() == (0, 0)
    assert Matrix(2, 3) == Matrix([[0, 0, 0], [0, 0, 0]])
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_columns_in_first_dimension():
    m = Matrix([[1, 2], [3, 4]], rows_in_dim1=False)
    assert m.get(0, 1) == 3
    assert m == Matrix([[1, 3], [2, 4]])


def test_ragged_data_raises():
    with pytest.raises(DimensionMismatchError):
        Matrix([[1, 2], [3]])


def test_raw_floats_make_a_real_matrix():
    m = Matrix([[0.1, 1e-7]])
    assert str(m) == "{ [0.1, 1e-07] }"
    assert isinstance(m.get(0, 1), RealNumber)
    assert not m.get(0, 1).is_zero()
    assert isinstance(Matrix([[1e-7]]).get_zero(), RealNumber)


def test_exact_matrix_rejects_floats(matrix_2x2):
    with pytest.raises(UnknownOperandError):
        Matrix([[1e-7]], zero=RationalNumber(0))
    with pytest.raises(UnknownOperandError):
        matrix_2x2.set(0, 0, 0.5)
    assert matrix_2x2.get(0, 0) == 1


def test_raw_values_take_the_decimal_threshold_of_zero():
    m = Matrix([[2, 3]], zero=RationalNumber(0, decimal_threshold=0))
    assert m.get(0, 1).decimal_threshold == 0
    assert m.get(0, 0).square_root() == RationalNumber(1)
    m.set(0, 0, 5)
    assert m.get(0, 0).decimal_threshold == 0


def test_copy_constructor_is_independent(matrix_2x2):
    copy = Matrix(matrix_2x2)
    copy.set(0, 0, 7)
    assert matrix_2x2.get(0, 0) == 1


@pytest.mark.parametrize("i, j", [(-1, 0), (2, 0), (0, 2), (0, -1)])
def test_index_out_of_range(matrix_2x2, i, j):
    with pytest.raises(IndexOutOfRangeError):
        matrix_2x2.get(i, j)
    with pytest.raises(IndexOutOfRangeError):
        matrix_2x2(i, j)
    with pytest.raises(IndexOutOfRangeError):
        matrix_2x2.set(i, j, 1)


def test_rows_and_columns(matrix_3x2):
    assert matrix_3x2.get_row(1) == Vector([3, 4])
    assert matrix_3x2.get_col(1) == Vector([2, 4, 6])
    assert [[str(x) for x in row] for row in matrix_3x2.get_number_rows()] == [["1", "2"], ["3", "4"], ["5", "6"]]
    with pytest.raises(IndexOutOfRangeError):
        matrix_3x2.get_row(3)


def test_get_returns_snapshot(matrix_2x2):
    matrix_2x2.get(0, 0).add(100)
    matrix_2x2.get_row(0).set(0, 100)
    assert matrix_2x2.get(0, 0) == 1


def test_number_wrapper(matrix_2x2):
    cell = matrix_2x2(0, 1)
    assert cell.read() == 2
    cell.update(lambda x: x.multiply_with(3))
    assert matrix_2x2.get(0, 1) == 6
    cell.write(RationalNumber(9))
    assert matrix_2x2.get(0, 1) == 9


# =============================================================================
# Linear algebra
# =============================================================================


def test_transpose(matrix_2x2):
    assert matrix_2x2.transpose_() == Matrix([[1, 3], [2, 4]])
    assert matrix_2x2.transpose_().transpose() == matrix_2x2
    m = Matrix([[1, 2, 3], [4, 5, 6]]).transpose()
    assert m.get_dims() == (3, 2)
    assert m.get(2, 1) == 6


def test_multiply_with_scalar(matrix_2x2):
    half = matrix_2x2.multiply_with_scalar_(RationalNumber(1, 2))
    assert half == Matrix([["1/2", 1], ["3/2", 2]])


def test_scalar_of_less_exact_kind_promotes():
    m = Matrix([[1, 2]]).multiply_with_scalar(RealNumber(0.5))
    assert isinstance(m.get(0, 1), RealNumber)
    assert isinstance(m.get_zero(), RealNumber)
    m.trim(1, 3)
    assert isinstance(m.get(0, 2), RealNumber)


def test_add_matrix(matrix_2x2):
    assert matrix_2x2.add_matrix_(matrix_2x2) == Matrix([[2, 4], [6, 8]])
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.add_matrix(Matrix(2, 3))
    with pytest.raises(UnknownOperandError):
        matrix_2x2.add_matrix(1)


def test_multiply_with_matrix(matrix_2x2, matrix_3x2):
    assert matrix_2x2.multiply_with_matrix_(Matrix([[5, 6], [7, 8]])) == Matrix([[19, 22], [43, 50]])
    product = matrix_3x2.multiply_with_matrix_(Matrix([[1], [1]]))
    assert product == Matrix([[3], [7], [11]])
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.multiply_with_matrix(matrix_3x2)


def test_multiply_with_vector(matrix_2x2, ones_2):
    assert matrix_2x2.multiply_with_vector(ones_2) == Vector([3, 7])
    assert matrix_2x2.multiply_with_vector(ones_2, transposed=True) == Vector([4, 6])
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.multiply_with_vector(Vector([1, 1, 1]))
    assert matrix_2x2 == Matrix([[1, 2], [3, 4]])


def test_complex_entries():
    m = Matrix([[ComplexNumber(1, 1)]]).multiply_with_scalar(ComplexNumber(0, 1))
    assert m.get(0, 0) == ComplexNumber(-1, 1)


# =============================================================================
# Write access and structure
# =============================================================================


def test_set_row_and_col(matrix_2x2):
    matrix_2x2.set_row(0, Vector([7, 8])).set_col(1, Vector([0, 0]))
    assert matrix_2x2 == Matrix([[7, 0], [3, 0]])
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.set_row(0, Vector([1, 2, 3]))
    with pytest.raises(UnknownOperandError):
        matrix_2x2.set_col(0, [1, 2])


def test_append_then_remove_restores(matrix_2x2):
    assert matrix_2x2.append_row_(Vector([5, 6])).remove_row(2) == matrix_2x2
    assert matrix_2x2.append_col_(Vector([5, 6])).remove_col(2) == matrix_2x2
    extended = matrix_2x2.append_col_(Vector([5, 6]))
    assert extended == Matrix([[1, 2, 5], [3, 4, 6]])
    with pytest.raises(DimensionMismatchError):
        matrix_2x2.append_row(Vector([1]))


def test_append_to_empty_matrix():
    assert Matrix().append_row(Vector([1, 2])).get_dims() == (1, 2)
    assert Matrix().append_col(Vector([1, 2])) == Matrix([[1], [2]])


def test_remove_rows_uses_original_indices(matrix_3x2):
    assert matrix_3x2.remove_rows_(0, 2) == Matrix([[3, 4]])
    assert matrix_3x2.remove_rows_(2, 0) == Matrix([[3, 4]])
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert m.remove_cols(0, 2) == Matrix([[2], [5]])


def test_remove_with_invalid_index_changes_nothing(matrix_3x2):
    with pytest.raises(IndexOutOfRangeError):
        matrix_3x2.remove_rows(0, 5)
    with pytest.raises(IndexOutOfRangeError):
        matrix_3x2.remove_cols(-1)
    assert matrix_3x2.get_dims() == (3, 2)


def test_trim(matrix_2x2):
    assert matrix_2x2.trim_(3, 3) == Matrix([[1, 2, 0], [3, 4, 0], [0, 0, 0]])
    assert matrix_2x2.trim_(1, 1) == Matrix([[1]])
    assert matrix_2x2.trim_(0, 0).get_dims() == (0, 0)
    with pytest.raises(ValueError):
        matrix_2x2.trim(-1, 0)


def test_structure_changes_are_logged(caplog, matrix_3x2):
    with caplog.at_level(logging.DEBUG, logger="mathmodel"):
        matrix_3x2.trim(2, 2)
        matrix_3x2.remove_rows(1)
    assert "trimming 3x2 matrix to 2x2" in caplog.text
    assert "removing rows [1] from 2x2 matrix" in caplog.text


def test_to_numpy(matrix_2x2):
    np.testing.assert_array_equal(matrix_2x2.to_numpy(), np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert Matrix([["1/4", 0]]).to_numpy().shape == (1, 2)
    assert Matrix(0, 3).to_numpy().shape == (0, 3)


def test_matrices_are_unhashable(matrix_2x2):
    with pytest.raises(TypeError):
        hash(matrix_2x2)
