import pytest
from mathmodel import Matrix, RationalNumber, Vector


@pytest.fixture
def half() -> RationalNumber:
    """Provide the rational value 1/2."""
    return RationalNumber(1, 2)


@pytest.fixture
def third() -> RationalNumber:
    """Provide the rational value 1/3."""
    return RationalNumber(1, 3)


@pytest.fixture
def matrix_2x2() -> Matrix:
    """Provide the rational matrix [[1, 2], [3, 4]]."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def matrix_3x2() -> Matrix:
    """Provide the rational matrix [[1, 2], [3, 4], [5, 6]]."""
    return Matrix([[1, 2], [3, 4], [5, 6]])


@pytest.fixture
def ones_2() -> Vector:
    """Provide the rational vector [1, 1]."""
    return Vector([1, 1])
