from .matrix_interface import MatrixInterface
from .matrix import Matrix
from .matrix_operations import MatrixOperations

__all__ = [
    'MatrixInterface',
    'Matrix',
    'MatrixOperations',
]
