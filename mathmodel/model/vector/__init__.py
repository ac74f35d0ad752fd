from .vector_interface import VectorInterface
from .vector import Vector

__all__ = [
    'VectorInterface',
    'Vector',
]
