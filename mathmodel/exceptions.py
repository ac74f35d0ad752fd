"""
Typed failures raised by the number kinds, vectors and matrices.

All errors derive from MathError and additionally from the closest built-in
exception, so callers can catch either ``MathError`` or e.g. ``ZeroDivisionError``.
"""


class MathError(Exception):
    """Base class for mathmodel errors."""

    label = "Math Error"

    def __init__(self, message: str = ""):
        super().__init__(f"{self.label}: {message}" if message else self.label)


class DivisionByZeroError(MathError, ZeroDivisionError):
    """Zero denominator, or reciprocal/division of a zero value."""

    label = "Division By Zero"


class UnknownOperandError(MathError, TypeError):
    """Operand is neither a recognized Number kind nor a plain integer."""

    label = "Unknown Operand"


class UnknownOperatorError(MathError, ValueError):
    """Operator code not recognized by a dispatch layer."""

    label = "Unknown Operator"


class DimensionMismatchError(MathError, ValueError):
    """Matrix/vector shapes incompatible for the requested operation."""

    label = "Dimension Mismatch"


class IndexOutOfRangeError(MathError, IndexError):
    """Row, column or vector index outside the valid bounds."""

    label = "Index Out Of Range"
