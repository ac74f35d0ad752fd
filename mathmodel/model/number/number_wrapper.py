"""
NumberWrapper - handle on exactly one cell of a matrix or vector.

The wrapper never exposes the container's storage: reads return a snapshot and
writes go through the container's own (bounds checked) setter.

    >>> cell = matrix(0, 1)
    >>> cell.update(lambda x: x.add(1))
"""

from typing import Callable

from .number import Number


class NumberWrapper:

    def __init__(self, reader: Callable[[], Number], writer: Callable[[Number], object]):
        """
        Args:
            reader: returns a snapshot of the wrapped cell
            writer: replaces the wrapped cell
        """
        self._reader = reader
        self._writer = writer

    def read(self) -> Number:
        """Snapshot of the wrapped number; modifying it does not touch the cell"""
        return self._reader()

    def write(self, number: Number) -> None:
        """Replace the wrapped number"""
        self._writer(number)

    def update(self, operation: Callable[[Number], Number]) -> Number:
        """
        Read-modify-write: apply ``operation`` to a snapshot and store its result.

        The return value of ``operation`` is stored, so mutating operations that
        promote (e.g. ``lambda x: x.add(RealNumber(0.5))``) are handled.
        """
        result = operation(self.read())
        self.write(result)
        return result

    def __str__(self) -> str:
        return str(self.read())

    def __repr__(self) -> str:
        return f"NumberWrapper({self.read()!r})"
