"""
CalcUtil - real n-th roots and the exactness check applied to them.

Exact kinds (IntegerNumber, RationalNumber) only stay exact after a root when the
floating point root is an integer up to ``decimal_threshold`` decimal digits.
"""

import math


class CalcUtil:
    """Static utility class for root computations"""

    def __init__(self):
        raise RuntimeError("CalcUtil is a static utility class - do not instantiate")

    @staticmethod
    def check_root_degree(nth: int) -> None:
        """
        Validate the degree of a root.

        Raises:
            ValueError: if nth is not a positive integer
        """
        if isinstance(nth, bool) or not isinstance(nth, int) or nth < 1:
            raise ValueError(f"root degree must be a positive integer, got {nth!r}")

    @staticmethod
    def nth_root(x, nth: int) -> float:
        """
        Real-valued nth root of a non-negative number.

        Python ints beyond the float range raise OverflowError on conversion.
        """
        CalcUtil.check_root_degree(nth)
        if x < 0:
            raise ValueError(f"nth_root is defined for non-negative values only, got {x}")
        if nth == 1:
            return float(x)
        if nth == 2:
            return math.sqrt(x)
        return math.pow(x, 1.0 / nth)

    @staticmethod
    def can_be_cast_to_int(number: float, decimal_threshold: int) -> bool:
        """True if number rounded to decimal_threshold digits equals number rounded to 0 digits"""
        return round(number, decimal_threshold) == round(number, 0)

    @staticmethod
    def exact_root(x: int, nth: int, decimal_threshold: int):
        """
        nth root of a non-negative integer, rounded to the nearest int when it is
        integral within decimal_threshold digits.

        Returns:
            Tuple (exact, root) where root is an int if exact, else the float root
        """
        root = CalcUtil.nth_root(x, nth)
        if CalcUtil.can_be_cast_to_int(root, decimal_threshold):
            return True, int(round(root))
        return False, root
