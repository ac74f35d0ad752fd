"""
Denominator - gcd/lcm helpers used to keep rational values in canonical form.
"""

import math


class Denominator:
    """
    Static utility class for common divisor/multiple computations on integers.

    Follows the usual number-theoretic convention gcd(0, n) = |n| and
    lcm(0, n) = 0.
    """

    def __init__(self):
        raise RuntimeError("Denominator is a static utility class - do not instantiate")

    @staticmethod
    def gcd(a: int, b: int) -> int:
        """Greatest common divisor, always non-negative"""
        return math.gcd(a, b)

    @staticmethod
    def lcm(a: int, b: int) -> int:
        """Least common multiple, always non-negative"""
        if a == 0 or b == 0:
            return 0
        return abs(a * b) // math.gcd(a, b)
