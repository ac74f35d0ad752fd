"""
Numeric primitives used by the number kinds: gcd/lcm and real n-th roots.
"""

from .denominator import Denominator
from .calc_util import CalcUtil

__all__ = [
    'Denominator',
    'CalcUtil',
]
