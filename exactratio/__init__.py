"""Exact rational numbers on arbitrary-precision integers."""

from .intmath import gcd, lcm
from .rational import Ratio, as_ratio_array, rationalize

__all__ = ["Ratio", "as_ratio_array", "gcd", "lcm", "rationalize"]
