"""Integer helpers shared by :class:`~exactratio.rational.Ratio`."""
from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Return the non-negative greatest common divisor of *a* and *b*.

    Euclid's algorithm on signed integers. ``gcd(a, 0) == abs(a)`` and
    ``gcd(0, 0) == 0``.
    """
    while b != 0:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Return ``a / gcd(a, b) * b`` using exact integer division.

    The result carries the sign of ``a * b``. ``lcm(0, 0)`` raises
    :class:`ZeroDivisionError`.
    """
    return a // gcd(a, b) * b


__all__ = ["gcd", "lcm"]
