"""Exact rational numbers with NumPy interoperability."""
from __future__ import annotations

import functools
import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Union

import numpy as np

from .binary64 import MIN_EXPONENT, decompose
from .intmath import gcd, lcm

logger = logging.getLogger(__name__)

NumberLike = Union["Ratio", Fraction, numbers.Real]


def _ensure_int(value: numbers.Real, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _to_double(value: int) -> float:
    """Return the double nearest to *value*, saturating to infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class Ratio:
    """A numerator/denominator pair of arbitrary-precision integers.

    Nothing is normalised on construction: the pair is kept exactly as given,
    may share common factors and may carry the sign on the denominator. A
    zero denominator is allowed and reported by :meth:`is_infinite`. Call
    :meth:`reduced` to obtain a coprime pair.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 1, denominator: int = 1) -> None:
        self._numerator = numerator
        self._denominator = denominator

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def of(cls, a: numbers.Integral, b: numbers.Integral) -> "Ratio":
        """Build ``a/b`` from any integral values, widened to ``int``."""
        return cls(_ensure_int(a, name="a"), _ensure_int(b, name="b"))

    @classmethod
    def from_float(cls, value: float, *, strict: bool = False) -> "Ratio":
        """Return the ratio exactly equal to the binary64 value *value*.

        The significand is rebuilt as ``1 + sum(2**-i)`` over its set bits and
        scaled by the unbiased exponent. Zero, subnormals, infinities and NaN
        are decoded as if they were normal numbers, which is wrong for all of
        them; a warning is logged when that happens. Pass ``strict=True`` to
        decode zero and subnormals exactly and reject non-finite values with
        :class:`ValueError`.
        """
        parts = decompose(float(value))

        if parts.is_special_pattern:
            if strict:
                raise ValueError(f"cannot convert {value!r} to Ratio")
            logger.warning("decoding non-finite value %r as a finite number", value)

        ratio = cls()
        exponent = parts.exponent
        if parts.is_denormal_pattern:
            if strict:
                ratio = cls(0, 1)
                exponent = MIN_EXPONENT
            else:
                logger.warning("decoding %r with an implicit leading 1", value)

        terms = (cls(1, 2 ** index) for index, bit in parts.significand_bits() if bit)
        ratio = functools.reduce(cls.add, terms, ratio)

        if exponent > 0:
            ratio = ratio.mul(cls(2 ** exponent))
        elif exponent < 0:
            ratio = ratio.mul(cls(1, 2 ** -exponent))

        if parts.sign == 1:
            ratio = ratio.neg()
        return ratio

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Ratio":
        """Create a :class:`Ratio` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Ratio":
        """Coerce a numeric-like value into :class:`Ratio`."""
        if isinstance(value, Ratio):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value), strict=True)
        raise TypeError(f"Cannot convert {type(value)!r} to Ratio")

    # ------------------------------------------------------------------
    # Properties and predicates
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_infinite(self) -> bool:
        return self._denominator == 0

    def to_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Arithmetic
    def reduced(self) -> "Ratio":
        """Return the pair divided through by its greatest common divisor.

        ``0/0`` raises :class:`ZeroDivisionError`.
        """
        divisor = gcd(self._numerator, self._denominator)
        return Ratio(self._numerator // divisor, self._denominator // divisor)

    def add(self, addend: "Ratio") -> "Ratio":
        """Sum over the least common multiple of both denominators, unreduced."""
        factor = lcm(self._denominator, addend._denominator)
        return Ratio(
            self._numerator * (factor // self._denominator)
            + addend._numerator * (factor // addend._denominator),
            factor,
        )

    def sub(self, subtrahend: "Ratio") -> "Ratio":
        factor = lcm(self._denominator, subtrahend._denominator)
        return Ratio(
            self._numerator * (factor // self._denominator)
            - subtrahend._numerator * (factor // subtrahend._denominator),
            factor,
        )

    def neg(self) -> "Ratio":
        return Ratio(-self._numerator, self._denominator)

    def mul_raw(self, factor: "Ratio") -> "Ratio":
        """Multiply component-wise without reducing."""
        return Ratio(
            self._numerator * factor._numerator,
            self._denominator * factor._denominator,
        )

    def mul(self, factor: "Ratio") -> "Ratio":
        return self.mul_raw(factor).reduced()

    # ------------------------------------------------------------------
    # Conversions
    def to_float(self) -> float:
        """Approximate the value by dividing the nearest doubles of each part.

        Parts too large for a double become infinite, and division follows
        IEEE rules, so a zero denominator yields ``inf`` or ``nan``.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            quotient = np.float64(_to_double(self._numerator)) / np.float64(
                _to_double(self._denominator)
            )
        return float(quotient)

    def to_string(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:  # pragma: no cover - trivial mapping
        return self.to_float()

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Ratio({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> "Ratio":
        return Ratio.rationalize(value)

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_ratio = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_ratio)

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self._coerce_scalar(x), self),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_ratio = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(other_ratio, self)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Ratio.add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, Ratio.add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Ratio.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, Ratio.sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Ratio.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, Ratio.mul)

    def __neg__(self) -> "Ratio":
        return self.neg()

    def __pos__(self) -> "Ratio":  # pragma: no cover - trivial
        return self

    # ------------------------------------------------------------------
    # Equality compares the stored pair, not the value.
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return (self._numerator, self._denominator) == (
            other._numerator,
            other._denominator,
        )

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.negative: operator.neg,
        np.positive: operator.pos,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Ratio ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Ratio):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                coerced.append(as_ratio_array(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: NumberLike) -> Ratio:
    """Public helper to convert *value* into :class:`Ratio`."""

    return Ratio.rationalize(value)


def as_ratio_array(values: Any) -> np.ndarray:
    """Return a new ``numpy.ndarray`` of :class:`Ratio` with ``dtype=object``.

    ``values`` can be any (nested) sequence of numeric-like entries or an
    existing NumPy array; each element goes through :func:`rationalize`.
    """

    array = np.asarray(values, dtype=object)
    convert = np.vectorize(Ratio.rationalize, otypes=[object])
    return convert(array)


__all__ = ["Ratio", "as_ratio_array", "rationalize"]
