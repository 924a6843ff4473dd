"""Bit-level access to IEEE-754 binary64 values."""
from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np

logger = logging.getLogger(__name__)

SIGNIFICAND_BITS = 52
EXPONENT_BITS = 11
EXPONENT_BIAS = 1023

SIGN_SHIFT = SIGNIFICAND_BITS + EXPONENT_BITS
EXPONENT_MASK = (1 << EXPONENT_BITS) - 1
SIGNIFICAND_MASK = (1 << SIGNIFICAND_BITS) - 1

# Smallest true exponent of a normal number; subnormals share it.
MIN_EXPONENT = 1 - EXPONENT_BIAS


class Binary64Parts(NamedTuple):
    """The three fields of a binary64 bit pattern."""

    sign: int
    biased_exponent: int
    significand: int

    @property
    def exponent(self) -> int:
        """The unbiased exponent, assuming a normal number."""
        return self.biased_exponent - EXPONENT_BIAS

    @property
    def is_denormal_pattern(self) -> bool:
        """True for zero and subnormals (biased exponent of 0)."""
        return self.biased_exponent == 0

    @property
    def is_special_pattern(self) -> bool:
        """True for infinities and NaNs (biased exponent all ones)."""
        return self.biased_exponent == EXPONENT_MASK

    def significand_bits(self):
        """Yield ``(index, bit)`` pairs, index 1 being the 2**-1 place."""
        for index in range(1, SIGNIFICAND_BITS + 1):
            yield index, (self.significand >> (SIGNIFICAND_BITS - index)) & 1


def to_bits(value: float) -> int:
    """Reinterpret the 64 bits of *value* as an unsigned integer."""
    return int(np.float64(value).view(np.uint64))


def decompose(value: float) -> Binary64Parts:
    """Split *value* into sign, biased exponent and significand fields."""
    bits = to_bits(value)
    parts = Binary64Parts(
        sign=bits >> SIGN_SHIFT,
        biased_exponent=(bits >> SIGNIFICAND_BITS) & EXPONENT_MASK,
        significand=bits & SIGNIFICAND_MASK,
    )
    logger.debug("decomposed %r into %s", value, parts)
    return parts


__all__ = [
    "Binary64Parts",
    "EXPONENT_BIAS",
    "EXPONENT_BITS",
    "EXPONENT_MASK",
    "MIN_EXPONENT",
    "SIGNIFICAND_BITS",
    "SIGNIFICAND_MASK",
    "decompose",
    "to_bits",
]
