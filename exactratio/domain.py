"""Bounded signed integer domains and the integer helpers built on them."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cached_property
from typing import Dict

import numpy as np

from .errors import OutOfRange

logger = logging.getLogger(__name__)

WIDTH_ENV_VAR = "EXACTRATIO_INT_WIDTH"
DEFAULT_WIDTH = 64

# Widths NumPy has a native signed integer type for.
_NUMPY_INT_TYPES: Dict[int, type] = {32: np.int32, 64: np.int64}


@dataclass(frozen=True)
class IntegerDomain:
    """A two's-complement signed integer range of ``width`` bits."""

    width: int

    def __post_init__(self) -> None:
        if self.width < 2:
            raise ValueError(f"width must be >= 2, got {self.width}")

    @cached_property
    def min(self) -> int:
        int_type = _NUMPY_INT_TYPES.get(self.width)
        if int_type is not None:
            return int(np.iinfo(int_type).min)
        return -(1 << (self.width - 1))

    @cached_property
    def max(self) -> int:
        int_type = _NUMPY_INT_TYPES.get(self.width)
        if int_type is not None:
            return int(np.iinfo(int_type).max)
        return (1 << (self.width - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def require(self, value: int, *, name: str = "value") -> int:
        """Return *value* unchanged or raise :class:`OutOfRange`."""
        if not self.contains(value):
            raise OutOfRange(
                f"{name} {value} is outside [{self.min}, {self.max}] "
                f"for a {self.width}-bit domain"
            )
        return value

    def __repr__(self) -> str:
        return f"IntegerDomain(width={self.width})"


INT32 = IntegerDomain(32)
INT64 = IntegerDomain(64)
INT128 = IntegerDomain(128)

_PRESETS: Dict[int, IntegerDomain] = {32: INT32, 64: INT64, 128: INT128}


def domain_for_width(width: int) -> IntegerDomain:
    """Return the preset domain for *width* (32, 64 or 128)."""
    try:
        return _PRESETS[width]
    except KeyError:
        raise ValueError(
            f"unsupported integer width {width!r}; choose one of {sorted(_PRESETS)}"
        ) from None


def _resolve_default_domain() -> IntegerDomain:
    raw = os.environ.get(WIDTH_ENV_VAR)
    if raw is None or not raw.strip():
        width = DEFAULT_WIDTH
    else:
        try:
            width = int(raw)
        except ValueError:
            raise ValueError(f"{WIDTH_ENV_VAR} must be an integer, got {raw!r}") from None
    domain = domain_for_width(width)
    logger.debug("default integer domain is %d-bit (%s=%r)", domain.width, WIDTH_ENV_VAR, raw)
    return domain


_default_domain = _resolve_default_domain()


def get_default_domain() -> IntegerDomain:
    """Return the process-wide domain chosen at import time."""
    return _default_domain


# ----------------------------------------------------------------------
# Integer helpers
def sign(x: int) -> int:
    """Return -1 for negative *x*, +1 otherwise (zero counts as positive)."""
    return -1 if x < 0 else 1


def abs_(x: int) -> int:
    return x if x >= 0 else 0 - x


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    ``gcd(a, 0) == abs(a)``, ``gcd(0, b) == abs(b)`` and ``gcd(0, 0) == 0``;
    callers must not divide by the latter.
    """
    a, b = abs_(a), abs_(b)
    while b:
        a, b = b, a % b
    return a


def power2(v: int) -> int:
    if v < 0:
        raise ValueError(f"exponent must be non-negative, got {v}")
    return 1 << v


def log2(v: int, strict: bool = False) -> int:
    """Return ``floor(log2(v))`` for positive *v*.

    With ``strict=True`` *v* must be an exact power of two.
    """
    if v < 1:
        raise ValueError(f"log2 is only defined for positive values, got {v}")
    result = v.bit_length() - 1
    if strict and (1 << result) != v:
        raise ValueError(f"{v} isn't a power of 2")
    return result


def is_power2(v: int) -> bool:
    return v >= 1 and power2(log2(v)) == v


__all__ = [
    "IntegerDomain",
    "INT32",
    "INT64",
    "INT128",
    "WIDTH_ENV_VAR",
    "domain_for_width",
    "get_default_domain",
    "sign",
    "abs_",
    "gcd",
    "power2",
    "log2",
    "is_power2",
]
