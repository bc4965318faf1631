"""Helpers for NumPy object arrays holding :class:`Rational` values."""
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .domain import IntegerDomain
from .rational import Rational


def as_rational_array(values: Any, *, domain: Optional[IntegerDomain] = None) -> np.ndarray:
    """Return an object array with every element of *values* coerced to :class:`Rational`.

    Elements must be exact (Rational, Fraction or integral); floats raise
    ``TypeError``.
    """
    source = np.asarray(values, dtype=object)
    vectorised = np.vectorize(lambda x: Rational.rationalize(x, domain=domain), otypes=[object])
    return vectorised(source)


def _filled(shape: Any, value: Rational) -> np.ndarray:
    # Rational is immutable, so every cell can share one instance.
    return np.full(shape, value, dtype=object)


def zeros(shape: Any, *, domain: Optional[IntegerDomain] = None) -> np.ndarray:
    return _filled(shape, Rational(0, domain=domain))


def ones(shape: Any, *, domain: Optional[IntegerDomain] = None) -> np.ndarray:
    return _filled(shape, Rational(1, domain=domain))


def zeros_like(array: Any, *, domain: Optional[IntegerDomain] = None) -> np.ndarray:
    return zeros(np.shape(array), domain=domain)


__all__ = ["as_rational_array", "zeros", "ones", "zeros_like"]
