"""Exception hierarchy for rational construction and arithmetic."""
from __future__ import annotations


class RatioError(Exception):
    """Base class of every error raised by :mod:`exactratio`."""


class ConstructionError(RatioError, ValueError):
    """A numerator/denominator pair cannot form a rational value."""


class ZeroDenominator(ConstructionError, ZeroDivisionError):
    """The denominator is zero."""


class OutOfRange(ConstructionError, OverflowError):
    """A component lies outside the integer domain."""


class RatioArithmeticError(RatioError, ArithmeticError):
    """Combining two rational values failed."""


class AddOverflow(RatioArithmeticError, OverflowError):
    pass


class SubUnderflow(RatioArithmeticError, OverflowError):
    pass


class MulOverflow(RatioArithmeticError, OverflowError):
    pass


class DivisionByZero(RatioArithmeticError, ZeroDivisionError):
    pass


__all__ = [
    "RatioError",
    "ConstructionError",
    "ZeroDenominator",
    "OutOfRange",
    "RatioArithmeticError",
    "AddOverflow",
    "SubUnderflow",
    "MulOverflow",
    "DivisionByZero",
]
