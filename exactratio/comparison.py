"""Equality and ordering predicates for :class:`~exactratio.rational.Rational`."""
from __future__ import annotations

from .checked import checked_mul
from .rational import Rational, common_domain


def equal(r1: Rational, r2: Rational) -> bool:
    """Return True when *r1* and *r2* denote the same rational number.

    Canonical form is unique, so components are compared directly and no
    cross-multiplication is needed. The domain is not compared: values from
    different domains may be equal, while ordering them with :func:`less`
    raises ``ValueError``.
    """
    return r1.numerator == r2.numerator and r1.denominator == r2.denominator


def not_equal(r1: Rational, r2: Rational) -> bool:
    return not equal(r1, r2)


def less(r1: Rational, r2: Rational) -> bool:
    """Return ``r1 < r2``.

    Unequal denominators are compared by cross-multiplication, which raises
    :class:`MulOverflow` when a product is not representable rather than
    answering with a wrong order.
    """
    domain = common_domain(r1, r2)
    if r1.denominator == r2.denominator:
        return r1.numerator < r2.numerator
    return checked_mul(r1.numerator, r2.denominator, domain=domain) < checked_mul(
        r2.numerator, r1.denominator, domain=domain
    )


def less_equal(r1: Rational, r2: Rational) -> bool:
    return not less(r2, r1)


def greater(r1: Rational, r2: Rational) -> bool:
    return less(r2, r1)


def greater_equal(r1: Rational, r2: Rational) -> bool:
    return not less(r1, r2)


__all__ = ["equal", "not_equal", "less", "less_equal", "greater", "greater_equal"]
