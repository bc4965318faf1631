"""Overflow-checked arithmetic on :class:`~exactratio.rational.Rational` values.

Each combinator pre-reduces its operands by a common divisor before
multiplying, so intermediates stay as small as the exact result allows.
"""
from __future__ import annotations

from .checked import checked_add, checked_mul, checked_neg
from .domain import gcd
from .errors import DivisionByZero
from .rational import Rational, common_domain


def add(r1: Rational, r2: Rational) -> Rational:
    """Return ``r1 + r2``.

    Raises:
        AddOverflow: the reduced numerator sum leaves the domain
        MulOverflow: a scaled numerator or the common denominator does
    """
    domain = common_domain(r1, r2)
    # Denominators are positive, so the divisor is at least 1.
    dens_gcd = gcd(r1.denominator, r2.denominator)
    num = checked_add(
        checked_mul(r1.numerator, r2.denominator // dens_gcd, domain=domain),
        checked_mul(r2.numerator, r1.denominator // dens_gcd, domain=domain),
        domain=domain,
    )
    den = checked_mul(r1.denominator, r2.denominator // dens_gcd, domain=domain)
    return Rational(num, den, domain=domain)


def negate(r: Rational) -> Rational:
    """Return ``-r``; a numerator equal to the domain minimum raises :class:`SubUnderflow`."""
    return Rational(checked_neg(r.numerator, domain=r.domain), r.denominator, domain=r.domain)


def subtract(r1: Rational, r2: Rational) -> Rational:
    common_domain(r1, r2)
    return add(r1, negate(r2))


def multiply(r1: Rational, r2: Rational) -> Rational:
    """Return ``r1 * r2``, cross-reducing each numerator against the other denominator."""
    domain = common_domain(r1, r2)
    gcd1 = gcd(r1.numerator, r2.denominator)
    gcd2 = gcd(r2.numerator, r1.denominator)
    num = checked_mul(r1.numerator // gcd1, r2.numerator // gcd2, domain=domain)
    den = checked_mul(r1.denominator // gcd2, r2.denominator // gcd1, domain=domain)
    return Rational(num, den, domain=domain)


def divide(r1: Rational, r2: Rational) -> Rational:
    """Return ``r1 / r2`` as ``r1`` times the reciprocal of *r2*.

    Raises:
        DivisionByZero: *r2* is zero
        OutOfRange: the reciprocal of *r2* is not representable
        MulOverflow: the product leaves the domain
    """
    domain = common_domain(r1, r2)
    if r2.numerator == 0:
        raise DivisionByZero(f"division of {r1} by zero")
    return multiply(r1, Rational(r2.denominator, r2.numerator, domain=domain))


def power(r: Rational, exponent: int) -> Rational:
    """Return ``r ** exponent`` for an integer *exponent* by repeated squaring."""
    if exponent < 0:
        r = r.reciprocal()
        exponent = -exponent
    result = Rational(1, domain=r.domain)
    base = r
    while exponent:
        if exponent & 1:
            result = multiply(result, base)
        exponent >>= 1
        # Skip the final squaring; it is not part of the result.
        if exponent:
            base = multiply(base, base)
    return result


__all__ = ["add", "subtract", "multiply", "divide", "negate", "power"]
