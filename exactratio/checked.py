"""Integer add/subtract/multiply that refuse to leave the integer domain."""
from __future__ import annotations

from typing import Optional

from .domain import IntegerDomain, get_default_domain
from .errors import AddOverflow, MulOverflow, SubUnderflow


def _operands(a: int, b: int, domain: Optional[IntegerDomain]) -> IntegerDomain:
    if domain is None:
        domain = get_default_domain()
    domain.require(a, name="operand")
    domain.require(b, name="operand")
    return domain


def checked_add(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> int:
    """Return ``a + b`` or raise :class:`AddOverflow`."""
    domain = _operands(a, b, domain)
    if (b > 0 and a > domain.max - b) or (b < 0 and a < domain.min - b):
        raise AddOverflow(f"{a} + {b} overflows the {domain.width}-bit domain")
    return a + b


def checked_sub(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> int:
    """Return ``a - b`` or raise :class:`SubUnderflow`.

    Subtracting the domain minimum always fails: its negation is not
    representable.
    """
    domain = _operands(a, b, domain)
    if b == domain.min:
        raise SubUnderflow(f"{a} - ({b}) underflows the {domain.width}-bit domain")
    negated = -b
    if (negated > 0 and a > domain.max - negated) or (negated < 0 and a < domain.min - negated):
        raise SubUnderflow(f"{a} - ({b}) underflows the {domain.width}-bit domain")
    return a - b


def checked_neg(a: int, *, domain: Optional[IntegerDomain] = None) -> int:
    return checked_sub(0, a, domain=domain)


def checked_mul(a: int, b: int, *, domain: Optional[IntegerDomain] = None) -> int:
    """Return ``a * b`` or raise :class:`MulOverflow`."""
    domain = _operands(a, b, domain)
    # Python integers never wrap, so the exact product is the wide accumulator.
    product = a * b
    if not domain.contains(product):
        raise MulOverflow(f"{a} * {b} overflows the {domain.width}-bit domain")
    return product


__all__ = ["checked_add", "checked_sub", "checked_neg", "checked_mul"]
