"""Canonical bounded rational numbers with NumPy interoperability."""
from __future__ import annotations

import numbers
import operator
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from .domain import IntegerDomain, abs_, gcd, get_default_domain, sign
from .errors import ZeroDenominator

RationalLike = Union["Rational", Fraction, numbers.Integral]

_FLOAT_PRESENTATIONS = frozenset("eEfFgGn%")


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an integral number."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def common_domain(a: "Rational", b: "Rational") -> IntegerDomain:
    """Return the domain shared by *a* and *b*."""
    if a._domain != b._domain:
        raise ValueError(
            f"cannot combine rationals over different domains: {a._domain!r} and {b._domain!r}"
        )
    return a._domain


class Rational:
    """Exact rational number over a bounded integer domain.

    Instances are always in lowest terms with a positive denominator, and
    both components lie within the domain's ``[min, max]`` range.
    """

    __slots__ = ("_numerator", "_denominator", "_domain")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
        *,
        domain: Optional[IntegerDomain] = None,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if domain is None:
            domain = get_default_domain()
        if den == 0:
            raise ZeroDenominator(f"denominator must be non-zero (numerator {num})")
        domain.require(num, name="numerator")
        domain.require(den, name="denominator")

        num, den = self._normalize(num, den)
        # Moving the sign can push MIN out of range, e.g. (MIN, -1).
        domain.require(num, name="normalized numerator")
        domain.require(den, name="normalized denominator")

        self._numerator = num
        self._denominator = den
        self._domain = domain

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_fraction(
        cls, value: Fraction, *, domain: Optional[IntegerDomain] = None
    ) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator, domain=domain)

    @classmethod
    def rationalize(
        cls, value: RationalLike, *, domain: Optional[IntegerDomain] = None
    ) -> "Rational":
        """Coerce an exact numeric value into :class:`Rational`."""
        if isinstance(value, Rational):
            if domain is None or domain == value._domain:
                return value
            return cls(value._numerator, value._denominator, domain=domain)
        if isinstance(value, Fraction):
            return cls.from_fraction(value, domain=domain)
        if isinstance(value, numbers.Integral):
            return cls(int(value), 1, domain=domain)
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    num = numerator
    den = denominator

    @property
    def domain(self) -> IntegerDomain:
        return self._domain

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def reciprocal(self) -> "Rational":
        """Return ``1 / self``; zero raises :class:`DivisionByZero`."""
        return arithmetic.divide(Rational(1, domain=self._domain), self)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __int__(self) -> int:
        """Truncate toward zero."""
        if self._numerator < 0:
            return -(-self._numerator // self._denominator)
        return self._numerator // self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        if format_spec.endswith("r"):
            format_spec = format_spec[:-1]
        if format_spec[-1:] in _FLOAT_PRESENTATIONS:
            raise ValueError(
                f"Rational does not convert to floating point (format spec {format_spec!r})"
            )
        return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Copying and pickling
    def __reduce__(self):
        return _rebuild, (self._numerator, self._denominator, self._domain)

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo) -> "Rational":
        return self

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, (Fraction, numbers.Integral)):
            return Rational.rationalize(value, domain=self._domain)
        return None

    def _binary_operation(self, other: Any, op: Callable[["Rational", "Rational"], Any]):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._require_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            return NotImplemented
        return op(self, other_rat)

    def _reflected_operation(self, other: Any, op: Callable[["Rational", "Rational"], Any]):
        return self._binary_operation(other, lambda a, b: op(b, a))

    def _require_scalar(self, value: Any) -> "Rational":
        coerced = self._coerce_scalar(value)
        if coerced is None:
            raise TypeError(f"Cannot interpret {type(value)!r} as Rational")
        return coerced

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        divisor = gcd(abs_(num), abs_(den))
        return num * sign(den) // divisor, abs_(den) // divisor

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, arithmetic.add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, arithmetic.add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, arithmetic.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, arithmetic.subtract)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, arithmetic.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, arithmetic.multiply)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, arithmetic.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, arithmetic.divide)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        return arithmetic.power(self, self._coerce_power(exponent))

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Rational):
            if value.denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value.numerator
        raise TypeError(f"Unsupported exponent type {type(value)!r}")

    def __neg__(self) -> "Rational":
        return arithmetic.negate(self)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        if self._numerator < 0:
            return arithmetic.negate(self)
        return self

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op: Callable[["Rational", "Rational"], bool]):
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            return NotImplemented
        return op(self, other_rat)

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, Rational):
            return comparison.equal(self, other)
        # Values outside the domain can never equal a Rational, so compare
        # components instead of coercing.
        if isinstance(other, numbers.Integral):
            return self._denominator == 1 and self._numerator == int(other)
        if isinstance(other, Fraction):
            return (self._numerator, self._denominator) == (
                other.numerator,
                other.denominator,
            )
        return NotImplemented

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, comparison.less)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, comparison.less_equal)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, comparison.greater)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, comparison.greater_equal)

    def __hash__(self) -> int:
        # Agree with int and Fraction hashing for equal values.
        return hash(Fraction(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
    }
    _UFUNC_PREDICATES = {
        np.equal: operator.eq,
        np.not_equal: operator.ne,
        np.less: operator.lt,
        np.less_equal: operator.le,
        np.greater: operator.gt,
        np.greater_equal: operator.ge,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        if ufunc in self._UFUNC_PREDICATES:
            op = self._UFUNC_PREDICATES[ufunc]
            otype = bool
        elif ufunc in self._UFUNC_DISPATCH:
            op = self._UFUNC_DISPATCH[ufunc]
            otype = object
        else:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._require_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._require_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[otype])
            return vectorised(*coerced)
        return op(*coerced)


def _rebuild(numerator: int, denominator: int, domain: IntegerDomain) -> Rational:
    return Rational(numerator, denominator, domain=domain)


def make_rational(
    num: Union[int, numbers.Integral],
    den: Union[int, numbers.Integral] = 1,
    *,
    domain: Optional[IntegerDomain] = None,
) -> Rational:
    """Construct the canonical :class:`Rational` for ``num / den``.

    Raises:
        ZeroDenominator: *den* is zero
        OutOfRange: a component, before or after normalization, lies
            outside the domain
    """
    return Rational(num, den, domain=domain)


def rationalize(value: RationalLike, *, domain: Optional[IntegerDomain] = None) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value, domain=domain)


# Combinators and comparators are built on Rational; bind them last.
from . import arithmetic, comparison  # noqa: E402

__all__ = ["Rational", "make_rational", "rationalize", "common_domain"]
