"""Exact bounded rational arithmetic."""

from .arithmetic import add, divide, multiply, negate, power, subtract
from .array import as_rational_array, ones, zeros, zeros_like
from .checked import checked_add, checked_mul, checked_neg, checked_sub
from .comparison import equal, greater, greater_equal, less, less_equal, not_equal
from .domain import (
    INT32,
    INT64,
    INT128,
    IntegerDomain,
    abs_,
    gcd,
    get_default_domain,
    is_power2,
    log2,
    power2,
    sign,
)
from .errors import (
    AddOverflow,
    ConstructionError,
    DivisionByZero,
    MulOverflow,
    OutOfRange,
    RatioArithmeticError,
    RatioError,
    SubUnderflow,
    ZeroDenominator,
)
from .rational import Rational, make_rational, rationalize
from .si import (
    CENTI,
    DECA,
    DECI,
    GIGA,
    HECTO,
    KILO,
    MEGA,
    MICRO,
    MILLI,
    NANO,
    SI_PREFIXES,
    si_prefixes,
)

__all__ = [
    "Rational",
    "make_rational",
    "rationalize",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "power",
    "equal",
    "not_equal",
    "less",
    "less_equal",
    "greater",
    "greater_equal",
    "checked_add",
    "checked_sub",
    "checked_mul",
    "checked_neg",
    "IntegerDomain",
    "INT32",
    "INT64",
    "INT128",
    "get_default_domain",
    "sign",
    "abs_",
    "gcd",
    "power2",
    "log2",
    "is_power2",
    "RatioError",
    "ConstructionError",
    "ZeroDenominator",
    "OutOfRange",
    "RatioArithmeticError",
    "AddOverflow",
    "SubUnderflow",
    "MulOverflow",
    "DivisionByZero",
    "si_prefixes",
    "SI_PREFIXES",
    "NANO",
    "MICRO",
    "MILLI",
    "CENTI",
    "DECI",
    "DECA",
    "HECTO",
    "KILO",
    "MEGA",
    "GIGA",
    "as_rational_array",
    "zeros",
    "ones",
    "zeros_like",
]
