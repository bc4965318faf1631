"""SI magnitude prefixes as pre-validated rational constants."""
from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .domain import IntegerDomain, get_default_domain
from .rational import Rational

logger = logging.getLogger(__name__)

# (name, power of ten), smallest first.
_SI_EXPONENTS: Tuple[Tuple[str, int], ...] = (
    ("yocto", -24),
    ("zepto", -21),
    ("atto", -18),
    ("femto", -15),
    ("pico", -12),
    ("nano", -9),
    ("micro", -6),
    ("milli", -3),
    ("centi", -2),
    ("deci", -1),
    ("deca", 1),
    ("hecto", 2),
    ("kilo", 3),
    ("mega", 6),
    ("giga", 9),
    ("tera", 12),
    ("peta", 15),
    ("exa", 18),
    ("zetta", 21),
    ("yotta", 24),
)


@lru_cache(maxsize=None)
def si_prefixes(domain: Optional[IntegerDomain] = None) -> Mapping[str, Rational]:
    """Return the SI prefixes representable in *domain*.

    Prefixes whose power of ten exceeds the domain's maximum are left out.
    """
    if domain is None:
        domain = get_default_domain()
    table = {}
    omitted = []
    for name, exponent in _SI_EXPONENTS:
        magnitude = 10 ** abs(exponent)
        if not domain.contains(magnitude):
            omitted.append(name)
            continue
        if exponent < 0:
            table[name] = Rational(1, magnitude, domain=domain)
        else:
            table[name] = Rational(magnitude, 1, domain=domain)
    logger.debug(
        "built %d SI prefixes for %d-bit domain, omitted: %s",
        len(table),
        domain.width,
        ", ".join(omitted) or "none",
    )
    return MappingProxyType(table)


SI_PREFIXES = si_prefixes()

NANO = SI_PREFIXES["nano"]
MICRO = SI_PREFIXES["micro"]
MILLI = SI_PREFIXES["milli"]
CENTI = SI_PREFIXES["centi"]
DECI = SI_PREFIXES["deci"]
DECA = SI_PREFIXES["deca"]
HECTO = SI_PREFIXES["hecto"]
KILO = SI_PREFIXES["kilo"]
MEGA = SI_PREFIXES["mega"]
GIGA = SI_PREFIXES["giga"]

__all__ = [
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
]
