"""
Tolerance tiers and kernel limits.

Defines the absolute tolerances used for approximate comparison of
floating-point results:
- DEFAULT: the library-wide epsilon (1e-6), used when none is given
- STRICT: near machine precision, for exact-arithmetic inputs

Used by approx_eq, the testing helpers, and the test suite.
"""

from dataclasses import dataclass

from pylinalg.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


DEFAULT = ToleranceTier(
    atol=1e-6,
    name='default',
    description='Absolute difference of at most 1e-6',
)

STRICT = ToleranceTier(
    atol=1e-12,
    name='strict',
    description='Absolute difference near double precision rounding',
)

DEFAULT_EPSILON = DEFAULT.atol

# Cofactor expansion costs O(n!); orders above this emit a RuntimeWarning.
COFACTOR_WARN_ORDER = 10

_TIERS = {tier.name: tier for tier in (DEFAULT, STRICT)}


def select_tolerance(name: str = 'default') -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"name: unknown tolerance tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
