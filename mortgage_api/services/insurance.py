# This project was developed with assistance from AI tools.
"""Mortgage insurance premium.

Pure function of the down-payment ratio. The premium is a flat share of
the asking price, tiered by ratio band; ratios of 20% or more carry no
insurance. Asking prices above 1,000,000 are exempt whatever the ratio.
"""

from .errors import InvalidAmount

INSURANCE_EXEMPT_ABOVE = 1_000_000

# (lower bound inclusive, upper bound exclusive, premium as fraction of asking price)
PREMIUM_TIERS: tuple[tuple[float, float, float], ...] = (
    (0.05, 0.10, 0.0315),
    (0.10, 0.15, 0.0240),
    (0.15, 0.20, 0.0180),
)


def insurance_premium(down_payment: float, asking_price: float) -> float:
    """Return the insurance premium owed on top of the asking price."""
    if asking_price <= 0:
        raise InvalidAmount("Error: asking price must be greater than 0")
    if asking_price > INSURANCE_EXEMPT_ABOVE:
        return 0.0

    ratio = down_payment / asking_price
    for lower, upper, premium_rate in PREMIUM_TIERS:
        if lower <= ratio < upper:
            return premium_rate * asking_price
    return 0.0
