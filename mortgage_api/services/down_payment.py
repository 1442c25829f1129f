# This project was developed with assistance from AI tools.
"""Minimum down payment rules.

5% of the first 500,000 of the asking price plus 10% of any portion above it.
"""

TIER_THRESHOLD = 500_000
BASE_RATE = 0.05
UPPER_RATE = 0.10


def minimum_down_payment(asking_price: float) -> float:
    """Smallest down payment accepted for ``asking_price``."""
    if asking_price > TIER_THRESHOLD:
        return TIER_THRESHOLD * BASE_RATE + (asking_price - TIER_THRESHOLD) * UPPER_RATE
    return asking_price * BASE_RATE


def is_down_payment_too_low(down_payment: float, asking_price: float) -> bool:
    return down_payment < minimum_down_payment(asking_price)
