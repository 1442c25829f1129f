# This project was developed with assistance from AI tools.
"""
Domain enums for mortgage calculations.

Shared by the calculation services and the request schemas.
"""

import enum

from .services.errors import UnknownSchedule


class PaymentSchedule(str, enum.Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"

    @property
    def payments_per_year(self) -> int:
        return _PAYMENTS_PER_YEAR[self]

    @classmethod
    def from_label(cls, label: str) -> "PaymentSchedule":
        """Parse a schedule label, ignoring case.

        Raises UnknownSchedule for any other label, including the empty string.
        """
        try:
            return cls(label.lower())
        except (ValueError, AttributeError) as exc:
            raise UnknownSchedule() from exc


_PAYMENTS_PER_YEAR: dict[PaymentSchedule, int] = {
    PaymentSchedule.WEEKLY: 52,
    PaymentSchedule.BIWEEKLY: 26,
    PaymentSchedule.MONTHLY: 12,
}
