# This project was developed with assistance from AI tools.
"""Payment and mortgage calculator schemas."""

from pydantic import BaseModel, ConfigDict

from ..enums import PaymentSchedule
from . import SuccessEnvelope


class PaymentAmountRequest(BaseModel):
    """Parsed input for the payment-amount calculation."""

    model_config = ConfigDict(frozen=True)

    asking_price: float
    down_payment: float
    payment_schedule: PaymentSchedule
    amortization_period: float


class MortgageAmountRequest(BaseModel):
    """Parsed input for the maximum-mortgage calculation."""

    model_config = ConfigDict(frozen=True)

    payment_amount: float
    payment_schedule: PaymentSchedule
    amortization_period: float


class PaymentAmountResponse(SuccessEnvelope):
    payment_amount: float


class MortgageAmountResponse(SuccessEnvelope):
    mortgage_amount: float
