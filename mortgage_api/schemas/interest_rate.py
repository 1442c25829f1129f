# This project was developed with assistance from AI tools.
"""Interest rate update schemas."""

from pydantic import BaseModel, Field

from . import SuccessEnvelope


class InterestRateUpdate(BaseModel):
    """PATCH body. The rate must be a JSON number; positivity is checked by the store."""

    interest_rate: float = Field(alias="interest-rate", strict=True, allow_inf_nan=False)


class InterestRateResponse(SuccessEnvelope):
    old_interest_rate: float
    new_interest_rate: float
