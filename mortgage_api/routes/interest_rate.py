# This project was developed with assistance from AI tools.
"""Interest rate endpoint."""

import logging

from fastapi import APIRouter, Request

from ..schemas.interest_rate import InterestRateResponse
from ..services.interest_rate import parse_interest_rate_update, update_interest_rate
from ..services.rate_store import RateStoreDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.patch("/interest-rate/", response_model=InterestRateResponse)
async def patch_interest_rate(request: Request, store: RateStoreDep) -> InterestRateResponse:
    """Replace the interest rate used by every later calculation.

    The raw body is read directly so malformed JSON surfaces as a calculator
    failure rather than a framework validation error.
    """
    update = parse_interest_rate_update(await request.body())
    result = update_interest_rate(store, update)
    logger.info(
        "Interest rate changed: %s -> %s",
        result.old_interest_rate,
        result.new_interest_rate,
    )
    return result
