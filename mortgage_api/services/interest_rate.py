# This project was developed with assistance from AI tools.
"""Interest rate update: body deserialization and the store swap."""

from pydantic import ValidationError

from ..schemas.interest_rate import InterestRateResponse, InterestRateUpdate
from .errors import InvalidInputType, InvalidRate
from .rate_store import RateStore


def parse_interest_rate_update(body: bytes | str) -> InterestRateUpdate:
    """Decode and validate a PATCH body.

    Raises InvalidRate when the body is not JSON, and InvalidInputType when it
    is JSON but lacks a numeric ``interest-rate`` field.
    """
    try:
        return InterestRateUpdate.model_validate_json(body)
    except ValidationError as exc:
        if any(err["type"] == "json_invalid" for err in exc.errors()):
            raise InvalidRate("Error: Unparsable Json") from exc
        raise InvalidInputType() from exc


def update_interest_rate(store: RateStore, update: InterestRateUpdate) -> InterestRateResponse:
    """Replace the stored rate, reporting both the old and the new value."""
    old_rate = store.replace(update.interest_rate)
    return InterestRateResponse(
        old_interest_rate=old_rate,
        new_interest_rate=update.interest_rate,
    )
