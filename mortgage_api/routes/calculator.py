# This project was developed with assistance from AI tools.
"""Calculator endpoints -- no authentication required."""

from fastapi import APIRouter, Query, Request

from ..schemas.calculator import MortgageAmountResponse, PaymentAmountResponse
from ..services.calculator import (
    calculate_mortgage_amount,
    calculate_payment_amount,
    parse_mortgage_request,
    parse_payment_request,
)
from ..services.errors import InvalidInputType
from ..services.rate_store import RateStoreDep

router = APIRouter()


def _reject_repeated(request: Request, *names: str) -> None:
    """A parameter given more than once is a list, not a single value."""
    if any(len(request.query_params.getlist(name)) > 1 for name in names):
        raise InvalidInputType()


@router.get("/payment-amount/", response_model=PaymentAmountResponse)
async def payment_amount(
    request: Request,
    store: RateStoreDep,
    asking_price: str = Query(alias="asking-price"),
    down_payment: str = Query(alias="down-payment"),
    payment_schedule: str = Query(alias="payment-schedule"),
    amortization_period: str = Query(alias="amortization-period"),
) -> PaymentAmountResponse:
    """Payment owed each period for a mortgage, insurance premium included."""
    _reject_repeated(
        request, "asking-price", "down-payment", "payment-schedule", "amortization-period"
    )
    req = parse_payment_request(
        asking_price=asking_price,
        down_payment=down_payment,
        payment_schedule=payment_schedule,
        amortization_period=amortization_period,
    )
    return PaymentAmountResponse(payment_amount=calculate_payment_amount(req, store.current()))


@router.get("/mortgage-amount/", response_model=MortgageAmountResponse)
async def mortgage_amount(
    request: Request,
    store: RateStoreDep,
    payment_amount: str = Query(alias="payment-amount"),
    payment_schedule: str = Query(alias="payment-schedule"),
    amortization_period: str = Query(alias="amortization-period"),
) -> MortgageAmountResponse:
    """Maximum mortgage a periodic payment can carry."""
    _reject_repeated(request, "payment-amount", "payment-schedule", "amortization-period")
    req = parse_mortgage_request(
        payment_amount=payment_amount,
        payment_schedule=payment_schedule,
        amortization_period=amortization_period,
    )
    return MortgageAmountResponse(mortgage_amount=calculate_mortgage_amount(req, store.current()))
