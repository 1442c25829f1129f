# This project was developed with assistance from AI tools.
"""Payment and maximum-mortgage calculation logic.

Pure math, no I/O. The routes parse query strings through the
``parse_*_request`` helpers and hand the typed request plus the current
annual rate to ``calculate_payment_amount`` / ``calculate_mortgage_amount``.
Every failure is raised as a ``MortgageError`` subclass.
"""

import math
import re

from ..enums import PaymentSchedule
from ..schemas.calculator import MortgageAmountRequest, PaymentAmountRequest
from .down_payment import is_down_payment_too_low
from .errors import (
    AmortizationOutOfRange,
    DegenerateSchedule,
    DownPaymentTooLow,
    InvalidAmount,
    InvalidInputType,
    NotANumber,
)
from .insurance import insurance_premium

MIN_AMORTIZATION_YEARS = 5
MAX_AMORTIZATION_YEARS = 25

# Plain decimal with optional exponent; no underscores, hex or inf/nan words.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_payments_per_year(label: str) -> int:
    """Convert a schedule label (weekly / biweekly / monthly) to payments per year."""
    return PaymentSchedule.from_label(label).payments_per_year


def compute_payment(total_financed: float, per_period_rate: float, num_periods: float) -> float:
    """Periodic payment that amortizes ``total_financed`` over ``num_periods``.

    payment = P * r * (1+r)^n / ((1+r)^n - 1)
    """
    compound = _compound_factor(per_period_rate, num_periods)
    return _finite(total_financed * per_period_rate * compound / (compound - 1))


def compute_max_mortgage(
    periodic_payment: float, per_period_rate: float, num_periods: float
) -> float:
    """Largest principal that ``periodic_payment`` amortizes over ``num_periods``.

    mortgage = M * ((1+r)^n - 1) / (r * (1+r)^n)
    """
    compound = _compound_factor(per_period_rate, num_periods)
    return _finite(periodic_payment * (compound - 1) / (per_period_rate * compound))


def _compound_factor(per_period_rate: float, num_periods: float) -> float:
    if num_periods <= 0 or per_period_rate == 0:
        raise DegenerateSchedule()
    try:
        compound = (1 + per_period_rate) ** num_periods
    except OverflowError as exc:
        raise DegenerateSchedule() from exc
    if compound == 1 or not math.isfinite(compound):
        raise DegenerateSchedule()
    return compound


def _finite(amount: float) -> float:
    if not math.isfinite(amount):
        raise InvalidAmount("Error: result is too large to represent")
    return amount


def parse_number(raw: str) -> float:
    """Parse a query-string number.

    Raises NotANumber for garbage, NaN, infinity and Python-only spellings
    such as ``1_000``.
    """
    if not isinstance(raw, str):
        raise InvalidInputType()
    cleaned = raw.strip()
    if not _NUMBER_PATTERN.fullmatch(cleaned):
        raise NotANumber()
    value = float(cleaned)
    if not math.isfinite(value):
        raise NotANumber()
    return value


def _parse_numbers(fields: dict[str, str]) -> dict[str, float]:
    parsed: dict[str, float] = {}
    failed = False
    for name, raw in fields.items():
        try:
            parsed[name] = parse_number(raw)
        except NotANumber:
            failed = True
    if failed:
        raise NotANumber(f"Error: {_join_names(list(fields))} must be numbers")
    return parsed


def _check_amounts(asking_price: float, down_payment: float) -> None:
    if asking_price <= 0:
        raise InvalidAmount("Error: asking price must be greater than 0")
    if down_payment < 0:
        raise InvalidAmount("Error: down payment cannot be negative")
    if down_payment > asking_price:
        raise InvalidAmount("Error: down payment cannot exceed the asking price")
    if is_down_payment_too_low(down_payment, asking_price):
        raise DownPaymentTooLow()


def _join_names(names: list[str]) -> str:
    if len(names) <= 2:
        return " and ".join(names)
    return ", ".join(names[:-1]) + ", and " + names[-1]


def validate_amortization_period(years: float) -> None:
    """Raise AmortizationOutOfRange unless 5 <= years <= 25."""
    if years < MIN_AMORTIZATION_YEARS or years > MAX_AMORTIZATION_YEARS:
        raise AmortizationOutOfRange()


def parse_payment_request(
    *,
    asking_price: str,
    down_payment: str,
    payment_schedule: str,
    amortization_period: str,
) -> PaymentAmountRequest:
    """Build a PaymentAmountRequest from raw query-string values."""
    numbers = _parse_numbers({
        "askingPrice": asking_price,
        "downPayment": down_payment,
        "amortizationPeriod": amortization_period,
    })
    # Down payment is judged before the schedule label.
    _check_amounts(numbers["askingPrice"], numbers["downPayment"])
    return PaymentAmountRequest(
        asking_price=numbers["askingPrice"],
        down_payment=numbers["downPayment"],
        payment_schedule=PaymentSchedule.from_label(payment_schedule),
        amortization_period=numbers["amortizationPeriod"],
    )


def parse_mortgage_request(
    *,
    payment_amount: str,
    payment_schedule: str,
    amortization_period: str,
) -> MortgageAmountRequest:
    """Build a MortgageAmountRequest from raw query-string values."""
    numbers = _parse_numbers({
        "paymentAmount": payment_amount,
        "amortizationPeriod": amortization_period,
    })
    return MortgageAmountRequest(
        payment_amount=numbers["paymentAmount"],
        payment_schedule=PaymentSchedule.from_label(payment_schedule),
        amortization_period=numbers["amortizationPeriod"],
    )


def calculate_payment_amount(req: PaymentAmountRequest, annual_rate: float) -> float:
    """Payment per period for the requested mortgage, insurance included."""
    _check_amounts(req.asking_price, req.down_payment)
    validate_amortization_period(req.amortization_period)

    total_financed = req.asking_price + insurance_premium(req.down_payment, req.asking_price)
    payments_per_year = req.payment_schedule.payments_per_year
    return compute_payment(
        total_financed,
        annual_rate / payments_per_year,
        payments_per_year * req.amortization_period,
    )


def calculate_mortgage_amount(req: MortgageAmountRequest, annual_rate: float) -> float:
    """Maximum mortgage the requested periodic payment can carry."""
    if req.payment_amount <= 0:
        raise InvalidAmount("Error: payment amount must be greater than 0")
    validate_amortization_period(req.amortization_period)

    payments_per_year = req.payment_schedule.payments_per_year
    return compute_max_mortgage(
        req.payment_amount,
        annual_rate / payments_per_year,
        payments_per_year * req.amortization_period,
    )
