# This project was developed with assistance from AI tools.
"""Tests for the calculator, interest rate and health endpoints."""

import pytest

from mortgage_api.main import app
from mortgage_api.services.rate_store import RateStore, get_rate_store

PAYMENT_URL = "/api/v1/payment-amount/"
MORTGAGE_URL = "/api/v1/mortgage-amount/"
RATE_URL = "/api/v1/interest-rate/"


def _payment_params(**overrides):
    params = {
        "asking-price": "300000",
        "down-payment": "30000",
        "payment-schedule": "monthly",
        "amortization-period": "25",
    }
    params.update(overrides)
    return params


def _mortgage_params(**overrides):
    params = {
        "payment-amount": "1500",
        "payment-schedule": "biweekly",
        "amortization-period": "20",
    }
    params.update(overrides)
    return params


def _assert_fail(response, message=None):
    assert response.status_code == 406
    data = response.json()
    assert data["result"] == "fail"
    if message is not None:
        assert data["message"] == message


# ---------------------------------------------------------------------------
# /payment-amount/
# ---------------------------------------------------------------------------


def test_payment_amount_happy_path(client):
    response = client.get(PAYMENT_URL, params=_payment_params())
    assert response.status_code == 200
    data = response.json()
    assert data["result"] == "success"
    assert set(data) == {"result", "paymentAmount"}
    assert 1370 < data["paymentAmount"] < 1390


def test_payment_amount_schedule_is_case_insensitive(client):
    lower = client.get(PAYMENT_URL, params=_payment_params()).json()
    params = _payment_params(**{"payment-schedule": "MONTHLY"})
    upper = client.get(PAYMENT_URL, params=params).json()
    assert lower == upper


def test_payment_amount_weekly_pays_less_per_period(client):
    monthly = client.get(PAYMENT_URL, params=_payment_params()).json()["paymentAmount"]
    weekly = client.get(
        PAYMENT_URL, params=_payment_params(**{"payment-schedule": "weekly"})
    ).json()["paymentAmount"]
    assert weekly < monthly


def test_payment_amount_missing_param(client):
    params = _payment_params()
    del params["down-payment"]
    _assert_fail(client.get(PAYMENT_URL, params=params), "Error: wrong input types")


def test_payment_amount_not_a_number(client):
    response = client.get(PAYMENT_URL, params=_payment_params(**{"asking-price": "a lot"}))
    _assert_fail(
        response,
        "Error: askingPrice, downPayment, and amortizationPeriod must be numbers",
    )


def test_payment_amount_unknown_schedule(client):
    response = client.get(PAYMENT_URL, params=_payment_params(**{"payment-schedule": "daily"}))
    _assert_fail(response, "Error: paymentSchedule must be 'weekly', 'biweekly', or 'monthly'")


def test_payment_amount_down_payment_too_low(client):
    response = client.get(
        PAYMENT_URL,
        params=_payment_params(**{"asking-price": "600000", "down-payment": "20000"}),
    )
    _assert_fail(response, "Error: Down Payment Is Too Low")


@pytest.mark.parametrize("years", ["3", "30"])
def test_payment_amount_amortization_out_of_range(client, years):
    response = client.get(PAYMENT_URL, params=_payment_params(**{"amortization-period": years}))
    _assert_fail(response, "Error: the mortgage must be paid off between 5 to 25 years")


def test_payment_amount_down_payment_exceeds_price(client):
    response = client.get(PAYMENT_URL, params=_payment_params(**{"down-payment": "400000"}))
    _assert_fail(response)


def test_payment_amount_repeated_param(client):
    response = client.get(
        PAYMENT_URL,
        params=[
            ("asking-price", "1"),
            ("asking-price", "300000"),
            ("down-payment", "30000"),
            ("payment-schedule", "monthly"),
            ("amortization-period", "25"),
        ],
    )
    _assert_fail(response, "Error: wrong input types")


def test_payment_amount_underscore_number(client):
    response = client.get(PAYMENT_URL, params=_payment_params(**{"asking-price": "300_000"}))
    _assert_fail(
        response,
        "Error: askingPrice, downPayment, and amortizationPeriod must be numbers",
    )


def test_payment_amount_low_down_payment_reported_before_schedule(client):
    params = _payment_params(
        **{"asking-price": "600000", "down-payment": "20000", "payment-schedule": "daily"}
    )
    _assert_fail(client.get(PAYMENT_URL, params=params), "Error: Down Payment Is Too Low")


def test_payment_amount_huge_rate_is_typed_failure(client):
    client.patch(RATE_URL, json={"interest-rate": 100})
    response = client.get(PAYMENT_URL, params=_payment_params(**{"payment-schedule": "weekly"}))
    _assert_fail(response, "Error: payment schedule produces a degenerate amortization")


# ---------------------------------------------------------------------------
# /mortgage-amount/
# ---------------------------------------------------------------------------


def test_mortgage_amount_happy_path(client):
    response = client.get(MORTGAGE_URL, params=_mortgage_params())
    assert response.status_code == 200
    data = response.json()
    assert data["result"] == "success"
    assert set(data) == {"result", "mortgageAmount"}
    assert data["mortgageAmount"] > 1500 * 26 * 10


def test_mortgage_amount_inverts_payment_amount(client):
    payment = client.get(PAYMENT_URL, params=_payment_params()).json()["paymentAmount"]
    response = client.get(
        MORTGAGE_URL,
        params={
            "payment-amount": repr(payment),
            "payment-schedule": "monthly",
            "amortization-period": "25",
        },
    )
    assert response.json()["mortgageAmount"] == pytest.approx(307200)


def test_mortgage_amount_too_large_is_typed_failure(client):
    response = client.get(MORTGAGE_URL, params=_mortgage_params(**{"payment-amount": "1e307"}))
    _assert_fail(response, "Error: result is too large to represent")


def test_mortgage_amount_repeated_param(client):
    params = list(_mortgage_params().items()) + [("payment-schedule", "weekly")]
    _assert_fail(client.get(MORTGAGE_URL, params=params), "Error: wrong input types")


def test_mortgage_amount_missing_param(client):
    params = _mortgage_params()
    del params["payment-schedule"]
    _assert_fail(client.get(MORTGAGE_URL, params=params), "Error: wrong input types")


def test_mortgage_amount_not_a_number(client):
    response = client.get(MORTGAGE_URL, params=_mortgage_params(**{"payment-amount": "NaN"}))
    _assert_fail(response, "Error: paymentAmount and amortizationPeriod must be numbers")


@pytest.mark.parametrize("years", ["3", "30"])
def test_mortgage_amount_amortization_out_of_range(client, years):
    response = client.get(MORTGAGE_URL, params=_mortgage_params(**{"amortization-period": years}))
    _assert_fail(response, "Error: the mortgage must be paid off between 5 to 25 years")


# ---------------------------------------------------------------------------
# /interest-rate/
# ---------------------------------------------------------------------------


def test_interest_rate_update(client, default_rate):
    response = client.patch(RATE_URL, json={"interest-rate": 0.05})
    assert response.status_code == 200
    assert response.json() == {
        "result": "success",
        "oldInterestRate": default_rate,
        "newInterestRate": 0.05,
    }


def test_interest_rate_update_changes_calculations(client):
    before = client.get(PAYMENT_URL, params=_payment_params()).json()["paymentAmount"]
    client.patch(RATE_URL, json={"interest-rate": 0.08})
    after = client.get(PAYMENT_URL, params=_payment_params()).json()["paymentAmount"]
    assert after > before


def test_interest_rate_negative_leaves_rate_unchanged(client, default_rate):
    response = client.patch(RATE_URL, json={"interest-rate": -1})
    _assert_fail(response, "Error: interest rate must be greater than 0")

    follow_up = client.patch(RATE_URL, json={"interest-rate": 0.03})
    assert follow_up.json()["oldInterestRate"] == default_rate


def test_interest_rate_zero_fails(client):
    _assert_fail(client.patch(RATE_URL, json={"interest-rate": 0}))


def test_interest_rate_unparsable_body(client):
    response = client.patch(
        RATE_URL, content=b"{not json", headers={"Content-Type": "application/json"}
    )
    _assert_fail(response, "Error: Unparsable Json")


def test_interest_rate_wrong_type(client):
    response = client.patch(RATE_URL, json={"interest-rate": "0.05"})
    _assert_fail(response, "Error: wrong input types")


def test_interest_rate_snake_case_key_rejected(client, default_rate):
    response = client.patch(RATE_URL, json={"interest_rate": 0.09})
    _assert_fail(response, "Error: wrong input types")

    follow_up = client.patch(RATE_URL, json={"interest-rate": 0.03})
    assert follow_up.json()["oldInterestRate"] == default_rate


def test_interest_rate_get_not_allowed(client):
    response = client.get(RATE_URL)
    assert response.status_code == 405
    assert response.json()["result"] == "fail"


# ---------------------------------------------------------------------------
# Dependency injection, CORS, misc
# ---------------------------------------------------------------------------


def test_rate_store_dependency_override(client):
    store = RateStore(0.1)
    app.dependency_overrides[get_rate_store] = lambda: store
    try:
        response = client.patch(RATE_URL, json={"interest-rate": 0.2})
    finally:
        app.dependency_overrides.clear()
    assert response.json()["oldInterestRate"] == 0.1
    assert store.current() == 0.2


def test_each_client_starts_from_default_rate(default_rate):
    from fastapi.testclient import TestClient

    with TestClient(app) as first:
        first.patch(RATE_URL, json={"interest-rate": 0.07})
    with TestClient(app) as second:
        response = second.patch(RATE_URL, json={"interest-rate": 0.03})
    assert response.json()["oldInterestRate"] == default_rate


def test_cors_preflight(client):
    response = client.options(
        PAYMENT_URL,
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-max-age"] == "86400"


def test_unknown_route_uses_fail_envelope(client):
    response = client.get("/api/v1/nothing-here/")
    assert response.status_code == 404
    assert response.json() == {"result": "fail", "message": "Error: Not Found"}


def test_health(client):
    response = client.get("/health/")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    assert all(item["status"] == "healthy" for item in data)
    assert data[0]["version"]


def test_root(client):
    assert "message" in client.get("/").json()
