# This project was developed with assistance from AI tools.
"""Shared fixtures.

``client`` enters the app lifespan, so every test gets a fresh RateStore
seeded with the configured default rate.
"""

import pytest
from fastapi.testclient import TestClient

from mortgage_api.core.config import settings
from mortgage_api.main import app
from mortgage_api.services.rate_store import RateStore


@pytest.fixture
def client():
    """TestClient bound to the real app, lifespan included."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def default_rate() -> float:
    return settings.DEFAULT_INTEREST_RATE


@pytest.fixture
def rate_store() -> RateStore:
    return RateStore(0.025)
