# This project was developed with assistance from AI tools.
"""Health check endpoint."""

from fastapi import APIRouter

from .. import __version__
from ..schemas.health import HealthItem
from ..services.rate_store import RateStoreDep

router = APIRouter()


@router.get("/", response_model=list[HealthItem])
async def health(store: RateStoreDep) -> list[HealthItem]:
    """Report API liveness and the rate currently in effect."""
    return [
        HealthItem(
            name="API",
            status="healthy",
            message="Mortgage calculator API is running",
            version=__version__,
        ),
        HealthItem(
            name="Interest rate",
            status="healthy",
            message=f"Current annual rate {store.current()}",
        ),
    ]
