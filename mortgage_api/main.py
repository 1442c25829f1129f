# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .routes import calculator, health, interest_rate
from .schemas.error import FailResponse
from .services.errors import InvalidInputType, MortgageError
from .services.rate_store import RateStore

logger = logging.getLogger(__name__)

# Status for every rejected calculator request.
FAIL_STATUS = status.HTTP_406_NOT_ACCEPTABLE


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    app.state.rate_store = RateStore(settings.DEFAULT_INTEREST_RATE)
    logger.info("Interest rate store ready (rate=%s)", settings.DEFAULT_INTEREST_RATE)
    yield


app = FastAPI(
    title="Mortgage Calculator API",
    description="Payment amount, maximum mortgage and interest rate endpoints",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=False,
    allow_methods=["GET", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Content-Length", "X-Requested-With"],
    max_age=settings.CORS_MAX_AGE,
)


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=FailResponse(message=message).model_dump(),
    )


@app.exception_handler(MortgageError)
async def mortgage_error_handler(request: Request, exc: MortgageError):
    """Convert calculator failures to the fail envelope."""
    return _fail(FAIL_STATUS, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed parameters are reported as wrong input types."""
    logger.debug("Request validation failed: %s", exc.errors())
    return _fail(FAIL_STATUS, InvalidInputType().message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap framework HTTP errors (404, 405, ...) in the fail envelope."""
    return _fail(exc.status_code, f"Error: {exc.detail}")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error: an unexpected error occurred")


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(calculator.router, prefix=settings.API_PREFIX, tags=["calculator"])
app.include_router(interest_rate.router, prefix=settings.API_PREFIX, tags=["interest-rate"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Mortgage Calculator API"}
