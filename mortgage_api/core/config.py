# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
An optional ``.env`` file in the working directory is honoured as well.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-calculator"
    DEBUG: bool = False
    API_PREFIX: str = Field(
        default="/api/v1",
        description="Path prefix shared by every calculator endpoint.",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["*"]
    CORS_MAX_AGE: int = Field(
        default=86400,
        description="Seconds browsers may cache a preflight response.",
    )

    # -- Rates --
    DEFAULT_INTEREST_RATE: float = Field(
        default=0.025,
        gt=0,
        description="Annual interest rate (fraction) in effect at startup.",
    )

    # -- Server --
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "info"


settings = Settings()
