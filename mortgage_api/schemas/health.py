# This project was developed with assistance from AI tools.
"""Health check schemas."""

from pydantic import BaseModel


class HealthItem(BaseModel):
    """Status of one component of the service."""

    name: str
    status: str
    message: str
    version: str | None = None
