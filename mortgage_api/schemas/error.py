# This project was developed with assistance from AI tools.
"""Failure envelope returned by every endpoint on error."""

from typing import Literal

from pydantic import BaseModel, Field


class FailResponse(BaseModel):
    """Uniform failure payload: ``{"result": "fail", "message": ...}``."""

    result: Literal["fail"] = "fail"
    message: str = Field(description="Human-readable explanation of the failure.")
