# This project was developed with assistance from AI tools.
"""Shared schema components."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SuccessEnvelope(BaseModel):
    """Base for successful responses: ``result`` plus camelCase payload fields."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: Literal["success"] = "success"
