"""
Currency models for the rate table.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class Currency(BaseModel):
    """A supported currency and its rate per one unit of the base currency."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
    )

    code: Annotated[str, Field(min_length=1, description="Currency code")]
    name: Annotated[str, Field(description="Display name")]
    rate: Annotated[float, Field(gt=0, description="Units per one base unit")]
