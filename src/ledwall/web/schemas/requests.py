"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ledwall.domain import Unit, parse_ratio, parse_unit


class CalculateRequest(BaseModel):
    """Request for a screen calculation.

    Provide exactly two of width, height, diagonal and ratio. Non-positive
    values count as not provided.
    """

    width: float | None = Field(default=None, description="Screen width in unit")
    height: float | None = Field(default=None, description="Screen height in unit")
    diagonal: float | None = Field(default=None, description="Screen diagonal in unit")
    ratio: float | None = Field(
        default=None, description="Aspect ratio as a number or 'W:H' text"
    )
    unit: Unit = Field(default=Unit.METERS, description="Unit of linear values")

    @field_validator("ratio", mode="before")
    @classmethod
    def parse_ratio_text(cls, v: Any) -> Any:
        """Accept ratios written as 'W:H'."""
        if isinstance(v, str):
            return parse_ratio(v)
        return v

    @field_validator("unit", mode="before")
    @classmethod
    def parse_unit_alias(cls, v: Any) -> Any:
        """Accept unit names and common abbreviations."""
        if isinstance(v, str):
            return parse_unit(v)
        return v
