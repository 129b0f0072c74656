"""Pydantic schemas for the REST API."""

from ledwall.web.schemas.requests import CalculateRequest
from ledwall.web.schemas.responses import (
    CabinetTypeSchema,
    CalculateResponseSchema,
    CalculationResultSchema,
    ErrorResponseSchema,
    GeometrySchema,
    RatioSchema,
    ScreenConfigSchema,
)

__all__ = [
    "CabinetTypeSchema",
    "CalculateRequest",
    "CalculateResponseSchema",
    "CalculationResultSchema",
    "ErrorResponseSchema",
    "GeometrySchema",
    "RatioSchema",
    "ScreenConfigSchema",
]
