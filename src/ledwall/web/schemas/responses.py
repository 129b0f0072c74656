"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class GeometrySchema(BaseModel):
    """Resolved target geometry."""

    width: float = Field(..., description="Width in millimeters")
    height: float = Field(..., description="Height in millimeters")
    diagonal: float = Field(..., description="Diagonal in millimeters")
    ratio: float = Field(..., description="Width/height ratio")


class CabinetTypeSchema(BaseModel):
    """Cabinet tile type."""

    name: str = Field(..., description="Cabinet identifier")
    label: str = Field(..., description="Display label")
    width: float = Field(..., description="Tile width in millimeters")
    height: float = Field(..., description="Tile height in millimeters")
    ratio: float = Field(..., description="Tile aspect ratio")


class ScreenConfigSchema(BaseModel):
    """Candidate cabinet grid."""

    columns: int = Field(..., description="Number of cabinet columns")
    rows: int = Field(..., description="Number of cabinet rows")
    cabinet_count: int = Field(..., description="Total number of cabinets")
    total_width: float = Field(..., description="Grid width in millimeters")
    total_height: float = Field(..., description="Grid height in millimeters")
    diagonal: float = Field(..., description="Grid diagonal in millimeters")
    ratio: float = Field(..., description="Grid aspect ratio")
    ratio_error: float = Field(..., description="Deviation from target ratio in percent")
    type: str = Field(..., description="'lower' or 'upper'")


class CalculationResultSchema(BaseModel):
    """Lower and upper candidates for one cabinet type."""

    cabinet: CabinetTypeSchema
    lower: ScreenConfigSchema | None = None
    upper: ScreenConfigSchema | None = None


class CalculateResponseSchema(BaseModel):
    """Response for a screen calculation."""

    unit: str = Field(..., description="Display unit of the request")
    geometry: GeometrySchema
    results: list[CalculationResultSchema] = Field(default_factory=list)


class RatioSchema(BaseModel):
    """Predefined aspect ratio."""

    label: str
    value: float


class ErrorResponseSchema(BaseModel):
    """Body of a 422 response for a screen that cannot be calculated."""

    error: str = Field(..., description="Error summary")
    error_type: str = Field(
        ..., description="Error category, e.g. insufficient_inputs or out_of_range"
    )
    details: list[dict[str, str]] = Field(
        default_factory=list, description="One entry with a message per error"
    )
