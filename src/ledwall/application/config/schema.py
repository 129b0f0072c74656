"""Pydantic models for the cabinet catalog configuration file.

A catalog file replaces the built-in cabinet types and predefined ratios:

    {
      "schema_version": "1.0",
      "cabinets": [
        {"name": "16:9", "width": 600, "height": 337.5}
      ],
      "ratios": [
        {"label": "16:9", "value": 1.7778}
      ]
    }
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for catalog files
# Version 1.0: Cabinet types and predefined ratios
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CabinetTypeConfig(BaseModel):
    """A cabinet tile entry.

    Attributes:
        name: Short identifier shown in results.
        width: Tile width in millimeters.
        height: Tile height in millimeters.
        label: Optional display label.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    width: float = Field(..., gt=0, le=10_000)
    height: float = Field(..., gt=0, le=10_000)
    label: str | None = None


class RatioConfig(BaseModel):
    """A predefined aspect ratio entry."""

    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., min_length=1)
    value: float = Field(..., gt=0)


class CatalogConfiguration(BaseModel):
    """Root model of a catalog configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinets: list[CabinetTypeConfig] = Field(..., min_length=1)
    ratios: list[RatioConfig] | None = Field(
        default=None, description="Predefined ratios (built-in list when omitted)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("cabinets")
    @classmethod
    def validate_unique_names(
        cls, v: list[CabinetTypeConfig]
    ) -> list[CabinetTypeConfig]:
        """Ensure cabinet names are unique."""
        names = [cabinet.name for cabinet in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate cabinet names: {', '.join(duplicates)}")
        return v
