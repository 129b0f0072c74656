"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ledwall.domain import CalculationResult, InputField, ResolvedGeometry, Unit


@dataclass
class ScreenInput:
    """Input DTO for a screen calculation.

    Linear values are in ``unit``; ``ratio`` is unitless. Fields left as
    None (or set to a non-positive value) are treated as not provided.
    """

    width: float | None = None
    height: float | None = None
    diagonal: float | None = None
    ratio: float | None = None
    unit: Unit = Unit.METERS

    def to_fields(self) -> dict[InputField, float | None]:
        """Return the field map expected by the dimension resolver."""
        return {
            InputField.WIDTH: self.width,
            InputField.HEIGHT: self.height,
            InputField.DIAGONAL: self.diagonal,
            InputField.RATIO: self.ratio,
        }


@dataclass
class ScreenOutput:
    """Output DTO for a screen calculation."""

    geometry: ResolvedGeometry | None
    results: list[CalculationResult] = field(default_factory=list)
    unit: Unit = Unit.METERS
    errors: list[str] = field(default_factory=list)
    error_type: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the calculation succeeded."""
        return not self.errors and self.geometry is not None
