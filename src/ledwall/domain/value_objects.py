"""Value objects for the LED wall domain.

All lengths are in millimeters (the canonical unit) unless noted otherwise.
Ratios are unitless width/height quotients.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """Display units a user may enter dimensions in."""

    INCHES = "inches"
    FEET = "feet"
    METERS = "meters"


class InputField(str, Enum):
    """Geometric quantities a raw input value can represent."""

    WIDTH = "width"
    HEIGHT = "height"
    DIAGONAL = "diagonal"
    RATIO = "ratio"


class ConfigTag(str, Enum):
    """Whether a candidate grid rounds the row count down or up."""

    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class CabinetType:
    """A display cabinet tile that screens are assembled from.

    Attributes:
        name: Short identifier, e.g. "16:9".
        width: Tile width in millimeters.
        height: Tile height in millimeters.
        label: Human readable description. Derived from the name and size
            when not given.
    """

    name: str
    width: float
    height: float
    label: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Cabinet name must not be empty")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Cabinet dimensions must be positive")
        if not self.label:
            object.__setattr__(
                self, "label", f"{self.name} ({self.width:g}×{self.height:g} mm)"
            )

    @property
    def ratio(self) -> float:
        """Aspect ratio of a single tile."""
        return self.width / self.height


@dataclass(frozen=True)
class PredefinedRatio:
    """A commonly used aspect ratio offered as a shortcut."""

    label: str
    value: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Ratio value must be positive")


@dataclass(frozen=True)
class ResolvedGeometry:
    """Fully determined target screen geometry in canonical units."""

    width: float
    height: float
    diagonal: float
    ratio: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.diagonal <= 0 or self.ratio <= 0:
            raise ValueError("Resolved geometry values must be positive")

    @property
    def area(self) -> float:
        """Screen area in square millimeters."""
        return self.width * self.height


@dataclass(frozen=True)
class ScreenConfig:
    """One candidate grid of cabinets for a single cabinet type."""

    columns: int
    rows: int
    total_width: float
    total_height: float
    diagonal: float
    ratio: float
    ratio_error: float
    tag: ConfigTag

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Grid must have at least one column and one row")

    @property
    def cabinet_count(self) -> int:
        """Number of tiles needed to build this grid."""
        return self.columns * self.rows


@dataclass(frozen=True)
class CalculationResult:
    """Lower and upper candidates for one cabinet type.

    Either candidate is None when no positive grid exists for its row count.
    """

    cabinet: CabinetType
    lower: ScreenConfig | None = None
    upper: ScreenConfig | None = None

    @property
    def candidates(self) -> list[ScreenConfig]:
        """Present candidates, lower first."""
        return [config for config in (self.lower, self.upper) if config is not None]
