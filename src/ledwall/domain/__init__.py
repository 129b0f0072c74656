"""Domain layer - geometry resolution and cabinet grid optimization."""

from .catalog import CABINET_TYPES, PREDEFINED_RATIOS, parse_ratio
from .dimension_resolver import (
    InconsistentGeometryError,
    InsufficientInputsError,
    NumericFailureError,
    OutOfRangeError,
    ResolutionError,
    UnsupportedCombinationError,
    resolve,
)
from .grid_optimizer import best_columns_for_rows, optimize, row_bounds
from .units import from_canonical, parse_unit, to_canonical
from .value_objects import (
    CabinetType,
    CalculationResult,
    ConfigTag,
    InputField,
    PredefinedRatio,
    ResolvedGeometry,
    ScreenConfig,
    Unit,
)

__all__ = [
    "CABINET_TYPES",
    "CabinetType",
    "CalculationResult",
    "ConfigTag",
    "InconsistentGeometryError",
    "InputField",
    "InsufficientInputsError",
    "NumericFailureError",
    "OutOfRangeError",
    "PREDEFINED_RATIOS",
    "PredefinedRatio",
    "ResolutionError",
    "ResolvedGeometry",
    "ScreenConfig",
    "Unit",
    "UnsupportedCombinationError",
    "best_columns_for_rows",
    "from_canonical",
    "optimize",
    "parse_ratio",
    "parse_unit",
    "resolve",
    "row_bounds",
    "to_canonical",
]
