"""Cabinet grid optimization.

For every cabinet type, the optimizer proposes two grids around the target
height: a lower candidate using the row count rounded down and an upper
candidate using the row count rounded up. For each row count the column
count is chosen to get as close as possible to the target aspect ratio.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .catalog import CABINET_TYPES
from .value_objects import (
    CabinetType,
    CalculationResult,
    ConfigTag,
    ResolvedGeometry,
    ScreenConfig,
)

# Absolute tolerance for treating an exact row count as a whole number.
INTEGER_ROW_EPSILON = 1e-4

# Columns scanned on either side of the estimated column count.
COLUMN_SEARCH_WINDOW = 3


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def row_bounds(target_height: float, cabinet_height: float) -> tuple[int, int]:
    """Return the (lower, upper) row counts for a target height.

    When the target height is effectively a whole multiple of the cabinet
    height, the upper count is one more than that multiple, so the two
    candidates never collapse onto the same grid.

    Example:
        >>> row_bounds(1012.5, 337.5)
        (3, 4)
    """
    exact_rows = target_height / cabinet_height
    lower_rows = math.floor(exact_rows)
    nearest = _round_half_up(exact_rows)
    if abs(exact_rows - nearest) < INTEGER_ROW_EPSILON:
        upper_rows = nearest + 1
    else:
        upper_rows = math.ceil(exact_rows)
    return lower_rows, upper_rows


def realized_ratio(cabinet: CabinetType, columns: int, rows: int) -> float:
    """Aspect ratio of a ``columns`` x ``rows`` grid of ``cabinet`` tiles."""
    return (columns * cabinet.width) / (rows * cabinet.height)


def best_columns_for_rows(
    cabinet: CabinetType,
    rows: int,
    target_ratio: float,
    window: int = COLUMN_SEARCH_WINDOW,
) -> int:
    """Find the column count whose grid ratio is closest to the target.

    Columns are scanned in ``[max(1, c0 - window), c0 + window]`` around the
    estimate ``c0``. The first (smallest) column count reaching the minimum
    error wins.

    Args:
        cabinet: Tile type making up the grid.
        rows: Fixed row count, must be positive.
        target_ratio: Desired width/height ratio.
        window: Half width of the scanned column range.

    Returns:
        The best column count, at least 1.
    """
    estimate = _round_half_up(target_ratio * rows * cabinet.height / cabinet.width)
    best_columns = max(1, estimate)
    best_error = math.inf
    for columns in range(max(1, estimate - window), estimate + window + 1):
        error = abs(realized_ratio(cabinet, columns, rows) - target_ratio)
        if error < best_error:
            best_error = error
            best_columns = columns
    return best_columns


def build_screen_config(
    cabinet: CabinetType,
    columns: int,
    rows: int,
    tag: ConfigTag,
    target_ratio: float,
) -> ScreenConfig:
    """Compute the totals and ratio error of a cabinet grid."""
    total_width = columns * cabinet.width
    total_height = rows * cabinet.height
    ratio = total_width / total_height
    if target_ratio > 0:
        ratio_error = abs(ratio - target_ratio) / target_ratio * 100
    else:
        ratio_error = 0.0
    return ScreenConfig(
        columns=columns,
        rows=rows,
        total_width=total_width,
        total_height=total_height,
        diagonal=math.hypot(total_width, total_height),
        ratio=ratio,
        ratio_error=ratio_error,
        tag=tag,
    )


def _candidate(
    cabinet: CabinetType, rows: int, tag: ConfigTag, target_ratio: float
) -> ScreenConfig | None:
    if rows <= 0:
        return None
    columns = best_columns_for_rows(cabinet, rows, target_ratio)
    if columns <= 0:
        return None
    return build_screen_config(cabinet, columns, rows, tag, target_ratio)


def optimize_cabinet(
    geometry: ResolvedGeometry, cabinet: CabinetType
) -> CalculationResult:
    """Compute the lower and upper candidates for a single cabinet type."""
    lower_rows, upper_rows = row_bounds(geometry.height, cabinet.height)
    return CalculationResult(
        cabinet=cabinet,
        lower=_candidate(cabinet, lower_rows, ConfigTag.LOWER, geometry.ratio),
        upper=_candidate(cabinet, upper_rows, ConfigTag.UPPER, geometry.ratio),
    )


def optimize(
    geometry: ResolvedGeometry,
    catalog: Sequence[CabinetType] = CABINET_TYPES,
) -> list[CalculationResult]:
    """Compute candidate grids for every cabinet type in ``catalog``.

    Results follow catalog order. A cabinet whose lower or upper row count
    is zero gets ``None`` in that slot; this function does not raise for it.
    """
    return [optimize_cabinet(geometry, cabinet) for cabinet in catalog]
