"""Application commands (use cases) for screen calculation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ledwall.domain import CABINET_TYPES, CabinetType, ResolutionError, optimize, resolve

from .dtos import ScreenInput, ScreenOutput

logger = logging.getLogger(__name__)


class CalculateScreenCommand:
    """Command to resolve a target screen and find cabinet grids for it."""

    def __init__(self, catalog: Sequence[CabinetType] | None = None) -> None:
        self.catalog: list[CabinetType] = list(
            CABINET_TYPES if catalog is None else catalog
        )

    def execute(self, screen_input: ScreenInput) -> ScreenOutput:
        """Execute the calculation.

        Resolution failures are reported in the returned output rather than
        raised, so callers can display them next to the inputs.

        Args:
            screen_input: Partial screen dimensions and their display unit.

        Returns:
            ScreenOutput with the resolved geometry and one result per
            cabinet type, or with errors.
        """
        try:
            geometry = resolve(screen_input.to_fields(), screen_input.unit)
        except ResolutionError as e:
            logger.debug(f"Resolution failed ({e.error_type}): {e.message}")
            return ScreenOutput(
                geometry=None,
                unit=screen_input.unit,
                errors=[e.message],
                error_type=e.error_type,
            )

        logger.debug(
            f"Resolved target {geometry.width:.1f} x {geometry.height:.1f} mm "
            f"(ratio {geometry.ratio:.4f})"
        )
        results = optimize(geometry, self.catalog)
        for result in results:
            logger.debug(
                f"Cabinet {result.cabinet.name}: "
                f"{len(result.candidates)} candidate(s)"
            )
        return ScreenOutput(geometry=geometry, results=results, unit=screen_input.unit)
