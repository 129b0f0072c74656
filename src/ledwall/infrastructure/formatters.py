"""Output formatters and exporters for screen calculations."""

from __future__ import annotations

import json
from typing import Any

from ledwall.application.dtos import ScreenOutput
from ledwall.domain import (
    CabinetType,
    CalculationResult,
    PredefinedRatio,
    ResolvedGeometry,
    ScreenConfig,
    Unit,
    from_canonical,
)

_UNIT_SUFFIX = {Unit.INCHES: "in", Unit.FEET: "ft", Unit.METERS: "m"}


def format_mm(mm: float, unit: Unit) -> str:
    """Format a millimeter length in ``unit`` with two decimals."""
    return f"{from_canonical(mm, unit):.2f}"


def format_dimension(mm: float) -> str:
    """Format a length in meters from 1000 mm up, otherwise in millimeters.

    Example:
        >>> format_dimension(1500)
        '1.50 m'
        >>> format_dimension(337.5)
        '337.5 mm'
    """
    if mm >= 1000:
        return f"{mm / 1000:.2f} m"
    return f"{mm:.1f} mm"


class ResultsFormatter:
    """Formats a screen calculation as a text report."""

    def format(self, output: ScreenOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        assert output.geometry is not None
        lines = self._format_target(output.geometry, output.unit)
        for result in output.results:
            lines.append("")
            lines.extend(self._format_result(result, output.unit))
        return "\n".join(lines)

    def _format_target(self, geometry: ResolvedGeometry, unit: Unit) -> list[str]:
        suffix = _UNIT_SUFFIX[unit]
        return [
            "TARGET SCREEN",
            "=" * 60,
            f"Width:    {format_mm(geometry.width, unit)} {suffix} "
            f"({format_dimension(geometry.width)})",
            f"Height:   {format_mm(geometry.height, unit)} {suffix} "
            f"({format_dimension(geometry.height)})",
            f"Diagonal: {format_mm(geometry.diagonal, unit)} {suffix} "
            f"({format_dimension(geometry.diagonal)})",
            f"Ratio:    {geometry.ratio:.3f}:1",
        ]

    def _format_result(self, result: CalculationResult, unit: Unit) -> list[str]:
        lines = [
            f"CABINET {result.cabinet.label}",
            "-" * 60,
        ]
        for title, config in (("Lower", result.lower), ("Upper", result.upper)):
            if config is None:
                lines.append(f"{title}: No valid configuration")
                continue
            lines.append(f"{title}: {self._format_config(config, unit)}")
        return lines

    def _format_config(self, config: ScreenConfig, unit: Unit) -> str:
        suffix = _UNIT_SUFFIX[unit]
        return (
            f"{config.columns} x {config.rows} ({config.cabinet_count} cabinets), "
            f"{format_mm(config.total_width, unit)} x "
            f"{format_mm(config.total_height, unit)} {suffix}, "
            f"diagonal {format_mm(config.diagonal, unit)} {suffix}, "
            f"ratio {config.ratio:.3f}, error {config.ratio_error:.2f}%"
        )


class CatalogFormatter:
    """Formats cabinet types and predefined ratios as tables."""

    def format_cabinets(self, cabinets: list[CabinetType]) -> str:
        lines = [
            f"{'Name':<12} {'Width (mm)':<12} {'Height (mm)':<12} {'Ratio'}",
            "-" * 48,
        ]
        for cabinet in cabinets:
            lines.append(
                f"{cabinet.name:<12} {cabinet.width:<12g} {cabinet.height:<12g} "
                f"{cabinet.ratio:.3f}"
            )
        return "\n".join(lines)

    def format_ratios(self, ratios: list[PredefinedRatio]) -> str:
        lines = [f"{'Label':<10} {'Value'}", "-" * 20]
        for ratio in ratios:
            lines.append(f"{ratio.label:<10} {ratio.value:.4f}")
        return "\n".join(lines)


class JsonResultsExporter:
    """Exports a screen calculation as JSON. Lengths are in millimeters."""

    def export(self, output: ScreenOutput) -> str:
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: ScreenOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": output.errors, "error_type": output.error_type}

        assert output.geometry is not None
        geometry = output.geometry
        return {
            "unit": output.unit.value,
            "geometry": {
                "width": geometry.width,
                "height": geometry.height,
                "diagonal": geometry.diagonal,
                "ratio": geometry.ratio,
            },
            "results": [self._format_result(result) for result in output.results],
        }

    def _format_result(self, result: CalculationResult) -> dict[str, Any]:
        return {
            "cabinet": {
                "name": result.cabinet.name,
                "label": result.cabinet.label,
                "width": result.cabinet.width,
                "height": result.cabinet.height,
                "ratio": result.cabinet.ratio,
            },
            "lower": self._format_config(result.lower),
            "upper": self._format_config(result.upper),
        }

    def _format_config(self, config: ScreenConfig | None) -> dict[str, Any] | None:
        if config is None:
            return None
        return {
            "columns": config.columns,
            "rows": config.rows,
            "cabinet_count": config.cabinet_count,
            "total_width": config.total_width,
            "total_height": config.total_height,
            "diagonal": config.diagonal,
            "ratio": config.ratio,
            "ratio_error": config.ratio_error,
            "type": config.tag.value,
        }
