"""Typer CLI for LED wall calculations."""

from pathlib import Path
from typing import Annotated

import typer

from ledwall.application import CalculateScreenCommand, ScreenInput
from ledwall.application.config import (
    ConfigError,
    config_to_cabinet_types,
    config_to_ratios,
    load_catalog_config,
)
from ledwall.domain import (
    CABINET_TYPES,
    PREDEFINED_RATIOS,
    CabinetType,
    PredefinedRatio,
    parse_ratio,
    parse_unit,
)
from ledwall.infrastructure import CatalogFormatter, JsonResultsExporter, ResultsFormatter

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="ledwall",
    help="Find the cabinet grids that best match a target LED screen size.",
)


def _load_catalog(
    catalog_file: Path | None,
) -> tuple[list[CabinetType], list[PredefinedRatio]]:
    """Load the cabinet catalog, or return the built-in one.

    Exits with code 1 when the catalog file cannot be loaded.
    """
    if catalog_file is None:
        return list(CABINET_TYPES), list(PREDEFINED_RATIOS)

    try:
        config = load_catalog_config(catalog_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return config_to_cabinet_types(config), config_to_ratios(config)


CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Path to JSON cabinet catalog file"),
]


@app.command()
def calculate(
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Screen width in the selected unit"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Screen height in the selected unit"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", "-d", help="Screen diagonal in the selected unit"),
    ] = None,
    ratio: Annotated[
        str | None,
        typer.Option("--ratio", "-r", help="Aspect ratio, e.g. 1.778 or 16:9"),
    ] = None,
    unit: Annotated[
        str,
        typer.Option("--unit", "-u", help="Unit of linear inputs: inches, feet, meters"),
    ] = "meters",
    catalog_file: CatalogOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """Calculate cabinet grids from any two of width, height, diagonal and ratio.

    Example:
        ledwall calculate --width 4 --ratio 16:9 --unit meters
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        display_unit = parse_unit(unit)
        ratio_value = parse_ratio(ratio) if ratio is not None else None
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    cabinet_types, _ = _load_catalog(catalog_file)

    screen_input = ScreenInput(
        width=width,
        height=height,
        diagonal=diagonal,
        ratio=ratio_value,
        unit=display_unit,
    )
    result = CalculateScreenCommand(cabinet_types).execute(screen_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonResultsExporter().export(result))
    else:
        typer.echo(ResultsFormatter().format(result))


@app.command()
def cabinets(catalog_file: CatalogOption = None) -> None:
    """List the available cabinet types."""
    cabinet_types, _ = _load_catalog(catalog_file)
    typer.echo(CatalogFormatter().format_cabinets(cabinet_types))


@app.command()
def ratios(catalog_file: CatalogOption = None) -> None:
    """List the predefined aspect ratios."""
    _, predefined = _load_catalog(catalog_file)
    typer.echo(CatalogFormatter().format_ratios(predefined))


if __name__ == "__main__":
    app()
