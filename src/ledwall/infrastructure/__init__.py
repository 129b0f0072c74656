"""Infrastructure layer - output formatting."""

from .formatters import (
    CatalogFormatter,
    JsonResultsExporter,
    ResultsFormatter,
    format_dimension,
    format_mm,
)

__all__ = [
    "CatalogFormatter",
    "JsonResultsExporter",
    "ResultsFormatter",
    "format_dimension",
    "format_mm",
]
