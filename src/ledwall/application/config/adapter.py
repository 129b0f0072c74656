"""Convert a CatalogConfiguration into domain objects."""

from ledwall.application.config.schema import CatalogConfiguration
from ledwall.domain import PREDEFINED_RATIOS, CabinetType, PredefinedRatio


def config_to_cabinet_types(config: CatalogConfiguration) -> list[CabinetType]:
    """Build the cabinet catalog, preserving file order."""
    return [
        CabinetType(
            name=cabinet.name,
            width=cabinet.width,
            height=cabinet.height,
            label=cabinet.label or "",
        )
        for cabinet in config.cabinets
    ]


def config_to_ratios(config: CatalogConfiguration) -> list[PredefinedRatio]:
    """Build the predefined ratio list, falling back to the built-in ratios."""
    if config.ratios is None:
        return list(PREDEFINED_RATIOS)
    return [PredefinedRatio(label=ratio.label, value=ratio.value) for ratio in config.ratios]
