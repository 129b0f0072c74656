"""Conversion between display units and canonical millimeters."""

from __future__ import annotations

from .value_objects import Unit

MM_PER_UNIT: dict[Unit, float] = {
    Unit.INCHES: 25.4,
    Unit.FEET: 304.8,
    Unit.METERS: 1000.0,
}

_UNIT_ALIASES: dict[str, Unit] = {
    "in": Unit.INCHES,
    "inch": Unit.INCHES,
    "ft": Unit.FEET,
    "foot": Unit.FEET,
    "m": Unit.METERS,
    "meter": Unit.METERS,
}


def to_canonical(value: float, unit: Unit) -> float:
    """Convert a length in ``unit`` to millimeters."""
    return value * MM_PER_UNIT[unit]


def from_canonical(mm: float, unit: Unit) -> float:
    """Convert a length in millimeters to ``unit``."""
    return mm / MM_PER_UNIT[unit]


def parse_unit(text: str | Unit) -> Unit:
    """Parse a unit from its value, name, or a common abbreviation.

    Raises:
        ValueError: If the text does not name a supported unit.

    Example:
        >>> parse_unit("meter")
        <Unit.METERS: 'meters'>
    """
    if isinstance(text, Unit):
        return text
    key = text.strip().lower()
    for unit in Unit:
        if key in (unit.value, unit.name.lower()):
            return unit
    if key in _UNIT_ALIASES:
        return _UNIT_ALIASES[key]
    valid = ", ".join(unit.value for unit in Unit)
    raise ValueError(f"Unknown unit '{text}'. Expected one of: {valid}")
