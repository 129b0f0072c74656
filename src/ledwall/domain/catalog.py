"""Built-in cabinet catalog and common aspect ratios."""

from __future__ import annotations

from .value_objects import CabinetType, PredefinedRatio

CABINET_TYPES: tuple[CabinetType, ...] = (
    CabinetType(name="16:9", width=600.0, height=337.5),
    CabinetType(name="1:1", width=500.0, height=500.0),
)

PREDEFINED_RATIOS: tuple[PredefinedRatio, ...] = (
    PredefinedRatio(label="16:9", value=16 / 9),
    PredefinedRatio(label="32:9", value=32 / 9),
    PredefinedRatio(label="4:3", value=4 / 3),
    PredefinedRatio(label="24:9", value=24 / 9),
    PredefinedRatio(label="9:16", value=9 / 16),
    PredefinedRatio(label="16:10", value=16 / 10),
    PredefinedRatio(label="2.40:1", value=2.40),
    PredefinedRatio(label="16:18", value=16 / 18),
    PredefinedRatio(label="48:9", value=48 / 9),
)


def parse_ratio(text: str) -> float:
    """Parse an aspect ratio given as a number or as ``W:H``.

    The value is returned as written, so a zero or negative ratio comes back
    as such and is treated as not provided by ``resolve``, the same as a
    numeric ratio.

    Raises:
        ValueError: If the text is not a number or ``W:H`` pair, or the
            ``H`` part is zero.

    Example:
        >>> round(parse_ratio("16:9"), 4)
        1.7778
    """
    if ":" in text:
        left, _, right = text.partition(":")
        try:
            numerator, denominator = float(left), float(right)
        except ValueError:
            raise ValueError(f"Invalid ratio '{text}'") from None
        if denominator == 0:
            raise ValueError(f"Invalid ratio '{text}': height part is zero")
        return numerator / denominator
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid ratio '{text}'") from None
