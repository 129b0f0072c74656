"""Target geometry resolution from a partial set of inputs.

A screen is fully described by width, height, diagonal and aspect ratio.
Any two of them determine the other two. This module converts the linear
inputs to millimeters and completes the geometry with closed-form
derivations.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping

from .units import to_canonical
from .value_objects import InputField, ResolvedGeometry, Unit

# Smallest and largest accepted screen side, in millimeters.
MIN_TARGET_MM = 100.0
MAX_TARGET_MM = 100_000.0


class ResolutionError(Exception):
    """Raised when a target geometry cannot be resolved from the inputs.

    Attributes:
        message: Human readable explanation.
        error_type: Machine readable category shared with API clients.
    """

    error_type = "resolution"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InsufficientInputsError(ResolutionError):
    """Fewer than two positive inputs were supplied."""

    error_type = "insufficient_inputs"


class UnsupportedCombinationError(ResolutionError):
    """The supplied inputs do not form one of the supported pairs."""

    error_type = "unsupported_combination"


class InconsistentGeometryError(ResolutionError):
    """A diagonal does not exceed the side it was paired with."""

    error_type = "inconsistent_geometry"


class NumericFailureError(ResolutionError):
    """A derivation produced a non-finite or non-positive value."""

    error_type = "numeric_failure"


class OutOfRangeError(ResolutionError):
    """Derived width or height is outside the supported size range."""

    error_type = "out_of_range"


_Values = dict[InputField, float]


def _from_ratio_width(v: _Values) -> tuple[float, float, float, float]:
    w, r = v[InputField.WIDTH], v[InputField.RATIO]
    h = w / r
    return w, h, math.hypot(w, h), r


def _from_ratio_height(v: _Values) -> tuple[float, float, float, float]:
    h, r = v[InputField.HEIGHT], v[InputField.RATIO]
    w = h * r
    return w, h, math.hypot(w, h), r


def _from_ratio_diagonal(v: _Values) -> tuple[float, float, float, float]:
    d, r = v[InputField.DIAGONAL], v[InputField.RATIO]
    h = d / math.sqrt(1 + r * r)
    return h * r, h, d, r


def _from_width_height(v: _Values) -> tuple[float, float, float, float]:
    w, h = v[InputField.WIDTH], v[InputField.HEIGHT]
    return w, h, math.hypot(w, h), w / h


def _from_width_diagonal(v: _Values) -> tuple[float, float, float, float]:
    w, d = v[InputField.WIDTH], v[InputField.DIAGONAL]
    if d <= w:
        raise InconsistentGeometryError(
            f"Diagonal ({d:.1f} mm) must be greater than width ({w:.1f} mm)"
        )
    h = math.sqrt(d * d - w * w)
    return w, h, d, w / h


def _from_height_diagonal(v: _Values) -> tuple[float, float, float, float]:
    h, d = v[InputField.HEIGHT], v[InputField.DIAGONAL]
    if d <= h:
        raise InconsistentGeometryError(
            f"Diagonal ({d:.1f} mm) must be greater than height ({h:.1f} mm)"
        )
    w = math.sqrt(d * d - h * h)
    return w, h, d, w / h


DERIVATIONS: dict[
    frozenset[InputField], Callable[[_Values], tuple[float, float, float, float]]
] = {
    frozenset({InputField.RATIO, InputField.WIDTH}): _from_ratio_width,
    frozenset({InputField.RATIO, InputField.HEIGHT}): _from_ratio_height,
    frozenset({InputField.RATIO, InputField.DIAGONAL}): _from_ratio_diagonal,
    frozenset({InputField.WIDTH, InputField.HEIGHT}): _from_width_height,
    frozenset({InputField.WIDTH, InputField.DIAGONAL}): _from_width_diagonal,
    frozenset({InputField.HEIGHT, InputField.DIAGONAL}): _from_height_diagonal,
}


def _present_values(
    inputs: Mapping[InputField | str, float | None],
) -> _Values:
    """Keep only the positive inputs, keyed by InputField.

    Raises:
        ValueError: If a key does not name a known input field.
    """
    values: _Values = {}
    for key, value in inputs.items():
        field = key if isinstance(key, InputField) else InputField(key)
        if value is None or not value > 0:
            continue
        values[field] = float(value)
    return values


def resolve(
    inputs: Mapping[InputField | str, float | None],
    unit: Unit,
) -> ResolvedGeometry:
    """Complete a target geometry from two of its four quantities.

    Width, height and diagonal are interpreted in ``unit``; ratio is
    unitless. Missing, ``None`` and non-positive values count as absent.

    Args:
        inputs: Mapping of input field to raw value.
        unit: Display unit of the linear inputs.

    Returns:
        The resolved geometry in millimeters.

    Raises:
        InsufficientInputsError: Fewer than two positive inputs.
        UnsupportedCombinationError: Inputs are not one of the supported pairs.
        InconsistentGeometryError: Diagonal not larger than the given side.
        NumericFailureError: A derived value is not finite and positive.
        OutOfRangeError: Width or height outside [100 mm, 100 000 mm].

    Example:
        >>> g = resolve({"width": 1, "height": 0.5625}, Unit.METERS)
        >>> round(g.diagonal, 2)
        1147.35
    """
    values = _present_values(inputs)
    if len(values) < 2:
        raise InsufficientInputsError(
            f"At least two positive inputs are required, got {len(values)}"
        )

    for field in (InputField.WIDTH, InputField.HEIGHT, InputField.DIAGONAL):
        if field in values:
            values[field] = to_canonical(values[field], unit)

    derive = DERIVATIONS.get(frozenset(values))
    if derive is None:
        names = ", ".join(sorted(field.value for field in values))
        raise UnsupportedCombinationError(
            f"Unsupported input combination: {names}. Provide exactly two values."
        )

    width, height, diagonal, ratio = derive(values)

    for name, value in (
        ("width", width),
        ("height", height),
        ("diagonal", diagonal),
        ("ratio", ratio),
    ):
        if not math.isfinite(value) or value <= 0:
            raise NumericFailureError(f"Derived {name} is not a valid number: {value}")

    for name, value in (("width", width), ("height", height)):
        if value < MIN_TARGET_MM or value > MAX_TARGET_MM:
            raise OutOfRangeError(
                f"Screen {name} ({value:.1f} mm) must be between "
                f"{MIN_TARGET_MM:g} mm and {MAX_TARGET_MM:g} mm"
            )

    return ResolvedGeometry(width=width, height=height, diagonal=diagonal, ratio=ratio)
