"""FastAPI dependency injection for calculation services."""

from typing import Annotated

from fastapi import Depends, Request

from ledwall.application import CalculateScreenCommand
from ledwall.domain import PredefinedRatio


def get_calculate_command(request: Request) -> CalculateScreenCommand:
    """Dependency for CalculateScreenCommand over the app's cabinet catalog."""
    return CalculateScreenCommand(request.app.state.cabinets)


def get_ratios(request: Request) -> list[PredefinedRatio]:
    """Dependency for the app's predefined ratios."""
    return request.app.state.ratios


CalculateCommandDep = Annotated[CalculateScreenCommand, Depends(get_calculate_command)]
RatiosDep = Annotated[list[PredefinedRatio], Depends(get_ratios)]
