"""Application layer - use cases and DTOs."""

from .commands import CalculateScreenCommand
from .dtos import ScreenInput, ScreenOutput

__all__ = [
    "CalculateScreenCommand",
    "ScreenInput",
    "ScreenOutput",
]
