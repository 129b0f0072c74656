"""Pytest configuration and shared fixtures for ledwall tests."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from ledwall.domain import CabinetType, ResolvedGeometry

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON catalog fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def wide_cabinet() -> CabinetType:
    """Standard 16:9 cabinet (600 x 337.5 mm)."""
    return CabinetType(name="16:9", width=600.0, height=337.5)


@pytest.fixture
def square_cabinet() -> CabinetType:
    """Standard 1:1 cabinet (500 x 500 mm)."""
    return CabinetType(name="1:1", width=500.0, height=500.0)


@pytest.fixture
def geometry_16_9() -> ResolvedGeometry:
    """A 4.8 x 2.7 m target screen (exactly 8 x 8 standard 16:9 cabinets)."""
    return ResolvedGeometry(
        width=4800.0,
        height=2700.0,
        diagonal=math.hypot(4800.0, 2700.0),
        ratio=4800.0 / 2700.0,
    )
