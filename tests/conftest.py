"""Pytest configuration and shared fixtures for furniture tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from furniture.application import FurnitureRequest, GenerateDesignCommand, ShelfModifierInput
from furniture.domain.services import EngineeringCalculator
from furniture.domain.value_objects import Dimensions, FurnitureType, MaterialType

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end pipeline tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def seeded_command() -> GenerateDesignCommand:
    """GenerateDesignCommand with a fixed seed for repeatable layouts."""
    return GenerateDesignCommand(rng=random.Random(42))


@pytest.fixture
def table_spec():
    """Engineering spec for the default 120x80x75 wooden table."""
    return EngineeringCalculator().compute(
        FurnitureType.TABLE, Dimensions(120, 80, 75), MaterialType.WOOD
    )


@pytest.fixture
def bookshelf_request() -> FurnitureRequest:
    """The 90x30x180 bookshelf with two dividers on the top shelf only."""
    return FurnitureRequest(
        furniture_type="bookshelf",
        material="wood",
        length=90,
        width=30,
        height=180,
        shelf_count=5,
        shelf_modifiers=[ShelfModifierInput(target="top", count=2)],
    )
