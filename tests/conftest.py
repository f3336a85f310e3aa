"""
Shared pytest fixtures for bracket engine tests.

Running tests:
    pytest tests/
"""
import pytest

from engine.seeding import build
from ingestion.regions_loader import load_default_regions
from models.team import Team


AUBURN = Team("Auburn", 1)
ALST = Team("ALST/SFC", 16)
LOUISVILLE = Team("Louisville", 8)
CREIGHTON = Team("Creighton", 9)
MICHIGAN = Team("Michigan", 5)
TEXAS_AM = Team("Texas A&M", 4)
YALE = Team("Yale", 13)
FLORIDA = Team("Florida", 1)
HOUSTON = Team("Houston", 1)
SIUE = Team("SIU-Edwardsville", 16)


@pytest.fixture(scope="session")
def regions():
    """The bundled 2025 field (South, West, East, Midwest)."""
    return load_default_regions()


@pytest.fixture
def bracket(regions):
    """A freshly seeded bracket with no picks."""
    return build(regions)
