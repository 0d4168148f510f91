"""Test configuration and fixtures for orthopaths."""
import pytest
from unittest.mock import MagicMock

from orthopaths.algorithms.base.grid import RoutingGrid
from orthopaths.application.interfaces.event_publisher import EventPublisher
from orthopaths.domain.models.grid import GridPoint
from orthopaths.infrastructure.persistence.event_bus import EventBus


@pytest.fixture
def open_grid():
    """3x3 grid with no walls."""
    return RoutingGrid(3, 3)


@pytest.fixture
def grid_from_rows():
    """Build a grid from text rows ('#' wall, '.' empty)."""
    def build(*rows):
        return RoutingGrid.from_rows(rows)
    return build


@pytest.fixture
def corner_points():
    """Top-left and bottom-right corners of the 3x3 grid."""
    return GridPoint(0, 0), GridPoint(2, 2)


@pytest.fixture
def mock_publisher():
    """Publisher that records calls without dispatching."""
    return MagicMock(spec=EventPublisher)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Keep config discovery away from any orthopaths.json in the real cwd."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
