"""
orthopaths - interior-disjoint shortest paths on an obstacle grid
"""

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = "Greedy K disjoint shortest paths on a 4-connected obstacle grid"

from .domain.models import CellType, GridPoint, Path, RoutingResult
from .algorithms.base import RoutingGrid, WallLayoutGenerator
from .algorithms.manhattan import DijkstraPathfinder, DisjointPathRouter
from .application.services import RoutingSession, SelectionOutcome

__all__ = [
    'CellType', 'GridPoint', 'Path', 'RoutingResult',
    'RoutingGrid', 'WallLayoutGenerator',
    'DijkstraPathfinder', 'DisjointPathRouter',
    'RoutingSession', 'SelectionOutcome',
]
