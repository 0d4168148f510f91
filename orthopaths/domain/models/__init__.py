"""Domain models."""
from .grid import CellType, GridPoint, Path, NOT_FOUND_COST
from .routing import RoutingResult

__all__ = ['CellType', 'GridPoint', 'Path', 'NOT_FOUND_COST', 'RoutingResult']
