"""Grid state and layout generation."""
from .grid import RoutingGrid, NO_PATH
from .layout import WallLayoutGenerator

__all__ = ['RoutingGrid', 'NO_PATH', 'WallLayoutGenerator']
