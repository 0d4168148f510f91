"""Base routing grid implementation."""
import logging
from typing import Iterable, Iterator, Optional

import numpy as np

from ...domain.models.grid import CellType, GridPoint
from ...shared.exceptions import GridError

logger = logging.getLogger(__name__)

# Occupancy value of a cell that no path has claimed
NO_PATH = -1

_CHAR_TO_CELL = {
    '.': CellType.EMPTY,
    '#': CellType.WALL,
    'S': CellType.START,
    'E': CellType.END,
}


class RoutingGrid:
    """Fixed-size obstacle grid with a path occupancy overlay.

    Cell classification and occupancy are parallel (height, width) numpy
    arrays indexed [y, x]. Walls are set at construction (or by
    replace_walls) and survive reset(); occupancy accumulates stamps from
    found paths until clear_occupancy() or reset().
    """

    def __init__(self, width: int, height: int, walls: Optional[np.ndarray] = None):
        """Initialize routing grid.

        Args:
            width: Number of columns
            height: Number of rows
            walls: Optional boolean mask of shape (height, width)
        """
        if width <= 0 or height <= 0:
            raise GridError(f"Grid dimensions must be positive, got {width}x{height}",
                            grid_bounds=(width, height))

        self.width = width
        self.height = height

        self.cell_array = np.full((height, width), CellType.EMPTY.value, dtype=np.int8)
        self.occupancy_array = np.full((height, width), NO_PATH, dtype=np.int32)

        if walls is not None:
            self._apply_walls(walls)

        logger.debug(f"Initialized routing grid: {width}x{height} with {self.wall_count} walls")

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'RoutingGrid':
        """Build a grid from text rows: '#' wall, '.' empty, 'S' start, 'E' end."""
        rows = [row.strip() for row in rows if row.strip()]
        if not rows:
            raise GridError("Grid needs at least one row")

        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise GridError("All grid rows must have the same length",
                            grid_bounds=(width, len(rows)))

        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char not in _CHAR_TO_CELL:
                    raise GridError(f"Unknown grid character {char!r} at ({x}, {y})")
                grid.cell_array[y, x] = _CHAR_TO_CELL[char].value
        return grid

    def _apply_walls(self, walls: np.ndarray):
        walls = np.asarray(walls, dtype=bool)
        if walls.shape != (self.height, self.width):
            raise GridError(
                f"Wall mask shape {walls.shape} does not match grid {(self.height, self.width)}",
                grid_bounds=(self.width, self.height)
            )
        self.cell_array[:] = CellType.EMPTY.value
        self.cell_array[walls] = CellType.WALL.value

    # --- Queries ---------------------------------------------------------

    def is_in_bounds(self, point: GridPoint) -> bool:
        """Check if grid position is inside the grid."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def _require_in_bounds(self, point: GridPoint):
        if not self.is_in_bounds(point):
            raise GridError(f"Position {point} is outside {self.width}x{self.height} grid",
                            grid_bounds=(self.width, self.height))

    def get_cell_type(self, point: GridPoint) -> CellType:
        """Get classification of grid cell."""
        self._require_in_bounds(point)
        return CellType(int(self.cell_array[point.y, point.x]))

    def get_occupant(self, point: GridPoint) -> Optional[int]:
        """Get index of the path occupying a cell, or None."""
        self._require_in_bounds(point)
        value = int(self.occupancy_array[point.y, point.x])
        return None if value == NO_PATH else value

    def is_wall(self, point: GridPoint) -> bool:
        return self.get_cell_type(point) == CellType.WALL

    def is_occupied(self, point: GridPoint) -> bool:
        return self.get_occupant(point) is not None

    def is_traversable(self, point: GridPoint, target: GridPoint) -> bool:
        """Check whether a search heading for target may enter point.

        The target is enterable even when a previous path occupies it, so a
        shared end cell never blocks later searches.
        """
        if not self.is_in_bounds(point):
            return False
        if self.cell_array[point.y, point.x] == CellType.WALL.value:
            return False
        if point == target:
            return True
        return bool(self.occupancy_array[point.y, point.x] == NO_PATH)

    def iter_points(self) -> Iterator[GridPoint]:
        """Iterate over every position in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield GridPoint(x, y)

    @property
    def wall_count(self) -> int:
        return int(np.count_nonzero(self.cell_array == CellType.WALL.value))

    # --- Mutation --------------------------------------------------------

    def set_cell_type(self, point: GridPoint, cell_type: CellType):
        """Classify a non-wall cell; used to mark start and end."""
        self._require_in_bounds(point)
        if cell_type == CellType.WALL or self.is_wall(point):
            raise GridError(f"Walls are fixed per layout, cannot set {cell_type.name} at {point}")
        self.cell_array[point.y, point.x] = cell_type.value

    def stamp(self, point: GridPoint, path_index: int):
        """Record that path path_index occupies a cell."""
        self._require_in_bounds(point)
        self.occupancy_array[point.y, point.x] = path_index

    def clear_occupancy(self):
        """Remove every path stamp."""
        self.occupancy_array[:] = NO_PATH
        logger.debug("Cleared path occupancy")

    def reset(self):
        """Clear occupancy and every non-wall cell, keeping the wall layout."""
        self.cell_array[self.cell_array != CellType.WALL.value] = CellType.EMPTY.value
        self.clear_occupancy()
        logger.debug(f"Reset grid, kept {self.wall_count} walls")

    def replace_walls(self, walls: np.ndarray):
        """Install a new wall layout and clear everything else."""
        self._apply_walls(walls)
        self.clear_occupancy()
        logger.debug(f"Installed new wall layout with {self.wall_count} walls")

    def get_statistics(self) -> dict:
        """Get grid statistics."""
        total_cells = self.width * self.height
        wall_cells = self.wall_count
        occupied_cells = int(np.count_nonzero(self.occupancy_array != NO_PATH))

        return {
            'dimensions': f"{self.width}x{self.height}",
            'total_cells': total_cells,
            'wall_cells': wall_cells,
            'open_cells': total_cells - wall_cells,
            'occupied_cells': occupied_cells,
            'utilization': occupied_cells / total_cells * 100,
        }
