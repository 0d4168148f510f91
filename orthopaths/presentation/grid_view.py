"""Colour lookup and plain-text rendering of a routing grid."""
from typing import List, Tuple

from ..algorithms.base.grid import RoutingGrid
from ..domain.models.grid import CellType, GridPoint
from ..shared.configuration.settings import DisplaySettings

RGB = Tuple[int, int, int]

_CELL_CHARS = {
    CellType.EMPTY: '.',
    CellType.WALL: '#',
    CellType.START: 'S',
    CellType.END: 'E',
}


def path_color(path_index: int, display: DisplaySettings) -> RGB:
    """Shade for a path; indexes past the palette reuse the lightest shade."""
    palette = display.path_colors
    return tuple(palette[min(path_index, len(palette) - 1)])


def cell_color(grid: RoutingGrid, point: GridPoint, display: DisplaySettings) -> RGB:
    """Fill colour of a cell. Path occupancy wins over the cell type."""
    occupant = grid.get_occupant(point)
    if occupant is not None:
        return path_color(occupant, display)

    cell_type = grid.get_cell_type(point)
    if cell_type == CellType.WALL:
        return tuple(display.wall_color)
    if cell_type == CellType.START:
        return tuple(display.start_color)
    if cell_type == CellType.END:
        return tuple(display.end_color)
    return tuple(display.empty_color)


def cell_char(grid: RoutingGrid, point: GridPoint) -> str:
    """Single character for a cell: path digit 1-9, '*' past 9, else type."""
    occupant = grid.get_occupant(point)
    if occupant is not None:
        return str(occupant + 1) if occupant < 9 else '*'
    return _CELL_CHARS[grid.get_cell_type(point)]


def render_lines(grid: RoutingGrid) -> List[str]:
    return [
        ''.join(cell_char(grid, GridPoint(x, y)) for x in range(grid.width))
        for y in range(grid.height)
    ]


def render_text(grid: RoutingGrid) -> str:
    """Render the grid one text row per grid row."""
    return '\n'.join(render_lines(grid))
