"""Application service driving one interactive disjoint-path session."""
import logging
from enum import Enum
from typing import Optional

from ...algorithms.base.grid import RoutingGrid
from ...algorithms.base.layout import WallLayoutGenerator
from ...algorithms.manhattan.disjoint_router import DisjointPathRouter
from ...domain.events.routing_events import (
    CellSelected, SelectionRejected, RoutingStarted, PathRouted,
    RoutingCompleted, GridCleared, GridRegenerated
)
from ...domain.models.grid import CellType, GridPoint
from ...domain.models.routing import RoutingResult
from ...infrastructure.persistence.event_bus import EventBus
from ...shared.configuration.settings import ApplicationSettings
from ..interfaces.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class SelectionOutcome(Enum):
    """What a cell selection did."""
    START_SET = "start_set"
    END_SET = "end_set"
    LOCKED = "locked"
    IGNORED_OUT_OF_BOUNDS = "out_of_bounds"
    IGNORED_WALL = "wall"
    IGNORED_SAME_AS_START = "same_as_start"


def screen_to_grid(screen_x: int, screen_y: int, cell_size: int) -> GridPoint:
    """Convert a pixel position to the cell under it."""
    return GridPoint(screen_x // cell_size, screen_y // cell_size)


class RoutingSession:
    """Owns a grid and turns start/end selections into K-path runs.

    The first accepted selection marks the start, the second marks the end
    and immediately runs the router. After that the session is locked until
    clear() (same walls) or regenerate() (new walls).
    """

    def __init__(self,
                 settings: Optional[ApplicationSettings] = None,
                 event_publisher: Optional[EventPublisher] = None,
                 generator: Optional[WallLayoutGenerator] = None,
                 router: Optional[DisjointPathRouter] = None,
                 grid: Optional[RoutingGrid] = None):
        """Initialize routing session.

        Args:
            settings: Application settings; defaults are used if None
            event_publisher: Receives session events; a private EventBus if None
            generator: Wall layout source; built from grid settings if None
            router: Disjoint path router
            grid: Pre-built grid to use instead of generating a layout
        """
        self.settings = settings or ApplicationSettings()
        self.event_publisher = event_publisher or EventBus()
        self.generator = generator or WallLayoutGenerator(
            wall_probability=self.settings.grid.wall_probability,
            seed=self.settings.grid.seed
        )
        self.router = router or DisjointPathRouter()

        if grid is None:
            width, height = self.settings.grid.width, self.settings.grid.height
            grid = RoutingGrid(width, height, walls=self.generator.generate(width, height))
        self.grid = grid

        self.start: Optional[GridPoint] = None
        self.end: Optional[GridPoint] = None
        self.result: Optional[RoutingResult] = None

    @property
    def path_count(self) -> int:
        return self.settings.routing.path_count

    @property
    def is_locked(self) -> bool:
        """True once paths have been computed for the current endpoints."""
        return self.result is not None

    def select_cell(self, point: GridPoint) -> SelectionOutcome:
        """Apply one start/end selection."""
        if not self.grid.is_in_bounds(point):
            return SelectionOutcome.IGNORED_OUT_OF_BOUNDS

        if self.is_locked:
            self.event_publisher.publish(SelectionRejected(
                point=point, reason="Paths already found. Press 'C' or 'R' to reset."
            ))
            return SelectionOutcome.LOCKED

        if self.grid.is_wall(point):
            return SelectionOutcome.IGNORED_WALL

        if self.start is None:
            self.start = point
            self.grid.set_cell_type(point, CellType.START)
            logger.debug(f"Start set at {point}")
            self.event_publisher.publish(CellSelected(point=point, role="start"))
            return SelectionOutcome.START_SET

        if point == self.start:
            return SelectionOutcome.IGNORED_SAME_AS_START

        self.end = point
        self.grid.set_cell_type(point, CellType.END)
        logger.debug(f"End set at {point}")
        self.event_publisher.publish(CellSelected(point=point, role="end"))

        self._run_routing()
        return SelectionOutcome.END_SET

    def select_screen_point(self, screen_x: int, screen_y: int) -> SelectionOutcome:
        """Apply a selection given in window pixels."""
        return self.select_cell(screen_to_grid(screen_x, screen_y, self.settings.display.cell_size))

    def _run_routing(self):
        self.event_publisher.publish(RoutingStarted(
            start=self.start, end=self.end, requested_paths=self.path_count
        ))

        self.result = self.router.route(self.grid, self.start, self.end, self.path_count)

        for index, path in enumerate(self.result.paths):
            self.event_publisher.publish(PathRouted(index=index, path=path))
        self.event_publisher.publish(RoutingCompleted(result=self.result))

        logger.info(f"Routed {self.result.found_count}/{self.path_count} disjoint paths "
                    f"in {self.result.elapsed_seconds * 1000:.1f} ms")

    def clear(self):
        """Forget endpoints and paths, keeping the wall layout."""
        self.grid.reset()
        self._forget_selection()
        self.event_publisher.publish(GridCleared(wall_count=self.grid.wall_count))

    def regenerate(self, seed: Optional[int] = None):
        """Install a fresh random wall layout and forget endpoints and paths.

        Args:
            seed: Restart the generator from this seed; None continues the
                  current random stream
        """
        if seed is not None:
            self.generator.reseed(seed)
        self.grid.replace_walls(self.generator.generate(self.grid.width, self.grid.height))
        self._forget_selection()
        self.event_publisher.publish(GridRegenerated(wall_count=self.grid.wall_count, seed=seed))

    def _forget_selection(self):
        self.start = None
        self.end = None
        self.result = None
