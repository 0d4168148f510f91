"""Greedy sequential construction of interior-disjoint shortest paths."""
import logging
from typing import Optional

from ...domain.models.grid import GridPoint, Path
from ...domain.models.routing import RoutingResult
from ...shared.exceptions import AlgorithmError
from ...shared.utils.performance_utils import timing_context
from ..base.grid import RoutingGrid
from .dijkstra import DijkstraPathfinder

logger = logging.getLogger(__name__)


class DisjointPathRouter:
    """Finds up to K shortest paths that share no interior cell.

    Each found path's interior is stamped into the grid occupancy before the
    next search, so later paths route around earlier ones. Paths are only
    locally optimal: earlier paths are never rerouted to make room for more.
    The stamps stay in the grid after the run; reset it to start over.
    """

    def __init__(self, pathfinder: Optional[DijkstraPathfinder] = None):
        self.pathfinder = pathfinder or DijkstraPathfinder()

    def route(self, grid: RoutingGrid, start: GridPoint, end: GridPoint,
              path_count: int) -> RoutingResult:
        """Find up to path_count disjoint paths from start to end.

        Stops at the first failed search and returns the paths found so far,
        possibly none.
        """
        result = RoutingResult(start=start, end=end, requested_paths=path_count)

        logger.info(f"Finding {path_count} shortest disjoint paths from {start} to {end}")

        with timing_context("disjoint routing", logger) as timing:
            for index in range(path_count):
                path = self.pathfinder.find_path(grid, start, end)

                if not path.found:
                    logger.info(f"No more paths found after {index} of {path_count}")
                    break

                self._check_path(path, index)
                result.paths.append(path)
                logger.info(f"Path {index + 1} cost: {path.cost}")

                self._stamp_path(grid, path, index, start, end)

        result.elapsed_seconds = timing.elapsed_seconds
        return result

    def _stamp_path(self, grid: RoutingGrid, path: Path, index: int,
                    start: GridPoint, end: GridPoint):
        """Mark every non-endpoint cell of path as taken by path index."""
        for point in path.points:
            if point == start or point == end:
                continue
            grid.stamp(point, index)

    def _check_path(self, path: Path, index: int):
        issues = path.validate_connectivity()
        if issues:
            raise AlgorithmError(
                f"Search returned a broken path: {'; '.join(issues)}",
                algorithm_name="dijkstra",
                path_index=index
            )
