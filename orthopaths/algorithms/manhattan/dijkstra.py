"""Uniform-cost (Dijkstra) pathfinding on the 4-connected routing grid."""
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ...domain.models.grid import GridPoint, Path
from ..base.grid import RoutingGrid

logger = logging.getLogger(__name__)

# Expansion order: up, right, down, left (y grows downward)
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

MOVE_COST = 1


@dataclass(order=True)
class SearchNode:
    """Frontier entry. Equal costs pop in insertion order."""
    cost: int
    sequence: int
    point: GridPoint = field(compare=False)


class DijkstraPathfinder:
    """Single-source, single-target shortest path search.

    Every move costs 1, so the settled cost of the end cell is the length of
    the returned path. Occupied cells are avoided through
    RoutingGrid.is_traversable, which always admits the end cell.
    """

    def find_path(self, grid: RoutingGrid, start: GridPoint, end: GridPoint) -> Path:
        """Find the shortest path from start to end on the current grid.

        Returns:
            The path, or Path.not_found() if the start is blocked or the end
            cannot be reached.
        """
        if not grid.is_traversable(start, end):
            logger.debug(f"Start {start} is blocked, skipping search")
            return Path.not_found()

        sequence = itertools.count()
        open_set: List[SearchNode] = []
        heapq.heappush(open_set, SearchNode(0, next(sequence), start))

        best_cost: Dict[GridPoint, int] = {start: 0}
        came_from: Dict[GridPoint, GridPoint] = {}
        settled = set()

        while open_set:
            current_node = heapq.heappop(open_set)
            current = current_node.point

            # Stale duplicate of a cell settled earlier
            if current in settled:
                continue
            settled.add(current)

            if current == end:
                path = self._reconstruct_path(came_from, start, end, current_node.cost)
                logger.debug(f"Dijkstra found path of cost {path.cost} "
                             f"after settling {len(settled)} cells")
                return path

            for dx, dy in NEIGHBOR_OFFSETS:
                neighbor = current.offset(dx, dy)

                if not grid.is_traversable(neighbor, end):
                    continue

                if neighbor in settled:
                    continue

                tentative_cost = current_node.cost + MOVE_COST
                if tentative_cost < best_cost.get(neighbor, float('inf')):
                    best_cost[neighbor] = tentative_cost
                    came_from[neighbor] = current
                    heapq.heappush(open_set, SearchNode(tentative_cost, next(sequence), neighbor))

        logger.debug(f"Dijkstra found no path from {start} to {end} "
                     f"after settling {len(settled)} cells")
        return Path.not_found()

    def _reconstruct_path(self, came_from: Dict[GridPoint, GridPoint],
                          start: GridPoint, end: GridPoint, cost: int) -> Path:
        """Walk parent links back from end, then reverse to start-to-end order."""
        points = [end]
        current = end
        while current != start:
            current = came_from[current]
            points.append(current)
        points.reverse()
        return Path(points=tuple(points), cost=cost)
