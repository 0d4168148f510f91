"""Domain models for grid cells, positions and paths."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class CellType(Enum):
    """Classification of a grid cell."""
    EMPTY = 0
    WALL = 1
    START = 2
    END = 3


@dataclass(frozen=True)
class GridPoint:
    """Value object for an (x, y) cell position. y grows downward."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'GridPoint':
        return GridPoint(self.x + dx, self.y + dy)

    def manhattan_distance(self, other: 'GridPoint') -> int:
        """Calculate 4-connected grid distance ignoring obstacles."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_adjacent(self, other: 'GridPoint') -> bool:
        return self.manhattan_distance(other) == 1

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


NOT_FOUND_COST = -1


@dataclass(frozen=True)
class Path:
    """Value object for a start-to-end route.

    cost is the number of moves; a path with cost NOT_FOUND_COST and no
    points is the "no route" sentinel returned by a failed search.
    """
    points: Tuple[GridPoint, ...] = field(default_factory=tuple)
    cost: int = NOT_FOUND_COST

    @classmethod
    def not_found(cls) -> 'Path':
        return cls(points=(), cost=NOT_FOUND_COST)

    @property
    def found(self) -> bool:
        return self.cost != NOT_FOUND_COST

    @property
    def start(self) -> GridPoint:
        return self.points[0]

    @property
    def end(self) -> GridPoint:
        return self.points[-1]

    @property
    def interior(self) -> Tuple[GridPoint, ...]:
        """Points strictly between the endpoints."""
        return self.points[1:-1]

    def __len__(self) -> int:
        return len(self.points)

    def validate_connectivity(self) -> List[str]:
        """Check that consecutive points are grid neighbours and cost matches."""
        issues = []

        if not self.found:
            return issues

        if not self.points:
            issues.append("Found path has no points")
            return issues

        for i in range(len(self.points) - 1):
            current = self.points[i]
            next_point = self.points[i + 1]
            if not current.is_adjacent(next_point):
                issues.append(f"Invalid movement at step {i}: {current} -> {next_point}")

        if self.cost != len(self.points) - 1:
            issues.append(f"Cost {self.cost} does not match {len(self.points) - 1} moves")

        return issues

    def to_dict(self) -> dict:
        return {
            "cost": self.cost,
            "points": [[point.x, point.y] for point in self.points],
        }
