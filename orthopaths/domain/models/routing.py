"""Domain model for the outcome of a disjoint path run."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .grid import GridPoint, Path


@dataclass
class RoutingResult:
    """Paths found by one K-path run, in discovery order.

    Fewer paths than requested is a normal outcome: the search ran out of
    routes that avoid the cells already taken.
    """
    start: GridPoint
    end: GridPoint
    requested_paths: int
    paths: List[Path] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def found_count(self) -> int:
        return len(self.paths)

    @property
    def is_complete(self) -> bool:
        """True when every requested path was found."""
        return self.found_count >= self.requested_paths

    @property
    def costs(self) -> List[int]:
        return [path.cost for path in self.paths]

    @property
    def total_cost(self) -> int:
        return sum(self.costs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "start": [self.start.x, self.start.y],
            "end": [self.end.x, self.end.y],
            "requested_paths": self.requested_paths,
            "found_paths": self.found_count,
            "total_cost": self.total_cost,
            "elapsed_seconds": self.elapsed_seconds,
            "paths": [path.to_dict() for path in self.paths],
        }
