"""Domain events emitted by a routing session."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from ..models.grid import GridPoint, Path
from ..models.routing import RoutingResult


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True)
class CellSelected(DomainEvent):
    """Event fired when the start or end cell is chosen."""
    point: GridPoint
    role: str  # 'start' or 'end'


@dataclass(frozen=True)
class SelectionRejected(DomainEvent):
    """Event fired when a selection is ignored."""
    point: Optional[GridPoint]
    reason: str


@dataclass(frozen=True)
class RoutingStarted(DomainEvent):
    """Event fired before the first search of a K-path run."""
    start: GridPoint
    end: GridPoint
    requested_paths: int


@dataclass(frozen=True)
class PathRouted(DomainEvent):
    """Event fired for each path of a completed run, in discovery order."""
    index: int
    path: Path


@dataclass(frozen=True)
class RoutingCompleted(DomainEvent):
    """Event fired when a K-path run finishes, complete or not."""
    result: RoutingResult

    @property
    def exhausted(self) -> bool:
        """True if the run stopped early because no route remained."""
        return not self.result.is_complete


@dataclass(frozen=True)
class GridCleared(DomainEvent):
    """Event fired when endpoints and paths are cleared on the same walls."""
    wall_count: int


@dataclass(frozen=True)
class GridRegenerated(DomainEvent):
    """Event fired when a new random wall layout is installed."""
    wall_count: int
    seed: Optional[int] = None
