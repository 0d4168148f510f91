"""Console status output driven by session events."""
import sys
from typing import TextIO

from ..application.interfaces.event_publisher import EventPublisher
from ..domain.events.routing_events import (
    CellSelected, SelectionRejected, RoutingStarted, PathRouted, RoutingCompleted,
    GridCleared, GridRegenerated
)

SEPARATOR = "-" * 40


class ConsoleReporter:
    """Writes human-readable status lines for session events."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def attach(self, publisher: EventPublisher) -> 'ConsoleReporter':
        """Subscribe to the events this reporter prints."""
        publisher.subscribe(CellSelected, self.on_cell_selected)
        publisher.subscribe(SelectionRejected, self.on_selection_rejected)
        publisher.subscribe(RoutingStarted, self.on_routing_started)
        publisher.subscribe(PathRouted, self.on_path_routed)
        publisher.subscribe(RoutingCompleted, self.on_routing_completed)
        publisher.subscribe(GridCleared, self.on_grid_cleared)
        publisher.subscribe(GridRegenerated, self.on_grid_regenerated)
        return self

    def _write(self, line: str):
        print(line, file=self.stream)

    def on_cell_selected(self, event: CellSelected):
        label = "Start" if event.role == "start" else "End"
        self._write(f"{label} set at ({event.point.x}, {event.point.y})")

    def on_selection_rejected(self, event: SelectionRejected):
        self._write(event.reason)

    def on_routing_started(self, event: RoutingStarted):
        self._write(f"Finding {event.requested_paths} shortest disjoint paths...")
        self._write(SEPARATOR)

    def on_path_routed(self, event: PathRouted):
        self._write(f"  Path {event.index + 1} Cost: {event.path.cost}")

    def on_routing_completed(self, event: RoutingCompleted):
        if event.exhausted:
            self._write("No more paths found.")
        self._write(SEPARATOR)
        self._write("Path search complete.")

    def on_grid_cleared(self, event: GridCleared):
        self._write("Grid cleared for new pathfinding.")

    def on_grid_regenerated(self, event: GridRegenerated):
        self._write("Grid randomized and reset.")
