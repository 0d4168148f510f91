"""Domain events."""
from .routing_events import (
    DomainEvent, CellSelected, SelectionRejected, RoutingStarted,
    PathRouted, RoutingCompleted, GridCleared, GridRegenerated
)

__all__ = [
    'DomainEvent', 'CellSelected', 'SelectionRejected', 'RoutingStarted',
    'PathRouted', 'RoutingCompleted', 'GridCleared', 'GridRegenerated'
]
