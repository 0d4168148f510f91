"""Publisher interface for routing session events.

A RoutingSession publishes CellSelected, SelectionRejected, RoutingStarted,
PathRouted, RoutingCompleted, GridCleared and GridRegenerated through this
interface; presentation code such as ConsoleReporter subscribes to them.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Type

from ...domain.events.routing_events import DomainEvent

EventHandler = Callable[[DomainEvent], None]


class EventPublisher(ABC):
    """Delivers session events to subscribed handlers."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Deliver event to handlers of its type and of DomainEvent."""

    @abstractmethod
    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Register handler for event_type; DomainEvent receives every event."""

    @abstractmethod
    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Remove a handler registered with subscribe."""

    @abstractmethod
    def get_event_history(self, count: int = 100) -> List[DomainEvent]:
        """Most recent published events, oldest first."""
