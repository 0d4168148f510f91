"""Application services."""
from .routing_session import RoutingSession, SelectionOutcome, screen_to_grid

__all__ = ['RoutingSession', 'SelectionOutcome', 'screen_to_grid']
