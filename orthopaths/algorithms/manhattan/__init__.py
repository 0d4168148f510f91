"""Manhattan (4-connected) routing algorithms."""
from .dijkstra import DijkstraPathfinder, SearchNode, NEIGHBOR_OFFSETS
from .disjoint_router import DisjointPathRouter

__all__ = ['DijkstraPathfinder', 'SearchNode', 'NEIGHBOR_OFFSETS', 'DisjointPathRouter']
