"""Path finding algorithm implementations."""

from .astar import AStarFinder
from .dijkstra import DijkstraFinder
from .traversal import BreadthFirstFinder, DepthFirstFinder

__all__ = [
    "AStarFinder",
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
]
