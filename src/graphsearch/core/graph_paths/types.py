"""Type definitions for graph path finding."""

from enum import Enum


class PathType(Enum):
    """Enumeration of single-pair path finding strategies."""

    BREADTH_FIRST = "breadth_first"  # Fewest edges, costs ignored
    DEPTH_FIRST = "depth_first"  # Any path, costs ignored
    DIJKSTRA = "dijkstra"  # Non-negative costs only
    A_STAR = "a_star"  # Non-negative costs only
