"""Graph path finding functionality."""

from typing import Optional, Sequence

from ..models import NodeID
from ..types import CostFunc, HeuristicFunc
from .algorithms.astar import AStarFinder
from .algorithms.dijkstra import DijkstraFinder
from .algorithms.traversal import BreadthFirstFinder, DepthFirstFinder
from .base import PathFinder
from .heuristics import find_inconsistency, is_consistent, zero_heuristic
from .models import PathResult, PathValidationError, PerformanceMetrics, ShortestPaths
from .types import PathType
from .utils import EPSILON, PriorityQueue, is_path

__all__ = [
    "AStarFinder",
    "BreadthFirstFinder",
    "DepthFirstFinder",
    "DijkstraFinder",
    "EPSILON",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "PriorityQueue",
    "ShortestPaths",
    "find_inconsistency",
    "is_consistent",
    "is_path",
    "zero_heuristic",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def is_path(path: Optional[Sequence[NodeID]], graph: object) -> bool:
        """Check whether a node sequence is a valid path in the graph."""
        return is_path(path, graph)

    @staticmethod
    def breadth_first_search(graph: object, start_node: NodeID, end_node: NodeID) -> PathResult:
        """Find the path with the fewest edges."""
        return BreadthFirstFinder(graph).find_path(start_node, end_node)

    @staticmethod
    def depth_first_search(graph: object, start_node: NodeID, end_node: NodeID) -> PathResult:
        """Find any path by depth-first traversal."""
        return DepthFirstFinder(graph).find_path(start_node, end_node)

    @staticmethod
    def dijkstra(
        graph: object, source: NodeID, cost_func: Optional[CostFunc] = None
    ) -> ShortestPaths:
        """Compute shortest paths from ``source`` to every reachable node."""
        return DijkstraFinder(graph, cost_func=cost_func).shortest_paths(source)

    @staticmethod
    def shortest_path(
        graph: object,
        start_node: NodeID,
        end_node: NodeID,
        cost_func: Optional[CostFunc] = None,
    ) -> PathResult:
        """Find the cheapest path between two nodes with Dijkstra's algorithm."""
        return DijkstraFinder(graph, cost_func=cost_func).find_path(start_node, end_node)

    @staticmethod
    def a_star(
        graph: object,
        start_node: NodeID,
        end_node: NodeID,
        heuristic: Optional[HeuristicFunc] = None,
        cost_func: Optional[CostFunc] = None,
    ) -> PathResult:
        """Find the cheapest path between two nodes guided by ``heuristic``."""
        return AStarFinder(graph, cost_func=cost_func).find_path(
            start_node, end_node, heuristic=heuristic
        )

    @classmethod
    def find_path(
        cls,
        graph: object,
        start_node: NodeID,
        end_node: NodeID,
        path_type: PathType = PathType.DIJKSTRA,
        heuristic: Optional[HeuristicFunc] = None,
        cost_func: Optional[CostFunc] = None,
    ) -> PathResult:
        """Generic single-pair path finding interface."""
        if not isinstance(path_type, PathType):
            raise ValueError(f"Unknown path type: {path_type!r}")

        if path_type == PathType.BREADTH_FIRST:
            return cls.breadth_first_search(graph, start_node, end_node)
        if path_type == PathType.DEPTH_FIRST:
            return cls.depth_first_search(graph, start_node, end_node)
        if path_type == PathType.A_STAR:
            return cls.a_star(graph, start_node, end_node, heuristic, cost_func)
        return cls.shortest_path(graph, start_node, end_node, cost_func)
