"""
Data models for graph path finding.

This module provides the core data structures used throughout the path finding package:
- PathResult: Container for single-pair search results
- ShortestPaths: Container for single-source shortest path trees
- PerformanceMetrics: Container for algorithm performance metrics
- PathValidationError: Exception for path validation failures

A search that finds nothing returns a result whose ``path`` is ``None``. That is
distinct from the zero-length path ``[start]`` returned when start and goal coincide.

Example:
    >>> result = PathResult(path=[1, 2, 6], cost=2.0, nodes_explored=4)
    >>> result.found
    True
    >>> result.edge_count
    2
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from ..models import NodeID
from .utils import is_path


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Nodes missing from the graph
    - Consecutive nodes without a connecting edge
    - Directed edges traversed against their orientation
    """

    pass


@dataclass
class PathResult:
    """
    Container for single-pair path finding results.

    Attributes:
        path: Sequence of nodes from start to goal, or None when no path exists
        cost: Total true cost of the path (hop count for unweighted searches)
        nodes_explored: Search effort diagnostic; visited nodes for breadth-first
            and depth-first search, expanded nodes for Dijkstra and A*

    Example:
        >>> result = finder.find_path(1, 14)
        >>> if result:
        ...     print(f"Path goes through nodes: {result.path}")
    """

    path: Optional[List[NodeID]]
    cost: float = 0.0
    nodes_explored: int = 0

    def __post_init__(self):
        """Validate initialization parameters."""
        if self.path is not None and not isinstance(self.path, list):
            raise TypeError("path must be a list or None")

        if not isinstance(self.cost, (int, float)):
            raise TypeError("cost must be a numeric value")

        if not isinstance(self.nodes_explored, int):
            raise TypeError("nodes_explored must be an integer")
        if self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @classmethod
    def not_found(cls, nodes_explored: int = 0, cost: float = math.inf) -> "PathResult":
        """Create a result for an unreachable goal."""
        return cls(path=None, cost=cost, nodes_explored=nodes_explored)

    @property
    def found(self) -> bool:
        """Whether the search reached its goal."""
        return self.path is not None

    @property
    def edge_count(self) -> int:
        """Number of edges on the path, 0 when no path was found."""
        return len(self.path) - 1 if self.path else 0

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.path) if self.path else 0

    def __iter__(self) -> Iterator[NodeID]:
        """Return an iterator over the path nodes."""
        return iter(self.path or [])

    def validate(self, graph: object) -> None:
        """
        Validate the path against a graph.

        Args:
            graph: The graph the path was computed on

        Raises:
            PathValidationError: If the path references unknown nodes or missing edges
        """
        if self.path is None:
            return
        if not is_path(self.path, graph):
            raise PathValidationError(f"Path {self.path} is not a valid path in the graph")


@dataclass
class ShortestPaths:
    """
    Single-source shortest path tree.

    Attributes:
        source: Node the search started from
        paths: Best path from source to every reachable node
        costs: Total cost of each path in ``paths``
        nodes_explored: Number of nodes expanded by the search

    Unreachable nodes are absent from both mappings.

    Example:
        >>> tree = DijkstraFinder(graph).shortest_paths(1)
        >>> tree.path_to(5), tree.cost_to(5)
        ([1, 3, 6, 5], 20.0)
    """

    source: NodeID
    paths: Dict[NodeID, List[NodeID]] = field(default_factory=dict)
    costs: Dict[NodeID, float] = field(default_factory=dict)
    nodes_explored: int = 0

    def __contains__(self, node: NodeID) -> bool:
        return node in self.costs

    def __len__(self) -> int:
        return len(self.costs)

    def path_to(self, node: NodeID) -> Optional[List[NodeID]]:
        """Get the shortest path to ``node`` or None if it is unreachable."""
        path = self.paths.get(node)
        return list(path) if path is not None else None

    def cost_to(self, node: NodeID) -> float:
        """Get the shortest path cost to ``node``, infinity if unreachable."""
        return self.costs.get(node, math.inf)

    def result_for(self, node: NodeID) -> PathResult:
        """Get the single-pair result for ``node``."""
        if node not in self.costs:
            return PathResult.not_found(self.nodes_explored)
        return PathResult(
            path=self.path_to(node),
            cost=self.costs[node],
            nodes_explored=self.nodes_explored,
        )


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of nodes of the found path (if applicable)
        nodes_explored: Number of nodes explored during search
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="a_star", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if not isinstance(self.end_time, (int, float)):
            raise TypeError("end_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
