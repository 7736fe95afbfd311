import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generator, Optional

from ..capabilities import cost_lookup, edge_lookup, require, successors_of
from ..models import NodeID
from ..types import CostFunc, NodeEnumerable
from .models import PathResult, PerformanceMetrics
from .utils import MemoryManager

logger = logging.getLogger(__name__)


class PathFinder[T: PathResult](ABC):
    """Abstract base class for path finding algorithms.

    Resolves the graph's capabilities once per finder: the successor function
    (``get_successors`` for directed graphs, ``get_neighbors`` otherwise), the edge
    lookup and the cost function.
    """

    operation = "path_search"

    def __init__(
        self,
        graph: NodeEnumerable,
        cost_func: Optional[CostFunc] = None,
        max_memory_mb: Optional[float] = None,
    ):
        """Initialize finder with graph, optional cost override and memory limit."""
        require(graph, NodeEnumerable, type(self).__name__)
        self.graph = graph
        self.successors = successors_of(graph)
        self.get_edge = edge_lookup(graph)
        self.cost = cost_lookup(graph, cost_func)
        self.memory_manager = MemoryManager(max_memory_mb)
        self.last_metrics: Optional[PerformanceMetrics] = None

    @abstractmethod
    def find_path(self, start_node: NodeID, end_node: NodeID, **kwargs) -> T:
        """Find path between nodes."""
        pass

    def has_nodes(self, *nodes: NodeID) -> bool:
        """Check that every given node exists in the graph."""
        return all(self.graph.has_node(node) for node in nodes)

    def edge_cost(self, from_node: NodeID, to_node: NodeID) -> float:
        """Cost of stepping from one node to the next, infinite without an edge."""
        edge = self.get_edge(from_node, to_node)
        if edge is None:
            return float("inf")
        return self.cost(edge)

    @contextmanager
    def _search_context(self) -> Generator[PerformanceMetrics, None, None]:
        """Context manager recording metrics for one search."""
        metrics = PerformanceMetrics(operation=self.operation, start_time=time())
        self.memory_manager.reset()
        try:
            yield metrics
        finally:
            metrics.end_time = time()
            if self.memory_manager.enabled:
                metrics.max_memory_used = self.memory_manager.peak_memory
            self.last_metrics = metrics
            logger.debug(f"{self.operation} finished: {metrics.to_dict()}")
