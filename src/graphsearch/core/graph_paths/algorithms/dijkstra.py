"""
Dijkstra's single-source shortest path algorithm.

Edge costs must be non-negative. Negative costs are not detected and lead to
undefined results.

The frontier is a PriorityQueue with lazy decrease-key. A node is closed, and its
cost committed, the first time it is popped; closed nodes are never relaxed again.
"""

import logging
import math
from typing import Dict, List, Optional, Set

from ...models import NodeID
from ..base import PathFinder
from ..models import PathResult, ShortestPaths
from ..utils import PriorityQueue, is_better_cost

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder[PathResult]):
    """Shortest paths over non-negative edge costs."""

    operation = "dijkstra"

    def shortest_paths(self, source: NodeID) -> ShortestPaths:
        """Compute the shortest path and cost from ``source`` to every reachable node.

        Returns:
            ShortestPaths whose ``paths`` and ``costs`` mappings only contain
            reachable nodes; the source maps to ``[source]`` at cost 0.
        """
        with self._search_context() as metrics:
            tree = self._search(source)
            metrics.nodes_explored = tree.nodes_explored
            return tree

    def find_path(self, start_node: NodeID, end_node: NodeID, **kwargs) -> PathResult:
        """Find the cheapest path between two nodes, stopping once the goal is closed."""
        with self._search_context() as metrics:
            result = self._search(start_node, goal=end_node).result_for(end_node)
            metrics.nodes_explored = result.nodes_explored
            metrics.path_length = len(result) if result.found else None
            return result

    def _search(self, source: NodeID, goal: Optional[NodeID] = None) -> ShortestPaths:
        if not self.has_nodes(source):
            logger.debug(f"Source node {source} not in graph")
            return ShortestPaths(source=source)

        logger.debug(f"Starting Dijkstra's algorithm from {source}")
        queue = PriorityQueue()
        queue.add_or_update(source, 0.0)

        costs: Dict[NodeID, float] = {source: 0.0}
        predecessors: Dict[NodeID, NodeID] = {}
        closed: Set[NodeID] = set()
        paths: Dict[NodeID, List[NodeID]] = {}

        while not queue.empty():
            self.memory_manager.check_memory()
            current_cost, current = queue.pop()
            closed.add(current)
            if current == source:
                paths[current] = [current]
            else:
                paths[current] = paths[predecessors[current]] + [current]

            if current == goal:
                break

            for neighbor in self.successors(current):
                if neighbor in closed:
                    continue

                new_cost = current_cost + self.edge_cost(current, neighbor)
                if math.isinf(new_cost):
                    continue

                if neighbor not in costs or is_better_cost(new_cost, costs[neighbor]):
                    costs[neighbor] = new_cost
                    predecessors[neighbor] = current
                    queue.add_or_update(neighbor, new_cost)

        logger.debug(f"Dijkstra from {source} closed {len(closed)} nodes")
        return ShortestPaths(
            source=source,
            paths=paths,
            costs={node: costs[node] for node in closed},
            nodes_explored=len(closed),
        )
