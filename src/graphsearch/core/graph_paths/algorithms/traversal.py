"""
Unweighted traversal searches.

Breadth-first search explores nodes in strict distance layers and therefore returns
a path with the fewest edges. Depth-first search shares the same bookkeeping with a
LIFO frontier; it returns some path, not necessarily the shortest.

Both mark a node visited when it is put on the frontier, so each node is queued at
most once and cyclic graphs are handled in O(V + E).
"""

import logging
from collections import deque
from typing import Deque, Dict, Set

from ...models import NodeID
from ..base import PathFinder
from ..models import PathResult
from ..utils import rebuild_path

logger = logging.getLogger(__name__)


class _TraversalFinder(PathFinder[PathResult]):
    """Shared frontier search for breadth-first and depth-first traversal."""

    def _take(self, frontier: Deque[NodeID]) -> NodeID:
        raise NotImplementedError

    def find_path(self, start_node: NodeID, end_node: NodeID, **kwargs) -> PathResult:
        """Find a path from ``start_node`` to ``end_node``.

        Returns:
            PathResult whose ``cost`` is the number of edges and whose
            ``nodes_explored`` counts visited nodes, the start included.
        """
        with self._search_context() as metrics:
            result = self._search(start_node, end_node)
            metrics.nodes_explored = result.nodes_explored
            metrics.path_length = len(result) if result.found else None
            return result

    def _search(self, start_node: NodeID, end_node: NodeID) -> PathResult:
        if not self.has_nodes(start_node):
            logger.debug(f"Start node {start_node} not in graph")
            return PathResult.not_found()

        visited: Set[NodeID] = {start_node}
        predecessors: Dict[NodeID, NodeID] = {}
        frontier: Deque[NodeID] = deque([start_node])

        while frontier:
            self.memory_manager.check_memory()
            current = self._take(frontier)

            if current == end_node:
                path = rebuild_path(predecessors, end_node)
                logger.debug(f"Reached {end_node} after visiting {len(visited)} nodes")
                return PathResult(
                    path=path, cost=float(len(path) - 1), nodes_explored=len(visited)
                )

            for neighbor in self.successors(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                predecessors[neighbor] = current
                frontier.append(neighbor)

        logger.debug(f"No path from {start_node} to {end_node}")
        return PathResult.not_found(len(visited))


class BreadthFirstFinder(_TraversalFinder):
    """Breadth-first search returning a path with the fewest edges."""

    operation = "breadth_first_search"

    def _take(self, frontier: Deque[NodeID]) -> NodeID:
        return frontier.popleft()


class DepthFirstFinder(_TraversalFinder):
    """Depth-first search returning the first path it runs into."""

    operation = "depth_first_search"

    def _take(self, frontier: Deque[NodeID]) -> NodeID:
        return frontier.pop()
