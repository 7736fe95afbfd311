"""
A* single-pair shortest path search.

Nodes are expanded in order of ``g(node) + heuristic(node, goal)`` where ``g`` is the
best known cost from the start. Without a heuristic the search is Dijkstra's
algorithm stopped at the goal.

The returned path is optimal when the heuristic is admissible. When it is also
consistent no node is expanded twice, and the search never expands more nodes than
the zero heuristic would. A closed node is reopened only if a strictly cheaper route
to it turns up, which a consistent heuristic rules out.
"""

import logging
import math
from typing import Dict, Optional, Set

from ...models import NodeID
from ...types import HeuristicFunc
from ..base import PathFinder
from ..heuristics import zero_heuristic
from ..models import PathResult
from ..utils import PriorityQueue, is_better_cost, rebuild_path

logger = logging.getLogger(__name__)


class AStarFinder(PathFinder[PathResult]):
    """Heuristic guided shortest path search over non-negative edge costs."""

    operation = "a_star"

    def find_path(
        self,
        start_node: NodeID,
        end_node: NodeID,
        heuristic: Optional[HeuristicFunc] = None,
        **kwargs,
    ) -> PathResult:
        """Find the cheapest path from ``start_node`` to ``end_node``.

        Args:
            start_node: Node to start from
            end_node: Goal node
            heuristic: Estimate ``heuristic(node, goal)`` of the remaining cost;
                None behaves as the zero heuristic

        Returns:
            PathResult with the true path cost (heuristic excluded) and the number of
            nodes expanded. When the goal is unreachable ``path`` is None and ``cost``
            is infinite.
        """
        if heuristic is None:
            heuristic = zero_heuristic

        with self._search_context() as metrics:
            result = self._search(start_node, end_node, heuristic)
            metrics.nodes_explored = result.nodes_explored
            metrics.path_length = len(result) if result.found else None
            return result

    def _search(self, start_node: NodeID, end_node: NodeID, heuristic: HeuristicFunc) -> PathResult:
        if not self.has_nodes(start_node):
            logger.debug(f"Start node {start_node} not in graph")
            return PathResult.not_found()

        queue = PriorityQueue()
        queue.add_or_update(start_node, heuristic(start_node, end_node))

        g_score: Dict[NodeID, float] = {start_node: 0.0}
        predecessors: Dict[NodeID, NodeID] = {}
        closed: Set[NodeID] = set()
        expanded = 0

        while not queue.empty():
            self.memory_manager.check_memory()
            _, current = queue.pop()
            expanded += 1

            if current == end_node:
                logger.debug(f"Reached {end_node} after expanding {expanded} nodes")
                return PathResult(
                    path=rebuild_path(predecessors, end_node),
                    cost=g_score[end_node],
                    nodes_explored=expanded,
                )

            closed.add(current)
            for neighbor in self.successors(current):
                tentative_g = g_score[current] + self.edge_cost(current, neighbor)
                if math.isinf(tentative_g):
                    continue
                if neighbor in g_score and not is_better_cost(tentative_g, g_score[neighbor]):
                    continue

                if neighbor in closed:
                    # Only reachable with an inconsistent heuristic
                    logger.debug(f"Reopening closed node {neighbor}")
                    closed.discard(neighbor)

                g_score[neighbor] = tentative_g
                predecessors[neighbor] = current
                queue.add_or_update(neighbor, tentative_g + heuristic(neighbor, end_node))

        logger.debug(f"No path from {start_node} to {end_node}")
        return PathResult.not_found(expanded)
