"""
Heuristics for A* search and tooling to check them.

A heuristic ``h(node, goal)`` is consistent (monotonic) when every edge ``(u, v)``
satisfies ``h(u, goal) <= cost(u, v) + h(v, goal)`` for every goal. Consistent
heuristics that are zero at the goal are also admissible.

Example:
    >>> def manhattan(a, b):
    ...     (r1, c1), (r2, c2) = coords[a], coords[b]
    ...     return abs(r1 - r2) + abs(c1 - c2)
    >>> is_consistent(grid, manhattan)
    True
"""

import logging
from typing import Optional, Tuple

from ..capabilities import cost_lookup, is_directed, require
from ..models import Edge, NodeID
from ..types import CostFunc, EdgeList, HeuristicFunc, NodeEnumerable
from .utils import EPSILON

logger = logging.getLogger(__name__)


def zero_heuristic(node: NodeID, goal: NodeID) -> float:
    """Heuristic that knows nothing; turns A* into Dijkstra."""
    return 0.0


def find_inconsistency(
    graph: object,
    heuristic: HeuristicFunc,
    cost_func: Optional[CostFunc] = None,
) -> Optional[Tuple[Edge, NodeID]]:
    """Find an edge and goal for which the heuristic is not consistent.

    Every node of the graph is tried as the goal against every edge. Edges of
    undirected graphs are checked in both orientations.

    Returns:
        The violating ``(edge, goal)`` pair, the edge in the violating orientation,
        or None if the heuristic is consistent.

    Raises:
        GraphCapabilityError: If the graph cannot enumerate its nodes and edges.
    """
    require(graph, NodeEnumerable, "Heuristic consistency check")
    require(graph, EdgeList, "Heuristic consistency check")
    cost = cost_lookup(graph, cost_func)
    directed = is_directed(graph)

    edges = list(graph.get_edges())
    for goal in graph.get_nodes():
        for edge in edges:
            orientations = (edge,) if directed else (edge, edge.reversed())
            for oriented in orientations:
                bound = cost(edge) + heuristic(oriented.tail, goal)
                if heuristic(oriented.head, goal) > bound + EPSILON:
                    logger.debug(f"Heuristic inconsistent on {oriented} towards {goal}")
                    return oriented, goal
    return None


def is_consistent(
    graph: object,
    heuristic: HeuristicFunc,
    cost_func: Optional[CostFunc] = None,
) -> bool:
    """Check whether the heuristic is consistent over every edge and goal."""
    return find_inconsistency(graph, heuristic, cost_func) is None
