"""Maximal clique enumeration with the Bron–Kerbosch algorithm.

The outer loop walks the nodes in degeneracy order (Eppstein, Löffler and Strash),
which keeps the candidate set of every top level call no larger than the graph's
degeneracy. Inner calls use Tomita pivoting: the pivot is the node of
``candidates | excluded`` with the most neighbours among the candidates, and only
candidates outside the pivot's neighbourhood are branched on.
"""

import logging
from typing import Dict, List, Set

from ..capabilities import is_directed, undirected_adjacency
from ..exceptions import GraphCapabilityError
from ..models import NodeID
from ..types import UndirectedAdjacency
from .ordering import order_adjacency

logger = logging.getLogger(__name__)


class CliqueFinder:
    """
    Enumerates the maximal cliques of an undirected graph.

    A clique is maximal when no other node is adjacent to all of its members.
    Isolated nodes are singleton cliques and self-loops are ignored.

    Example:
        >>> CliqueFinder(graph).find_cliques()
        [{3, 5}, {2, 3}, {3, 4}, {1, 2}, {0, 1, 4}]
    """

    def __init__(self, graph: UndirectedAdjacency):
        if is_directed(graph) or not isinstance(graph, UndirectedAdjacency):
            raise GraphCapabilityError(
                f"Clique enumeration requires an undirected graph, got {type(graph).__name__}"
            )
        self.adjacency: Dict[NodeID, Set[NodeID]] = undirected_adjacency(graph)
        self._cliques: List[Set[NodeID]] = []

    def find_cliques(self) -> List[Set[NodeID]]:
        """Return every maximal clique exactly once, in no particular order."""
        self._cliques = []
        candidates = set(self.adjacency)
        excluded: Set[NodeID] = set()

        # Degeneracy order is the reverse of VertexOrdering.order
        for node in reversed(order_adjacency(self.adjacency).order):
            neighbors = self.adjacency[node]
            self._expand([node], candidates & neighbors, excluded & neighbors)
            candidates.remove(node)
            excluded.add(node)

        logger.debug(f"Found {len(self._cliques)} maximal cliques")
        return self._cliques

    def _choose_pivot(self, candidates: Set[NodeID], excluded: Set[NodeID]) -> NodeID:
        return max(candidates | excluded, key=lambda node: len(candidates & self.adjacency[node]))

    def _expand(
        self, clique: List[NodeID], candidates: Set[NodeID], excluded: Set[NodeID]
    ) -> None:
        """Extend ``clique`` with every combination of candidates.

        ``candidates`` are nodes adjacent to every clique member that may still be
        added; ``excluded`` are such nodes whose cliques were already reported.
        """
        if not candidates and not excluded:
            self._cliques.append(set(clique))
            return

        pivot = self._choose_pivot(candidates, excluded)

        # Frame-local copies; the caller's sets are never modified
        candidates = set(candidates)
        excluded = set(excluded)
        for node in candidates - self.adjacency[pivot]:
            neighbors = self.adjacency[node]
            self._expand(clique + [node], candidates & neighbors, excluded & neighbors)
            candidates.remove(node)
            excluded.add(node)


def find_maximal_cliques(graph: UndirectedAdjacency) -> List[Set[NodeID]]:
    """Enumerate all maximal cliques of an undirected graph."""
    return CliqueFinder(graph).find_cliques()
