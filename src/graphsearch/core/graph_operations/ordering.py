"""Degeneracy ordering and k-core decomposition of undirected graphs.

Implements the Matula–Beck algorithm as described by Batagelj and Zaversnik
(arXiv:cs/0310049): repeatedly remove a node of minimum remaining degree. Degrees
live in a bucket queue of sets, so each removal and each degree decrement is O(1)
and the whole run is O(V + E).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..capabilities import is_directed, undirected_adjacency
from ..exceptions import GraphCapabilityError
from ..models import NodeID
from ..types import UndirectedAdjacency

logger = logging.getLogger(__name__)


@dataclass
class VertexOrdering:
    """
    Result of a degeneracy ordering.

    Attributes:
        order: Nodes in reverse removal order; the last removed node comes first
        cores: ``cores[k]`` holds the nodes whose core number is ``k``, i.e. nodes of
            the k-core that are not in the (k+1)-core. ``cores[0]`` always exists and
            holds the isolated nodes.
    """

    order: List[NodeID] = field(default_factory=list)
    cores: List[Set[NodeID]] = field(default_factory=lambda: [set()])

    @property
    def degeneracy(self) -> int:
        """Largest k for which the graph has a non-empty k-core."""
        return len(self.cores) - 1

    @property
    def core_numbers(self) -> Dict[NodeID, int]:
        """Map each node to its core number."""
        return {node: k for k, members in enumerate(self.cores) for node in members}

    def k_core(self, k: int) -> Set[NodeID]:
        """Nodes of the k-core: the maximal subgraph with minimum degree ``k``."""
        if k < 0:
            raise ValueError("k must be non-negative")
        return set().union(*self.cores[k:])


def order_adjacency(adjacency: Dict[NodeID, Set[NodeID]]) -> VertexOrdering:
    """Compute the degeneracy ordering of a self-loop free adjacency map."""
    degrees: Dict[NodeID, int] = {node: len(neighbors) for node, neighbors in adjacency.items()}
    max_degree = max(degrees.values(), default=0)

    # buckets[d] holds the remaining nodes with d remaining neighbours
    buckets: List[Set[NodeID]] = [set() for _ in range(max_degree + 1)]
    for node, degree in degrees.items():
        buckets[degree].add(node)

    removal_order: List[NodeID] = []
    cores: List[Set[NodeID]] = [set()]
    k = 0
    lowest = 0

    for _ in range(len(adjacency)):
        while not buckets[lowest]:
            lowest += 1

        if lowest > k:
            k = lowest
            cores.extend(set() for _ in range(k - len(cores) + 1))

        node = buckets[lowest].pop()
        removal_order.append(node)
        cores[k].add(node)
        del degrees[node]

        for neighbor in adjacency[node]:
            degree = degrees.get(neighbor)
            if degree is None:
                continue
            buckets[degree].remove(neighbor)
            buckets[degree - 1].add(neighbor)
            degrees[neighbor] = degree - 1

        # Removing a node lowers neighbour degrees by at most one
        lowest = max(lowest - 1, 0)

    removal_order.reverse()
    logger.debug(f"Degeneracy ordering of {len(removal_order)} nodes, k={k}")
    return VertexOrdering(order=removal_order, cores=cores)


def degeneracy_ordering(graph: UndirectedAdjacency) -> VertexOrdering:
    """Compute the degeneracy ordering and core decomposition of an undirected graph.

    Ties between nodes of equal remaining degree are broken arbitrarily; they only
    change the order within a tie group, never the core partition.

    Raises:
        GraphCapabilityError: If the graph is directed or has no undirected adjacency.

    Example:
        >>> ordering = degeneracy_ordering(graph)
        >>> ordering.degeneracy
        3
        >>> ordering.cores
        [set(), {5}, {3}, {0, 1, 2, 4, 6}]
    """
    if is_directed(graph) or not isinstance(graph, UndirectedAdjacency):
        raise GraphCapabilityError(
            f"Vertex ordering requires an undirected graph, got {type(graph).__name__}"
        )
    return order_adjacency(undirected_adjacency(graph))
