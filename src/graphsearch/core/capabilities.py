"""
Capability dispatch helpers.

Algorithms ask this module for the adjacency, edge and cost lookups of a graph
instead of branching on the graph's type themselves. Directed graphs are preferred
when an object implements both adjacency protocols.
"""

from typing import Callable, Dict, Iterable, Optional, Set

from .exceptions import GraphCapabilityError
from .models import Edge, NodeID
from .types import (
    CostFunc,
    DirectedAdjacency,
    EdgeCoster,
    NodeEnumerable,
    UndirectedAdjacency,
)

SuccessorFunc = Callable[[NodeID], Iterable[NodeID]]
EdgeLookup = Callable[[NodeID, NodeID], Optional[Edge]]


def require(graph: object, protocol: type, operation: str) -> None:
    """Raise GraphCapabilityError unless ``graph`` implements ``protocol``."""
    if not isinstance(graph, protocol):
        raise GraphCapabilityError(
            f"{operation} requires a graph implementing {protocol.__name__}, "
            f"got {type(graph).__name__}"
        )


def is_directed(graph: object) -> bool:
    """Check whether the graph exposes directed adjacency."""
    return isinstance(graph, DirectedAdjacency)


def successors_of(graph: object) -> SuccessorFunc:
    """Get the function listing the nodes one step away from a node."""
    if isinstance(graph, DirectedAdjacency):
        return graph.get_successors
    if isinstance(graph, UndirectedAdjacency):
        return graph.get_neighbors
    raise GraphCapabilityError(
        f"{type(graph).__name__} implements neither get_successors nor get_neighbors"
    )


def edge_lookup(graph: object) -> EdgeLookup:
    """Get the function returning the edge that lets a walk go from u to v."""
    if isinstance(graph, DirectedAdjacency):
        return graph.get_edge
    if isinstance(graph, UndirectedAdjacency):

        def either_orientation(u: NodeID, v: NodeID) -> Optional[Edge]:
            edge = graph.get_edge(u, v)
            if edge is None:
                edge = graph.get_edge(v, u)
            return edge

        return either_orientation
    raise GraphCapabilityError(f"{type(graph).__name__} does not implement get_edge")


def uniform_cost(edge: Edge) -> float:
    """Cost function treating every edge as unit cost."""
    return 1.0


def cost_lookup(graph: object, cost_func: Optional[CostFunc] = None) -> CostFunc:
    """Resolve the edge cost function for a search.

    An explicit ``cost_func`` wins, then the graph's own ``get_cost``, then unit cost.
    """
    if cost_func is not None:
        return cost_func
    if isinstance(graph, EdgeCoster):
        return graph.get_cost
    return uniform_cost


def undirected_adjacency(graph: object) -> Dict[NodeID, Set[NodeID]]:
    """Build an undirected adjacency map covering every node of the graph.

    Directed graphs are symmetrised, so the map describes weak connectivity.
    Self-loops are dropped.
    """
    require(graph, NodeEnumerable, "Undirected adjacency")
    successors = successors_of(graph)
    nodes = graph.get_nodes()
    adjacency: Dict[NodeID, Set[NodeID]] = {node: set() for node in nodes}
    for node in nodes:
        for neighbor in successors(node):
            if neighbor == node:
                continue
            adjacency[node].add(neighbor)
            adjacency.setdefault(neighbor, set()).add(node)
    return adjacency
