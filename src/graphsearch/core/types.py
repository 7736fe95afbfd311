"""
Core type definitions and protocols.

This module provides the capability protocols a graph may implement. Algorithms are
written against the smallest set of capabilities they need, so any object exposing
the right methods can be searched without adapting it to a concrete graph class.

A graph is directed when it implements ``get_successors`` and undirected when it
implements ``get_neighbors``. ``get_edge`` is directional for directed graphs and
orientation-agnostic for undirected graphs.
"""

from typing import Callable, Iterable, Optional, Protocol, Set, runtime_checkable

from .models import Edge, NodeID


@runtime_checkable
class NodeEnumerable(Protocol):
    """Protocol for graphs that can list and test their nodes."""

    def get_nodes(self) -> Set[NodeID]:
        """Get all nodes currently in the graph."""
        ...

    def has_node(self, node: NodeID) -> bool:
        """Check if a node exists in the graph."""
        ...


@runtime_checkable
class DirectedAdjacency(Protocol):
    """Protocol for directed adjacency lookups."""

    def get_successors(self, node: NodeID) -> Iterable[NodeID]:
        """Get nodes reachable from ``node`` over one outgoing edge."""
        ...

    def get_edge(self, from_node: NodeID, to_node: NodeID) -> Optional[Edge]:
        """Get the edge running from ``from_node`` to ``to_node`` if it exists."""
        ...


@runtime_checkable
class UndirectedAdjacency(Protocol):
    """Protocol for undirected adjacency lookups."""

    def get_neighbors(self, node: NodeID) -> Iterable[NodeID]:
        """Get nodes sharing an edge with ``node``."""
        ...

    def get_edge(self, from_node: NodeID, to_node: NodeID) -> Optional[Edge]:
        """Get the edge between two nodes regardless of stored orientation."""
        ...


@runtime_checkable
class EdgeCoster(Protocol):
    """Protocol for graphs carrying edge costs."""

    def get_cost(self, edge: Edge) -> float:
        """Get the cost of traversing ``edge``."""
        ...


@runtime_checkable
class EdgeList(Protocol):
    """Protocol for graphs that can enumerate their edges."""

    def get_edges(self) -> Iterable[Edge]:
        """Get all edges in the graph."""
        ...


@runtime_checkable
class DirectedGraph(NodeEnumerable, DirectedAdjacency, Protocol):
    """Node enumeration plus directed adjacency."""


@runtime_checkable
class UndirectedGraph(NodeEnumerable, UndirectedAdjacency, Protocol):
    """Node enumeration plus undirected adjacency."""


# Type alias for edge cost functions
CostFunc = Callable[[Edge], float]

# Type alias for heuristics: heuristic(node, goal) -> estimated remaining cost
HeuristicFunc = Callable[[NodeID, NodeID], float]
