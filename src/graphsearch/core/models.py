"""
Edge model for the graph search library.

Nodes are plain integer ids and need no model of their own. Edges are identified
by their endpoint pair: ``head -> tail`` for directed graphs, an unordered pair for
undirected graphs. Costs are not stored on the edge; they are looked up through the
graph's ``get_cost`` capability or a caller supplied cost function.
"""

from dataclasses import dataclass
from typing import Tuple

# Type alias for node identities
NodeID = int


@dataclass(frozen=True)
class Edge:
    """
    Connection between two nodes.

    Attributes:
        head (NodeID): Source node for directed graphs, either endpoint otherwise
        tail (NodeID): Target node for directed graphs, the other endpoint otherwise

    Example:
        >>> edge = Edge(1, 2)
        >>> edge.reversed()
        Edge(head=2, tail=1)
    """

    head: NodeID
    tail: NodeID

    @property
    def nodes(self) -> Tuple[NodeID, NodeID]:
        """Endpoint pair in stored orientation."""
        return (self.head, self.tail)

    @property
    def is_self_loop(self) -> bool:
        """Whether both endpoints are the same node."""
        return self.head == self.tail

    def reversed(self) -> "Edge":
        """Return the edge with its endpoints swapped."""
        return Edge(self.tail, self.head)

    def connects(self, node_a: NodeID, node_b: NodeID) -> bool:
        """Check whether the edge joins two nodes, ignoring orientation."""
        return {self.head, self.tail} == {node_a, node_b}
