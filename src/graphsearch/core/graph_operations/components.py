"""Connected component analysis.

This module provides functionality for partitioning a graph into components:
- Connected components of undirected graphs (weakly connected components when the
  graph is directed, i.e. reachable when edge directions are ignored)
- Strongly connected components of directed graphs (mutually reachable following
  edge direction), found with Tarjan's algorithm
- Topological ordering of directed acyclic graphs, derived from the strongly
  connected components

Every traversal here uses an explicit stack or queue, so graph depth is not bounded
by the interpreter's recursion limit.
"""

import logging
from collections import deque
from typing import Callable, Dict, Iterable, Iterator, List, Set, Tuple

from ..capabilities import is_directed, require, undirected_adjacency
from ..exceptions import CycleError, GraphCapabilityError
from ..models import NodeID
from ..types import DirectedAdjacency, NodeEnumerable

logger = logging.getLogger(__name__)


class ComponentAnalysis:
    """Connected component analysis for graphs.

    The analysis methods are implemented as static methods to provide utility-style
    functionality that can be used with any graph implementing the capability
    protocols without maintaining state.
    """

    @staticmethod
    def _find_component_bfs(
        start: NodeID, adjacency: Dict[NodeID, Set[NodeID]], visited: Set[NodeID]
    ) -> Set[NodeID]:
        """Find all nodes in a component using breadth-first search.

        Args:
            start (NodeID): Starting node.
            adjacency (Dict[NodeID, Set[NodeID]]): Undirected adjacency map.
            visited (Set[NodeID]): Set of visited nodes, updated in place.

        Returns:
            Set[NodeID]: Set of nodes in the component.
        """
        component = {start}
        queue = deque([start])
        visited.add(start)

        while queue:
            current_node = queue.popleft()
            for neighbor in adjacency[current_node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.add(neighbor)
                    queue.append(neighbor)

        return component

    @staticmethod
    def find_components(graph: NodeEnumerable) -> List[Set[NodeID]]:
        """Partition the graph into maximal connected node sets.

        Args:
            graph: Undirected graph, or directed graph whose edge directions are
                ignored.

        Returns:
            List[Set[NodeID]]: One set per component. Every node appears in exactly
            one set; isolated nodes form singleton components. The order of the
            components is unspecified.

        Example:
            >>> ComponentAnalysis.find_components(graph)
            [{0}, {1, 2, 3, 4, 5}, {6, 7, 8}]
        """
        adjacency = undirected_adjacency(graph)
        visited: Set[NodeID] = set()
        components = []

        for node in adjacency:
            if node not in visited:
                components.append(
                    ComponentAnalysis._find_component_bfs(node, adjacency, visited)
                )

        logger.debug(f"Found {len(components)} components over {len(adjacency)} nodes")
        return components

    @staticmethod
    def are_connected(graph: NodeEnumerable, node1: NodeID, node2: NodeID) -> bool:
        """Check if two nodes are in the same component."""
        if not graph.has_node(node1) or not graph.has_node(node2):
            return False
        adjacency = undirected_adjacency(graph)
        return node2 in ComponentAnalysis._find_component_bfs(node1, adjacency, set())

    @staticmethod
    def get_largest_component(graph: NodeEnumerable) -> Set[NodeID]:
        """Get the largest connected component, empty for an empty graph."""
        components = ComponentAnalysis.find_components(graph)
        return max(components, key=len, default=set())

    @staticmethod
    def get_isolated_nodes(graph: NodeEnumerable) -> Set[NodeID]:
        """Get nodes without neighbors other than themselves."""
        adjacency = undirected_adjacency(graph)
        return {node for node, neighbors in adjacency.items() if not neighbors}

    @staticmethod
    def _tarjan_scc(
        root: NodeID,
        successors: Callable[[NodeID], Iterable[NodeID]],
        indices: Dict[NodeID, int],
        lowlinks: Dict[NodeID, int],
        stack: List[NodeID],
        on_stack: Set[NodeID],
        strongly_connected_components: List[Set[NodeID]],
    ) -> None:
        """Run Tarjan's strong-connect step from ``root`` without recursion.

        Each entry of ``call_stack`` stands for one recursive call: the node and the
        iterator over its remaining successors.

        Args:
            root (NodeID): Unvisited node to start from.
            successors: Successor lookup of the graph.
            indices (Dict[NodeID, int]): Discovery indices, updated in place.
            lowlinks (Dict[NodeID, int]): Lowest reachable index, updated in place.
            stack (List[NodeID]): Nodes of components still being built.
            on_stack (Set[NodeID]): Membership set for ``stack``.
            strongly_connected_components (List[Set[NodeID]]): Output list.
        """

        def visit(node: NodeID) -> Tuple[NodeID, Iterator[NodeID]]:
            indices[node] = lowlinks[node] = len(indices)
            stack.append(node)
            on_stack.add(node)
            return node, iter(successors(node))

        call_stack = [visit(root)]
        while call_stack:
            node, pending = call_stack[-1]

            descended = False
            for successor in pending:
                if successor not in indices:
                    # Successor has not yet been visited; descend into it
                    call_stack.append(visit(successor))
                    descended = True
                    break
                if successor in on_stack:
                    # Successor is in the component currently being built
                    lowlinks[node] = min(lowlinks[node], indices[successor])
            if descended:
                continue

            call_stack.pop()
            if call_stack:
                parent = call_stack[-1][0]
                lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

            # If node is root of strongly connected component, collect it
            if lowlinks[node] == indices[node]:
                component = set()
                while True:
                    member = stack.pop()
                    on_stack.remove(member)
                    component.add(member)
                    if member == node:
                        break
                strongly_connected_components.append(component)

    @staticmethod
    def find_strongly_connected_components(graph: NodeEnumerable) -> List[Set[NodeID]]:
        """Find all strongly connected components in the directed graph.

        A strongly connected component (SCC) is a maximal set of nodes in which every
        node is reachable from every other node following the direction of edges.

        Args:
            graph: Directed graph.

        Returns:
            List[Set[NodeID]]: Components in reverse topological order of the
            condensation: a component appears before every component that has an
            edge into it.

        Raises:
            GraphCapabilityError: If the graph has no directed adjacency.

        Example:
            >>> ComponentAnalysis.find_strongly_connected_components(graph)
            [{5}, {2, 3, 4, 6}, {0, 1, 7}]

        Note:
            - Each node appears in exactly one component
            - Nodes on no cycle form their own single-node components
            - Node enumeration order only changes the order of components that are
              not reachable from one another
        """
        require(graph, NodeEnumerable, "Strongly connected components")
        if not is_directed(graph):
            raise GraphCapabilityError(
                f"Strongly connected components require {DirectedAdjacency.__name__}, "
                f"got {type(graph).__name__}"
            )

        indices: Dict[NodeID, int] = {}
        lowlinks: Dict[NodeID, int] = {}
        stack: List[NodeID] = []
        on_stack: Set[NodeID] = set()
        strongly_connected_components: List[Set[NodeID]] = []

        for node in graph.get_nodes():
            if node not in indices:
                ComponentAnalysis._tarjan_scc(
                    node,
                    graph.get_successors,
                    indices,
                    lowlinks,
                    stack,
                    on_stack,
                    strongly_connected_components,
                )

        logger.debug(f"Found {len(strongly_connected_components)} strongly connected components")
        return strongly_connected_components

    @staticmethod
    def topological_sort(graph: NodeEnumerable) -> List[NodeID]:
        """Order the nodes of a directed acyclic graph so every edge points forward.

        Raises:
            CycleError: If the graph has a cycle; ``cycles`` lists the offending
                strongly connected components, self-loops included.
        """
        components = ComponentAnalysis.find_strongly_connected_components(graph)

        cycles = []
        for component in components:
            if len(component) > 1:
                cycles.append(component)
                continue
            (node,) = component
            if node in set(graph.get_successors(node)):
                cycles.append(component)
        if cycles:
            raise CycleError(f"Graph has {len(cycles)} cycle(s), no topological order", cycles)

        return [node for component in reversed(components) for node in component]
