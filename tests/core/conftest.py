"""Shared test fixtures.

The library only consumes graphs through capability protocols, so the tests bring
their own small in-memory graphs: a directed adjacency map, an undirected adjacency
map and a rectangular tile grid.
"""

import math
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Set

import pytest

from graphsearch.core.models import Edge


class DirectedTestGraph:
    """Directed graph storing ``head -> {tail: cost}``."""

    def __init__(self):
        self._successors: Dict[int, Dict[int, float]] = {}

    def add_node(self, node: int) -> None:
        self._successors.setdefault(node, {})

    def add_edge(self, head: int, tail: int, cost: float = 1.0) -> None:
        self.add_node(head)
        self.add_node(tail)
        self._successors[head][tail] = cost

    def get_nodes(self) -> Set[int]:
        return set(self._successors)

    def has_node(self, node: int) -> bool:
        return node in self._successors

    def get_successors(self, node: int) -> List[int]:
        return list(self._successors.get(node, {}))

    def get_edge(self, from_node: int, to_node: int) -> Optional[Edge]:
        if to_node in self._successors.get(from_node, {}):
            return Edge(from_node, to_node)
        return None

    def get_cost(self, edge: Edge) -> float:
        return self._successors.get(edge.head, {}).get(edge.tail, math.inf)

    def get_edges(self) -> Iterator[Edge]:
        for head, tails in self._successors.items():
            for tail in tails:
                yield Edge(head, tail)


class UndirectedTestGraph:
    """Undirected graph keeping each edge in the orientation it was added."""

    def __init__(self):
        self._neighbors: Dict[int, Set[int]] = {}
        self._edges: Dict[frozenset, Edge] = {}
        self._costs: Dict[frozenset, float] = {}

    def add_node(self, node: int) -> None:
        self._neighbors.setdefault(node, set())

    def add_edge(self, head: int, tail: int, cost: float = 1.0) -> None:
        self.add_node(head)
        self.add_node(tail)
        self._neighbors[head].add(tail)
        self._neighbors[tail].add(head)
        key = frozenset((head, tail))
        self._edges[key] = Edge(head, tail)
        self._costs[key] = cost

    def get_nodes(self) -> Set[int]:
        return set(self._neighbors)

    def has_node(self, node: int) -> bool:
        return node in self._neighbors

    def get_neighbors(self, node: int) -> List[int]:
        return list(self._neighbors.get(node, ()))

    def get_edge(self, from_node: int, to_node: int) -> Optional[Edge]:
        return self._edges.get(frozenset((from_node, to_node)))

    def get_cost(self, edge: Edge) -> float:
        return self._costs.get(frozenset(edge.nodes), math.inf)

    def get_edges(self) -> List[Edge]:
        return list(self._edges.values())


class TileGraph:
    """Four-connected grid of tiles with unit cost moves between passable tiles.

    Node ids are ``row * cols + col``. Impassable tiles are nodes without edges.
    """

    def __init__(self, rows: int, cols: int, passable: bool = True):
        self.rows = rows
        self.cols = cols
        self._passable = [[passable] * cols for _ in range(rows)]

    @classmethod
    def from_string(cls, text: str) -> "TileGraph":
        """Build a grid from rows of text where ``▀`` marks an impassable tile."""
        lines = text.split("\n")
        graph = cls(len(lines), len(lines[0]))
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                graph.set_passability(row, col, char != "▀")
        return graph

    def set_passability(self, row: int, col: int, passable: bool) -> None:
        self._passable[row][col] = passable

    def coords_to_node(self, row: int, col: int) -> int:
        return row * self.cols + col

    def node_to_coords(self, node: int) -> tuple:
        return divmod(node, self.cols)

    def manhattan(self, node: int, goal: int) -> float:
        (r1, c1), (r2, c2) = self.node_to_coords(node), self.node_to_coords(goal)
        return float(abs(r1 - r2) + abs(c1 - c2))

    def _is_passable(self, node: int) -> bool:
        row, col = self.node_to_coords(node)
        return self._passable[row][col]

    def get_nodes(self) -> Set[int]:
        return set(range(self.rows * self.cols))

    def has_node(self, node: int) -> bool:
        return 0 <= node < self.rows * self.cols

    def get_neighbors(self, node: int) -> List[int]:
        if not self.has_node(node) or not self._is_passable(node):
            return []
        row, col = self.node_to_coords(node)
        neighbors = []
        for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = row + d_row, col + d_col
            if 0 <= r < self.rows and 0 <= c < self.cols and self._passable[r][c]:
                neighbors.append(self.coords_to_node(r, c))
        return neighbors

    def get_edge(self, from_node: int, to_node: int) -> Optional[Edge]:
        if not (self.has_node(from_node) and self.has_node(to_node)):
            return None
        if not (self._is_passable(from_node) and self._is_passable(to_node)):
            return None
        (r1, c1), (r2, c2) = self.node_to_coords(from_node), self.node_to_coords(to_node)
        if abs(r1 - r2) + abs(c1 - c2) != 1:
            return None
        return Edge(from_node, to_node)

    def get_edges(self) -> List[Edge]:
        return [
            Edge(node, neighbor)
            for node in range(self.rows * self.cols)
            for neighbor in self.get_neighbors(node)
            if node < neighbor
        ]


def _build(graph, links: Mapping[int, Iterable[int]], cost: float):
    for node, targets in links.items():
        graph.add_node(node)
        for target in targets:
            graph.add_edge(node, target, cost)
    return graph


@pytest.fixture
def directed_graph_factory() -> Callable[..., DirectedTestGraph]:
    """Factory building a directed graph from ``{node: [successors]}``."""

    def build(links: Mapping[int, Iterable[int]] = (), cost: float = 1.0) -> DirectedTestGraph:
        return _build(DirectedTestGraph(), dict(links), cost)

    return build


@pytest.fixture
def undirected_graph_factory() -> Callable[..., UndirectedTestGraph]:
    """Factory building an undirected graph from ``{node: [neighbours]}``."""

    def build(links: Mapping[int, Iterable[int]] = (), cost: float = 1.0) -> UndirectedTestGraph:
        return _build(UndirectedTestGraph(), dict(links), cost)

    return build


@pytest.fixture
def tile_graph_factory() -> Callable[..., TileGraph]:
    """Factory building an open tile grid of the given size."""
    return TileGraph


@pytest.fixture
def tile_graph_from_string() -> Callable[[str], TileGraph]:
    """Factory building a tile grid from its text picture."""
    return TileGraph.from_string


@pytest.fixture
def small_weighted_graph() -> UndirectedTestGraph:
    """
    Six node weighted undirected graph:

        1-2:7  1-3:9  1-6:14  2-3:10  2-4:15
        3-4:11  3-6:2  4-5:7  5-6:9
    """
    graph = UndirectedTestGraph()
    for head, tail, cost in [
        (1, 2, 7),
        (1, 3, 9),
        (1, 6, 14),
        (2, 3, 10),
        (2, 4, 15),
        (3, 4, 11),
        (3, 6, 2),
        (4, 5, 7),
        (5, 6, 9),
    ]:
        graph.add_edge(head, tail, float(cost))
    return graph


@pytest.fixture
def small_heuristic() -> Callable[[int, int], float]:
    """Euclidean distance between planar positions of the small weighted graph."""
    positions = {1: (0, 6), 2: (1, 0), 3: (8, 7), 4: (16, 0), 5: (17, 6), 6: (9, 8)}

    def heuristic(node: int, goal: int) -> float:
        (x1, y1), (x2, y2) = positions[node], positions[goal]
        return math.hypot(x2 - x1, y2 - y1)

    return heuristic


@pytest.fixture
def batagelj_zaversnik_links() -> Dict[int, List[int]]:
    """Example graph of figure 1 in Batagelj and Zaversnik, arXiv:cs/0310049."""
    return {
        0: [],
        1: [2, 3],
        2: [4],
        3: [4],
        4: [5],
        5: [],
        6: [7, 8, 14],
        7: [8, 11, 12, 14],
        8: [14],
        9: [11],
        10: [11],
        11: [12],
        12: [18],
        13: [14, 15],
        14: [15, 17],
        15: [16, 17],
        16: [],
        17: [18, 19, 20],
        18: [19, 20],
        19: [20],
        20: [],
    }
