"""Core graph search functionality."""

from .exceptions import CycleError, GraphCapabilityError, GraphOperationError
from .models import Edge, NodeID
from .types import (
    CostFunc,
    DirectedAdjacency,
    DirectedGraph,
    EdgeCoster,
    EdgeList,
    HeuristicFunc,
    NodeEnumerable,
    UndirectedAdjacency,
    UndirectedGraph,
)
from .graph_paths import (
    AStarFinder,
    BreadthFirstFinder,
    DepthFirstFinder,
    DijkstraFinder,
    PathFinding,
    PathResult,
    PathType,
    PathValidationError,
    ShortestPaths,
    is_consistent,
    is_path,
    zero_heuristic,
)
from .graph_operations import (
    CliqueFinder,
    ComponentAnalysis,
    VertexOrdering,
    degeneracy_ordering,
    find_maximal_cliques,
)

__all__ = [
    "AStarFinder",
    "BreadthFirstFinder",
    "CliqueFinder",
    "ComponentAnalysis",
    "CostFunc",
    "CycleError",
    "DepthFirstFinder",
    "DijkstraFinder",
    "DirectedAdjacency",
    "DirectedGraph",
    "Edge",
    "EdgeCoster",
    "EdgeList",
    "GraphCapabilityError",
    "GraphOperationError",
    "HeuristicFunc",
    "NodeEnumerable",
    "NodeID",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "ShortestPaths",
    "UndirectedAdjacency",
    "UndirectedGraph",
    "VertexOrdering",
    "degeneracy_ordering",
    "find_maximal_cliques",
    "is_consistent",
    "is_path",
    "zero_heuristic",
]
