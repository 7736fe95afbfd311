"""
graphsearch - Classical graph algorithms over capability-typed graphs

This package provides path finding, connectivity and clique algorithms that work
on any graph object implementing a small set of read-only capabilities. It includes:

- Breadth-first, depth-first, Dijkstra and A* searches
- Path validity checking and heuristic consistency checking
- Connected and strongly connected components, topological sorting
- Degeneracy ordering, k-core decomposition and maximal clique enumeration

See ``graphsearch.core.types`` for the capability protocols.
"""

__version__ = "0.1.0"
__author__ = "graphsearch developers"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("graphsearch requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core import (
    ComponentAnalysis,
    Edge,
    PathFinding,
    PathResult,
    degeneracy_ordering,
    find_maximal_cliques,
    is_path,
)

__all__ = [
    "ComponentAnalysis",
    "Edge",
    "PathFinding",
    "PathResult",
    "degeneracy_ordering",
    "find_maximal_cliques",
    "is_path",
]
