"""Graph structure analysis: components, orderings and cliques."""

from .cliques import CliqueFinder, find_maximal_cliques
from .components import ComponentAnalysis
from .ordering import VertexOrdering, degeneracy_ordering

__all__ = [
    "CliqueFinder",
    "ComponentAnalysis",
    "VertexOrdering",
    "degeneracy_ordering",
    "find_maximal_cliques",
]
