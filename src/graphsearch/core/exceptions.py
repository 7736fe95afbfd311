"""
Custom exceptions for the graph search library.

This module defines the hierarchy of custom exceptions used by the algorithm suite.
Graph outcomes such as an unreachable goal are reported through results, never
through exceptions; the types below signal misuse of the library instead, such as
handing an algorithm a graph that lacks a capability it needs.
"""

from typing import List, Set


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an algorithm cannot operate on the graph it was
    given, either because the graph does not provide a required capability or
    because the requested operation is undefined for the graph's structure.

    Examples:
        * Graph without any adjacency capability
        * Topological sort of a cyclic graph
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class GraphCapabilityError(GraphOperationError):
    """
    Raised when a graph does not implement a capability an algorithm requires.

    Examples:
        * Strongly connected components requested for a graph without
          ``get_successors``
        * Heuristic consistency checked on a graph without ``get_edges``
    """


class CycleError(GraphOperationError):
    """
    Raised when a directed graph contains a cycle where none is allowed.

    Attributes:
        cycles: The strongly connected components that make the graph cyclic.
    """

    def __init__(self, message: str, cycles: List[Set[int]]):
        super().__init__(message)
        self.cycles = cycles
