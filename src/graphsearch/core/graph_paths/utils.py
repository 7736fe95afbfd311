"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from heapq import heappop, heappush
from typing import Dict, Hashable, List, Mapping, Optional, Sequence, Tuple

import psutil

from ..capabilities import edge_lookup
from ..models import NodeID
from ..types import NodeEnumerable

logger = logging.getLogger(__name__)

# Constants
EPSILON = 1e-10  # Floating point comparison tolerance
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two memory samples


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Compare costs with floating point tolerance.

    Returns True only if ``new_cost`` undercuts ``old_cost`` by more than EPSILON,
    so equal-cost alternatives never replace an already recorded path.
    """
    return (new_cost - old_cost) < -EPSILON


def is_path(path: Optional[Sequence[NodeID]], graph: object) -> bool:
    """Check whether a node sequence is a walk the graph allows.

    Empty and absent paths are valid. A single node is valid if it exists. Longer
    sequences need every node to exist and every consecutive pair to be joined by an
    edge: in the direction of travel for directed graphs, in either stored orientation
    for undirected graphs.
    """
    if not path:
        return True
    if not isinstance(graph, NodeEnumerable):
        return False
    if not all(graph.has_node(node) for node in path):
        return False
    if len(path) == 1:
        return True

    get_edge = edge_lookup(graph)
    return all(get_edge(path[i], path[i + 1]) is not None for i in range(len(path) - 1))


def rebuild_path(predecessors: Mapping[NodeID, NodeID], goal: NodeID) -> List[NodeID]:
    """Walk predecessor links back from ``goal`` and return the path in travel order.

    The start node is the one without a predecessor entry.
    """
    path = [goal]
    current = goal
    while current in predecessors:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


class PriorityQueue:
    """Priority queue with decrease-key and peek functionality.

    Decrease-key is implemented by lazy invalidation: the queue keeps one live entry
    per item and skips superseded heap entries when popping. Items with equal priority
    come out in insertion order.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, Hashable]] = []
        self._entry_finder: Dict[Hashable, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: Hashable, priority: float) -> bool:
        """Insert ``item`` or lower its priority.

        Returns True if the queue changed. A priority that is not strictly better
        than the live one is ignored.
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if not is_better_cost(priority, old_priority):
                return False

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, Hashable]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            stored = self._entry_finder.get(item)
            if stored is not None and stored == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def peek(self) -> Optional[Tuple[float, Hashable]]:
        """Return the item with the lowest priority without removing it."""
        while self._queue:
            priority, count, item = self._queue[0]
            if self._entry_finder.get(item) == (priority, count):
                return (priority, item)
            heappop(self._queue)
        return None

    def __contains__(self, item: Hashable) -> bool:
        return item in self._entry_finder

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Optional memory budget for long running searches.

    Without a budget every check is a no-op and the process is never sampled.
    With a budget the resident set size is sampled at most every
    MEMORY_CHECK_INTERVAL seconds and MemoryError is raised once the growth since
    the search started exceeds the budget.
    """

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.monotonic()

    @property
    def enabled(self) -> bool:
        """Whether a memory budget is enforced."""
        return self.max_memory is not None

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                logger.debug(f"Memory budget exceeded: {current / 1024 / 1024:.1f}MB in use")
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak sampled memory usage in bytes, 0 when no budget is set."""
        return self._peak_memory

    def reset(self) -> None:
        """Restart tracking from the current memory usage."""
        if self.max_memory:
            self.start_memory = get_memory_usage()
            self._peak_memory = self.start_memory
        self._last_check = time.monotonic()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
