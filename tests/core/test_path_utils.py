"""
Tests for path finding utilities: priority queue, path rebuilding, memory budget.
"""

from unittest.mock import patch

import pytest

from graphsearch.core.graph_paths import utils
from graphsearch.core.graph_paths.utils import (
    MemoryManager,
    PriorityQueue,
    is_better_cost,
    rebuild_path,
)


def test_priority_queue_orders_by_priority():
    """Test items come out cheapest first."""
    queue = PriorityQueue()
    for item, priority in [("c", 3.0), ("a", 1.0), ("b", 2.0)]:
        queue.add_or_update(item, priority)

    assert len(queue) == 3
    assert [queue.pop()[1] for _ in range(3)] == ["a", "b", "c"]
    assert queue.empty()
    assert queue.pop() is None
    assert queue.peek() is None


def test_priority_queue_decrease_key():
    """Test lowering a priority reorders the item."""
    queue = PriorityQueue()
    queue.add_or_update("a", 5.0)
    queue.add_or_update("b", 3.0)

    assert queue.add_or_update("a", 1.0)
    assert len(queue) == 2
    assert queue.peek() == (1.0, "a")
    assert queue.pop() == (1.0, "a")
    assert queue.pop() == (3.0, "b")
    assert queue.empty()


def test_priority_queue_ignores_worse_or_equal_priority():
    """Test only strictly better priorities replace the live entry."""
    queue = PriorityQueue()
    queue.add_or_update("a", 2.0)

    assert not queue.add_or_update("a", 2.0)
    assert not queue.add_or_update("a", 4.0)
    assert queue.pop() == (2.0, "a")


def test_priority_queue_ties_in_insertion_order():
    """Test equal priorities keep insertion order."""
    queue = PriorityQueue()
    for item in [3, 1, 2]:
        queue.add_or_update(item, 1.0)
    assert [queue.pop()[1] for _ in range(3)] == [3, 1, 2]


def test_priority_queue_membership():
    """Test membership tracks live entries only."""
    queue = PriorityQueue()
    queue.add_or_update(1, 1.0)
    assert 1 in queue
    queue.pop()
    assert 1 not in queue

    # Popped items may be added again
    assert queue.add_or_update(1, 7.0)
    assert queue.pop() == (7.0, 1)


def test_is_better_cost_tolerance():
    """Test cost comparison ignores floating point noise."""
    assert is_better_cost(1.0, 2.0)
    assert not is_better_cost(2.0, 2.0)
    assert not is_better_cost(0.1 + 0.2, 0.3)


def test_rebuild_path():
    """Test predecessor links are unwound into travel order."""
    predecessors = {2: 1, 3: 2, 6: 3}
    assert rebuild_path(predecessors, 6) == [1, 2, 3, 6]
    assert rebuild_path(predecessors, 1) == [1]


def test_memory_manager_disabled_by_default():
    """Test no budget means no sampling."""
    manager = MemoryManager()
    assert not manager.enabled
    with patch.object(utils, "get_memory_usage") as usage:
        manager.check_memory()
        manager.reset()
    usage.assert_not_called()
    assert manager.peak_memory == 0


def test_memory_manager_rejects_non_positive_budget():
    """Test budgets must be positive."""
    with pytest.raises(ValueError, match="max_memory_mb must be positive"):
        MemoryManager(0)
    with pytest.raises(ValueError):
        MemoryManager(-5)


def test_memory_manager_raises_when_budget_exceeded():
    """Test the budget is enforced after a sampling interval."""
    megabyte = 1024 * 1024
    with patch.object(utils, "get_memory_usage", return_value=100 * megabyte):
        manager = MemoryManager(max_memory_mb=10)
    assert manager.enabled

    manager._last_check -= utils.MEMORY_CHECK_INTERVAL * 2
    with patch.object(utils, "get_memory_usage", return_value=200 * megabyte):
        with patch.object(utils.gc, "collect") as collect:
            with pytest.raises(MemoryError, match="exceeds limit"):
                manager.check_memory()
    collect.assert_called_once()
    assert manager.peak_memory == 200 * megabyte


def test_memory_manager_within_budget():
    """Test checks pass while growth stays under the budget."""
    megabyte = 1024 * 1024
    with patch.object(utils, "get_memory_usage", return_value=100 * megabyte):
        manager = MemoryManager(max_memory_mb=10)
        manager._last_check -= utils.MEMORY_CHECK_INTERVAL * 2
        manager.check_memory()
    assert manager.peak_memory == 100 * megabyte


def test_memory_usage_reads_process_rss():
    """Test the process sampler returns a positive byte count."""
    assert utils.get_memory_usage() > 0
