"""Tests for the window buffer."""

import pytest

from windowsort import Reversed, WindowHeap


class TestWindowHeapOrdering:
    """Tests for priority order of pops."""

    def test_pops_maximum_first(self):
        """Default heap pops the largest item."""
        heap = WindowHeap[int]()
        heap.extend([3, 1, 4, 1, 5])

        assert heap.pop() == 5
        assert heap.pop() == 4

    def test_reverse_pops_minimum_first(self):
        """reverse=True turns the heap into a min-heap."""
        heap = WindowHeap[int](reverse=True)
        heap.extend([3, 1, 4])

        assert heap.pop() == 1
        assert heap.pop() == 3

    def test_key_function(self):
        """Items are ranked by the key function."""
        heap = WindowHeap[str](key=len)
        heap.extend(["bb", "a", "cccc", "ddd"])

        assert heap.pop() == "cccc"

    def test_equal_keys_pop_in_insertion_order(self):
        """Ties are broken by insertion order."""
        heap = WindowHeap[tuple](key=lambda pair: pair[0])
        heap.extend([(1, "first"), (1, "second"), (1, "third")])

        assert [heap.pop()[1] for _ in range(3)] == ["first", "second", "third"]

    def test_uncomparable_items_with_equal_keys(self):
        """Items are never compared to each other when keys tie."""
        heap = WindowHeap[dict](key=lambda d: d["priority"])
        heap.push({"priority": 2, "payload": object()})
        heap.push({"priority": 2, "payload": object()})

        assert heap.pop()["priority"] == 2
        assert heap.pop()["priority"] == 2

    def test_reversed_items_pop_smallest_value(self):
        """Reversed-wrapped items behave like a min-heap."""
        heap = WindowHeap[Reversed[int]]()
        heap.extend(Reversed(v) for v in [7, 2, 9])

        assert heap.pop().value == 2


class TestWindowHeapAccess:
    """Tests for size, peek and drain."""

    def test_empty_heap(self):
        """A new heap holds nothing."""
        heap = WindowHeap[int]()

        assert heap.size() == 0
        assert len(heap) == 0
        assert not heap.has_items()

    def test_peek_does_not_remove(self):
        """peek() returns the next item without popping it."""
        heap = WindowHeap[int]()
        heap.extend([1, 8, 3])

        assert heap.peek() == 8
        assert heap.size() == 3

    def test_pop_empty_raises(self):
        """Popping an empty heap raises IndexError."""
        with pytest.raises(IndexError):
            WindowHeap[int]().pop()

    def test_peek_empty_raises(self):
        """Peeking an empty heap raises IndexError."""
        with pytest.raises(IndexError):
            WindowHeap[int]().peek()

    def test_drain_yields_sorted_and_empties(self):
        """drain() pops everything in non-increasing order."""
        heap = WindowHeap[int]()
        heap.extend([5, 2, 9, 2, 7])

        assert list(heap.drain()) == [9, 7, 5, 2, 2]
        assert not heap.has_items()

    def test_drain_is_lazy(self):
        """drain() only pops as far as it is consumed."""
        heap = WindowHeap[int]()
        heap.extend([1, 2, 3])

        drained = heap.drain()
        assert next(drained) == 3
        assert heap.size() == 2

    def test_clear(self):
        """clear() discards all items."""
        heap = WindowHeap[int]()
        heap.extend([1, 2])
        heap.clear()

        assert heap.size() == 0
