"""Iterator adapter that sorts items within a sliding window.

The adapter keeps a bounded heap of at most ``capacity`` items pulled from an
upstream iterable. Each call to ``next()`` tops the heap up from upstream and
then yields the heap's maximum. Once upstream runs dry the remaining items are
drained in order. The output is therefore sorted only locally: each yielded
item is the best among the items currently in the window, not among the whole
sequence.

This is useful for input that is "almost sorted" but too large (or infinite)
to materialize, e.g. timestamped events merged from several producers with a
bounded amount of jitter. If you can bound how far an item may arrive out of
place, a window of that size restores the full order.

Example::

    from windowsort import window_sort

    list(window_sort([4, 2, 3, 1], 2))                # [4, 3, 2, 1]
    list(window_sort([1, 4, 2, 3], 2, reverse=True))  # [1, 2, 3, 4]

    # Order events by timestamp, tolerating up to 64 positions of jitter
    for event in window_sort(events, 64, key=lambda e: e.timestamp, reverse=True):
        handle(event)
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from windowsort.ordering import SortKey
from windowsort.window_heap import WindowHeap

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WindowState(Enum):
    """Lifecycle of a WindowSort adapter."""

    FILLING = "filling"
    STEADY = "steady"
    DRAINING = "draining"
    DONE = "done"
    PASS_THROUGH = "pass_through"


@dataclass(frozen=True)
class WindowSortStats:
    """Counters tracked by WindowSort."""

    pulled: int = 0
    yielded: int = 0
    peak_buffered: int = 0


class WindowSort(Generic[T]):
    """Sorts the items of an upstream iterable within a sliding window.

    Each ``next()`` call fills the window from upstream until it holds
    ``capacity`` items (or upstream is exhausted), then pops the window's
    maximum. After upstream is exhausted no further pulls are made and the
    remaining items are drained in non-increasing order.

    A capacity of 1 or 0 yields upstream unchanged. Capacity 0 bypasses the
    window entirely and is reported as ``WindowState.PASS_THROUGH``.

    The adapter is its own iterator and cannot be restarted. Exceptions raised
    by upstream propagate out of ``next()`` unchanged; items already in the
    window stay there and are returned by later calls.

    Args:
        upstream: Iterable to sort. May be infinite.
        capacity: Maximum number of items held in the window.
        key: Optional function mapping an item to its sort key.
        reverse: Yield the window minimum instead of the maximum.
        name: Label used in log messages.

    Raises:
        TypeError: If capacity is not an integer.
        ValueError: If capacity is negative.
    """

    def __init__(
        self,
        upstream: Iterable[T],
        capacity: int,
        *,
        key: SortKey | None = None,
        reverse: bool = False,
        name: str = "window_sort",
    ):
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")

        self._name = name
        self._capacity = capacity
        self._upstream: Iterator[T] | None = iter(upstream)
        self._window: WindowHeap[T] = WindowHeap(key=key, reverse=reverse)
        self._state = WindowState.PASS_THROUGH if capacity == 0 else WindowState.FILLING

        self._pulled = 0
        self._yielded = 0
        self._peak_buffered = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        """Maximum number of items held in the window."""
        return self._capacity

    @property
    def state(self) -> WindowState:
        return self._state

    @property
    def buffered(self) -> int:
        """Number of items currently held in the window."""
        return len(self._window)

    @property
    def exhausted(self) -> bool:
        """Whether upstream has signalled its end."""
        return self._upstream is None

    @property
    def stats(self) -> WindowSortStats:
        return WindowSortStats(
            pulled=self._pulled,
            yielded=self._yielded,
            peak_buffered=self._peak_buffered,
        )

    def __iter__(self) -> WindowSort[T]:
        return self

    def __next__(self) -> T:
        if self._state is WindowState.PASS_THROUGH:
            return self._pass_through()

        while len(self._window) < self._capacity and self._pull():
            pass

        if self._state is WindowState.FILLING and len(self._window) == self._capacity:
            self._transition(WindowState.STEADY)

        if not self._window.has_items():
            raise StopIteration

        item = self._window.pop()
        self._yielded += 1
        if self._state is WindowState.DRAINING and not self._window.has_items():
            self._transition(WindowState.DONE)
        return item

    def __length_hint__(self) -> int:
        buffered = len(self._window)
        if self._upstream is None:
            return buffered
        return buffered + operator.length_hint(self._upstream, 0)

    def _pull(self) -> bool:
        """Move one item from upstream into the window.

        Returns False once upstream is exhausted. Upstream exceptions other
        than StopIteration propagate before anything is inserted.
        """
        if self._upstream is None:
            return False
        try:
            item = next(self._upstream)
        except StopIteration:
            self._mark_exhausted()
            return False

        self._pulled += 1
        self._window.push(item)
        if len(self._window) > self._peak_buffered:
            self._peak_buffered = len(self._window)
        return True

    def _pass_through(self) -> T:
        if self._upstream is not None:
            try:
                item = next(self._upstream)
            except StopIteration:
                self._mark_exhausted()
            else:
                self._pulled += 1
                self._yielded += 1
                return item
        raise StopIteration

    def _mark_exhausted(self) -> None:
        self._upstream = None
        if self._window.has_items():
            self._transition(WindowState.DRAINING)
        else:
            self._transition(WindowState.DONE)

    def _transition(self, new_state: WindowState) -> None:
        logger.debug(
            "[%s] %s -> %s (pulled=%d, buffered=%d)",
            self._name,
            self._state.name,
            new_state.name,
            self._pulled,
            len(self._window),
        )
        self._state = new_state

    def __repr__(self) -> str:
        return (
            f"WindowSort(name={self._name!r}, capacity={self._capacity}, "
            f"state={self._state.name}, buffered={len(self._window)})"
        )


def window_sort(
    upstream: Iterable[T],
    capacity: int,
    *,
    key: SortKey | None = None,
    reverse: bool = False,
) -> WindowSort[T]:
    """Sort ``upstream`` within a sliding window of ``capacity`` items.

    See ``WindowSort`` for details.
    """
    return WindowSort(upstream, capacity, key=key, reverse=reverse)
