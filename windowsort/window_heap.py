import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Generic, TypeVar

from windowsort.ordering import Reversed, SortKey, identity

T = TypeVar("T")


@dataclass(order=True, slots=True)
class _Entry(Generic[T]):
    rank: Any
    seq: int
    item: T = field(compare=False)


class WindowHeap(Generic[T]):
    def __init__(self, key: SortKey | None = None, reverse: bool = False):
        """Bounded-window priority buffer that pops its maximum element.

        heapq only offers a min-heap, so each item is stored in an entry
        ranked by ``Reversed(key(item))``. With ``reverse=True`` the plain key
        is used and the heap pops its minimum instead. Entries with equal rank
        fall back to insertion order, so items themselves are never compared.
        """
        self._key = key or identity
        self._reverse = reverse
        self._heap: list[_Entry[T]] = []
        self._counter = count()

    def _rank(self, item: T) -> Any:
        value = self._key(item)
        return value if self._reverse else Reversed(value)

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(self._rank(item), next(self._counter), item))

    def extend(self, items: Iterable[T]) -> None:
        """Push every item from an iterable onto the heap."""
        for item in items:
            self.push(item)

    def pop(self) -> T:
        """Remove and return the highest-priority item. Raises IndexError if empty."""
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        return self._heap[0].item

    def drain(self) -> Iterator[T]:
        """Pop items in priority order until the heap is empty."""
        while self._heap:
            yield self.pop()

    def clear(self) -> None:
        self._heap.clear()

    def has_items(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
