"""Ordering policies for window sorting.

The window buffer always yields its maximum. Callers who want the minimum
instead either pass ``reverse=True`` or wrap their elements in ``Reversed``,
which inverts every comparison of the wrapped value.

Example::

    from windowsort import Reversed, window_sort

    ascending = (r.value for r in window_sort(map(Reversed, readings), 16))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Generic, TypeVar

T = TypeVar("T")

SortKey = Callable[[Any], Any]


@total_ordering
@dataclass(frozen=True, slots=True)
class Reversed(Generic[T]):
    """Wraps a value so that it compares in the opposite direction.

    ``Reversed(a) < Reversed(b)`` holds exactly when ``b < a``. Equality and
    hashing follow the wrapped value.
    """

    value: T

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reversed):
            return NotImplemented
        return other.value < self.value


def identity(item: Any) -> Any:
    return item
