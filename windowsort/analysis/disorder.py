"""Disorder metrics for choosing a window size.

A window of size k fully restores the order of a sequence exactly when no
item arrives more than k - 1 positions after the position it holds in the
sorted output. ``measure_disorder`` reports that lateness along with broader
measures of how scrambled a sample is, so the window can be sized from a
representative slice of upstream data before running on the live stream.

The target order matches ``window_sort``: descending by default, ascending
with ``reverse=True``, and stable among equal keys.

Example::

    from windowsort.analysis import measure_disorder

    report = measure_disorder(sample, key=lambda e: e.timestamp, reverse=True)
    print(report.required_window, report.sortedness)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import pandas as pd

from windowsort.ordering import SortKey, identity

POSITION = "position"
SORTED_POSITION = "sorted_position"
DISPLACEMENT = "displacement"


@dataclass(frozen=True)
class DisorderReport:
    """How far a sequence is from the order window_sort would target.

    Attributes:
        length: Number of items measured.
        inversions: Pairs of items that appear in the wrong relative order.
        max_displacement: Largest distance, in either direction, between an
            item's position and its sorted position.
        max_lateness: Largest number of positions an item arrives after its
            sorted position. Zero when nothing arrives late.
        sortedness: 1.0 for sorted input, 0.0 for fully reversed input.
    """

    length: int
    inversions: int
    max_displacement: int
    max_lateness: int
    sortedness: float

    @property
    def required_window(self) -> int:
        """Smallest window size (at least 1) that fully sorts the sequence."""
        return self.max_lateness + 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "inversions": self.inversions,
            "max_displacement": self.max_displacement,
            "max_lateness": self.max_lateness,
            "sortedness": round(self.sortedness, 6),
            "required_window": self.required_window,
        }


def displacement_frame(
    sequence: Iterable[Any],
    *,
    key: SortKey | None = None,
    reverse: bool = False,
) -> pd.DataFrame:
    """Tabulate each item's position against its sorted position.

    Args:
        sequence: Finite sample of items.
        key: Optional function mapping an item to its sort key.
        reverse: Measure against ascending order instead of descending.

    Returns:
        DataFrame with one row per item and the columns ``position``,
        ``sorted_position`` and ``displacement`` (position minus sorted
        position; positive means the item arrived late).
    """
    key = key or identity
    items = list(sequence)
    keys = [key(item) for item in items]
    order = sorted(range(len(items)), key=keys.__getitem__, reverse=not reverse)

    sorted_positions = [0] * len(items)
    for target, index in enumerate(order):
        sorted_positions[index] = target

    positions = list(range(len(items)))
    return pd.DataFrame(
        {
            POSITION: positions,
            SORTED_POSITION: sorted_positions,
            DISPLACEMENT: [p - s for p, s in zip(positions, sorted_positions)],
        },
        dtype="int64",
    )


def count_inversions(values: list[int]) -> int:
    """Count pairs i < j with values[i] > values[j] using merge sort."""
    return _merge_count(values)[1]


def _merge_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return list(values), 0

    mid = len(values) // 2
    left, left_count = _merge_count(values[:mid])
    right, right_count = _merge_count(values[mid:])

    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            # right[j] jumps over every left value not yet merged
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def measure_disorder(
    sequence: Iterable[Any],
    *,
    key: SortKey | None = None,
    reverse: bool = False,
) -> DisorderReport:
    """Summarize how scrambled a finite sample is.

    Args:
        sequence: Finite sample of items.
        key: Optional function mapping an item to its sort key.
        reverse: Measure against ascending order instead of descending.

    Returns:
        DisorderReport for the sample.
    """
    frame = displacement_frame(sequence, key=key, reverse=reverse)
    length = len(frame)
    if length == 0:
        return DisorderReport(
            length=0, inversions=0, max_displacement=0, max_lateness=0, sortedness=1.0
        )

    inversions = count_inversions(frame[SORTED_POSITION].tolist())
    max_pairs = length * (length - 1) // 2
    return DisorderReport(
        length=length,
        inversions=inversions,
        max_displacement=int(frame[DISPLACEMENT].abs().max()),
        max_lateness=max(int(frame[DISPLACEMENT].max()), 0),
        sortedness=1.0 - inversions / max_pairs if max_pairs else 1.0,
    )


def required_window(
    sequence: Iterable[Any],
    *,
    key: SortKey | None = None,
    reverse: bool = False,
) -> int:
    """Smallest window size for which window_sort fully sorts ``sequence``."""
    return measure_disorder(sequence, key=key, reverse=reverse).required_window
