"""Measure how scrambled a sample is and size the sort window for it."""

from windowsort.analysis.disorder import (
    DisorderReport,
    count_inversions,
    displacement_frame,
    measure_disorder,
    required_window,
)
from windowsort.analysis.plotting import plot_displacement

__all__ = [
    "DisorderReport",
    "count_inversions",
    "displacement_frame",
    "measure_disorder",
    "plot_displacement",
    "required_window",
]
