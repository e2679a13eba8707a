"""windowsort - bounded-memory approximate sorting for streams.

Reorders the items of an iterable within a sliding window, so almost-sorted
and possibly infinite streams can be put in order without materializing them.

Basic usage:
    from windowsort import window_sort

    for event in window_sort(events, 64, key=lambda e: e.timestamp, reverse=True):
        handle(event)

Logging:
    The library is silent by default. Enable output with:

    import windowsort
    windowsort.enable_console_logging(level="DEBUG")

    Or set WINDOWSORT_LOGGING=DEBUG and call windowsort.configure_from_env().
"""

import logging
from importlib import metadata

from windowsort.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from windowsort.ordering import Reversed, SortKey
from windowsort.window_heap import WindowHeap
from windowsort.window_sort import WindowSort, WindowSortStats, WindowState, window_sort

logging.getLogger("windowsort").addHandler(logging.NullHandler())

try:
    __version__ = metadata.version("window-sort")
except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
    __version__ = "0.1.0"

__all__ = [
    # Core
    "WindowSort",
    "WindowSortStats",
    "WindowState",
    "window_sort",
    # Buffer and ordering
    "Reversed",
    "SortKey",
    "WindowHeap",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
    "__version__",
]
