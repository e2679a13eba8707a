"""Charts of item displacement before and after window sorting."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pandas as pd

from windowsort.analysis.disorder import DISPLACEMENT, POSITION


def plot_displacement(
    frames: Mapping[str, pd.DataFrame],
    path: str | Path,
    title: str = "Displacement from sorted order",
) -> Path:
    """Save one scatter panel per frame showing displacement by position.

    Args:
        frames: Label to displacement_frame() result, e.g. {"input": ..., "window=8": ...}.
        path: Output image path. Parent directories are created if missing.
        title: Figure title.

    Returns:
        The path the chart was written to.

    Raises:
        ValueError: If frames is empty.
    """
    if not frames:
        raise ValueError("frames must contain at least one displacement frame")

    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, axes = plt.subplots(1, len(frames), figsize=(6 * len(frames), 4), squeeze=False)
    for ax, (label, frame) in zip(axes[0], frames.items()):
        ax.scatter(frame[POSITION], frame[DISPLACEMENT], s=6, color="steelblue", alpha=0.7)
        ax.axhline(0, color="black", linewidth=0.8)
        ax.set_xlabel("Position")
        ax.set_ylabel("Displacement")
        ax.set_title(label)
        ax.grid(True, alpha=0.2)

    fig.suptitle(title)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path
