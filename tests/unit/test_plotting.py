"""Tests for displacement charts."""

import pytest

from windowsort.analysis import displacement_frame, plot_displacement


class TestPlotDisplacement:
    def test_writes_png(self, tmp_path):
        """A chart file is created, including missing parent directories."""
        path = plot_displacement(
            {"input": displacement_frame([1, 3, 2, 5, 4])},
            tmp_path / "charts" / "disp.png",
        )

        assert path.exists()
        assert path.suffix == ".png"

    def test_multiple_panels(self, tmp_path):
        frames = {
            "before": displacement_frame([1, 2, 3]),
            "after": displacement_frame([3, 2, 1]),
        }

        assert plot_displacement(frames, tmp_path / "two.png").exists()

    def test_rejects_empty_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="at least one"):
            plot_displacement({}, tmp_path / "none.png")
