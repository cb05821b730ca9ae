from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from moore_neighborhood import dynamic  # noqa: E402
from moore_neighborhood.viz.plot import plot_offsets  # noqa: E402


@pytest.mark.parametrize("dimensions", [1, 2, 3])
def test_plot_offsets(dimensions: int):
    ax = plot_offsets(dynamic.moore(1, dimensions))
    assert ax.get_title() == f"Moore neighborhood d={dimensions} n={3**dimensions - 1}"
    plt.close("all")


def test_plot_rejects_unplottable():
    with pytest.raises(ValueError):
        plot_offsets([])
    with pytest.raises(ValueError):
        plot_offsets(dynamic.moore(1, 4))
