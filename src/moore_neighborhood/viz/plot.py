from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt


def plot_offsets(offsets: Sequence[Sequence[int]], *, ax=None, title: str | None = None):
    """Minimal visualization: scatter of neighbor offsets colored by enumeration position.

    Handles 1-, 2- and 3-dimensional neighborhoods; the origin is marked with an x.
    """
    if not offsets:
        raise ValueError("nothing to plot")
    dimensions = len(offsets[0])
    if dimensions not in (1, 2, 3):
        raise ValueError("only 1, 2 or 3 dimensional neighborhoods can be plotted")

    if ax is None:
        fig = plt.figure()
        if dimensions == 3:
            ax = fig.add_subplot(111, projection="3d")
        else:
            ax = fig.add_subplot(111)

    colors = list(range(len(offsets)))
    xs = [o[0] for o in offsets]
    if dimensions == 1:
        ys = [0] * len(offsets)
    else:
        ys = [o[1] for o in offsets]

    if dimensions == 3:
        zs = [o[2] for o in offsets]
        sc = ax.scatter(xs, ys, zs, c=colors, cmap="viridis", s=30)
        ax.scatter([0], [0], [0], marker="x", color="black")
        ax.set_zlabel("z")
        ax.set_box_aspect((1, 1, 1))
    else:
        sc = ax.scatter(xs, ys, c=colors, cmap="viridis", s=30)
        ax.scatter([0], [0], marker="x", color="black")
        ax.set_aspect("equal")
    plt.colorbar(sc, ax=ax, shrink=0.7, pad=0.1, label="position")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(title or f"Moore neighborhood d={dimensions} n={len(offsets)}")
    return ax
