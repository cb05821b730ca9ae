from __future__ import annotations

from collections.abc import Sequence

from moore_neighborhood.core.decoder import decode_offset, neighbor_count


def moore(radius: int, dimensions: int) -> list[list[int]]:
    """Moore neighborhood of `radius` in `dimensions` axes, as lists.

    >>> moore(1, 2)
    [[-1, -1], [0, -1], [1, -1], [-1, 0], [1, 0], [-1, 1], [0, 1], [1, 1]]
    """
    length = neighbor_count(radius, dimensions)
    half_length = length // 2
    neighbors: list[list[int]] = []
    for position in range(length):
        neighbors.append(decode_offset(position, radius, dimensions, half_length))
    return neighbors


def neighbors(cell: Sequence[int], radius: int = 1) -> list[tuple[int, ...]]:
    """Absolute lattice coordinates of every cell within `radius` of `cell`.

    The lattice is flat and unbounded; offsets are added without wrapping.
    """
    if len(cell) == 0:
        raise ValueError("cell must have at least one axis")
    return [
        tuple(c + d for c, d in zip(cell, offset))
        for offset in moore(radius, len(cell))
    ]
