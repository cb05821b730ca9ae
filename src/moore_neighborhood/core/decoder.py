from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

# Largest hypercube a Python sequence can index.
INDEX_MAX = sys.maxsize


def side_length(radius: int) -> int:
    if radius < 0:
        raise ValueError("radius must be >= 0")
    return 2 * radius + 1


def hypercube_size(radius: int, dimensions: int) -> int:
    """Number of lattice points in the full (2*radius+1)^dimensions cube, centre included."""
    size = side_length(radius)
    if dimensions < 1:
        raise ValueError("dimensions must be >= 1")
    if size == 1:
        return 1
    # size >= 3, so this many axes already exceeds INDEX_MAX.
    if dimensions >= INDEX_MAX.bit_length():
        raise OverflowError(f"{dimensions} dimensions overflow the neighbor index")
    total = size**dimensions
    if total > INDEX_MAX:
        raise OverflowError(
            f"hypercube of side {size} in {dimensions} dimensions overflows the neighbor index"
        )
    return total


def neighbor_count(radius: int, dimensions: int) -> int:
    return hypercube_size(radius, dimensions) - 1


def decode_offset(
    position: int,
    radius: int,
    dimensions: int,
    half_length: int | None = None,
) -> list[int]:
    """Decode a neighbor position into its per-axis offset.

    The position is read as a base-(2*radius+1) number with axis 0 as the least
    significant digit. Positions at or past the centre are shifted by one so the
    all-zero offset is skipped while every other offset keeps its relative order.

    `half_length` may be passed by callers that decode many positions for the
    same (radius, dimensions); it must equal neighbor_count(radius, dimensions) // 2.
    """
    if half_length is None:
        length = neighbor_count(radius, dimensions)
        if not (0 <= position < length):
            raise IndexError(f"position {position} out of range for {length} neighbors")
        half_length = length // 2

    size = 2 * radius + 1
    index = position if position < half_length else position + 1
    offset = [0] * dimensions
    prev_divisor = 1
    for axis in range(dimensions):
        divisor = prev_divisor * size
        value = index % divisor
        offset[axis] = value // prev_divisor - radius
        prev_divisor = divisor
        index -= value
    return offset


def iter_offsets(radius: int, dimensions: int) -> Iterator[list[int]]:
    length = neighbor_count(radius, dimensions)
    half_length = length // 2
    for position in range(length):
        yield decode_offset(position, radius, dimensions, half_length)


def encode_offset(offset: Sequence[int], radius: int) -> int:
    """Inverse of decode_offset: the position of `offset` in the enumeration."""
    size = side_length(radius)
    dimensions = len(offset)
    length = neighbor_count(radius, dimensions)

    index = 0
    for axis in range(dimensions - 1, -1, -1):
        value = offset[axis]
        if not (-radius <= value <= radius):
            raise ValueError(f"offset {tuple(offset)} lies outside radius {radius}")
        index = index * size + (value + radius)

    half_length = length // 2
    if index == half_length:
        raise ValueError("the origin is not a neighbor")
    return index if index < half_length else index - 1
