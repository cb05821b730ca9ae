from __future__ import annotations

from dataclasses import dataclass

from moore_neighborhood.core.decoder import iter_offsets

Offset1 = tuple[int]
Offset2 = tuple[int, int]
Offset3 = tuple[int, int, int]


def moore(radius: int, dimensions: int = 2) -> list[tuple[int, ...]]:
    """Moore neighborhood with fixed-length tuple offsets.

    >>> moore(1, 1)
    [(-1,), (1,)]
    """
    return [tuple(offset) for offset in iter_offsets(radius, dimensions)]


@dataclass(frozen=True, slots=True)
class GenericDimension:
    """Enumerator bound to one dimension count; only the radius varies per call."""

    dimensions: int

    def __post_init__(self) -> None:
        if self.dimensions < 1:
            raise ValueError("dimensions must be >= 1")

    def __call__(self, radius: int) -> list[tuple[int, ...]]:
        return moore(radius, self.dimensions)
