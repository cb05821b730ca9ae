from __future__ import annotations

from dataclasses import dataclass

from moore_neighborhood.core.decoder import neighbor_count
from moore_neighborhood.variants.generic_full import GenericFull


@dataclass(frozen=True, slots=True)
class NeighborhoodConfig:
    radius: int = 1
    dimensions: int = 2

    @property
    def length(self) -> int:
        return neighbor_count(self.radius, self.dimensions)

    def build(self) -> GenericFull:
        return GenericFull(self.radius, self.dimensions, self.length)


def moore(radius: int = 1, dimensions: int = 2) -> tuple[tuple[int, ...], ...]:
    """Fixed-size Moore neighborhood, defaulting to the 8 offsets of a 2-D grid cell.

    >>> len(moore())
    8
    >>> moore(1, 1)
    ((-1,), (1,))
    """
    return NeighborhoodConfig(radius, dimensions).build().moore()
