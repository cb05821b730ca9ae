from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass

from moore_neighborhood.core.decoder import decode_offset, neighbor_count


@dataclass(frozen=True, slots=True)
class GenericFull:
    """Moore neighborhood with radius, dimensions and length all fixed up front.

    `length` defaults to (2*radius+1)**dimensions - 1. Supplying a different
    value is a caller arithmetic error and fails at construction.
    """

    radius: int
    dimensions: int
    length: int | None = None

    def __post_init__(self) -> None:
        expected = neighbor_count(self.radius, self.dimensions)
        if self.length is None:
            object.__setattr__(self, "length", expected)
        elif self.length != expected:
            raise AssertionError(
                f"length {self.length} != (2*{self.radius}+1)**{self.dimensions} - 1 = {expected}"
            )

    def moore(self) -> tuple[tuple[int, ...], ...]:
        buffer: list[tuple[int, ...]] = [(0,) * self.dimensions for _ in range(self.length)]
        self.moore_prealloc(buffer)
        return tuple(buffer)

    def moore_prealloc(self, buffer: MutableSequence) -> int:
        """Write the neighborhood into `buffer`, returning the number of rows written.

        `buffer` may hold more rows than the neighborhood; rows past the returned
        count are left untouched. Rows are assigned as tuples, so a list of rows
        or a 2-D array of shape (capacity, dimensions) both work.
        """
        length = self.length
        if len(buffer) < length:
            raise AssertionError(f"buffer holds {len(buffer)} rows, need {length}")

        half_length = length // 2
        for position in range(length):
            buffer[position] = tuple(decode_offset(position, self.radius, self.dimensions, half_length))
        return length


def moore(radius: int, dimensions: int, length: int | None = None) -> tuple[tuple[int, ...], ...]:
    return GenericFull(radius, dimensions, length).moore()


def moore_prealloc(radius: int, dimensions: int, buffer: MutableSequence) -> int:
    return GenericFull(radius, dimensions).moore_prealloc(buffer)
