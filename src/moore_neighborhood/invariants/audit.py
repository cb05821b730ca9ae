from __future__ import annotations

import itertools
from collections.abc import Sequence

from moore_neighborhood.core.decoder import neighbor_count


def reference_neighborhood(radius: int, dimensions: int) -> list[tuple[int, ...]]:
    """Naive enumeration: every point of the hypercube except the origin.

    Ordered like the decoder, axis 0 varying fastest.
    """
    length = neighbor_count(radius, dimensions)
    axis = range(-radius, radius + 1)
    origin = (0,) * dimensions
    out = [tuple(reversed(p)) for p in itertools.product(axis, repeat=dimensions)]
    out = [p for p in out if p != origin]
    if len(out) != length:
        raise AssertionError("reference enumeration size mismatch")
    return out


def audit_neighborhood(offsets: Sequence[Sequence[int]], radius: int, dimensions: int) -> None:
    # NON-MUTATING: only reads `offsets`.
    length = neighbor_count(radius, dimensions)
    if len(offsets) != length:
        raise AssertionError(f"expected {length} offsets, got {len(offsets)}")

    seen: set[tuple[int, ...]] = set()
    for offset in offsets:
        t = tuple(offset)
        if len(t) != dimensions:
            raise AssertionError(f"offset {t} does not have {dimensions} axes")
        if any(abs(v) > radius for v in t):
            raise AssertionError(f"offset {t} lies outside radius {radius}")
        if not any(t):
            raise AssertionError("origin present in neighborhood")
        if t in seen:
            raise AssertionError(f"offset {t} repeated")
        seen.add(t)

    if sorted(seen) != sorted(reference_neighborhood(radius, dimensions)):
        raise AssertionError("neighborhood membership differs from reference enumeration")
