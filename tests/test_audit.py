from __future__ import annotations

import pytest

from moore_neighborhood import audit_neighborhood, dynamic
from moore_neighborhood.invariants.audit import reference_neighborhood


@pytest.mark.parametrize("radius,dimensions", [(1, 1), (1, 2), (2, 2), (1, 3), (2, 3)])
def test_audit_passes_and_is_non_mutating(radius: int, dimensions: int):
    offsets = dynamic.moore(radius, dimensions)
    before = [list(o) for o in offsets]
    audit_neighborhood(offsets, radius, dimensions)
    assert offsets == before


def test_reference_matches_sorted_set():
    assert sorted(map(tuple, dynamic.moore(2, 3))) == sorted(reference_neighborhood(2, 3))


def test_audit_detects_wrong_count():
    offsets = dynamic.moore(1, 2)
    with pytest.raises(AssertionError):
        audit_neighborhood(offsets[:-1], 1, 2)


def test_audit_detects_origin():
    offsets = dynamic.moore(1, 2)
    offsets[0] = [0, 0]
    with pytest.raises(AssertionError):
        audit_neighborhood(offsets, 1, 2)


def test_audit_detects_duplicate():
    offsets = dynamic.moore(1, 2)
    offsets[0] = offsets[1]
    with pytest.raises(AssertionError):
        audit_neighborhood(offsets, 1, 2)


def test_audit_detects_out_of_radius_and_wrong_axes():
    offsets = dynamic.moore(1, 2)
    offsets[0] = [2, -1]
    with pytest.raises(AssertionError):
        audit_neighborhood(offsets, 1, 2)
    offsets = dynamic.moore(1, 2)
    offsets[0] = [-1, -1, 0]
    with pytest.raises(AssertionError):
        audit_neighborhood(offsets, 1, 2)
