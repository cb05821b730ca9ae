"""Moore neighborhoods of integer lattice cells in any number of dimensions."""

from .core.config import NeighborhoodConfig, moore
from .core.decoder import decode_offset, encode_offset, iter_offsets, neighbor_count
from .invariants.audit import audit_neighborhood
from .variants import GenericDimension, GenericFull, dynamic, generic_dimension, generic_full
from .variants.dynamic import neighbors

__all__ = [
    "moore",
    "NeighborhoodConfig",
    "GenericDimension",
    "GenericFull",
    "neighbor_count",
    "decode_offset",
    "encode_offset",
    "iter_offsets",
    "neighbors",
    "audit_neighborhood",
    "dynamic",
    "generic_dimension",
    "generic_full",
]
