"""moore_neighborhood.variants"""

from . import dynamic, generic_dimension, generic_full
from .generic_dimension import GenericDimension
from .generic_full import GenericFull

__all__ = [
    "dynamic",
    "generic_dimension",
    "generic_full",
    "GenericDimension",
    "GenericFull",
]
