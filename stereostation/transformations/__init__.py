"""Convert between coordinate systems.

:mod:`~stereostation.transformations.axes`
    rotations and conversion between Cartesian and polar coordinates

"""
from . import axes

__all__ = ['axes']
