"""
Boundary module for molecular dynamics simulations.

Provides unit cells (Strategy Pattern) and the minimal image helper:
- UnitCell: Abstract base class
- InfiniteCell: No periodicity
- OrthorhombicCell: Rectangular periodic cell
- TriclinicCell: General periodic cell
"""

from .infinite_cell import InfiniteCell
from .periodic_cell import OrthorhombicCell, TriclinicCell
from .unit_cell import UnitCell, minimal_image

__all__ = [
    "UnitCell",
    "InfiniteCell",
    "OrthorhombicCell",
    "TriclinicCell",
    "minimal_image",
]
