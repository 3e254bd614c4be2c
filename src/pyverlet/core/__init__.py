"""
Core module for molecular dynamics simulations.

This module provides the fundamental containers:
- Array3D: Resizable array of 3D vectors
- Frame: Positions, velocities and unit cell
- System: Simulation context (frame, masses, forces)
"""

from .array3d import Array3D
from .frame import Frame
from .system import System, validate_masses

__all__ = [
    "Array3D",
    "Frame",
    "System",
    "validate_masses",
]
