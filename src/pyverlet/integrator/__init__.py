"""
Integrator module for molecular dynamics simulations.

Provides time integration algorithms:
- VelocityVerlet: Standard symplectic integrator
- Verlet: Basic position Verlet with reconstructed velocities
"""

from .integrator import Integrator
from .velocity_verlet import VelocityVerlet
from .verlet import Verlet

__all__ = [
    "Integrator",
    "VelocityVerlet",
    "Verlet",
]
