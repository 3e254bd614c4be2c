"""
Velocity Verlet integrator implementation.

The most common integrator for molecular dynamics simulations.
Time-reversible and symplectic with good energy conservation.
"""
from typing import TYPE_CHECKING

import numpy as np

from pyverlet.core import Array3D

from .integrator import Integrator

if TYPE_CHECKING:
    from pyverlet.core import System


class VelocityVerlet(Integrator):
    """
    Velocity Verlet integrator.

    Algorithm (for each time step dt):
        1. r(t + dt) = r(t) + v(t) * dt + (1/2) * a(t) * dt²
        2. v(t + dt/2) = v(t) + (1/2) * a(t) * dt
        3. Compute forces at r(t + dt)
        4. a(t + dt) = F(t + dt) / m
        5. v(t + dt) = v(t + dt/2) + (1/2) * a(t + dt) * dt

    The acceleration used in steps 1-2 is the one computed at the end of
    the previous step, so it is kept between calls. After a resize the
    accelerations restart from zero.

    Properties:
        - Time-reversible
        - Symplectic (preserves phase space volume)
        - Second-order accurate in positions
        - Good long-term energy conservation

    Attributes:
        accelerations: One acceleration vector per particle.

    Example:
        >>> from pyverlet.integrator import VelocityVerlet
        >>> integrator = VelocityVerlet(dt=0.001)
        >>> integrator.prepare(system)
        >>> for step in range(1000):
        ...     integrator.step(system)
    """

    def __init__(self, dt: float) -> None:
        super().__init__(dt)
        self.accelerations = Array3D(0)

    def _setup(self, system: "System", n_particles: int) -> None:
        if len(self.accelerations) != n_particles:
            self.accelerations.resize(n_particles)
            self.accelerations.zero()

    def _integrate(self, system: "System") -> None:
        """
        Advance system by one Velocity Verlet step.

        Args:
            system: The system to integrate.
        """
        dt = self.dt
        positions = system.frame.positions.as_array()
        velocities = system.frame.velocities.as_array()
        accelerations = self.accelerations.as_array()
        masses = system.masses

        # Step 1: r(t + dt) with the old acceleration
        positions += velocities * dt + 0.5 * accelerations * dt ** 2

        # Step 2: first half-kick, v(t + dt/2)
        velocities += 0.5 * accelerations * dt

        # Step 3: forces at r(t + dt)
        system.evaluate_forces()

        # Step 4: a(t + dt) = F / m, masses is (N,), forces is (N, 3)
        np.divide(
            system.forces.as_array(), masses[:, np.newaxis], out=accelerations
        )

        # Step 5: second half-kick, v(t + dt)
        velocities += 0.5 * accelerations * dt

    def get_name(self) -> str:
        """Return integrator name with timestep."""
        return f"VelocityVerlet(dt={self.dt})"
