"""
Basic (position) Verlet integrator implementation.

Positions are propagated from the current and previous positions only;
velocities are reconstructed from the position difference and lag the
positions by one step.
"""
from typing import TYPE_CHECKING

import numpy as np

from pyverlet.boundary import minimal_image
from pyverlet.core import Array3D

from .integrator import Integrator

if TYPE_CHECKING:
    from pyverlet.core import System


class Verlet(Integrator):
    """
    Basic Verlet integrator.

    Algorithm (for each time step dt):
        1. Compute forces at r(t)
        2. r(t + dt) = 2 r(t) - r(t - dt) + (dt² / m) * F(t)
        3. v(t) = (r(t + dt) - r(t - dt)) / (2 dt)

    The scheme is not self-starting: on (re)allocation the previous
    positions are estimated as r(t - dt) = r(t) - v(t) * dt. Velocities
    are never fed back into the position update.

    When the system wraps positions into the cell between steps, r(t + dt)
    may sit in a different periodic image than r(t - dt). The displacement
    is then minimal-imaged before computing the velocity.

    Attributes:
        tmp: Scratch buffer holding r(t) during a step.
        prevpos: Positions at the previous step, r(t - dt).
        wrap_velocities: Whether displacements are minimal-imaged,
            captured from the system at every ``prepare``.

    Example:
        >>> from pyverlet.integrator import Verlet
        >>> integrator = Verlet(dt=0.001)
        >>> integrator.prepare(system)
        >>> integrator.step(system)
    """

    def __init__(self, dt: float) -> None:
        super().__init__(dt)
        self.tmp = Array3D(0)
        self.prevpos = Array3D(0)
        self.wrap_velocities = False

    def _setup(self, system: "System", n_particles: int) -> None:
        self.wrap_velocities = system.is_wrapping_positions()

        if len(self.prevpos) != n_particles or len(self.tmp) != n_particles:
            self.prevpos.resize(n_particles)
            self.tmp.resize(n_particles)
            self.tmp.zero()

            # Approximate the positions at t - dt
            frame = system.frame
            self.prevpos.copy_from(
                frame.positions.as_array() - frame.velocities.as_array() * self.dt
            )

    def _integrate(self, system: "System") -> None:
        """
        Advance system by one Verlet step.

        Args:
            system: The system to integrate.
        """
        dt = self.dt
        system.evaluate_forces()

        positions = system.frame.positions.as_array()
        velocities = system.frame.velocities.as_array()
        prevpos = self.prevpos.as_array()
        tmp = self.tmp.as_array()
        masses = system.masses

        # Save r(t)
        np.copyto(tmp, positions)

        # r(t + dt)
        positions[...] = (
            2.0 * positions
            - prevpos
            + (dt ** 2 / masses[:, np.newaxis]) * system.forces.as_array()
        )

        # v(t) from the displacement over two steps
        delta = positions - prevpos
        if self.wrap_velocities:
            # positions may have been wrapped into the cell, prevpos never is
            minimal_image(delta, system.frame.cell)
        velocities[...] = delta / (2.0 * dt)

        # r(t) becomes the previous positions
        np.copyto(prevpos, tmp)

    def get_name(self) -> str:
        """Return integrator name with timestep."""
        return f"Verlet(dt={self.dt})"
