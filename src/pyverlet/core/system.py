"""
System class for molecular dynamics simulations.

This module provides the System class: the simulation context that an
integrator reads from and writes into. It owns the particle frame, the
masses and the force buffer, and knows how to evaluate forces.
"""
from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .array3d import Array3D
from .frame import Frame

if TYPE_CHECKING:
    from pyverlet.force import ForceCalculator


def validate_masses(masses: ArrayLike, n_particles: int) -> NDArray[np.float64]:
    """
    Check a mass vector against a particle count.

    Args:
        masses: One scalar per particle.
        n_particles: Expected number of particles.

    Returns:
        The masses as an (N,) float64 array.

    Raises:
        ValueError: If the length is wrong or any mass is not a finite
            positive number.
    """
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    if masses.shape[0] != n_particles:
        raise ValueError(
            f"Number of masses ({masses.shape[0]}) must match "
            f"number of particles ({n_particles})"
        )
    bad = ~np.isfinite(masses) | (masses <= 0.0)
    if np.any(bad):
        index = int(np.flatnonzero(bad)[0])
        raise ValueError(
            f"All masses must be positive, got {masses[index]} for particle {index}"
        )
    return masses


class System:
    """
    Simulation context shared by the driver, the integrator and the
    force calculator.

    The System manages:
    - The Frame (positions, velocities, unit cell)
    - Per-particle masses, index-aligned with the frame
    - The force buffer, filled by ``evaluate_forces``
    - Whether positions are wrapped into the primary cell between steps
    - Simulation time and step counters, advanced by the driver

    Design Notes:
        - Integrators never copy per-particle arrays out of the System;
          they mutate ``frame.positions`` and ``frame.velocities`` in place.
        - The force buffer is only written by ``evaluate_forces``.

    Attributes:
        frame: Current particle frame.
        masses: (N,) array of particle masses.
        forces: Force buffer, length N after each evaluation.
        force_calculator: Strategy that computes forces.
        wrap_particles: Whether the driver wraps positions into the cell.
        boltzmann: Boltzmann constant used for temperature (default 1.0).
        time: Current simulation time.
        step: Current step number.

    Example:
        >>> from pyverlet.core import Frame, System
        >>> frame = Frame(positions=np.zeros((2, 3)))
        >>> system = System(frame, masses=[1.0, 2.0], force_calculator=calc)
        >>> system.evaluate_forces()
    """

    def __init__(
        self,
        frame: Frame,
        masses: ArrayLike,
        force_calculator: "ForceCalculator",
        wrap_particles: bool = False,
        boltzmann: float = 1.0,
    ) -> None:
        """
        Initialize a System.

        Args:
            frame: Particle frame.
            masses: One positive mass per particle.
            force_calculator: ForceCalculator strategy.
            wrap_particles: Wrap positions into the cell after every step.
            boltzmann: Boltzmann constant in the simulation's units.

        Raises:
            ValueError: If the masses do not match the frame.
        """
        self.frame = frame
        self.masses = validate_masses(masses, frame.n_particles)
        self.force_calculator = force_calculator
        self.wrap_particles = wrap_particles
        self.boltzmann = boltzmann
        self.forces = Array3D(frame.n_particles)
        self.time = 0.0
        self.step = 0

    @property
    def n_particles(self) -> int:
        """Return the live number of particles."""
        return self.frame.n_particles

    def evaluate_forces(self) -> None:
        """
        Fill the force buffer from the current positions.

        Raises:
            RuntimeError: If the force calculator returns an array whose
                shape is not (N, 3).
        """
        forces = np.asarray(
            self.force_calculator.compute_forces(self), dtype=np.float64
        )
        n_particles = self.n_particles
        if forces.shape != (n_particles, 3):
            raise RuntimeError(
                f"{self.force_calculator.get_name()} returned forces of shape "
                f"{forces.shape}, expected ({n_particles}, 3)"
            )
        self.forces.resize(n_particles)
        self.forces.copy_from(forces)

    def is_wrapping_positions(self) -> bool:
        """Whether positions are wrapped into the primary cell between steps."""
        return self.wrap_particles and self.frame.cell.is_periodic

    def wrap_positions(self) -> None:
        """Wrap positions into the primary cell, in place."""
        positions = self.frame.positions
        positions.copy_from(self.frame.cell.wrap_positions(positions.as_array()))

    def set_masses(self, masses: ArrayLike) -> None:
        """
        Replace all masses.

        Raises:
            ValueError: If the masses do not match the frame.
        """
        self.masses = validate_masses(masses, self.n_particles)

    def add_particle(
        self,
        position: ArrayLike,
        mass: float,
        velocity: ArrayLike = (0.0, 0.0, 0.0),
    ) -> int:
        """
        Append one particle to the frame and the mass vector.

        Integrators must be prepared again before the next step.

        Returns:
            Index of the new particle.

        Raises:
            ValueError: If mass is not positive.
        """
        mass = float(validate_masses([mass], 1)[0])
        index = self.frame.add_particle(position, velocity)
        self.masses = np.append(self.masses, mass)
        return index

    def remove_particle(self, index: int) -> None:
        """
        Remove one particle from the frame and the mass vector.

        Integrators must be prepared again before the next step.
        """
        self.frame.remove_particle(index)
        self.masses = np.delete(self.masses, index)

    def compute_kinetic_energy(self) -> float:
        """
        Compute total kinetic energy of the system.

        KE = (1/2) * Σ_i m_i * |v_i|²

        Returns:
            Total kinetic energy.
        """
        velocities = self.frame.velocities.as_array()
        return float(0.5 * np.sum(self.masses[:, np.newaxis] * velocities ** 2))

    def compute_temperature(self) -> float:
        """
        Compute instantaneous temperature from kinetic energy.

        Uses the equipartition theorem with n_dof = 3*N - 3.

        Raises:
            ValueError: If system has fewer than 2 particles.
        """
        if self.n_particles < 2:
            raise ValueError("Need at least 2 particles to compute temperature")
        n_dof = 3 * self.n_particles - 3
        return 2.0 * self.compute_kinetic_energy() / (n_dof * self.boltzmann)

    def get_momentum(self) -> NDArray[np.floating]:
        """Return the (3,) total momentum."""
        velocities = self.frame.velocities.as_array()
        return np.sum(self.masses[:, np.newaxis] * velocities, axis=0)

    def get_center_of_mass(self) -> Optional[NDArray[np.floating]]:
        """Return the (3,) center of mass, or None for an empty system."""
        if self.n_particles == 0:
            return None
        positions = self.frame.positions.as_array()
        return np.sum(self.masses[:, np.newaxis] * positions, axis=0) / np.sum(self.masses)

    def __repr__(self) -> str:
        """Return string representation of the system."""
        return (
            f"System(n_particles={self.n_particles}, "
            f"cell={self.frame.cell.get_name()}, "
            f"forces={self.force_calculator.get_name()})"
        )
