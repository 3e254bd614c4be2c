"""
Abstract base class for time integrators.

This module provides the Integrator ABC that defines the two-phase
``prepare`` / ``step`` contract shared by all integration schemes
(Velocity Verlet, Verlet).
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import numpy as np

from pyverlet.core.system import validate_masses

if TYPE_CHECKING:
    from pyverlet.core import System


class Integrator(ABC):
    """
    Abstract base for time integration algorithms (Strategy Pattern).

    Integrators advance a System by one fixed time step, updating
    positions and velocities in place according to Newton's equations.
    Each integrator owns the derived per-particle state its scheme needs,
    sized to the particle count seen by the last ``prepare`` call.

    Lifecycle:
        Uninitialized --prepare(N)--> Ready(N)
        Ready(N) --prepare(M)--> Ready(M)   (buffers reallocated if M != N)
        Ready(N) --step--> Ready(N)         (only while the system has N particles)

    Attributes:
        dt: Time step size, fixed at construction.

    Example:
        >>> from pyverlet.integrator import VelocityVerlet
        >>> integrator = VelocityVerlet(dt=0.001)
        >>> integrator.prepare(system)
        >>> for _ in range(1000):
        ...     integrator.step(system)
    """

    def __init__(self, dt: float) -> None:
        """
        Initialize integrator.

        Args:
            dt: Time step size in simulation time units.

        Raises:
            ValueError: If dt is not a finite positive number.
        """
        if not np.isfinite(dt) or dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self._dt = float(dt)
        self._n_prepared: Optional[int] = None

    @property
    def dt(self) -> float:
        """Time step size."""
        return self._dt

    @property
    def n_prepared(self) -> Optional[int]:
        """Particle count of the last ``prepare`` call, None before the first."""
        return self._n_prepared

    @property
    def is_prepared(self) -> bool:
        """Whether ``prepare`` has been called at least once."""
        return self._n_prepared is not None

    def prepare(self, system: "System") -> None:
        """
        Size the integrator's derived state for the current particle count.

        Must be called before the first ``step`` and again after any
        change in the number of particles. Calling it again with an
        unchanged particle count leaves the derived state untouched.
        The validated masses are stored back on the system as an (N,)
        float64 array.

        Args:
            system: The system to integrate.

        Raises:
            ValueError: If any mass is zero, negative or non-finite, or
                the mass vector does not match the particle count.
        """
        n_particles = system.n_particles
        system.masses = validate_masses(system.masses, n_particles)
        self._setup(system, n_particles)
        self._n_prepared = n_particles

    def step(self, system: "System") -> None:
        """
        Advance the system by exactly one time step.

        Positions and velocities of ``system.frame`` are updated in place
        and forces are evaluated exactly once.

        Args:
            system: The system to integrate.

        Raises:
            RuntimeError: If ``prepare`` was never called, or the particle
                count changed since the last ``prepare``.
            FloatingPointError: If positions or velocities are no longer
                finite after the step.
        """
        if self._n_prepared is None:
            raise RuntimeError(
                f"{self.get_name()}: step() called before prepare()"
            )
        if system.n_particles != self._n_prepared:
            raise RuntimeError(
                f"{self.get_name()}: system has {system.n_particles} particles "
                f"but the integrator was prepared for {self._n_prepared}; "
                f"call prepare() after changing the particle count"
            )

        self._integrate(system)
        self._check_finite(system)

    @abstractmethod
    def _setup(self, system: "System", n_particles: int) -> None:
        """
        Reallocate and re-initialize derived state if its size differs.

        Args:
            system: The system to integrate.
            n_particles: Current number of particles.
        """
        pass

    @abstractmethod
    def _integrate(self, system: "System") -> None:
        """Apply one step of the scheme to the system, in place."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this integrator."""
        pass

    def _check_finite(self, system: "System") -> None:
        # the driver advances system.step only after step() returns
        failed_step = system.step + 1
        frame = system.frame
        for label, values in (
            ("positions", frame.positions.as_array()),
            ("velocities", frame.velocities.as_array()),
        ):
            finite = np.isfinite(values).all(axis=1)
            if not finite.all():
                index = int(np.flatnonzero(~finite)[0])
                raise FloatingPointError(
                    f"{self.get_name()}: non-finite {label} for particle "
                    f"{index} at step {failed_step}"
                )

    def __repr__(self) -> str:
        return self.get_name()
