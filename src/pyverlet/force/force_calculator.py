"""
Force calculator interface for molecular dynamics simulations.

This module provides the ForceCalculator ABC through which integrators
obtain forces, and a thin adapter for plain force functions. Concrete
force fields live outside this package.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pyverlet.core import System


class ForceCalculator(ABC):
    """
    Abstract base for force evaluation (Strategy Pattern).

    A force calculator maps the current particle positions of a System
    to one force vector per particle. It may be arbitrarily expensive;
    integrators call it exactly once per step through
    ``System.evaluate_forces``.

    Example:
        >>> class ZeroForce(ForceCalculator):
        ...     def compute_forces(self, system):
        ...         return np.zeros((system.n_particles, 3))
        ...     def get_name(self):
        ...         return "Zero"
    """

    @abstractmethod
    def compute_forces(self, system: "System") -> NDArray[np.floating]:
        """
        Compute forces on all particles.

        Args:
            system: System whose current positions are used.

        Returns:
            (N, 3) array of forces.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this force calculator."""
        pass


class FunctionForceCalculator(ForceCalculator):
    """
    Adapter turning a function of positions into a ForceCalculator.

    Attributes:
        function: Callable taking the (N, 3) positions array and the unit
            cell and returning an (N, 3) force array.
        name: Name reported by ``get_name``.

    Example:
        >>> def spring(positions, cell):
        ...     return -10.0 * positions
        >>> calculator = FunctionForceCalculator(spring, name="Spring")
    """

    def __init__(
        self,
        function: Callable[..., NDArray[np.floating]],
        name: str = "Function",
    ) -> None:
        self.function = function
        self.name = name

    def compute_forces(self, system: "System") -> NDArray[np.floating]:
        frame = system.frame
        return self.function(frame.positions.as_array(), frame.cell)

    def get_name(self) -> str:
        return self.name
