"""
Abstract base class for periodic unit cells.

This module provides the UnitCell ABC describing the simulation cell
and the in-place ``minimal_image`` helper the integrators use.
"""
from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray


class UnitCell(ABC):
    """
    Abstract base for unit cells (Strategy Pattern).

    A unit cell knows its own geometry and how to map displacement
    vectors to their shortest periodic equivalent and positions into
    the primary cell. Implementations (Infinite, Orthorhombic,
    Triclinic) are interchangeable.

    Example:
        >>> from pyverlet.boundary import OrthorhombicCell
        >>> cell = OrthorhombicCell([10.0, 10.0, 10.0])
        >>> cell.apply_minimal_image(np.array([8.0, 0.0, 0.0]))
        array([-2.,  0.,  0.])
    """

    @abstractmethod
    def apply_minimal_image(
        self,
        vector: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """
        Return the minimal-image representative of displacement vectors.

        Args:
            vector: (N, 3) or (3,) displacement vectors.

        Returns:
            New array of the same shape with the shortest periodic
            equivalents.
        """
        pass

    @abstractmethod
    def wrap_positions(
        self,
        positions: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """
        Wrap positions into the primary cell.

        Args:
            positions: (N, 3) particle positions.

        Returns:
            New (N, 3) array of wrapped positions.
        """
        pass

    @abstractmethod
    def get_volume(self) -> float:
        """Return the cell volume (``inf`` for a non-periodic cell)."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this cell."""
        pass

    @property
    def is_periodic(self) -> bool:
        """Whether any direction of this cell is periodic."""
        return True


def minimal_image(vector: NDArray[np.floating], cell: UnitCell) -> None:
    """
    Replace ``vector`` by its minimal image under ``cell``, in place.

    Args:
        vector: (3,) or (N, 3) float array, modified in place.
        cell: Unit cell defining the periodicity.
    """
    vector[...] = cell.apply_minimal_image(vector)
