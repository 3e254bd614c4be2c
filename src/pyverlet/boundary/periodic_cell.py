"""
Periodic unit cell implementations.

This module provides fully periodic cells, typical for bulk simulations:
- OrthorhombicCell: rectangular box with three edge lengths
- TriclinicCell: general cell defined by lengths and angles
"""
import itertools
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .unit_cell import UnitCell


class OrthorhombicCell(UnitCell):
    """
    Rectangular periodic cell.

    Particles leaving one face re-enter through the opposite face and
    displacements follow the minimum image convention.

    Attributes:
        lengths: (3,) array of edge lengths.

    Example:
        >>> cell = OrthorhombicCell([10.0, 10.0, 10.0])
        >>> # Vector of 8 units maps to -2
        >>> cell.apply_minimal_image(np.array([[8.0, 0.0, 0.0]]))
        array([[-2.,  0.,  0.]])
    """

    def __init__(self, lengths: Sequence[float]) -> None:
        """
        Initialize an orthorhombic cell.

        Args:
            lengths: Edge lengths (a, b, c).

        Raises:
            ValueError: If lengths is not three positive numbers.
        """
        self.lengths = np.asarray(lengths, dtype=np.float64)
        if self.lengths.shape != (3,):
            raise ValueError(
                f"Cell lengths must be a (3,) array, got shape {self.lengths.shape}"
            )
        if np.any(self.lengths <= 0):
            raise ValueError(f"Cell lengths must be positive, got {self.lengths}")

    def apply_minimal_image(
        self,
        vector: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """
        Map displacement vectors to the range [-L/2, L/2].

        Args:
            vector: (N, 3) or (3,) displacement vectors.

        Returns:
            Corrected vectors.
        """
        vector = np.asarray(vector, dtype=np.float64)
        return vector - self.lengths * np.round(vector / self.lengths)

    def wrap_positions(
        self,
        positions: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """
        Wrap positions back into [0, L).

        Args:
            positions: (N, 3) particle positions.

        Returns:
            Wrapped positions.
        """
        positions = np.asarray(positions, dtype=np.float64)
        return positions - self.lengths * np.floor(positions / self.lengths)

    def get_volume(self) -> float:
        return float(np.prod(self.lengths))

    def get_name(self) -> str:
        """Return the cell name with its lengths."""
        a, b, c = self.lengths
        return f"Orthorhombic({a:g}, {b:g}, {c:g})"


class TriclinicCell(UnitCell):
    """
    General periodic cell defined by edge lengths and angles.

    The cell matrix holds the three cell vectors as columns, with the
    first vector along x and the second in the xy plane. Minimal image
    and wrapping are done in fractional coordinates. After rounding, the
    minimal image also checks the 26 neighbouring lattice translations
    and keeps the shortest vector, so skewed cells get the true shortest
    image unless they are far from reduced form.

    Attributes:
        lengths: (3,) array of edge lengths (a, b, c).
        angles: (3,) array of angles (alpha, beta, gamma) in degrees.
        matrix: (3, 3) cell matrix, columns are the cell vectors.
    """

    def __init__(
        self,
        lengths: Sequence[float],
        angles: Sequence[float] = (90.0, 90.0, 90.0),
    ) -> None:
        """
        Initialize a triclinic cell.

        Args:
            lengths: Edge lengths (a, b, c).
            angles: Angles (alpha, beta, gamma) in degrees.

        Raises:
            ValueError: If the parameters do not describe a valid cell.
        """
        self.lengths = np.asarray(lengths, dtype=np.float64)
        self.angles = np.asarray(angles, dtype=np.float64)
        if self.lengths.shape != (3,) or self.angles.shape != (3,):
            raise ValueError("Cell lengths and angles must both have 3 entries")
        if np.any(self.lengths <= 0):
            raise ValueError(f"Cell lengths must be positive, got {self.lengths}")
        if np.any(self.angles <= 0) or np.any(self.angles >= 180):
            raise ValueError(f"Cell angles must be in (0, 180), got {self.angles}")

        self.matrix = self._build_matrix()
        if abs(np.linalg.det(self.matrix)) < 1e-12:
            raise ValueError("Cell vectors are degenerate")
        self._inverse = np.linalg.inv(self.matrix)
        shifts = np.array(list(itertools.product((-1.0, 0.0, 1.0), repeat=3)))
        self._translations = shifts @ self.matrix.T

    def _build_matrix(self) -> NDArray[np.float64]:
        a, b, c = self.lengths
        alpha, beta, gamma = np.radians(self.angles)
        cos_a, cos_b, cos_g = np.cos(alpha), np.cos(beta), np.cos(gamma)
        sin_g = np.sin(gamma)

        cx = c * cos_b
        cy = c * (cos_a - cos_b * cos_g) / sin_g
        cz_sq = c * c - cx * cx - cy * cy
        if cz_sq <= 0:
            raise ValueError(f"Cell angles {self.angles} do not form a valid cell")

        return np.array([
            [a, b * cos_g, cx],
            [0.0, b * sin_g, cy],
            [0.0, 0.0, np.sqrt(cz_sq)],
        ])

    def apply_minimal_image(
        self,
        vector: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        vector = np.asarray(vector, dtype=np.float64)
        fractional = vector @ self._inverse.T
        fractional -= np.round(fractional)
        reduced = fractional @ self.matrix.T

        # (..., 27, 3) candidates, one per neighbouring translation
        candidates = reduced[..., np.newaxis, :] + self._translations
        lengths = np.sum(candidates * candidates, axis=-1)
        shortest = np.argmin(lengths, axis=-1, keepdims=True)[..., np.newaxis]
        return np.take_along_axis(candidates, shortest, axis=-2)[..., 0, :]

    def wrap_positions(
        self,
        positions: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        positions = np.asarray(positions, dtype=np.float64)
        fractional = positions @ self._inverse.T
        fractional -= np.floor(fractional)
        return fractional @ self.matrix.T

    def get_volume(self) -> float:
        return float(abs(np.linalg.det(self.matrix)))

    def get_name(self) -> str:
        """Return the cell name with its parameters."""
        a, b, c = self.lengths
        alpha, beta, gamma = self.angles
        return (
            f"Triclinic({a:g}, {b:g}, {c:g}, "
            f"{alpha:g}, {beta:g}, {gamma:g})"
        )
