"""
Infinite (non-periodic) unit cell.

Used for isolated systems such as gas-phase molecules or clusters.
"""
import numpy as np
from numpy.typing import NDArray

from .unit_cell import UnitCell


class InfiniteCell(UnitCell):
    """
    Cell without periodicity.

    Minimal image and wrapping leave their inputs unchanged.

    Example:
        >>> cell = InfiniteCell()
        >>> cell.apply_minimal_image(np.array([15.0, 0.0, 0.0]))
        array([15.,  0.,  0.])
    """

    def apply_minimal_image(
        self,
        vector: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """No modification for a non-periodic cell."""
        return np.array(vector, dtype=np.float64)

    def wrap_positions(
        self,
        positions: NDArray[np.floating],
    ) -> NDArray[np.floating]:
        """No wrapping for a non-periodic cell."""
        return np.array(positions, dtype=np.float64)

    def get_volume(self) -> float:
        return float("inf")

    def get_name(self) -> str:
        """Return 'Infinite' as the cell name."""
        return "Infinite"

    @property
    def is_periodic(self) -> bool:
        return False
