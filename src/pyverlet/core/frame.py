"""
Frame class for molecular dynamics simulations.

This module provides the Frame dataclass holding the particle positions,
velocities and unit cell at a single instant.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike

from pyverlet.boundary import InfiniteCell, UnitCell

from .array3d import Array3D


@dataclass
class Frame:
    """
    Particle positions and velocities plus the unit cell.

    Positions and velocities always have the same length N. N may change
    between integration steps through ``resize``, ``add_particle`` and
    ``remove_particle``; integrators pick up the change on their next
    ``prepare`` call.

    Attributes:
        positions: N position vectors.
        velocities: N velocity vectors.
        cell: Unit cell (default: InfiniteCell).

    Example:
        >>> import numpy as np
        >>> from pyverlet.core import Frame
        >>> from pyverlet.boundary import OrthorhombicCell
        >>> frame = Frame(
        ...     positions=np.zeros((10, 3)),
        ...     velocities=np.zeros((10, 3)),
        ...     cell=OrthorhombicCell([10.0, 10.0, 10.0]),
        ... )
        >>> frame.n_particles
        10
    """
    positions: Union[Array3D, ArrayLike]
    velocities: Optional[Union[Array3D, ArrayLike]] = None
    cell: UnitCell = field(default_factory=InfiniteCell)

    def __post_init__(self) -> None:
        """Convert inputs to Array3D and validate lengths."""
        if not isinstance(self.positions, Array3D):
            self.positions = Array3D(data=self.positions)
        if self.velocities is None:
            self.velocities = Array3D(len(self.positions))
        elif not isinstance(self.velocities, Array3D):
            self.velocities = Array3D(data=self.velocities)

        if len(self.velocities) != len(self.positions):
            raise ValueError(
                f"Velocities length {len(self.velocities)} must match "
                f"positions length {len(self.positions)}"
            )

    @property
    def n_particles(self) -> int:
        """Return the number of particles in the frame."""
        return len(self.positions)

    def resize(self, size: int) -> None:
        """
        Resize positions and velocities together.

        New particles start at the origin with zero velocity.
        """
        self.positions.resize(size)
        self.velocities.resize(size)

    def add_particle(
        self,
        position: ArrayLike,
        velocity: ArrayLike = (0.0, 0.0, 0.0),
    ) -> int:
        """
        Append one particle.

        Args:
            position: (3,) position.
            velocity: (3,) velocity.

        Returns:
            Index of the new particle.
        """
        index = self.n_particles
        self.resize(index + 1)
        self.positions[index] = position
        self.velocities[index] = velocity
        return index

    def remove_particle(self, index: int) -> None:
        """
        Remove the particle at ``index``, shifting later particles down.

        Raises:
            IndexError: If index is out of range.
        """
        n = self.n_particles
        if not -n <= index < n:
            raise IndexError(f"Particle index {index} out of range for {n} particles")
        self.positions = Array3D(data=np.delete(self.positions.as_array(), index, axis=0))
        self.velocities = Array3D(data=np.delete(self.velocities.as_array(), index, axis=0))

    def copy(self) -> "Frame":
        """Create a deep copy of the frame. The cell is shared."""
        return Frame(
            positions=self.positions.copy(),
            velocities=self.velocities.copy(),
            cell=self.cell,
        )
