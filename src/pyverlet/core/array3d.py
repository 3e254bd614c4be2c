"""
Resizable array of three-dimensional vectors.

This module provides the Array3D container used for every per-particle
vector quantity (positions, velocities, accelerations, forces).
"""
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Array3D:
    """
    Dense, resizable container of N three-dimensional vectors.

    Storage is a contiguous (N, 3) float64 NumPy array. Rows are indexed
    by particle, columns by spatial dimension. The container carries no
    physics; integrators and the System operate on it through
    ``as_array()`` for vectorized updates.

    Attributes:
        data: The underlying (N, 3) array. Replaced on resize, so callers
            should not hold on to it across a ``resize`` call.

    Example:
        >>> from pyverlet.core import Array3D
        >>> positions = Array3D(2)
        >>> positions[1] = [1.0, 2.0, 3.0]
        >>> positions.resize(3)
        >>> len(positions)
        3
    """

    def __init__(
        self, size: Optional[int] = None, data: Optional[ArrayLike] = None
    ) -> None:
        """
        Create an array of ``size`` zero vectors, or wrap existing data.

        Args:
            size: Number of vectors; 0 when omitted. When ``data`` is also
                given it must equal the number of rows in ``data``.
            data: Optional (N, 3) array-like to copy from.

        Raises:
            ValueError: If size is negative, data is not (N, 3), or size
                and data disagree on the length.
        """
        if data is not None:
            array = np.array(data, dtype=np.float64)
            if array.ndim == 1 and array.size == 0:
                array = array.reshape(0, 3)
            if array.ndim != 2 or array.shape[1] != 3:
                raise ValueError(
                    f"Array3D data must be an (N, 3) array, got shape {array.shape}"
                )
            if size is not None and size != array.shape[0]:
                raise ValueError(
                    f"Array3D size {size} does not match data with "
                    f"{array.shape[0]} vectors"
                )
            self.data: NDArray[np.float64] = np.ascontiguousarray(array)
        else:
            if size is None:
                size = 0
            if size < 0:
                raise ValueError(f"Array3D size must be non-negative, got {size}")
            self.data = np.zeros((size, 3), dtype=np.float64)

    @classmethod
    def zeros(cls, size: int) -> "Array3D":
        """Return a new array of ``size`` zero vectors."""
        return cls(size)

    def __len__(self) -> int:
        return self.data.shape[0]

    def __getitem__(self, index: Union[int, slice]) -> NDArray[np.float64]:
        return self.data[index]

    def __setitem__(self, index: Union[int, slice], value: ArrayLike) -> None:
        self.data[index] = value

    def __iter__(self):
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Array3D(size={len(self)})"

    def as_array(self) -> NDArray[np.float64]:
        """
        Return the live (N, 3) view of the storage.

        Writes through the returned array mutate this container.
        """
        return self.data

    def resize(self, size: int) -> None:
        """
        Change the number of vectors.

        The first ``min(old, new)`` vectors are kept; any new vectors are
        zero. Resizing to the current length keeps the same storage.

        Args:
            size: New number of vectors.

        Raises:
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError(f"Array3D size must be non-negative, got {size}")
        current = len(self)
        if size == current:
            return
        new_data = np.zeros((size, 3), dtype=np.float64)
        keep = min(size, current)
        new_data[:keep] = self.data[:keep]
        self.data = new_data

    def zero(self) -> None:
        """Set every vector to (0, 0, 0) in place."""
        self.data.fill(0.0)

    def copy_from(self, other: Union["Array3D", ArrayLike]) -> None:
        """
        Overwrite this array element-wise with ``other``.

        Args:
            other: Array3D or (N, 3) array-like of the same length.

        Raises:
            ValueError: If the lengths differ.
        """
        source = other.data if isinstance(other, Array3D) else np.asarray(other)
        if source.shape != self.data.shape:
            raise ValueError(
                f"Cannot copy shape {source.shape} into Array3D of shape "
                f"{self.data.shape}"
            )
        np.copyto(self.data, source)

    def copy(self) -> "Array3D":
        """Return an independent copy."""
        return Array3D(data=self.data)

    def norms(self) -> NDArray[np.float64]:
        """Return the Euclidean norm of each vector as an (N,) array."""
        return np.linalg.norm(self.data, axis=1)
