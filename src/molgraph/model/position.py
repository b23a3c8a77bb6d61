from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from molgraph._constants import POSITION_EPSILON


@dataclass(frozen=True)
class Position:
    """A point in three-dimensional space, in angstroms.

    Positions are immutable values: arithmetic returns a new
    ``Position``, and ``+=`` / ``/=`` rebind rather than mutate.

    Attributes:
        x: Cartesian x coordinate.
        y: Cartesian y coordinate.
        z: Cartesian z coordinate.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y, self.z + other.z)

    def __truediv__(self, scalar: float) -> Position:
        return Position(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Position:
        return Position(-self.x, -self.y, -self.z)

    def midpoint(self, other: Position) -> Position:
        """Point halfway between this position and *other*."""
        return Position(
            (self.x + other.x) / 2.0,
            (self.y + other.y) / 2.0,
            (self.z + other.z) / 2.0,
        )

    def distance_to(self, other: Position) -> float:
        """Euclidean distance to *other*.

        Non-finite coordinates propagate into the result.
        """
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def is_very_close_to(self, other: Position) -> bool:
        """Whether every component differs by less than ``1e-16``.

        The comparison is absolute, not relative, so it is only
        meaningful for telling whether two atoms sit at effectively
        the same coordinates.
        """
        return (
            abs(self.x - other.x) < POSITION_EPSILON
            and abs(self.y - other.y) < POSITION_EPSILON
            and abs(self.z - other.z) < POSITION_EPSILON
        )

    def as_array(self) -> np.ndarray:
        """Coordinates as a float array of shape ``(3,)``."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, coords: np.ndarray) -> Position:
        """Build a position from any length-3 sequence.

        Raises:
            ValueError: If *coords* does not hold exactly three values.
        """
        arr = np.asarray(coords, dtype=float)
        if arr.shape != (3,):
            raise ValueError(
                f"coords must have shape (3,), got {arr.shape}"
            )
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))
