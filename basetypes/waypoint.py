"""A position associated with a heading and tolerances."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .floats import unknown

__all__ = ["Waypoint"]


def _unit_x() -> np.ndarray:
    return np.array([1.0, 0.0, 0.0])


@dataclass(eq=False)
class Waypoint:
    """Position (x, y, z), heading in radians and their tolerances.

    The default position is (1, 0, 0); everything else defaults to zero.
    """

    position: np.ndarray = field(default_factory=_unit_x)
    heading: float = 0.0
    tol_position: float = 0.0
    tol_heading: float = 0.0

    def __post_init__(self) -> None:
        position = np.array(self.position, dtype=float)
        if position.shape != (3,):
            raise ValueError(f"expected a 3-vector position, got shape {position.shape}")
        self.position = position

    @classmethod
    def unknown(cls) -> "Waypoint":
        """Return a waypoint whose every value is unknown (NaN)."""
        return cls(np.full(3, unknown()), unknown(), unknown(), unknown())

    def has_valid_position(self) -> bool:
        """Return True if every position entry is finite."""
        return bool(np.isfinite(self.position).all())