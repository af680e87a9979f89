"""Force and torque applied at a point."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .linalg import is_not_nan

__all__ = ["Wrench"]


def _nan3() -> np.ndarray:
    return np.full(3, np.nan)


def _vec3(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Wrench:
    """Force (N) and torque (Nm); NaN by default."""

    force: np.ndarray = field(default_factory=_nan3)
    torque: np.ndarray = field(default_factory=_nan3)

    def __post_init__(self) -> None:
        self.force = _vec3(self.force)
        self.torque = _vec3(self.torque)

    def set_nan(self) -> None:
        """Set every component to NaN."""
        self.force[:] = np.nan
        self.torque[:] = np.nan

    def set_zero(self) -> None:
        """Set every component to zero."""
        self.force[:] = 0.0
        self.torque[:] = 0.0

    def is_valid(self) -> bool:
        """Return False if any component is NaN."""
        return is_not_nan(self.force) and is_not_nan(self.torque)

    def __add__(self, other: "Wrench") -> "Wrench":
        """Component-wise sum; meaningful only in a common reference frame."""
        if not isinstance(other, Wrench):
            return NotImplemented
        return Wrench(self.force + other.force, self.torque + other.torque)

    def __sub__(self, other: "Wrench") -> "Wrench":
        """Component-wise difference; meaningful only in a common reference frame."""
        if not isinstance(other, Wrench):
            return NotImplemented
        return Wrench(self.force - other.force, self.torque - other.torque)