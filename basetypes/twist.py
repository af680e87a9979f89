"""Spatial velocity of a rigid body as linear and angular components."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .linalg import is_not_nan

__all__ = ["Twist"]


def _nan3() -> np.ndarray:
    return np.full(3, np.nan)


def _vec3(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class Twist:
    """Linear velocity (m/s) and angular velocity (rad/s); NaN by default.

    Both vectors are in x-y-z order.
    """

    linear: np.ndarray = field(default_factory=_nan3)
    angular: np.ndarray = field(default_factory=_nan3)

    def __post_init__(self) -> None:
        self.linear = _vec3(self.linear)
        self.angular = _vec3(self.angular)

    def set_nan(self) -> None:
        """Set every component to NaN."""
        self.linear[:] = np.nan
        self.angular[:] = np.nan

    def set_zero(self) -> None:
        """Set every component to zero."""
        self.linear[:] = 0.0
        self.angular[:] = 0.0

    def is_valid(self) -> bool:
        """Return False if any component is NaN."""
        return is_not_nan(self.linear) and is_not_nan(self.angular)

    def __add__(self, other: "Twist") -> "Twist":
        """Component-wise sum; meaningful only in a common reference frame."""
        if not isinstance(other, Twist):
            return NotImplemented
        return Twist(self.linear + other.linear, self.angular + other.angular)

    def __sub__(self, other: "Twist") -> "Twist":
        """Component-wise difference; meaningful only in a common reference frame."""
        if not isinstance(other, Twist):
            return NotImplemented
        return Twist(self.linear - other.linear, self.angular - other.angular)