"""Command structures shared by motion controllers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .floats import unset
from .time_value import Time

__all__ = ["LinearAngular6DCommand", "Speed6D"]


def _unset3() -> np.ndarray:
    return np.full(3, unset())


def _vec3(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {arr.shape}")
    return arr


@dataclass(eq=False)
class LinearAngular6DCommand:
    """Common command for all controller types, in all control frames.

    ``linear`` is (x, y, z) and ``angular`` is (roll, pitch, yaw); every
    component is unset (NaN) by default.
    """

    time: Time = field(default_factory=Time)
    linear: np.ndarray = field(default_factory=_unset3)
    angular: np.ndarray = field(default_factory=_unset3)

    def __post_init__(self) -> None:
        self.linear = _vec3(self.linear)
        self.angular = _vec3(self.angular)

    @property
    def x(self) -> float:
        return float(self.linear[0])

    @x.setter
    def x(self, value: float) -> None:
        self.linear[0] = value

    @property
    def y(self) -> float:
        return float(self.linear[1])

    @y.setter
    def y(self, value: float) -> None:
        self.linear[1] = value

    @property
    def z(self) -> float:
        return float(self.linear[2])

    @z.setter
    def z(self, value: float) -> None:
        self.linear[2] = value

    @property
    def roll(self) -> float:
        return float(self.angular[0])

    @roll.setter
    def roll(self, value: float) -> None:
        self.angular[0] = value

    @property
    def pitch(self) -> float:
        return float(self.angular[1])

    @pitch.setter
    def pitch(self, value: float) -> None:
        self.angular[1] = value

    @property
    def yaw(self) -> float:
        return float(self.angular[2])

    @yaw.setter
    def yaw(self, value: float) -> None:
        self.angular[2] = value


@dataclass
class Speed6D:
    """Speed command for 6-dof vehicles such as AUVs.

    Linear speeds are in m/s, rotations in rad/s:
    surge forward, sway rightward, heave downward; positive roll rolls to
    the right, positive pitch raises the nose, positive yaw turns right.
    """

    surge: float = 0.0
    sway: float = 0.0
    heave: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0