"""Linear and angular velocity with an associated 6x6 covariance."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real

import numpy as np

__all__ = ["TwistWithCovariance"]


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _nan_cov() -> np.ndarray:
    return np.full((6, 6), np.nan)


def _as_shape(values, shape) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != shape:
        raise ValueError(f"expected shape {shape}, got {arr.shape}")
    return arr


def _skew(v) -> np.ndarray:
    return np.array(
        [
            [0.0, -v[2], v[1]],
            [v[2], 0.0, -v[0]],
            [-v[1], v[0], 0.0],
        ]
    )


def _block_diag(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    out = np.zeros((6, 6))
    out[:3, :3] = a
    out[3:, 3:] = b
    return out


@dataclass(eq=False)
class TwistWithCovariance:
    """Velocity ``vel`` (m/s), rotation rate ``rot`` (rad/s) and covariance ``cov``.

    The covariance is ordered [linear, angular]; an unset covariance is all NaN.
    """

    vel: np.ndarray = field(default_factory=_zeros3)
    rot: np.ndarray = field(default_factory=_zeros3)
    cov: np.ndarray = field(default_factory=_nan_cov)

    def __post_init__(self) -> None:
        self.vel = _as_shape(self.vel, (3,))
        self.rot = _as_shape(self.rot, (3,))
        self.cov = _nan_cov() if self.cov is None else _as_shape(self.cov, (6, 6))

    @classmethod
    def from_velocity(cls, velocity, cov) -> "TwistWithCovariance":
        """Build from a 6-vector [linear, angular] and its covariance."""
        twist = cls(cov=cov)
        twist.velocity = velocity
        return twist

    @classmethod
    def zero(cls) -> "TwistWithCovariance":
        """Zero velocity with an unset covariance."""
        return cls()

    def _copy(self) -> "TwistWithCovariance":
        return TwistWithCovariance(self.vel, self.rot, self.cov)

    @property
    def velocity(self) -> np.ndarray:
        """The 6-vector [linear, angular]."""
        return np.concatenate((self.vel, self.rot))

    @velocity.setter
    def velocity(self, value) -> None:
        arr = _as_shape(value, (6,))
        self.vel = arr[:3].copy()
        self.rot = arr[3:].copy()

    @property
    def linear_velocity_cov(self) -> np.ndarray:
        return self.cov[:3, :3].copy()

    @linear_velocity_cov.setter
    def linear_velocity_cov(self, value) -> None:
        self.cov[:3, :3] = _as_shape(value, (3, 3))

    @property
    def angular_velocity_cov(self) -> np.ndarray:
        return self.cov[3:, 3:].copy()

    @angular_velocity_cov.setter
    def angular_velocity_cov(self, value) -> None:
        self.cov[3:, 3:] = _as_shape(value, (3, 3))

    def has_valid_velocity(self) -> bool:
        """Return True if every velocity entry is finite."""
        return bool(np.isfinite(self.vel).all() and np.isfinite(self.rot).all())

    def invalidate_velocity(self) -> None:
        self.vel = np.full(3, np.nan)
        self.rot = np.full(3, np.nan)

    def has_valid_covariance(self) -> bool:
        """Return True if every covariance entry is finite."""
        return bool(np.isfinite(self.cov).all())

    def invalidate_covariance(self) -> None:
        self.cov = _nan_cov()

    def invalidate(self) -> None:
        self.invalidate_velocity()
        self.invalidate_covariance()

    @staticmethod
    def cross_jacobian(u, v) -> np.ndarray:
        """Return the 3x6 matrix ``[skew(u), skew(v)]``."""
        return np.hstack((_skew(np.asarray(u, dtype=float)), _skew(np.asarray(v, dtype=float))))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < 6:
            raise IndexError(f"twist index {index} out of range 0..5")

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return float(self.vel[index]) if index < 3 else float(self.rot[index - 3])

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        if index < 3:
            self.vel[index] = value
        else:
            self.rot[index - 3] = value

    def __iadd__(self, other: "TwistWithCovariance") -> "TwistWithCovariance":
        if not isinstance(other, TwistWithCovariance):
            return NotImplemented
        self.vel = self.vel + other.vel
        self.rot = self.rot + other.rot
        if self.has_valid_covariance() and other.has_valid_covariance():
            self.cov = self.cov + other.cov
        return self

    def __add__(self, other: "TwistWithCovariance") -> "TwistWithCovariance":
        if not isinstance(other, TwistWithCovariance):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __isub__(self, other: "TwistWithCovariance") -> "TwistWithCovariance":
        if not isinstance(other, TwistWithCovariance):
            return NotImplemented
        self.vel = self.vel - other.vel
        self.rot = self.rot - other.rot
        if self.has_valid_covariance() and other.has_valid_covariance():
            # Uncertainties add up for a difference as well.
            self.cov = self.cov + other.cov
        return self

    def __sub__(self, other: "TwistWithCovariance") -> "TwistWithCovariance":
        if not isinstance(other, TwistWithCovariance):
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def _scaled(self, factor: float) -> "TwistWithCovariance":
        if not self.has_valid_covariance():
            return TwistWithCovariance(self.vel * factor, self.rot * factor)
        return TwistWithCovariance(
            self.vel * factor, self.rot * factor, (factor * factor) * self.cov
        )

    def _spatial_cross(self, rhs: "TwistWithCovariance") -> "TwistWithCovariance":
        lhs = self
        result = TwistWithCovariance(
            np.cross(lhs.rot, rhs.vel) + np.cross(lhs.vel, rhs.rot),
            np.cross(lhs.rot, rhs.rot),
        )
        if lhs.has_valid_covariance() and rhs.has_valid_covariance():
            cov = np.zeros((6, 6))
            jac = self.cross_jacobian(lhs.rot, rhs.vel)
            block = _block_diag(lhs.cov[3:, 3:], rhs.cov[:3, :3])
            cov[:3, :3] = jac @ block @ jac.T
            jac = self.cross_jacobian(lhs.vel, rhs.rot)
            block = _block_diag(lhs.cov[:3, :3], rhs.cov[3:, 3:])
            cov[:3, :3] += jac @ block @ jac.T
            jac = self.cross_jacobian(lhs.rot, rhs.rot)
            block = _block_diag(lhs.cov[3:, 3:], rhs.cov[3:, 3:])
            cov[3:, 3:] = jac @ block @ jac.T
            result.cov = cov
        return result

    def __mul__(self, other):
        """Scale by a number, or take the spatial cross product with a twist."""
        if isinstance(other, TwistWithCovariance):
            return self._spatial_cross(other)
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self._scaled(float(other))
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        divisor = float(other)
        return TwistWithCovariance(
            self.vel / divisor, self.rot / divisor, (1.0 / (divisor * divisor)) * self.cov
        )

    def __neg__(self) -> "TwistWithCovariance":
        return TwistWithCovariance(-self.vel, -self.rot, self.cov)

    def __str__(self) -> str:
        lines = []
        for i, value in enumerate(self.velocity):
            row = "".join("%.5f\t" % entry for entry in self.cov[i])
            lines.append("%.5f\t|%s\n" % (value, row))
        return "".join(lines)