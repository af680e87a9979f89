"""Small linear-algebra helpers: NaN checks, SPD repair and quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

__all__ = ["is_not_nan", "is_finite", "guarantee_spd", "Quaternion"]


def is_not_nan(x) -> bool:
    """Return True if no entry of ``x`` is NaN."""
    arr = np.asarray(x, dtype=float)
    return bool(np.all(arr == arr))


def is_finite(x) -> bool:
    """Return True if every entry of ``x`` is finite."""
    arr = np.asarray(x, dtype=float)
    with np.errstate(invalid="ignore"):
        return is_not_nan(arr - arr)


def guarantee_spd(a, min_eig: float = 0.0) -> np.ndarray:
    """Return a symmetric positive semi-definite version of ``a``.

    Only the lower triangular part of ``a`` is considered. Eigenvalues
    below ``min_eig`` are raised to ``min_eig``.
    """
    matrix = np.asarray(a, dtype=float)
    values, vectors = np.linalg.eigh(matrix, UPLO="L")
    values = np.maximum(values, min_eig)
    return (vectors * values) @ vectors.T


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk`` used to represent rotations."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_angle_axis(cls, angle: float, axis) -> "Quaternion":
        """Build the rotation of ``angle`` radians about the unit vector ``axis``."""
        ax = np.asarray(axis, dtype=float)
        half = 0.5 * angle
        s = math.sin(half)
        return cls(math.cos(half), s * ax[0], s * ax[1], s * ax[2])

    @classmethod
    def from_rotation_matrix(cls, matrix) -> "Quaternion":
        """Build the quaternion of a 3x3 rotation matrix."""
        m = np.asarray(matrix, dtype=float)
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            t = math.sqrt(trace + 1.0)
            w = 0.5 * t
            t = 0.5 / t
            return cls(
                w,
                (m[2, 1] - m[1, 2]) * t,
                (m[0, 2] - m[2, 0]) * t,
                (m[1, 0] - m[0, 1]) * t,
            )
        i = 0
        if m[1, 1] > m[0, 0]:
            i = 1
        if m[2, 2] > m[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3
        t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
        vec = [0.0, 0.0, 0.0]
        vec[i] = 0.5 * t
        t = 0.5 / t
        w = (m[k, j] - m[j, k]) * t
        vec[j] = (m[j, i] + m[i, j]) * t
        vec[k] = (m[k, i] + m[i, k]) * t
        return cls(w, *vec)

    def _vec(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def _coeffs(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    def rotation_matrix(self) -> np.ndarray:
        """Return the 3x3 rotation matrix of this quaternion."""
        tx, ty, tz = 2.0 * self.x, 2.0 * self.y, 2.0 * self.z
        twx, twy, twz = tx * self.w, ty * self.w, tz * self.w
        txx, txy, txz = tx * self.x, ty * self.x, tz * self.x
        tyy, tyz, tzz = ty * self.y, tz * self.y, tz * self.z
        return np.array(
            [
                [1.0 - (tyy + tzz), txy - twz, txz + twy],
                [txy + twz, 1.0 - (txx + tzz), tyz - twx],
                [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
            ]
        )

    def inverse(self) -> "Quaternion":
        """Return the multiplicative inverse (zero if the norm is zero)."""
        n2 = self.w**2 + self.x**2 + self.y**2 + self.z**2
        if n2 > 0.0:
            return Quaternion(self.w / n2, -self.x / n2, -self.y / n2, -self.z / n2)
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    def to_angle_axis(self) -> tuple[float, np.ndarray]:
        """Return ``(angle, axis)`` with the angle in ``[0, pi]``."""
        vec = self._vec()
        n = float(np.linalg.norm(vec))
        if n != 0.0:
            angle = 2.0 * math.atan2(n, abs(self.w))
            axis = -vec / n if self.w < 0.0 else vec / n
            return angle, axis
        return 0.0, np.array([1.0, 0.0, 0.0])

    def rotate(self, vector) -> np.ndarray:
        """Rotate a 3-vector by this (unit) quaternion."""
        v = np.asarray(vector, dtype=float)
        vec = self._vec()
        uv = 2.0 * np.cross(vec, v)
        return v + self.w * uv + np.cross(vec, uv)

    def has_nan(self) -> bool:
        return any(math.isnan(c) for c in (self.w, self.x, self.y, self.z))

    def is_approx(self, other: "Quaternion", prec: float = 1e-12) -> bool:
        """Compare coefficients relative to the smaller of the two norms."""
        a = self._coeffs()
        b = other._coeffs()
        diff = float(np.linalg.norm(a - b))
        return diff <= prec * min(float(np.linalg.norm(a)), float(np.linalg.norm(b)))

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            w1, x1, y1, z1 = self.w, self.x, self.y, self.z
            w2, x2, y2, z2 = other.w, other.x, other.y, other.z
            return Quaternion(
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
                w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
            )
        if isinstance(other, (np.ndarray, list, tuple)):
            return self.rotate(other)
        return NotImplemented