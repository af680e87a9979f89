"""Rigid 3D transformation with an optional 6x6 uncertainty."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .linalg import Quaternion

__all__ = ["TransformWithCovariance"]


def _zeros3() -> np.ndarray:
    return np.zeros(3)


def _nan_cov() -> np.ndarray:
    return np.full((6, 6), np.nan)


def _as_shape(values, shape) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.shape != shape:
        raise ValueError(f"expected shape {shape}, got {arr.shape}")
    return arr


def _skew(r) -> np.ndarray:
    return np.array(
        [
            [0.0, -r[2], r[1]],
            [r[2], 0.0, -r[0]],
            [-r[1], r[0], 0.0],
        ]
    )


def _vec(q: Quaternion) -> np.ndarray:
    return np.array([q.x, q.y, q.z], dtype=float)


def _sign(v: float) -> float:
    return 1.0 if v > 0.0 else -1.0


def _q_to_r(q: Quaternion) -> np.ndarray:
    """Scaled-axis representation of a rotation."""
    angle, axis = q.to_angle_axis()
    return np.asarray(axis, dtype=float) * angle


def _blocks(a, b, c, d) -> np.ndarray:
    return np.block([[a, b], [c, d]])


# The uncertainty propagation follows Pennec and Thirion, "A framework for
# uncertainty and validation of 3-D registration methods based on points
# and frames" (1997), using the approximations given there.


def _dq_by_dr(q: Quaternion) -> np.ndarray:
    r = _q_to_r(q)
    theta = float(np.linalg.norm(r))
    kappa = 0.5 - theta * theta / 48.0
    lam = 1.0 / 24.0 * (1.0 - theta * theta / 40.0)
    res = np.empty((4, 3))
    res[0] = -_vec(q) / 2.0
    res[1:] = kappa * np.eye(3) - lam * np.outer(r, r)
    return res


def _dr_by_dq(q: Quaternion) -> np.ndarray:
    v = _vec(q)
    mu = float(np.linalg.norm(v))
    tau = 2.0 * _sign(q.w) * (1.0 + mu * mu / 6.0)
    nu = -2.0 * _sign(q.w) * (2.0 / 3.0 + mu * mu / 5.0)
    res = np.empty((3, 4))
    res[:, 0] = -2.0 * v
    res[:, 1:] = tau * np.eye(3) + nu * np.outer(v, v)
    return res


def _dq2q1_by_dq1(q2: Quaternion) -> np.ndarray:
    v = _vec(q2)
    res = np.zeros((4, 4))
    res[0, 1:] = -v
    res[1:, 0] = v
    res[1:, 1:] = _skew(v)
    return np.eye(4) * q2.w + res


def _dq2q1_by_dq2(q1: Quaternion) -> np.ndarray:
    v = _vec(q1)
    res = np.zeros((4, 4))
    res[0, 1:] = -v
    res[1:, 0] = v
    res[1:, 1:] = -_skew(v)
    return np.eye(4) * q1.w + res


def _dr2r1_by_r1(q: Quaternion, q1: Quaternion, q2: Quaternion) -> np.ndarray:
    return _dr_by_dq(q) @ _dq2q1_by_dq1(q2) @ _dq_by_dr(q1)


def _dr2r1_by_r2(q: Quaternion, q1: Quaternion, q2: Quaternion) -> np.ndarray:
    return _dr_by_dq(q) @ _dq2q1_by_dq2(q1) @ _dq_by_dr(q2)


def _drx_by_dr(q: Quaternion, x) -> np.ndarray:
    r = _q_to_r(q)
    x = np.asarray(x, dtype=float)
    theta = float(np.linalg.norm(r))
    t2 = theta * theta
    alpha = 1.0 - t2 / 6.0
    beta = 0.5 - t2 / 24.0
    gamma = 1.0 / 3.0 - t2 / 30.0
    delta = -1.0 / 12.0 + t2 / 180.0
    rrt = np.outer(r, r)
    eye = np.eye(3)
    return (
        -_skew(x) @ (gamma * rrt - beta * _skew(r) + alpha * eye)
        - _skew(r) @ _skew(x) @ (delta * rrt + 2.0 * beta * eye)
    )


def _rotation_of(linear: np.ndarray) -> np.ndarray:
    """Rotation part of a linear map (polar decomposition)."""
    u, _, vt = np.linalg.svd(linear)
    rot = u @ vt
    if np.linalg.det(rot) < 0.0:
        u[:, -1] *= -1.0
        rot = u @ vt
    return rot


@dataclass(eq=False)
class TransformWithCovariance:
    """A translation and orientation with the 6x6 covariance of their error.

    The covariance is ordered [translation, scaled-axis orientation]; an
    unset covariance is all NaN.
    """

    translation: np.ndarray = field(default_factory=_zeros3)
    orientation: Quaternion = field(default_factory=Quaternion.identity)
    cov: np.ndarray = field(default_factory=_nan_cov)

    def __post_init__(self) -> None:
        self.translation = _as_shape(self.translation, (3,))
        if not isinstance(self.orientation, Quaternion):
            raise TypeError("orientation must be a Quaternion")
        self.cov = _nan_cov() if self.cov is None else _as_shape(self.cov, (6, 6))

    @classmethod
    def from_affine(cls, matrix, cov=None) -> "TransformWithCovariance":
        """Build from a 4x4 homogeneous transform and an optional covariance."""
        result = cls(cov=cov)
        result.transform = matrix
        return result

    @classmethod
    def identity(cls) -> "TransformWithCovariance":
        """The identity transform with an unset covariance."""
        return cls()

    def composition(self, other: "TransformWithCovariance") -> "TransformWithCovariance":
        """Return ``self * other``."""
        return self * other

    def composition_inv(self, other: "TransformWithCovariance") -> "TransformWithCovariance":
        """Return ``result`` such that ``result * other == self``."""
        tf, t1 = self, other
        p2 = tf.translation + tf.orientation.rotate(t1.inverse().translation)
        q2 = tf.orientation * t1.orientation.inverse()

        if not t1.has_valid_covariance() and not tf.has_valid_covariance():
            return TransformWithCovariance(p2, q2)

        q1 = t1.orientation
        q = q2 * q1
        zero = np.zeros((3, 3))
        j1 = _blocks(q2.rotation_matrix(), zero, zero, _dr2r1_by_r1(q, q1, q2))
        j2 = _blocks(np.eye(3), _drx_by_dr(q2, t1.translation), zero, _dr2r1_by_r2(q, q1, q2))
        cov = (
            np.linalg.inv(j2)
            @ (tf.cov - j1 @ t1.cov @ j1.T)
            @ np.linalg.inv(j2.T)
        )
        return TransformWithCovariance(p2, q2, cov)

    def pre_composition_inv(self, other: "TransformWithCovariance") -> "TransformWithCovariance":
        """Return ``result`` such that ``other * result == self``."""
        tf, t2 = self, other
        q2_inv = t2.orientation.inverse()
        p1 = t2.inverse().translation + q2_inv.rotate(tf.translation)
        q1 = q2_inv * tf.orientation

        if not t2.has_valid_covariance() and not tf.has_valid_covariance():
            return TransformWithCovariance(p1, q1)

        q2 = t2.orientation
        q = q2 * q1
        zero = np.zeros((3, 3))
        j1 = _blocks(q2.rotation_matrix(), zero, zero, _dr2r1_by_r1(q, q1, q2))
        j2 = _blocks(np.eye(3), _drx_by_dr(q2, p1), zero, _dr2r1_by_r2(q, q1, q2))
        cov = (
            np.linalg.inv(j1)
            @ (tf.cov - j2 @ t2.cov @ j2.T)
            @ np.linalg.inv(j1.T)
        )
        return TransformWithCovariance(p1, q1, cov)

    def __mul__(self, other):
        """Compose: the result maps through ``other`` first, then ``self``."""
        if not isinstance(other, TransformWithCovariance):
            return NotImplemented
        t2, t1 = self, other
        q1, q2 = t1.orientation, t2.orientation
        q = q2 * q1
        p = t2.translation + q2.rotate(t1.translation)

        t1_valid = t1.has_valid_covariance()
        t2_valid = t2.has_valid_covariance()
        if not t1_valid and not t2_valid:
            return TransformWithCovariance(p, q)

        zero = np.zeros((3, 3))
        cov = np.zeros((6, 6))
        if t1_valid:
            j1 = _blocks(q2.rotation_matrix(), zero, zero, _dr2r1_by_r1(q, q1, q2))
            cov += j1 @ t1.cov @ j1.T
        if t2_valid:
            j2 = _blocks(np.eye(3), _drx_by_dr(q2, t1.translation), zero, _dr2r1_by_r2(q, q1, q2))
            cov += j2 @ t2.cov @ j2.T
        return TransformWithCovariance(p, q, cov)

    def compose_point_with_covariance(self, point, cov) -> tuple[np.ndarray, np.ndarray]:
        """Transform a point with 3x3 covariance; return ``(point, covariance)``."""
        point = _as_shape(point, (3,))
        cov = _as_shape(cov, (3, 3))
        rot = self.orientation.rotation_matrix()
        q = Quaternion.from_rotation_matrix(rot)
        jac = np.hstack((np.eye(3), _drx_by_dr(q, point)))
        point_cov = jac @ self.cov @ jac.T + rot @ cov @ rot.T
        return rot @ point + self.translation, point_cov

    def inverse(self) -> "TransformWithCovariance":
        q_inv = self.orientation.inverse()
        translation = -q_inv.rotate(self.translation)
        if not self.has_valid_covariance():
            return TransformWithCovariance(translation, q_inv)
        q = self.orientation
        jac = _blocks(
            q.rotation_matrix().T,
            _drx_by_dr(q.inverse(), self.translation),
            np.zeros((3, 3)),
            np.eye(3),
        )
        return TransformWithCovariance(translation, q_inv, jac @ self.cov @ jac.T)

    @property
    def transform(self) -> np.ndarray:
        """The 4x4 homogeneous transformation matrix."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.orientation.rotation_matrix()
        matrix[:3, 3] = self.translation
        return matrix

    @transform.setter
    def transform(self, matrix) -> None:
        m = _as_shape(matrix, (4, 4))
        self.translation = m[:3, 3].copy()
        self.orientation = Quaternion.from_rotation_matrix(_rotation_of(m[:3, :3]))

    @property
    def translation_cov(self) -> np.ndarray:
        return self.cov[:3, :3].copy()

    @translation_cov.setter
    def translation_cov(self, value) -> None:
        self.cov[:3, :3] = _as_shape(value, (3, 3))

    @property
    def orientation_cov(self) -> np.ndarray:
        return self.cov[3:, 3:].copy()

    @orientation_cov.setter
    def orientation_cov(self, value) -> None:
        self.cov[3:, 3:] = _as_shape(value, (3, 3))

    def has_valid_transform(self) -> bool:
        """Return True if neither translation nor orientation contains NaN."""
        return not bool(np.isnan(self.translation).any()) and not self.orientation.has_nan()

    def invalidate_transform(self) -> None:
        self.translation = np.full(3, np.nan)
        self.orientation = Quaternion(np.nan, np.nan, np.nan, np.nan)

    def has_valid_covariance(self) -> bool:
        """Return True if the covariance contains no NaN."""
        return not bool(np.isnan(self.cov).any())

    def invalidate_covariance(self) -> None:
        self.cov = _nan_cov()

    def __str__(self) -> str:
        angle, axis = self.orientation.to_angle_axis()
        pose = np.concatenate((self.translation, np.asarray(axis, dtype=float) * angle))
        lines = []
        for value, row in zip(pose, self.cov):
            entries = "".join("%.5f\t" % entry for entry in row)
            lines.append("%.5f\t|%s\n" % (value, entries))
        return "".join(lines)