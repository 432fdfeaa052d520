"""Quaternion helpers and static frame conversions (NED/ENU, aircraft/base_link, ECEF/ENU).

Quaternions are numpy arrays ordered ``[w, x, y, z]``. Rotations follow the
yaw-pitch-roll (ZYX) convention: yaw first, pitch second, roll third.
"""

from __future__ import annotations

import enum
import math

import numpy as np

_DEG_TO_RAD = math.pi / 180.0


class StaticTF(enum.Enum):
    """Kind of static frame conversion."""

    NED_TO_ENU = enum.auto()
    ENU_TO_NED = enum.auto()
    AIRCRAFT_TO_BASELINK = enum.auto()
    BASELINK_TO_AIRCRAFT = enum.auto()
    ECEF_TO_ENU = enum.auto()
    ENU_TO_ECEF = enum.auto()


_NED_ENU = (StaticTF.NED_TO_ENU, StaticTF.ENU_TO_NED)
_AIRCRAFT = (StaticTF.AIRCRAFT_TO_BASELINK, StaticTF.BASELINK_TO_AIRCRAFT)


def quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Build a quaternion from roll, pitch and yaw in radians (ZYX order)."""
    cr, sr = math.cos(roll / 2.0), math.sin(roll / 2.0)
    cp, sp = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
    cy, sy = math.cos(yaw / 2.0), math.sin(yaw / 2.0)
    return np.array(
        [
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        ]
    )


def quaternion_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b`` of two quaternions."""
    aw, ax, ay, az = (float(v) for v in a)
    bw, bx, by, bz = (float(v) for v in b)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def quaternion_to_rotation_matrix(q) -> np.ndarray:
    """Rotation matrix of a quaternion (the quaternion is not normalised first)."""
    w, x, y, z = (float(v) for v in q)
    tx, ty, tz = 2.0 * x, 2.0 * y, 2.0 * z
    twx, twy, twz = tx * w, ty * w, tz * w
    txx, txy, txz = tx * x, ty * x, tz * x
    tyy, tyz, tzz = ty * y, tz * y, tz * z
    return np.array(
        [
            [1.0 - (tyy + tzz), txy - twz, txz + twy],
            [txy + twz, 1.0 - (txx + tzz), tyz - twx],
            [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
        ]
    )


def _normalized(q) -> np.ndarray:
    arr = np.asarray(q, dtype=float)
    return arr / np.linalg.norm(arr)


def quaternion_to_rpy(q) -> np.ndarray:
    """Return ``[roll, pitch, yaw]`` of a quaternion; yaw lies in ``[0, pi]``."""
    m = quaternion_to_rotation_matrix(q)
    first = math.atan2(m[1, 0], m[0, 0])
    c2 = math.hypot(m[2, 2], m[2, 1])
    if first < 0.0:
        first += math.pi
        second = math.atan2(-m[2, 0], -c2)
    else:
        second = math.atan2(-m[2, 0], c2)
    s1, c1 = math.sin(first), math.cos(first)
    third = math.atan2(s1 * m[0, 2] - c1 * m[1, 2], c1 * m[1, 1] - s1 * m[0, 1])
    return np.array([third, second, first])


def quaternion_get_yaw(q) -> float:
    """Yaw angle of a quaternion in ``(-pi, pi]``."""
    q0, q1, q2, q3 = (float(v) for v in q)
    return math.atan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3))


_NED_ENU_Q = quaternion_from_rpy(math.pi, 0.0, math.pi / 2.0)
_AIRCRAFT_BASELINK_Q = quaternion_from_rpy(math.pi, 0.0, 0.0)
_AIRCRAFT_BASELINK_AFFINE = quaternion_to_rotation_matrix(_AIRCRAFT_BASELINK_Q)
_AIRCRAFT_BASELINK_R = quaternion_to_rotation_matrix(_normalized(_AIRCRAFT_BASELINK_Q))

# NED <-> ENU uses reflections rather than rotations to keep the axes exact.
_NED_ENU_REFLECTION_XY = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
_NED_ENU_REFLECTION_Z = np.diag([1.0, 1.0, -1.0])


def _unsupported(transform: StaticTF) -> ValueError:
    return ValueError(f"transform {transform.name} is not supported here")


def transform_orientation(q, transform: StaticTF) -> np.ndarray:
    """Change the frame an attitude quaternion is expressed in."""
    if transform in _NED_ENU:
        return quaternion_multiply(_NED_ENU_Q, q)
    if transform in _AIRCRAFT:
        return quaternion_multiply(q, _AIRCRAFT_BASELINK_Q)
    raise _unsupported(transform)


def transform_static_frame(vec, transform: StaticTF) -> np.ndarray:
    """Convert a 3-vector between NED/ENU or aircraft/base_link frames."""
    v = np.asarray(vec, dtype=float).reshape(3)
    if transform in _NED_ENU:
        return _NED_ENU_REFLECTION_XY @ (_NED_ENU_REFLECTION_Z @ v)
    if transform in _AIRCRAFT:
        return _AIRCRAFT_BASELINK_AFFINE @ v
    raise _unsupported(transform)


def _as_square(cov) -> tuple[np.ndarray, tuple[int, ...]]:
    arr = np.asarray(cov, dtype=float)
    size = arr.size
    if size not in (9, 36, 81):
        raise ValueError(f"covariance must hold 9, 36 or 81 values, got {size}")
    n = math.isqrt(size)
    return arr.reshape(n, n), arr.shape


def _block_diag(block: np.ndarray, count: int) -> np.ndarray:
    return np.kron(np.eye(count), block)


def transform_static_covariance(cov, transform: StaticTF) -> np.ndarray:
    """Convert a 3x3, 6x6 or 9x9 covariance (flat row-major or square) between static frames.

    The result has the same shape as the input.
    """
    m, shape = _as_square(cov)
    blocks = m.shape[0] // 3
    if transform in _NED_ENU:
        perm = _block_diag(_NED_ENU_REFLECTION_XY, blocks)
        refl = _block_diag(_NED_ENU_REFLECTION_Z, blocks)
        out = perm @ (refl @ m @ refl) @ perm.T
    elif transform in _AIRCRAFT:
        if blocks == 1:
            out = m @ quaternion_to_rotation_matrix(_AIRCRAFT_BASELINK_Q)
        else:
            r = _block_diag(_AIRCRAFT_BASELINK_R, blocks)
            out = r @ m @ r.T
    else:
        raise _unsupported(transform)
    return out.reshape(shape)


def transform_ecef_enu(vec, map_origin, transform: StaticTF) -> np.ndarray:
    """Rotate a local offset between ECEF and ENU around ``map_origin`` (lat, lon in degrees)."""
    v = np.asarray(vec, dtype=float).reshape(3)
    origin = np.asarray(map_origin, dtype=float).reshape(3)
    lat = origin[0] * _DEG_TO_RAD
    lon = origin[1] * _DEG_TO_RAD
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    sin_lon, cos_lon = math.sin(lon), math.cos(lon)
    r = np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-cos_lon * sin_lat, -sin_lon * sin_lat, cos_lat],
            [cos_lon * cos_lat, sin_lon * cos_lat, sin_lat],
        ]
    )
    if transform is StaticTF.ECEF_TO_ENU:
        return r @ v
    if transform is StaticTF.ENU_TO_ECEF:
        return r.T @ v
    raise _unsupported(transform)


def transform_frame(vec, q) -> np.ndarray:
    """Rotate a 3-vector by quaternion ``q``."""
    v = np.asarray(vec, dtype=float).reshape(3)
    return quaternion_to_rotation_matrix(q) @ v


def transform_covariance(cov, q) -> np.ndarray:
    """Rotate a 3x3, 6x6 or 9x9 covariance by quaternion ``q``; the input shape is kept."""
    m, shape = _as_square(cov)
    blocks = m.shape[0] // 3
    if blocks == 1:
        out = m @ quaternion_to_rotation_matrix(q)
    else:
        r = _block_diag(quaternion_to_rotation_matrix(_normalized(q)), blocks)
        out = r @ m @ r.T
    return out.reshape(shape)