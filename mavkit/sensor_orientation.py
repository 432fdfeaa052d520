"""Names and rotations of MAV_SENSOR_ORIENTATION values."""

from __future__ import annotations

import logging
import math
import re

import numpy as np

from mavkit.transforms import quaternion_from_rpy

_log = logging.getLogger("mavkit.uas")

_DEG_TO_RAD = math.pi / 180.0

# name, roll, pitch, yaw (degrees)
_ORIENTATIONS_DEG = (
    ("NONE", 0.0, 0.0, 0.0),
    ("YAW_45", 0.0, 0.0, 45.0),
    ("YAW_90", 0.0, 0.0, 90.0),
    ("YAW_135", 0.0, 0.0, 135.0),
    ("YAW_180", 0.0, 0.0, 180.0),
    ("YAW_225", 0.0, 0.0, 225.0),
    ("YAW_270", 0.0, 0.0, 270.0),
    ("YAW_315", 0.0, 0.0, 315.0),
    ("ROLL_180", 180.0, 0.0, 0.0),
    ("ROLL_180_YAW_45", 180.0, 0.0, 45.0),
    ("ROLL_180_YAW_90", 180.0, 0.0, 90.0),
    ("ROLL_180_YAW_135", 180.0, 0.0, 135.0),
    ("PITCH_180", 0.0, 180.0, 0.0),
    ("ROLL_180_YAW_225", 180.0, 0.0, 225.0),
    ("ROLL_180_YAW_270", 180.0, 0.0, 270.0),
    ("ROLL_180_YAW_315", 180.0, 0.0, 315.0),
    ("ROLL_90", 90.0, 0.0, 0.0),
    ("ROLL_90_YAW_45", 90.0, 0.0, 45.0),
    ("ROLL_90_YAW_90", 90.0, 0.0, 90.0),
    ("ROLL_90_YAW_135", 90.0, 0.0, 135.0),
    ("ROLL_270", 270.0, 0.0, 0.0),
    ("ROLL_270_YAW_45", 270.0, 0.0, 45.0),
    ("ROLL_270_YAW_90", 270.0, 0.0, 90.0),
    ("ROLL_270_YAW_135", 270.0, 0.0, 135.0),
    ("PITCH_90", 0.0, 90.0, 0.0),
    ("PITCH_270", 0.0, 270.0, 0.0),
    ("PITCH_180_YAW_90", 0.0, 180.0, 90.0),
    ("PITCH_180_YAW_270", 0.0, 180.0, 270.0),
    ("ROLL_90_PITCH_90", 90.0, 90.0, 0.0),
    ("ROLL_180_PITCH_90", 180.0, 90.0, 0.0),
    ("ROLL_270_PITCH_90", 270.0, 90.0, 0.0),
    ("ROLL_90_PITCH_180", 90.0, 180.0, 0.0),
    ("ROLL_270_PITCH_180", 270.0, 180.0, 0.0),
    ("ROLL_90_PITCH_270", 90.0, 270.0, 0.0),
    ("ROLL_180_PITCH_270", 180.0, 270.0, 0.0),
    ("ROLL_270_PITCH_270", 270.0, 270.0, 0.0),
    ("ROLL_90_PITCH_180_YAW_90", 90.0, 180.0, 90.0),
    ("ROLL_90_YAW_270", 90.0, 0.0, 270.0),
    ("ROLL_90_PITCH_68_YAW_293", 90.0, 68.0, 293.0),
    ("PITCH_315", 0.0, 315.0, 0.0),
    ("ROLL_90_PITCH_315", 90.0, 315.0, 0.0),
    ("CUSTOM", 0.0, 0.0, 0.0),
)

_NAMES = tuple(name for name, *_ in _ORIENTATIONS_DEG)
_ROTATIONS = tuple(
    quaternion_from_rpy(r * _DEG_TO_RAD, p * _DEG_TO_RAD, y * _DEG_TO_RAD)
    for _, r, p, y in _ORIENTATIONS_DEG
)

_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_c_int(text: str) -> int | None:
    """Parse a leading integer the way a base-0 C conversion does; None if there is none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    if sign == "-":
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"orientation index out of int range: {text!r}")
    return value


def sensor_orientation_to_string(index: int) -> str:
    """Name of an orientation table index; out-of-range indices come back as their number."""
    idx = int(index)
    if 0 <= idx < len(_NAMES):
        return _NAMES[idx]
    _log.error("SENSOR: wrong orientation index: %d", idx)
    return str(idx)


def sensor_orientation_matching(index: int) -> np.ndarray:
    """Rotation quaternion ``[w, x, y, z]`` of an orientation; identity when out of range."""
    idx = int(index)
    if 0 <= idx < len(_ROTATIONS):
        return _ROTATIONS[idx].copy()
    _log.error("SENSOR: wrong orientation index: %d", idx)
    return np.array([1.0, 0.0, 0.0, 0.0])


def sensor_orientation_from_str(text: str) -> int:
    """Find an orientation index by name or number; -1 if it cannot be found."""
    try:
        return _NAMES.index(text)
    except ValueError:
        pass

    idx = _parse_c_int(text)
    if idx is not None:
        if idx < 0 or idx > len(_NAMES):
            _log.error("SENSOR: orientation index out of bound: %d", idx)
            return -1
        return idx

    _log.error("SENSOR: wrong orientation str: %s", text)
    return -1