"""Human-readable names for vehicle, autopilot, state and time-sync enumerations."""

from __future__ import annotations

import enum
import logging

_log = logging.getLogger("mavkit.uas")


class TimesyncMode(enum.IntEnum):
    """Time synchronisation mode between the FCU and the host."""

    NONE = 0
    MAVLINK = 1
    ONBOARD = 2
    PASSTHROUGH = 3


_MAV_AUTOPILOT_STRINGS = (
    "Generic autopilot",
    "Reserved for future use",
    "SLUGS autopilot",
    "ArduPilot",
    "OpenPilot",
    "Generic autopilot only supporting simple waypoints",
    "Generic autopilot supporting waypoints and other simple navigation commands",
    "Generic autopilot supporting the full mission command set",
    "No valid autopilot",
    "PPZ UAV",
    "UAV Dev Board",
    "FlexiPilot",
    "PX4 Autopilot",
    "SMACCMPilot",
    "AutoQuad",
    "Armazila",
    "Aerob",
    "ASLUAV autopilot",
    "SmartAP Autopilot",
    "AirRails",
)

_MAV_TYPE_STRINGS = (
    "Generic micro air vehicle",
    "Fixed wing aircraft",
    "Quadrotor",
    "Coaxial helicopter",
    "Normal helicopter with tail rotor",
    "Ground installation",
    "Operator control unit",
    "Airship",
    "Free balloon",
    "Rocket",
    "Ground rover",
    "Surface vessel",
    "Submarine",
    "Hexarotor",
    "Octorotor",
    "Tricopter",
    "Flapping wing",
    "Kite",
    "Onboard companion controller",
    "Two",
    "Quad",
    "Tiltrotor VTOL",
    "VTOL reserved 2",
    "VTOL reserved 3",
    "VTOL reserved 4",
    "VTOL reserved 5",
    "Onboard gimbal",
    "Onboard ADSB peripheral",
    "Steerable",
    "Dodecarotor",
    "Camera",
    "Charging station",
    "Onboard FLARM collision avoidance system",
)

_MAV_TYPE_NAMES = (
    "GENERIC",
    "FIXED_WING",
    "QUADROTOR",
    "COAXIAL",
    "HELICOPTER",
    "ANTENNA_TRACKER",
    "GCS",
    "AIRSHIP",
    "FREE_BALLOON",
    "ROCKET",
    "GROUND_ROVER",
    "SURFACE_BOAT",
    "SUBMARINE",
    "HEXAROTOR",
    "OCTOROTOR",
    "TRICOPTER",
    "FLAPPING_WING",
    "KITE",
    "ONBOARD_CONTROLLER",
    "VTOL_DUOROTOR",
    "VTOL_QUADROTOR",
    "VTOL_TILTROTOR",
    "VTOL_RESERVED2",
    "VTOL_RESERVED3",
    "VTOL_RESERVED4",
    "VTOL_RESERVED5",
    "GIMBAL",
    "ADSB",
    "PARAFOIL",
    "DODECAROTOR",
    "CAMERA",
    "CHARGING_STATION",
    "FLARM",
)

_MAV_STATE_STRINGS = (
    "Uninit",
    "Boot",
    "Calibrating",
    "Standby",
    "Active",
    "Critical",
    "Emergency",
    "Poweroff",
    "Flight_Termination",
)

_TIMESYNC_MODE_STRINGS = tuple(mode.name for mode in TimesyncMode)


def _lookup(table: tuple[str, ...], value: int) -> str:
    idx = int(value)
    if 0 <= idx < len(table):
        return table[idx]
    return str(idx)


def mav_autopilot_to_string(value: int) -> str:
    """Describe a MAV_AUTOPILOT value; unknown values come back as their number."""
    return _lookup(_MAV_AUTOPILOT_STRINGS, value)


def mav_type_to_string(value: int) -> str:
    """Describe a MAV_TYPE value; unknown values come back as their number."""
    return _lookup(_MAV_TYPE_STRINGS, value)


def mav_type_to_name(value: int) -> str:
    """Return the short enum name of a MAV_TYPE value."""
    return _lookup(_MAV_TYPE_NAMES, value)


def mav_type_from_str(name: str) -> int:
    """Find a MAV_TYPE by its short name; unknown names give GENERIC (0)."""
    try:
        return _MAV_TYPE_NAMES.index(name)
    except ValueError:
        _log.error("TYPE: Unknown MAV_TYPE: %s", name)
        return 0


def mav_state_to_string(value: int) -> str:
    """Describe a MAV_STATE value; unknown values come back as their number."""
    return _lookup(_MAV_STATE_STRINGS, value)


def timesync_mode_to_string(value: int) -> str:
    """Return the name of a time-sync mode; unknown values come back as their number."""
    return _lookup(_TIMESYNC_MODE_STRINGS, value)


def timesync_mode_from_str(name: str) -> TimesyncMode:
    """Find a time-sync mode by name; unknown names give NONE."""
    try:
        return TimesyncMode[name]
    except KeyError:
        _log.error("TM: Unknown mode: %s", name)
        return TimesyncMode.NONE