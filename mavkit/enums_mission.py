"""Human-readable names for ADS-B, GPS, mission, frame, component and sensor enumerations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

_log = logging.getLogger("mavkit.uas")

_ADSB_ALTITUDE_TYPE_STRINGS = (
    "PRESSURE_QNH",
    "GEOMETRIC",
)

_ADSB_EMITTER_TYPE_STRINGS = (
    "NO_INFO",
    "LIGHT",
    "SMALL",
    "LARGE",
    "HIGH_VORTEX_LARGE",
    "HEAVY",
    "HIGHLY_MANUV",
    "ROTOCRAFT",
    "UNASSIGNED",
    "GLIDER",
    "LIGHTER_AIR",
    "PARACHUTE",
    "ULTRA_LIGHT",
    "UNASSIGNED2",
    "UAV",
    "SPACE",
    "UNASSGINED3",
    "EMERGENCY_SURFACE",
    "SERVICE_SURFACE",
    "POINT_OBSTACLE",
)

# The estimator enum starts at 1, but the table is indexed directly by value.
_MAV_ESTIMATOR_TYPE_STRINGS = (
    "NAIVE",
    "VISION",
    "VIO",
    "GPS",
    "GPS_INS",
)

_GPS_FIX_TYPE_STRINGS = (
    "NO_GPS",
    "NO_FIX",
    "2D_FIX",
    "3D_FIX",
    "DGPS",
    "RTK_FLOAT",
    "RTK_FIXED",
    "STATIC",
    "PPP",
)

_MAV_MISSION_RESULT_STRINGS = (
    "mission accepted OK",
    "generic error / not accepting mission commands at all right now",
    "coordinate frame is not supported",
    "command is not supported",
    "mission item exceeds storage space",
    "one of the parameters has an invalid value",
    "param1 has an invalid value",
    "param2 has an invalid value",
    "param3 has an invalid value",
    "param4 has an invalid value",
    "x/param5 has an invalid value",
    "y/param6 has an invalid value",
    "param7 has an invalid value",
    "received waypoint out of sequence",
    "not accepting any mission commands from this communication partner",
)

_MAV_FRAME_STRINGS = (
    "GLOBAL",
    "LOCAL_NED",
    "MISSION",
    "GLOBAL_RELATIVE_ALT",
    "LOCAL_ENU",
    "GLOBAL_INT",
    "GLOBAL_RELATIVE_ALT_INT",
    "LOCAL_OFFSET_NED",
    "BODY_NED",
    "BODY_OFFSET_NED",
    "GLOBAL_TERRAIN_ALT",
    "GLOBAL_TERRAIN_ALT_INT",
    "BODY_FRD",
    "BODY_FLU",
    "MOCAP_NED",
    "MOCAP_ENU",
    "VISION_NED",
    "VISION_ENU",
    "ESTIM_NED",
    "ESTIM_ENU",
)

_MAV_FRAME_LOCAL_NED = 1

_MAV_COMP_ID_STRINGS = {
    0: "ALL",
    1: "AUTOPILOT1",
    100: "CAMERA",
    101: "CAMERA2",
    102: "CAMERA3",
    103: "CAMERA4",
    104: "CAMERA5",
    105: "CAMERA6",
    140: "SERVO1",
    141: "SERVO2",
    142: "SERVO3",
    143: "SERVO4",
    144: "SERVO5",
    145: "SERVO6",
    146: "SERVO7",
    147: "SERVO8",
    148: "SERVO9",
    149: "SERVO10",
    150: "SERVO11",
    151: "SERVO12",
    152: "SERVO13",
    153: "SERVO14",
    154: "GIMBAL",
    155: "LOG",
    156: "ADSB",
    157: "OSD",
    158: "PERIPHERAL",
    159: "QX1_GIMBAL",
    160: "FLARM",
    180: "MAPPER",
    190: "MISSIONPLANNER",
    195: "PATHPLANNER",
    200: "IMU",
    201: "IMU_2",
    202: "IMU_3",
    220: "GPS",
    221: "GPS2",
    240: "UDP_BRIDGE",
    241: "UART_BRIDGE",
    250: "SYSTEM_CONTROL",
}

_MAV_DISTANCE_SENSOR_STRINGS = (
    "LASER",
    "ULTRASOUND",
    "INFRARED",
    "RADAR",
    "UNKNOWN",
)

_LANDING_TARGET_TYPE_STRINGS = (
    "LIGHT_BEACON",
    "RADIO_BEACON",
    "VISION_FIDUCIAL",
    "VISION_OTHER",
)


def _lookup(table: Sequence[str], value: int) -> str:
    idx = int(value)
    if 0 <= idx < len(table):
        return table[idx]
    return str(idx)


def adsb_altitude_type_to_string(value: int) -> str:
    """Name an ADSB_ALTITUDE_TYPE value; unknown values come back as their number."""
    return _lookup(_ADSB_ALTITUDE_TYPE_STRINGS, value)


def adsb_emitter_type_to_string(value: int) -> str:
    """Name an ADSB_EMITTER_TYPE value; unknown values come back as their number."""
    return _lookup(_ADSB_EMITTER_TYPE_STRINGS, value)


def mav_estimator_type_to_string(value: int) -> str:
    """Name a MAV_ESTIMATOR_TYPE value; unknown values come back as their number."""
    return _lookup(_MAV_ESTIMATOR_TYPE_STRINGS, value)


def gps_fix_type_to_string(value: int) -> str:
    """Name a GPS_FIX_TYPE value; unknown values come back as their number."""
    return _lookup(_GPS_FIX_TYPE_STRINGS, value)


def mav_mission_result_to_string(value: int) -> str:
    """Describe a MAV_MISSION_RESULT value; unknown values come back as their number."""
    return _lookup(_MAV_MISSION_RESULT_STRINGS, value)


def mav_frame_to_string(value: int) -> str:
    """Name a MAV_FRAME value; unknown values come back as their number."""
    return _lookup(_MAV_FRAME_STRINGS, value)


def mav_frame_from_str(name: str) -> int:
    """Find a MAV_FRAME by name; unknown names give LOCAL_NED (1)."""
    try:
        return _MAV_FRAME_STRINGS.index(name)
    except ValueError:
        _log.error("FRAME: Unknown MAV_FRAME: %s", name)
        return _MAV_FRAME_LOCAL_NED


def mav_component_to_string(value: int) -> str:
    """Name a MAV_COMPONENT id; unknown ids come back as their number."""
    idx = int(value)
    return _MAV_COMP_ID_STRINGS.get(idx, str(idx))


def mav_distance_sensor_to_string(value: int) -> str:
    """Name a MAV_DISTANCE_SENSOR value; unknown values come back as their number."""
    return _lookup(_MAV_DISTANCE_SENSOR_STRINGS, value)


def landing_target_type_to_string(value: int) -> str:
    """Name a LANDING_TARGET_TYPE value; unknown values come back as their number."""
    return _lookup(_LANDING_TARGET_TYPE_STRINGS, value)


def landing_target_type_from_str(name: str) -> int:
    """Find a LANDING_TARGET_TYPE by name; unknown names give LIGHT_BEACON (0)."""
    try:
        return _LANDING_TARGET_TYPE_STRINGS.index(name)
    except ValueError:
        _log.error(
            "TYPE: Unknown LANDING_TARGET_TYPE: %s. Defaulting to LIGHT_BEACON", name
        )
        return 0