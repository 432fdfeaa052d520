# mavkit

Helpers for software that talks to MAVLink vehicles such as autopilots and
ground stations.

- **Enum naming**: `mavkit.enums_vehicle` and `mavkit.enums_mission` turn
  numeric MAVLink enum values into names and descriptions. They also turn
  names back into values. Unknown values come back as their number. Unknown
  names give a fixed default and are logged. Examples are `mav_type_to_name`,
  `mav_type_from_str`, `mav_frame_from_str`, `gps_fix_type_to_string`,
  `mav_component_to_string` and `timesync_mode_from_str` (which returns a
  `TimesyncMode`).
- **Frame transforms**: `mavkit.transforms` works with quaternions as numpy
  arrays `[w, x, y, z]`, in yaw-pitch-roll (ZYX) order. It provides:
  - `quaternion_from_rpy`, `quaternion_to_rpy`, `quaternion_get_yaw`,
    `quaternion_multiply` and `quaternion_to_rotation_matrix`.
  - Static conversions selected by `StaticTF`: NED↔ENU, aircraft↔base_link
    and ECEF↔ENU. These are `transform_orientation`,
    `transform_static_frame`, `transform_static_covariance` and
    `transform_ecef_enu`.
  - Rotation of vectors and 3x3, 6x6 or 9x9 covariances by a quaternion, with
    `transform_frame` and `transform_covariance`.
- **Sensor orientations**: `mavkit.sensor_orientation` holds the names and
  rotations of the MAV_SENSOR_ORIENTATION values. The functions are
  `sensor_orientation_to_string`, `sensor_orientation_matching` and
  `sensor_orientation_from_str`. The last one accepts a name or a decimal,
  octal or hex index, and returns -1 if it finds neither.
- **Diagnostics**: `mavkit.diag` contains:
  - `DeviceError`, the link error type.
  - The counter records `MavlinkStatus` and `IOStat`.
  - `DiagnosticStatus`, which holds a level, a summary line and key/value
    pairs.
  - `MavlinkDiag`, which reports the counters of any object that has
    `get_status()` and `get_iostat()`.
  - `RadioMonitor`, which tracks 3DR radio reports and summarises RSSI.

## Install

```
pip install .
```

## Examples

```python
from mavkit.enums_vehicle import mav_type_to_name, mav_type_from_str
from mavkit.transforms import StaticTF, transform_static_frame

mav_type_to_name(2)              # "QUADROTOR"
mav_type_from_str("HEXAROTOR")   # 13

transform_static_frame([1.0, 2.0, 3.0], StaticTF.NED_TO_ENU)   # array([ 2.,  1., -3.])
```

```python
from mavkit.sensor_orientation import sensor_orientation_from_str

sensor_orientation_from_str("ROLL_180")   # 8
sensor_orientation_from_str("0x10")       # 16
```

```python
from mavkit.diag import DiagnosticStatus, RadioMonitor

radio = RadioMonitor(low_rssi=40)
radio.handle_message(ord("3"), ord("D"), 100, 95, 50, 10, 12, 0, 0)

stat = DiagnosticStatus()
radio.run(stat)
stat.message                     # "Normal"
stat.as_dict()["RSSI (dBm)"]     # "-74.4"
```

## What it does not do

mavkit has no MAVLink transport. It does not open serial, UDP or TCP links,
and it does not parse or serialise MAVLink frames. It also does not track
vehicle state, decode flight modes, send commands or route messages to
handlers. `MavlinkDiag` reads counters from a link object that you supply.
`RadioMonitor` takes the fields of radio reports that you have already
decoded.

## Tests

```
pip install .[test]
pytest
```