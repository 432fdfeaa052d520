"""MAVLink helpers: enum naming, frame transforms, sensor orientations and diagnostics."""

__version__ = "0.1.0"
__all__ = [
    "enums_vehicle",
    "enums_mission",
    "transforms",
    "sensor_orientation",
    "diag",
]