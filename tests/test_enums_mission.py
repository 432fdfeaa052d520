import pytest

from mavkit import enums_mission as em


def test_adsb_altitude_type_names():
    assert em.adsb_altitude_type_to_string(0) == "PRESSURE_QNH"
    assert em.adsb_altitude_type_to_string(1) == "GEOMETRIC"
    assert em.adsb_altitude_type_to_string(2) == "2"


def test_adsb_emitter_type_names():
    assert em.adsb_emitter_type_to_string(0) == "NO_INFO"
    assert em.adsb_emitter_type_to_string(19) == "POINT_OBSTACLE"
    assert em.adsb_emitter_type_to_string(20) == "20"


def test_estimator_type_indexed_directly():
    assert em.mav_estimator_type_to_string(1) == "VISION"
    assert em.mav_estimator_type_to_string(4) == "GPS_INS"
    assert em.mav_estimator_type_to_string(5) == "5"


def test_gps_fix_type_names():
    assert em.gps_fix_type_to_string(3) == "3D_FIX"
    assert em.gps_fix_type_to_string(8) == "PPP"
    assert em.gps_fix_type_to_string(9) == "9"


def test_mission_result_descriptions():
    assert em.mav_mission_result_to_string(0) == "mission accepted OK"
    assert em.mav_mission_result_to_string(13) == "received waypoint out of sequence"
    assert em.mav_mission_result_to_string(15) == "15"


@pytest.mark.parametrize("value", range(20))
def test_mav_frame_round_trip(value):
    assert em.mav_frame_from_str(em.mav_frame_to_string(value)) == value


def test_mav_frame_unknown():
    assert em.mav_frame_to_string(20) == "20"
    assert em.mav_frame_from_str("NOT_A_FRAME") == em.mav_frame_from_str("LOCAL_NED")
    assert em.mav_frame_to_string(em.mav_frame_from_str("NOT_A_FRAME")) == "LOCAL_NED"


def test_mav_frame_is_case_sensitive():
    assert em.mav_frame_from_str("global") == em.mav_frame_from_str("LOCAL_NED")
    assert em.mav_frame_from_str("GLOBAL") == 0


def test_component_names():
    assert em.mav_component_to_string(240) == "UDP_BRIDGE"
    assert em.mav_component_to_string(250) == "SYSTEM_CONTROL"
    assert em.mav_component_to_string(1) == "AUTOPILOT1"
    assert em.mav_component_to_string(2) == "2"


def test_distance_sensor_names():
    assert em.mav_distance_sensor_to_string(0) == "LASER"
    assert em.mav_distance_sensor_to_string(4) == "UNKNOWN"
    assert em.mav_distance_sensor_to_string(5) == "5"


@pytest.mark.parametrize("value", range(4))
def test_landing_target_round_trip(value):
    name = em.landing_target_type_to_string(value)
    assert em.landing_target_type_from_str(name) == value


def test_landing_target_unknown():
    assert em.landing_target_type_to_string(4) == "4"
    assert em.landing_target_type_from_str("SMOKE_SIGNAL") == 0
    assert em.landing_target_type_to_string(0) == "LIGHT_BEACON"


def test_unknown_names_are_logged(caplog):
    with caplog.at_level("ERROR", logger="mavkit.uas"):
        em.mav_frame_from_str("NOWHERE")
    assert "NOWHERE" in caplog.text