import errno
import gc
import os

import pytest

from mavkit.diag import (
    DeviceError,
    DiagnosticStatus,
    IOStat,
    MavlinkDiag,
    MavlinkStatus,
    RadioMonitor,
)


class FakeLink:
    def __init__(self, status=None, iostat=None):
        self.status = status or MavlinkStatus()
        self.iostat = iostat or IOStat()

    def get_status(self):
        return self.status

    def get_iostat(self):
        return self.iostat


def test_device_error_from_text():
    err = DeviceError("udp: resolve", "Bind address resolve failed")
    assert str(err) == "DeviceError:udp: resolve:Bind address resolve failed"


def test_device_error_from_errno():
    err = DeviceError("serial", errno.ENOENT)
    assert str(err) == "DeviceError:serial:" + os.strerror(errno.ENOENT)


def test_device_error_from_exception_and_is_runtime_error():
    cause = OSError("boom")
    with pytest.raises(RuntimeError) as info:
        raise DeviceError("tcp", cause)
    assert str(info.value) == "DeviceError:tcp:" + str(cause)
    assert info.value.module == "tcp"


def test_diagnostic_status_add_and_summary():
    stat = DiagnosticStatus()
    stat.summary(1, "warn")
    stat.add("k", 5)
    assert stat.level == 1
    assert stat.message == "warn"
    assert stat.values == [("k", "5")]


def test_mavlink_diag_without_link():
    diag = MavlinkDiag("FCU connection")
    stat = DiagnosticStatus()
    diag.run(stat)
    assert stat.level == 2
    assert stat.message == "not connected"
    assert stat.values == []


def test_mavlink_diag_reports_counters():
    link = FakeLink(
        MavlinkStatus(packet_rx_success_count=10, buffer_overrun=2, parse_error=3,
                      current_rx_seq=4, current_tx_seq=5),
        IOStat(tx_total_bytes=100, rx_total_bytes=200, tx_speed=1.5, rx_speed=2.5),
    )
    diag = MavlinkDiag("FCU connection")
    diag.set_link(link)
    diag.set_connection_status(True)
    stat = DiagnosticStatus()
    diag.run(stat)
    values = stat.as_dict()
    assert values["Received packets:"] == "10"
    assert values["Dropped packets:"] == "0"
    assert values["Buffer overruns:"] == "2"
    assert values["Parse errors:"] == "3"
    assert values["Rx sequence number:"] == "4"
    assert values["Tx sequence number:"] == "5"
    assert values["Rx total bytes:"] == "200"
    assert values["Tx total bytes:"] == "100"
    assert values["Rx speed:"] == "2.500000"
    assert values["Tx speed:"] == "1.500000"
    assert (stat.level, stat.message) == (0, "connected")


def test_mavlink_diag_drops_then_recovers():
    link = FakeLink(MavlinkStatus(packet_rx_drop_count=3))
    diag = MavlinkDiag("GCS bridge")
    diag.set_link(link)
    diag.set_connection_status(True)

    first = DiagnosticStatus()
    diag.run(first)
    assert first.level == 1
    assert first.message == "3 packeges dropped since last report"
    assert diag.last_drop_count == 3

    second = DiagnosticStatus()
    diag.run(second)
    assert (second.level, second.message) == (0, "connected")


def test_mavlink_diag_link_up_but_not_connected():
    diag = MavlinkDiag("FCU connection")
    diag.set_link(FakeLink())
    stat = DiagnosticStatus()
    diag.run(stat)
    assert (stat.level, stat.message) == (1, "not connected")


def test_mavlink_diag_keeps_only_weak_reference():
    diag = MavlinkDiag("FCU connection")
    link = FakeLink()
    diag.set_link(link)
    del link
    gc.collect()
    stat = DiagnosticStatus()
    diag.run(stat)
    assert stat.level == 2


def test_radio_no_data():
    monitor = RadioMonitor()
    stat = DiagnosticStatus()
    monitor.run(stat)
    assert (stat.level, stat.message) == (2, "No data")
    assert monitor.last_status is None


def test_radio_dbm_conversion_and_callback():
    seen = []
    monitor = RadioMonitor(on_status=seen.append)
    status = monitor.handle_message(ord("3"), ord("D"), 0, 0, 1, 2, 3, 4, 5)
    assert status.rssi_dbm == pytest.approx(-127.0)
    assert status.remrssi_dbm == pytest.approx(-127.0)
    assert seen == [status]
    assert monitor.last_status == status


def test_radio_dbm_increases_with_rssi():
    monitor = RadioMonitor()
    low = monitor.handle_message(ord("3"), ord("D"), 50, 60, 0, 0, 0, 0, 0)
    high = monitor.handle_message(ord("3"), ord("D"), 100, 120, 0, 0, 0, 0, 0)
    assert high.rssi_dbm > low.rssi_dbm
    assert high.remrssi_dbm > low.remrssi_dbm


def test_radio_summary_levels():
    monitor = RadioMonitor(low_rssi=40)

    monitor.handle_message(ord("3"), ord("D"), 10, 100, 0, 0, 0, 0, 0)
    stat = DiagnosticStatus()
    monitor.run(stat)
    assert (stat.level, stat.message) == (1, "Low RSSI")

    monitor.handle_message(ord("3"), ord("D"), 100, 10, 0, 0, 0, 0, 0)
    stat = DiagnosticStatus()
    monitor.run(stat)
    assert (stat.level, stat.message) == (1, "Low remote RSSI")

    monitor.handle_message(ord("3"), ord("D"), 100, 100, 0, 0, 0, 0, 0)
    stat = DiagnosticStatus()
    monitor.run(stat)
    assert (stat.level, stat.message) == (0, "Normal")


def test_radio_run_values():
    monitor = RadioMonitor()
    monitor.handle_message(ord("3"), ord("D"), 0, 0, 7, 8, 9, 11, 12)
    stat = DiagnosticStatus()
    monitor.run(stat)
    values = stat.as_dict()
    assert values["RSSI"] == "0"
    assert values["RSSI (dBm)"] == "-127.0"
    assert values["Remote RSSI (dBm)"] == "-127.0"
    assert values["Tx buffer (%)"] == "7"
    assert values["Noice level"] == "8"
    assert values["Remote noice level"] == "9"
    assert values["Rx errors"] == "11"
    assert values["Fixed"] == "12"


def test_radio_ignored_after_radio_status():
    monitor = RadioMonitor()
    first = monitor.handle_radio(1, 1, 50, 50, 0, 0, 0, 0, 0)
    assert first is not None and first.rssi == 50
    monitor.handle_radio_status(ord("3"), ord("D"), 60, 60, 0, 0, 0, 0, 0)
    assert monitor.handle_radio(1, 1, 70, 70, 0, 0, 0, 0, 0) is None
    assert monitor.last_status.rssi == 60


def test_radio_connection_change_resets_diag():
    monitor = RadioMonitor()
    monitor.handle_message(ord("3"), ord("D"), 100, 100, 0, 0, 0, 0, 0)
    assert monitor.diag_added is True
    monitor.connection_changed(False)
    assert monitor.diag_added is False


def test_radio_warns_on_foreign_source(caplog):
    monitor = RadioMonitor()
    with caplog.at_level("WARNING", logger="mavkit.diag"):
        monitor.handle_message(1, 1, 100, 100, 0, 0, 0, 0, 0)
    assert "RADIO_STATUS not from 3DR modem?" in caplog.text