"""Link error type, link statistics and diagnostic tasks for the MAVLink link and 3DR radio."""

from __future__ import annotations

import logging
import os
import threading
import time
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

_log = logging.getLogger("mavkit.diag")

OK = 0
WARN = 1
ERROR = 2

_RADIO_SYSID = ord("3")
_RADIO_COMPID = ord("D")
_DEFAULT_LOW_RSSI = 40


class DeviceError(RuntimeError):
    """Communication error raised while opening or using a link."""

    def __init__(self, module: str, msg: str | int | BaseException) -> None:
        super().__init__(self.make_message(module, msg))
        self.module = module

    @staticmethod
    def make_message(module: str, msg: str | int | BaseException) -> str:
        """Build ``DeviceError:<module>:<description>``; an int is read as an errno."""
        if isinstance(msg, bool):
            text = str(msg)
        elif isinstance(msg, int):
            text = os.strerror(msg)
        else:
            text = str(msg)
        return f"DeviceError:{module}:{text}"


@dataclass
class MavlinkStatus:
    """Parser counters of a link."""

    packet_rx_success_count: int = 0
    packet_rx_drop_count: int = 0
    buffer_overrun: int = 0
    parse_error: int = 0
    current_rx_seq: int = 0
    current_tx_seq: int = 0


@dataclass
class IOStat:
    """Byte counters and speeds of a link."""

    tx_total_bytes: int = 0
    rx_total_bytes: int = 0
    tx_speed: float = 0.0
    rx_speed: float = 0.0


class _Link(Protocol):
    def get_status(self) -> MavlinkStatus: ...

    def get_iostat(self) -> IOStat: ...


@dataclass
class DiagnosticStatus:
    """Result of one diagnostic run: a level, a summary line and key/value pairs."""

    level: int = OK
    message: str = ""
    values: list[tuple[str, str]] = field(default_factory=list)

    def summary(self, level: int, message: str) -> None:
        """Set the level and summary line."""
        self.level = int(level)
        self.message = message

    def add(self, key: str, value: Any) -> None:
        """Append a key/value pair; the value is stored as text."""
        self.values.append((key, str(value)))

    def as_dict(self) -> dict[str, str]:
        """The key/value pairs as a dictionary."""
        return dict(self.values)


class MavlinkDiag:
    """Diagnostic task reporting the statistics of a link it does not own."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.last_drop_count = 0
        self.is_connected = False
        self._link_ref: Callable[[], _Link | None] = lambda: None

    def set_link(self, link: _Link | None) -> None:
        """Watch ``link``; only a weak reference is kept when the object allows it."""
        if link is None:
            self._link_ref = lambda: None
            return
        try:
            self._link_ref = weakref.ref(link)
        except TypeError:
            self._link_ref = lambda: link

    def set_connection_status(self, connected: bool) -> None:
        """Record whether the vehicle is connected over the link."""
        self.is_connected = bool(connected)

    def run(self, stat: DiagnosticStatus) -> None:
        """Fill ``stat`` with the link counters and a summary."""
        link = self._link_ref()
        if link is None:
            stat.summary(ERROR, "not connected")
            return

        mav_status = link.get_status()
        iostat = link.get_iostat()

        stat.add("Received packets:", int(mav_status.packet_rx_success_count))
        stat.add("Dropped packets:", int(mav_status.packet_rx_drop_count))
        stat.add("Buffer overruns:", int(mav_status.buffer_overrun))
        stat.add("Parse errors:", int(mav_status.parse_error))
        stat.add("Rx sequence number:", int(mav_status.current_rx_seq))
        stat.add("Tx sequence number:", int(mav_status.current_tx_seq))

        stat.add("Rx total bytes:", int(iostat.rx_total_bytes))
        stat.add("Tx total bytes:", int(iostat.tx_total_bytes))
        stat.add("Rx speed:", f"{float(iostat.rx_speed):f}")
        stat.add("Tx speed:", f"{float(iostat.tx_speed):f}")

        drops = int(mav_status.packet_rx_drop_count)
        if drops > self.last_drop_count:
            stat.summary(
                WARN, f"{drops - self.last_drop_count} packeges dropped since last report"
            )
        elif self.is_connected:
            stat.summary(OK, "connected")
        else:
            stat.summary(WARN, "not connected")

        self.last_drop_count = drops


@dataclass(frozen=True)
class RadioStatus:
    """One radio status report, with RSSI converted to dBm."""

    rssi: int
    remrssi: int
    txbuf: int
    noise: int
    remnoise: int
    rxerrors: int
    fixed: int
    rssi_dbm: float
    remrssi_dbm: float
    stamp_ns: int = 0


def _to_dbm(value: int) -> float:
    return value / 1.9 - 127


class RadioMonitor:
    """Tracks 3DR radio status reports and reports them as a diagnostic."""

    def __init__(
        self,
        low_rssi: int = _DEFAULT_LOW_RSSI,
        on_status: Callable[[RadioStatus], None] | None = None,
    ) -> None:
        self.low_rssi = int(low_rssi)
        self.on_status = on_status
        self.has_radio_status = False
        self.diag_added = False
        self._lock = threading.Lock()
        self._last_status: RadioStatus | None = None

    @property
    def last_status(self) -> RadioStatus | None:
        """The most recent report, or None before the first one."""
        with self._lock:
            return self._last_status

    def handle_radio_status(self, sysid: int, compid: int, rssi: int, remrssi: int,
                            txbuf: int, noise: int, remnoise: int, rxerrors: int,
                            fixed: int) -> RadioStatus:
        """Handle a RADIO_STATUS report; later RADIO reports are then ignored."""
        self.has_radio_status = True
        return self.handle_message(sysid, compid, rssi, remrssi, txbuf, noise,
                                   remnoise, rxerrors, fixed)

    def handle_radio(self, sysid: int, compid: int, rssi: int, remrssi: int,
                     txbuf: int, noise: int, remnoise: int, rxerrors: int,
                     fixed: int) -> RadioStatus | None:
        """Handle an older RADIO report; ignored once RADIO_STATUS has been seen."""
        if self.has_radio_status:
            return None
        return self.handle_message(sysid, compid, rssi, remrssi, txbuf, noise,
                                   remnoise, rxerrors, fixed)

    def handle_message(self, sysid: int, compid: int, rssi: int, remrssi: int,
                       txbuf: int, noise: int, remnoise: int, rxerrors: int,
                       fixed: int) -> RadioStatus:
        """Store a radio report and pass it to ``on_status``."""
        if sysid != _RADIO_SYSID or compid != _RADIO_COMPID:
            _log.warning("RADIO_STATUS not from 3DR modem?")

        status = RadioStatus(
            rssi=int(rssi),
            remrssi=int(remrssi),
            txbuf=int(txbuf),
            noise=int(noise),
            remnoise=int(remnoise),
            rxerrors=int(rxerrors),
            fixed=int(fixed),
            rssi_dbm=_to_dbm(int(rssi)),
            remrssi_dbm=_to_dbm(int(remrssi)),
            stamp_ns=time.time_ns(),
        )

        self.diag_added = True
        with self._lock:
            self._last_status = status

        if self.on_status is not None:
            self.on_status(status)
        return status

    def run(self, stat: DiagnosticStatus) -> None:
        """Fill ``stat`` with the last radio report."""
        with self._lock:
            last = self._last_status

        if last is None:
            stat.summary(ERROR, "No data")
            return
        if last.rssi < self.low_rssi:
            stat.summary(WARN, "Low RSSI")
        elif last.remrssi < self.low_rssi:
            stat.summary(WARN, "Low remote RSSI")
        else:
            stat.summary(OK, "Normal")

        stat.add("RSSI", last.rssi)
        stat.add("RSSI (dBm)", f"{last.rssi_dbm:.1f}")
        stat.add("Remote RSSI", last.remrssi)
        stat.add("Remote RSSI (dBm)", f"{last.remrssi_dbm:.1f}")
        stat.add("Tx buffer (%)", last.txbuf)
        stat.add("Noice level", last.noise)
        stat.add("Remote noice level", last.remnoise)
        stat.add("Rx errors", last.rxerrors)
        stat.add("Fixed", last.fixed)

    def connection_changed(self, connected: bool) -> None:
        """Drop the diagnostic on any connection change; it returns with the next report."""
        self.diag_added = False