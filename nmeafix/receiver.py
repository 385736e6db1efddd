"""Background reader that turns NMEA GGA and VTG telegrams into a GPS state."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

from nmeafix.geo import Coordinate, Pose, pose_from_fix
from nmeafix.nmea import (
    _float_or_zero,
    _int_or_zero,
    degree_minutes_to_degrees,
    has_valid_checksum,
)

__all__ = ["GPSStatus", "LineSource", "UbloxNeo7m"]


@dataclass(frozen=True)
class GPSStatus:
    """Fix quality, satellite count, HDOP, fix time and pose of the last GGA fix."""

    fix: float
    satellites: int
    hdop: float
    fix_timestamp: int
    pose: Pose


class LineSource(Protocol):
    """Anything that yields one telegram per call, such as a serial port."""

    def read_line(self) -> str:
        """Return the next line received."""
        ...


class UbloxNeo7m:
    """A u-blox NEO-7M receiver read through a line source."""

    def __init__(self, serial: LineSource) -> None:
        self._serial = serial
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._pose = Pose(Coordinate(0, 0), 0)
        self._old_pose = self._pose
        self._speed = 0.0
        self._status = GPSStatus(-1, -1, -1, -1, self._pose)

    def handle_telegram(self, telegram: str) -> None:
        """Update state from one telegram; invalid or unknown ones are ignored."""
        if not has_valid_checksum(telegram):
            return
        fields = telegram.split(",")

        def field(index: int) -> str:
            return fields[index] if index < len(fields) else ""

        talker = fields[0]
        if "GGA" in talker:
            current = Coordinate(
                degree_minutes_to_degrees(field(2)),
                degree_minutes_to_degrees(field(4)),
            )
            with self._lock:
                self._old_pose = self._pose
                self._pose = pose_from_fix(self._old_pose.coordinate, current)
                self._status = GPSStatus(
                    fix=_float_or_zero(field(6)),
                    satellites=_int_or_zero(field(7)),
                    hdop=_float_or_zero(field(8)),
                    fix_timestamp=_int_or_zero(field(1)),
                    pose=self._pose,
                )
        elif "VTG" in talker:
            speed = _float_or_zero(field(7))
            with self._lock:
                self._speed = speed

    def run(self) -> None:
        """Read and handle telegrams until stop_thread is called."""
        while not self._stop.is_set():
            self.handle_telegram(self._serial.read_line())

    def setup(self) -> threading.Thread:
        """Start reading in a background thread and return that thread."""
        self._stop.clear()
        thread = threading.Thread(target=self.run, name="gps-reader", daemon=True)
        thread.start()
        return thread

    def stop_thread(self) -> None:
        """Ask the background thread to finish after its current telegram."""
        self._stop.set()

    @property
    def pose(self) -> Pose:
        """The latest pose."""
        with self._lock:
            return self._pose

    @property
    def speed(self) -> float:
        """The latest speed over ground in km/h."""
        with self._lock:
            return self._speed

    @property
    def status(self) -> GPSStatus:
        """The status of the latest GGA fix."""
        with self._lock:
            return self._status