"""Geographic positions and rhumb-line bearings on the WGS84 ellipsoid."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Coordinate", "Pose", "rhumb_bearing", "pose_from_fix"]

WGS84_A = 6378137.0
WGS84_F = 1 / 298.257223563
_ECCENTRICITY = math.sqrt(WGS84_F * (2 - WGS84_F))


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Pose:
    """A position together with an orientation in degrees clockwise from north."""

    coordinate: Coordinate
    orientation: float


def _isometric_latitude(latitude: float) -> float:
    phi = math.radians(latitude)
    return math.asinh(math.tan(phi)) - _ECCENTRICITY * math.atanh(
        _ECCENTRICITY * math.sin(phi)
    )


def rhumb_bearing(start: Coordinate, end: Coordinate) -> float:
    """Azimuth in degrees, in [-180, 180], of the rhumb line from start to end."""
    delta_lon = math.remainder(end.longitude - start.longitude, 360.0)
    delta_psi = _isometric_latitude(end.latitude) - _isometric_latitude(start.latitude)
    return math.degrees(math.atan2(math.radians(delta_lon), delta_psi))


def pose_from_fix(previous: Coordinate, current: Coordinate) -> Pose:
    """Pose at ``current`` facing along the rhumb line from ``previous``, in [0, 360)."""
    bearing = rhumb_bearing(previous, current)
    return Pose(current, bearing + 360 if bearing < 0 else bearing)