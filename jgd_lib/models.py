# -*- coding: utf-8 -*-
"""Coordinate value types.

- LatLon: a pair of latitude and longitude (usually decimal degrees)
- Dms: degrees, minutes, seconds
- ECEF: Earth-centered, Earth-fixed cartesian coordinate in metres

All types are immutable ``NamedTuple`` instances with element-wise
arithmetic, so they can be freely shared between threads.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import NamedTuple

from jgd_lib.constants import MINUTES
from jgd_lib.constants import SECS
from jgd_lib.errors import DegreesError


class Dms(NamedTuple):
    """Degrees, minutes, seconds.

    ``Dms(35, 39, 29.1572)`` is 35°39'29.1572".
    """

    d: int
    m: int
    s: float

    @classmethod
    def from_degrees(cls, deg: float) -> Dms:
        """Split decimal degrees, truncating degrees and minutes."""
        d = int(deg)
        m = int(math.fmod(deg * MINUTES, 60.0))
        s = math.fmod(deg * SECS, 60.0)
        return cls(d, m, s)

    def to_degrees(self) -> float:
        return float(self.d) + float(self.m) / MINUTES + self.s / SECS


class LatLon(NamedTuple):
    """Latitude and longitude of a coordinate.

    Arithmetic is element-wise: ``LatLon + LatLon``, ``LatLon - LatLon``,
    ``LatLon * scalar`` and ``LatLon / scalar``.
    """

    lat: float
    lon: float

    def __add__(self, other: LatLon) -> LatLon:  # type: ignore[override]
        return LatLon(self.lat + other.lat, self.lon + other.lon)

    def __sub__(self, other: LatLon) -> LatLon:
        return LatLon(self.lat - other.lat, self.lon - other.lon)

    def __mul__(self, scalar: float) -> LatLon:  # type: ignore[override]
        return LatLon(self.lat * scalar, self.lon * scalar)

    def __truediv__(self, scalar: float) -> LatLon:
        return LatLon(self.lat / scalar, self.lon / scalar)

    def map(self, f: Callable[[float], float]) -> LatLon:
        """Return a pair with ``f`` applied to both lat and lon."""
        return LatLon(f(self.lat), f(self.lon))

    @classmethod
    def from_secs(cls, lat: float, lon: float) -> LatLon:
        """Build from arcseconds."""
        return cls(float(lat), float(lon)) / SECS

    @classmethod
    def from_milli_secs(cls, lat: float, lon: float) -> LatLon:
        """Build from milli-arcseconds."""
        return cls.from_secs(lat, lon) / 1_000.0

    @classmethod
    def from_micro_secs(cls, lat: float, lon: float) -> LatLon:
        """Build from micro-arcseconds."""
        return cls.from_milli_secs(lat, lon) / 1_000.0

    @classmethod
    def from_dms(cls, lat: Dms, lon: Dms) -> LatLon:
        """Build decimal degrees from a pair of Dms.

        Example:
            Origin of the Japanese geodetic coordinates::

                LatLon.from_dms(Dms(35, 39, 29.1572), Dms(139, 44, 28.8869))
        """
        return cls(lat.to_degrees(), lon.to_degrees())

    def to_dms(self) -> tuple[Dms, Dms]:
        return Dms.from_degrees(self.lat), Dms.from_degrees(self.lon)

    def validate_degrees(self) -> None:
        """Check that the pair is a valid coordinate in degrees.

        Raises:
            DegreesError: If |lat| > 90 or |lon| > 180
        """

        def _in_range(lat: float, lon: float) -> bool:
            return abs(lat) <= 90.0 and abs(lon) <= 180.0

        if _in_range(self.lat, self.lon):
            return
        raise DegreesError(possibly_reversed=_in_range(self.lon, self.lat))


class ECEF(NamedTuple):
    """Earth-centered, Earth-fixed coordinate in metres."""

    x: float
    y: float
    z: float

    def __add__(self, other: ECEF) -> ECEF:  # type: ignore[override]
        return ECEF(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: ECEF) -> ECEF:
        return ECEF(self.x - other.x, self.y - other.y, self.z - other.z)
