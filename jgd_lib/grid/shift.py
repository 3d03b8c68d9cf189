# -*- coding: utf-8 -*-
"""Fixed point shift values.

Shifts are stored as integer micro-arcseconds and only become floating
point degrees when they are used for interpolation. ``MicroSecond`` is the
single place where that conversion happens, in both directions.
"""

from __future__ import annotations

from typing import NamedTuple

from jgd_lib.constants import MICRO_SECS
from jgd_lib.models import LatLon


class MicroSecond(NamedTuple):
    """Latitude and longitude shift in micro-arcseconds (int32 each)."""

    lat: int
    lon: int

    def to_degrees(self) -> LatLon:
        return LatLon(float(self.lat), float(self.lon)) / MICRO_SECS

    @classmethod
    def from_degrees(cls, degrees: LatLon) -> MicroSecond:
        """Quantize a shift in degrees to the nearest micro-arcsecond."""
        scaled = degrees * MICRO_SECS
        return cls(round(scaled.lat), round(scaled.lon))
