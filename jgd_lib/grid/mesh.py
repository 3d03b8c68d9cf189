# -*- coding: utf-8 -*-
"""Serial index of the Japanese 3rd level mesh.

A 3rd level mesh is 30" of latitude by 45" of longitude. ``Mesh3`` numbers
the meshes serially from latitude 0° / longitude 0°, so a mesh is identified
by a pair of small integers that fit in int16 for any valid coordinate.

Grid points of the parameter files sit on the **south-west** corner of each
mesh, not at its centre.
"""

from __future__ import annotations

from typing import NamedTuple

from jgd_lib.constants import MESH3_LAT_SEC
from jgd_lib.constants import MESH3_LON_SEC
from jgd_lib.constants import MESH3_PER_LAT_DEGREE
from jgd_lib.constants import MESH3_PER_LON_DEGREE
from jgd_lib.constants import SECS
from jgd_lib.models import LatLon


class Mesh3(NamedTuple):
    """Serial number of a 3rd level mesh, ordered latitude first."""

    lat: int
    lon: int

    @classmethod
    def floor(cls, degrees: LatLon) -> Mesh3:
        """Mesh whose south-west corner is at or below ``degrees``.

        The conversion truncates toward zero, which equals flooring only
        for non-negative coordinates.
        """
        return cls(
            int(degrees.lat * MESH3_PER_LAT_DEGREE),
            int(degrees.lon * MESH3_PER_LON_DEGREE),
        )

    def north(self) -> Mesh3:
        return Mesh3(self.lat + 1, self.lon)

    def east(self) -> Mesh3:
        return Mesh3(self.lat, self.lon + 1)

    def to_degrees(self) -> LatLon:
        """South-west corner of the mesh in degrees."""
        return LatLon(self.lat * MESH3_LAT_SEC, self.lon * MESH3_LON_SEC) / SECS

    def diagonal_weight(self, p: LatLon) -> LatLon:
        """Distance from this corner to ``p`` in units of mesh height/width.

        Measured from the south-west corner this gives the north and east
        weights of ``p``; measured from the north-east corner it gives the
        south and west weights.
        """
        diff_secs = (p - self.to_degrees()).map(lambda x: abs(x) * SECS)
        return LatLon(diff_secs.lat / MESH3_LAT_SEC, diff_secs.lon / MESH3_LON_SEC)
