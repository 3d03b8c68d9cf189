# -*- coding: utf-8 -*-
"""Earth ellipsoids and the closed-form geodetic <-> ECEF conversion.

The three parameter datum shift works by converting a geodetic coordinate
to ECEF on the source ellipsoid, translating it, and converting back on the
target ellipsoid. Heights are not tracked: points are assumed to lie on the
ellipsoid surface.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from jgd_lib.models import ECEF
from jgd_lib.models import LatLon


@dataclass(frozen=True)
class Ellipsoid:
    """Earth ellipsoid.

    Attributes:
        equatorial_radius: semi-major axis in metres
        polar_radius: semi-minor axis in metres
    """

    equatorial_radius: float
    polar_radius: float

    @property
    def equatorial_eccentricity(self) -> float:
        """(a^2 - b^2) / a^2"""
        a2 = self.equatorial_radius**2
        b2 = self.polar_radius**2
        return (a2 - b2) / a2

    @property
    def polar_eccentricity(self) -> float:
        """(a^2 - b^2) / b^2"""
        a2 = self.equatorial_radius**2
        b2 = self.polar_radius**2
        return (a2 - b2) / b2

    def to_ecef(self, degrees: LatLon) -> ECEF:
        """Convert a geodetic coordinate on the surface to ECEF."""
        lat, lon = degrees.map(math.radians)
        e2 = self.equatorial_eccentricity
        n = self.equatorial_radius / math.sqrt(1.0 - e2 * math.sin(lat) ** 2)
        return ECEF(
            n * math.cos(lat) * math.cos(lon),
            n * math.cos(lat) * math.sin(lon),
            n * (1.0 - e2) * math.sin(lat),
        )

    def to_geodetic(self, ecef: ECEF) -> LatLon:
        """Convert an ECEF coordinate to geodetic degrees (Bowring)."""
        a = self.equatorial_radius
        b = self.polar_radius
        p = math.hypot(ecef.x, ecef.y)
        theta = math.atan((ecef.z * a) / (p * b))
        lat = math.atan2(
            ecef.z + self.polar_eccentricity * b * math.sin(theta) ** 3,
            p - self.equatorial_eccentricity * a * math.cos(theta) ** 3,
        )
        lon = math.atan2(ecef.y, ecef.x)
        return LatLon(lat, lon).map(math.degrees)


#: GRS80, the ellipsoid of JGD2000 / JGD2011
GRS80 = Ellipsoid(equatorial_radius=6378137.0, polar_radius=6356752.31424518)

#: Bessel 1841, the ellipsoid of the Tokyo Datum
BESSEL = Ellipsoid(equatorial_radius=6377397.155, polar_radius=6356078.963)
