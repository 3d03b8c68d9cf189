# -*- coding: utf-8 -*-
"""Tests for ellipsoids and the geodetic <-> ECEF conversion."""

import pytest

from jgd_lib.earth import BESSEL
from jgd_lib.earth import GRS80
from jgd_lib.earth import Ellipsoid
from jgd_lib.models import LatLon


class TestEllipsoid:
    """Tests for Ellipsoid eccentricities."""

    def test_grs80(self):
        assert GRS80.equatorial_eccentricity == pytest.approx(
            0.006694379990141124, rel=1e-12
        )
        assert GRS80.polar_eccentricity == pytest.approx(
            0.006739496742276239, rel=1e-12
        )

    def test_bessel(self):
        assert BESSEL.equatorial_eccentricity == pytest.approx(
            0.006674372174974933, rel=1e-12
        )
        assert BESSEL.polar_eccentricity == pytest.approx(
            0.006719218741581313, rel=1e-12
        )

    def test_sphere(self):
        sphere = Ellipsoid(equatorial_radius=1.0, polar_radius=1.0)
        assert sphere.equatorial_eccentricity == 0.0
        assert sphere.polar_eccentricity == 0.0

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GRS80.equatorial_radius = 1.0


class TestConversion:
    """Tests for Ellipsoid.to_ecef and Ellipsoid.to_geodetic."""

    def test_equator(self):
        ecef = GRS80.to_ecef(LatLon(0.0, 0.0))
        assert ecef.x == pytest.approx(GRS80.equatorial_radius)
        assert ecef.y == pytest.approx(0.0, abs=1e-6)
        assert ecef.z == pytest.approx(0.0, abs=1e-6)

    def test_meridian_90(self):
        ecef = GRS80.to_ecef(LatLon(0.0, 90.0))
        assert ecef.x == pytest.approx(0.0, abs=1e-6)
        assert ecef.y == pytest.approx(GRS80.equatorial_radius)

    @pytest.mark.parametrize(
        "degrees",
        [
            LatLon(35.0, 135.0),
            LatLon(45.5, 141.9),
            LatLon(24.0, 123.0),
            LatLon(-33.9, 151.2),
        ],
    )
    @pytest.mark.parametrize("ellipsoid", [GRS80, BESSEL])
    def test_round_trip(self, ellipsoid, degrees):
        """Test that surface points survive a round trip within 1mm."""
        result = ellipsoid.to_geodetic(ellipsoid.to_ecef(degrees))
        assert result.lat == pytest.approx(degrees.lat, abs=9e-9)
        assert result.lon == pytest.approx(degrees.lon, abs=9e-9)
