# -*- coding: utf-8 -*-
"""Japanese geodetic datums and the transforms between them.

Supported paths::

    Tokyo ──TKY2JGD──▶ JGD2000 ──PatchJGD──▶ JGD2011
      ╎ (fallback)       ▲  │
      ▼                  │  ▼
    Tokyo97 ──3 params───┘ Tokyo97

Grid based transforms follow the GSI ``TKY2JGD`` and ``PatchJGD`` programs;
the three parameter transform matches PROJ's ``towgs84``. Only geographic
coordinates on the ground surface in Japan are meaningful inputs.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from jgd_lib.constants import TOKYO97_TO_ITRF94
from jgd_lib.earth import BESSEL
from jgd_lib.earth import GRS80
from jgd_lib.enums import Datum
from jgd_lib.enums import GridName
from jgd_lib.errors import ConversionError
from jgd_lib.grid.table import Grid
from jgd_lib.interface import GridInterface
from jgd_lib.models import ECEF
from jgd_lib.models import LatLon

logger = logging.getLogger(__name__)


class _Geographic:
    """A coordinate in degrees tagged with its datum."""

    datum: ClassVar[Datum]

    def __init__(self, degrees: LatLon) -> None:
        self._degrees = LatLon(*degrees)

    @property
    def degrees(self) -> LatLon:
        """Coordinate in decimal degrees."""
        return self._degrees

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._degrees.lat}, {self._degrees.lon})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Geographic):
            return NotImplemented
        return self.datum == other.datum and self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash((self.datum, self._degrees))


class Tokyo(_Geographic):
    """Tokyo Datum, the older Japanese datum (EPSG:4301).

    Args:
        degrees: Coordinate in degrees
        grid: TKY2JGD grid to use instead of the default one

    Raises:
        DegreesError: If the coordinate is out of range
    """

    datum = Datum.TOKYO

    def __init__(self, degrees: LatLon, *, grid: Grid | None = None) -> None:
        super().__init__(degrees)
        self._degrees.validate_degrees()
        self._grid = grid

    def to_jgd2000(self) -> Jgd2000:
        """Transform with the TKY2JGD grid.

        Where the grid has no parameters the coordinate is transformed by
        :meth:`Tokyo97.to_jgd2000` instead, with a much lower accuracy.
        """
        grid = self._grid
        if grid is None:
            grid = GridInterface.load_default(GridName.TKY2JGD)
        if (shift := grid.bilinear(self._degrees)) is not None:
            return Jgd2000(self._degrees + shift)

        logger.debug("No TKY2JGD coverage at %s, using Tokyo97", self._degrees)
        return Tokyo97(self._degrees).to_jgd2000()


class Tokyo97(_Geographic):
    """Tokyo97, defined from ITRF94 by a three parameter transform.

    Coordinates surveyed in the Tokyo Datum are better served by
    :class:`Tokyo`; the three parameters were computed around Tokyo and
    lose accuracy towards Hokkaido and Kyushu.
    """

    datum = Datum.TOKYO97

    #: Translation to ITRF94 in metres
    TO_ITRF94 = ECEF(*TOKYO97_TO_ITRF94)

    def __init__(self, degrees: LatLon) -> None:
        super().__init__(degrees)
        self._degrees.validate_degrees()

    def to_jgd2000(self) -> Jgd2000:
        # JGD2000 uses ITRF94 with the GRS80 ellipsoid
        itrf94 = BESSEL.to_ecef(self._degrees) + self.TO_ITRF94
        return Jgd2000(GRS80.to_geodetic(itrf94))


class Jgd2000(_Geographic):
    """Japanese Geodetic Datum 2000 (EPSG:4612).

    Args:
        degrees: Coordinate in degrees
        grid: PatchJGD grid to use instead of the default one

    Raises:
        DegreesError: If the coordinate is out of range
    """

    datum = Datum.JGD2000

    def __init__(self, degrees: LatLon, *, grid: Grid | None = None) -> None:
        super().__init__(degrees)
        self._degrees.validate_degrees()
        self._grid = grid

    def to_jgd2011(self) -> Jgd2011:
        """Transform with the touhokutaiheiyouoki2011 PatchJGD grid.

        Outside the grid the coordinate is returned unchanged.
        """
        grid = self._grid
        if grid is None:
            grid = GridInterface.load_default(GridName.TOUHOKUTAIHEIYOUOKI2011)
        if (shift := grid.bilinear(self._degrees)) is None:
            return Jgd2011(self._degrees)
        return Jgd2011(self._degrees + shift)

    def to_tokyo97(self) -> Tokyo97:
        """Inverse of :meth:`Tokyo97.to_jgd2000`."""
        itrf94 = GRS80.to_ecef(self._degrees) - Tokyo97.TO_ITRF94
        return Tokyo97(BESSEL.to_geodetic(itrf94))


class Jgd2011(_Geographic):
    """Japanese Geodetic Datum 2011 (EPSG:6668)."""

    datum = Datum.JGD2011

    def __init__(self, degrees: LatLon) -> None:
        super().__init__(degrees)
        self._degrees.validate_degrees()


_DATUM_CLASSES: dict[Datum, type[_Geographic]] = {
    Datum.TOKYO: Tokyo,
    Datum.TOKYO97: Tokyo97,
    Datum.JGD2000: Jgd2000,
    Datum.JGD2011: Jgd2011,
}


def convert(
    degrees: LatLon,
    source: Datum | str,
    target: Datum | str,
    *,
    grids: dict[GridName, Grid] | None = None,
) -> LatLon:
    """Convert a coordinate between two datums.

    Args:
        degrees: Coordinate in the source datum
        source: Source datum
        target: Target datum
        grids: Optional grids overriding the default ones

    Returns:
        Coordinate in the target datum

    Raises:
        ConversionError: If there is no transform from source to target
        DegreesError: If the coordinate is out of range
    """
    source = Datum.normalize(source)
    target = Datum.normalize(target)
    grids = grids or {}
    tky2jgd = grids.get(GridName.TKY2JGD)
    patchjgd = grids.get(GridName.TOUHOKUTAIHEIYOUOKI2011)

    if source == target:
        return _DATUM_CLASSES[source](degrees).degrees

    match (source, target):
        case (Datum.TOKYO, Datum.JGD2000):
            result = Tokyo(degrees, grid=tky2jgd).to_jgd2000()
        case (Datum.TOKYO, Datum.JGD2011):
            jgd2000 = Tokyo(degrees, grid=tky2jgd).to_jgd2000()
            result = Jgd2000(jgd2000.degrees, grid=patchjgd).to_jgd2011()
        case (Datum.TOKYO97, Datum.JGD2000):
            result = Tokyo97(degrees).to_jgd2000()
        case (Datum.TOKYO97, Datum.JGD2011):
            jgd2000 = Tokyo97(degrees).to_jgd2000()
            result = Jgd2000(jgd2000.degrees, grid=patchjgd).to_jgd2011()
        case (Datum.JGD2000, Datum.JGD2011):
            result = Jgd2000(degrees, grid=patchjgd).to_jgd2011()
        case (Datum.JGD2000, Datum.TOKYO97):
            result = Jgd2000(degrees).to_tokyo97()
        case _:
            raise ConversionError(
                f"Unsupported conversion: {source.value} => {target.value}"
            )

    return result.degrees
