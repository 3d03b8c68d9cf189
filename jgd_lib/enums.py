# -*- coding: utf-8 -*-
"""Enumerations for Japanese geodetic datums and parameter grids."""

from enum import Enum

from pyproj import CRS

from jgd_lib.constants import GRID_EXTENSION
from jgd_lib.constants import PAR_EXTENSION


class Severity(str, Enum):
    """Severity level for compile errors.

    Attributes:
        ERROR: Critical error, compilation stops
        WARNING: Non-fatal warning
    """

    ERROR = "error"
    WARNING = "warning"


class Datum(str, Enum):
    """Geodetic datums used in Japan.

    Attributes:
        TOKYO: Tokyo Datum, the older Japanese datum (EPSG:4301)
        TOKYO97: Tokyo97, defined from ITRF94 by a three parameter shift
        JGD2000: Japanese Geodetic Datum 2000 (EPSG:4612)
        JGD2011: Japanese Geodetic Datum 2011 (EPSG:6668)
    """

    TOKYO = "tokyo"
    TOKYO97 = "tokyo97"
    JGD2000 = "jgd2000"
    JGD2011 = "jgd2011"

    @property
    def epsg(self) -> int | None:
        """EPSG code of the geographic CRS, if one is registered."""
        return {
            Datum.TOKYO: 4301,
            Datum.TOKYO97: None,
            Datum.JGD2000: 4612,
            Datum.JGD2011: 6668,
        }[self]

    @property
    def crs(self) -> CRS | None:
        """pyproj CRS of this datum (None for Tokyo97)."""
        if self.epsg is None:
            return None
        return CRS.from_epsg(self.epsg)

    @classmethod
    def normalize(cls, value: "str | Datum | None") -> "Datum | None":
        """Normalize a datum name to a Datum enum value.

        Matching is case-insensitive and ignores spaces, dashes and
        underscores, so ``"JGD 2000"`` and ``"jgd-2000"`` both resolve.

        Raises:
            ValueError: If the datum string is not recognized
        """
        if value is None or isinstance(value, Datum):
            return value

        normalized = "".join(ch for ch in value.lower() if ch not in " -_")
        for datum in cls:
            if datum.value == normalized:
                return datum

        raise ValueError(f"Unknown datum: {value!r}")


class GridName(str, Enum):
    """Parameter grids published by the Geospatial Information Authority.

    Attributes:
        TKY2JGD: Tokyo Datum -> JGD2000 (Ver.2.1.2, 2003)
        TOUHOKUTAIHEIYOUOKI2011: JGD2000 -> JGD2011 correction for the
            2011 Tohoku earthquake (Ver.4.0.0, 2017)
    """

    TKY2JGD = "TKY2JGD"
    TOUHOKUTAIHEIYOUOKI2011 = "touhokutaiheiyouoki2011"

    @property
    def grid_filename(self) -> str:
        """File name of the compiled binary grid."""
        return f"{self.value}{GRID_EXTENSION}"

    @property
    def par_filename(self) -> str:
        """File name of the source parameter file."""
        return f"{self.value}{PAR_EXTENSION}"
