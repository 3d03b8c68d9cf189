# -*- coding: utf-8 -*-
"""Japanese Geodetic Datum Library.

A Python library for transforming coordinates between the geodetic datums
used in Japan (Tokyo Datum, Tokyo97, JGD2000, JGD2011), using the GSI
TKY2JGD / PatchJGD parameter grids and the Tokyo97 three parameter shift.

Usage:
    # Compile a GSI parameter file once
    from jgd_lib import GridInterface
    grid = GridInterface.compile_par(Path("TKY2JGD.par"))
    GridInterface.save_grid(grid, Path("TKY2JGD.in"))

    # Transform coordinates
    from jgd_lib import LatLon, Tokyo
    lat, lon = Tokyo(LatLon(35.0, 135.0)).to_jgd2000().to_jgd2011().degrees

    # Or by datum name
    from jgd_lib import convert
    lat, lon = convert(LatLon(35.0, 135.0), "tokyo", "jgd2011")

Limitations:
    Only geographic coordinates on land in Japan are supported. Planar
    rectangular coordinates are not.
"""

__version__ = "0.1.0"

# Constants
from jgd_lib.constants import MICRO_SECS
from jgd_lib.constants import SECS

# Datums
from jgd_lib.crs import Jgd2000
from jgd_lib.crs import Jgd2011
from jgd_lib.crs import Tokyo
from jgd_lib.crs import Tokyo97
from jgd_lib.crs import convert

# Ellipsoids
from jgd_lib.earth import BESSEL
from jgd_lib.earth import GRS80
from jgd_lib.earth import Ellipsoid

# Enums
from jgd_lib.enums import Datum
from jgd_lib.enums import GridName
from jgd_lib.enums import Severity

# Errors
from jgd_lib.errors import ConversionError
from jgd_lib.errors import DegreesError
from jgd_lib.errors import GridCompileError
from jgd_lib.errors import GridCompileException
from jgd_lib.errors import SourceLocation

# Grid
from jgd_lib.grid.interpolation import BilinearInterpolator
from jgd_lib.grid.interpolation import GridInterpolator
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import GridPoint
from jgd_lib.grid.shift import MicroSecond
from jgd_lib.grid.table import Grid

# I/O
from jgd_lib.interface import GridInterface
from jgd_lib.io import compile_par_file
from jgd_lib.io import load_default_grid
from jgd_lib.io import read_grid_file
from jgd_lib.io import write_grid_file

# Models
from jgd_lib.models import ECEF
from jgd_lib.models import Dms
from jgd_lib.models import LatLon

__all__ = [
    "BESSEL",
    "ECEF",
    "GRS80",
    "MICRO_SECS",
    "SECS",
    "BilinearInterpolator",
    "ConversionError",
    "Datum",
    "DegreesError",
    "Dms",
    "Ellipsoid",
    "Grid",
    "GridCompileError",
    "GridCompileException",
    "GridInterface",
    "GridInterpolator",
    "GridName",
    "GridPoint",
    "Jgd2000",
    "Jgd2011",
    "LatLon",
    "Mesh3",
    "MicroSecond",
    "Severity",
    "SourceLocation",
    "Tokyo",
    "Tokyo97",
    "compile_par_file",
    "convert",
    "load_default_grid",
    "read_grid_file",
    "write_grid_file",
]
