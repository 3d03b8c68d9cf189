# -*- coding: utf-8 -*-
"""Constants used throughout the jgd_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding of the GSI parameter (.par) files
PAR_ENCODING = "ascii"

#: Encoding used for plain text input/output of the CLI
TEXT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Angular Units (expressed in degrees)
# -----------------------------------------------------------------------------

DEGREES: float = 1.0
MINUTES: float = DEGREES * 60.0
SECS: float = MINUTES * 60.0
MILLI_SECS: float = SECS * 1_000.0
MICRO_SECS: float = MILLI_SECS * 1_000.0

#: Integer micro-arcseconds per arcsecond
MICRO_SECS_PER_SEC: int = 1_000_000

# -----------------------------------------------------------------------------
# 3rd Level Mesh
# -----------------------------------------------------------------------------

#: Height of a 3rd level mesh in arcseconds
MESH3_LAT_SEC: float = 30.0

#: Width of a 3rd level mesh in arcseconds
MESH3_LON_SEC: float = 45.0

#: 3rd level meshes per degree of latitude (3600 / 30)
MESH3_PER_LAT_DEGREE: float = 120.0

#: 3rd level meshes per degree of longitude (3600 / 45)
MESH3_PER_LON_DEGREE: float = 80.0

#: 1st level longitude codes count degrees east of this meridian
MESH1_LON_OFFSET: int = 100

# -----------------------------------------------------------------------------
# Binary Table Layout
# -----------------------------------------------------------------------------

#: Size of one packed record: i16 + i16 + i32 + i32
RECORD_SIZE: int = 12

INT16_MIN: int = -(2**15)
INT16_MAX: int = 2**15 - 1
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# -----------------------------------------------------------------------------
# Parameter File Layout
# -----------------------------------------------------------------------------

#: Column header that ends the preamble of a .par file
PAR_HEADER: str = "MeshCode   dB(sec)   dL(sec)"

#: Widths of the six mesh code columns (lat1, lon1, lat2, lon2, lat3, lon3)
PAR_MESH_WIDTHS: tuple[int, ...] = (2, 2, 1, 1, 1, 1)

#: Width of the integer part of a shift column
PAR_INTEGER_WIDTH: int = 4

#: Width of the fractional part of a shift column
PAR_FRACTION_WIDTH: int = 5

# -----------------------------------------------------------------------------
# Datum Transformation
# -----------------------------------------------------------------------------

#: Translation from Tokyo97 (Bessel) to ITRF94 (GRS80), in metres
TOKYO97_TO_ITRF94: tuple[float, float, float] = (-146.414, 507.337, 680.507)

# -----------------------------------------------------------------------------
# Grid Files
# -----------------------------------------------------------------------------

#: Environment variable pointing at the directory of compiled grids
DATA_DIR_ENV_VAR: str = "JGD_LIB_DATA_DIR"

#: Extension of compiled binary grids
GRID_EXTENSION: str = ".in"

#: Extension of GSI parameter files
PAR_EXTENSION: str = ".par"

#: Decimal places used when printing coordinates in degrees
COORDINATE_PRECISION: int = 9
