# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides small hand-made grids and parameter files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from jgd_lib.enums import GridName
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import GridPoint
from jgd_lib.grid.shift import MicroSecond
from jgd_lib.grid.table import Grid
from jgd_lib.interface import GridInterface

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


@pytest.fixture(autouse=True)
def _clear_grid_cache():
    """Do not leak loaded default grids between tests."""
    GridInterface.clear_cache()
    yield
    GridInterface.clear_cache()


# =============================================================================
# Hand-made grids
# =============================================================================

# Shifts (lat, lon) in micro-arcseconds at each corner:
#
#   (0, 0) --- (6, 6)
#     |           | 30"
#  (-6, 0) --- (0, 6)
#          45"
SMALLEST_POINTS = [
    GridPoint(Mesh3(lat=0, lon=0), MicroSecond(lat=-6, lon=0)),
    GridPoint(Mesh3(lat=0, lon=1), MicroSecond(lat=0, lon=6)),
    GridPoint(Mesh3(lat=1, lon=0), MicroSecond(lat=0, lon=0)),
    GridPoint(Mesh3(lat=1, lon=1), MicroSecond(lat=6, lon=6)),
]


@pytest.fixture
def smallest_points() -> list[GridPoint]:
    return list(SMALLEST_POINTS)


@pytest.fixture
def smallest_grid() -> Grid:
    """A single mesh with four corners."""
    return Grid.from_points(SMALLEST_POINTS)


@pytest.fixture
def empty_grid() -> Grid:
    return Grid.from_points([])


# =============================================================================
# Parameter files
# =============================================================================

PAR_PREAMBLE = """JGD2000 TKY2JGD Ver.2.1.2 (test excerpt)
MeshCode   dB(sec)   dL(sec)
"""

# Mesh 5235-40-00 is the south-west corner at 35°N 135°E
PAR_BODY = """52354000  11.64532  -9.98765
52354001  11.64600  -9.98800
52354010  11.65000  -9.99000
52354011  11.65100  -9.99100
"""


@pytest.fixture
def par_text() -> str:
    return PAR_PREAMBLE + PAR_BODY


@pytest.fixture
def par_file(tmp_path: Path, par_text: str) -> Path:
    path = tmp_path / "TKY2JGD.par"
    path.write_text(par_text.replace("\n", "\r\n"), encoding="ascii", newline="")
    return path


@pytest.fixture
def grid_dir(tmp_path: Path, par_file: Path) -> Path:
    """A data directory holding a compiled TKY2JGD grid."""
    out = tmp_path / "grids"
    out.mkdir()
    grid = GridInterface.compile_par(par_file)
    GridInterface.save_grid(grid, out / GridName.TKY2JGD.grid_filename)
    return out
