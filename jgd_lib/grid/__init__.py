# -*- coding: utf-8 -*-
"""Grid module: mesh index, packed records, sorted table and compiler."""

from jgd_lib.grid.compiler import compile_grid
from jgd_lib.grid.compiler import compile_records
from jgd_lib.grid.format import format_record
from jgd_lib.grid.format import format_records
from jgd_lib.grid.format import to_bytes
from jgd_lib.grid.interpolation import BilinearInterpolator
from jgd_lib.grid.interpolation import GridInterpolator
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import RECORD_DTYPE
from jgd_lib.grid.models import GridPoint
from jgd_lib.grid.models import ParRecord
from jgd_lib.grid.parser import ParFileParser
from jgd_lib.grid.shift import MicroSecond
from jgd_lib.grid.table import Grid

__all__ = [
    "RECORD_DTYPE",
    "BilinearInterpolator",
    "Grid",
    "GridInterpolator",
    "GridPoint",
    "Mesh3",
    "MicroSecond",
    "ParFileParser",
    "ParRecord",
    "compile_grid",
    "compile_records",
    "format_record",
    "format_records",
    "to_bytes",
]
