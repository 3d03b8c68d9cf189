# -*- coding: utf-8 -*-
"""File I/O operations for parameter grids.

This module provides function wrappers around GridInterface.

For new code, prefer using GridInterface directly:

    from jgd_lib.interface import GridInterface

    grid = GridInterface.compile_par(Path("TKY2JGD.par"))
    GridInterface.save_grid(grid, Path("TKY2JGD.in"))
"""

from pathlib import Path

from jgd_lib.enums import GridName
from jgd_lib.grid.table import Grid
from jgd_lib.interface import GridInterface
from jgd_lib.interface import ProgressCallback

__all__ = [
    "ProgressCallback",
    "compile_par_file",
    "load_default_grid",
    "read_grid_file",
    "write_grid_file",
]


def compile_par_file(
    path: Path,
    *,
    on_progress: ProgressCallback | None = None,
) -> Grid:
    """Compile a GSI .par file into a sorted grid.

    Args:
        path: Path to the .par file
        on_progress: Optional progress callback

    Returns:
        Compiled grid
    """
    return GridInterface.compile_par(path, on_progress=on_progress)


def read_grid_file(path: Path) -> Grid:
    """Read a compiled binary grid."""
    return GridInterface.load_grid(path)


def write_grid_file(path: Path, grid: Grid) -> None:
    """Write a grid as a compiled binary table."""
    GridInterface.save_grid(grid, path)


def load_default_grid(name: GridName | str) -> Grid:
    """Load a published grid (TKY2JGD or touhokutaiheiyouoki2011)."""
    return GridInterface.load_default(GridName(name))
