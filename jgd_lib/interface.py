# -*- coding: utf-8 -*-
"""Unified interface for parameter grid I/O.

This module provides the primary entry point for compiling, writing and
loading grids:

1. The parser turns a .par file into validated ``ParRecord`` objects
2. The compiler deduplicates and sorts them into a packed array
3. The packed array is written as a flat binary table
4. At runtime the binary table is loaded once as a read-only ``Grid``

Compiled default grids are looked up in the directory named by the
``JGD_LIB_DATA_DIR`` environment variable, or in the ``data`` directory
shipped inside the package.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from jgd_lib.constants import DATA_DIR_ENV_VAR
from jgd_lib.constants import PAR_ENCODING
from jgd_lib.constants import TEXT_ENCODING
from jgd_lib.enums import GridName
from jgd_lib.errors import GridCompileError
from jgd_lib.grid.compiler import compile_records
from jgd_lib.grid.format import format_records
from jgd_lib.grid.format import to_bytes
from jgd_lib.grid.models import ParRecord
from jgd_lib.grid.parser import ParFileParser
from jgd_lib.grid.table import Grid

logger = logging.getLogger(__name__)

#: Directory of compiled grids shipped with the package
PACKAGE_DATA_DIR = Path(__file__).parent / "data"

# Cache of loaded default grids (grid name -> grid)
_grid_cache: dict[GridName, Grid] = {}


class ProgressCallback(Protocol):
    """Protocol for progress callbacks."""

    def __call__(
        self,
        message: str | None = None,
        completed: int | None = None,
        total: int | None = None,
    ) -> None:
        """Report progress."""
        ...


def data_dir() -> Path:
    """Directory holding the compiled default grids."""
    if env := os.environ.get(DATA_DIR_ENV_VAR):
        return Path(env)
    return PACKAGE_DATA_DIR


class GridInterface:
    """Unified interface for grid I/O.

    Example:
        # Compile a parameter file once
        grid = GridInterface.compile_par(Path("TKY2JGD.par"))
        GridInterface.save_grid(grid, Path("TKY2JGD.in"))

        # Load it at runtime
        grid = GridInterface.load_grid(Path("TKY2JGD.in"))
    """

    # -------------------------------------------------------------------------
    # Compiling (.par -> Grid)
    # -------------------------------------------------------------------------

    @classmethod
    def parse_par(
        cls,
        path: Path,
        *,
        encoding: str = PAR_ENCODING,
    ) -> list[ParRecord]:
        """Parse a .par file without compiling it."""
        return ParFileParser().parse_file(path, encoding=encoding)

    @classmethod
    def compile_par(
        cls,
        path: Path,
        *,
        encoding: str = PAR_ENCODING,
        on_progress: ProgressCallback | None = None,
        warnings: list[GridCompileError] | None = None,
    ) -> Grid:
        """Parse and compile a .par file into a sorted grid.

        Args:
            path: Path to the .par file
            encoding: Character encoding (default: ASCII)
            on_progress: Optional progress callback
            warnings: Optional list collecting non-fatal compile warnings

        Returns:
            Compiled grid

        Raises:
            GridCompileException: On malformed or conflicting records
            FileNotFoundError: If the .par file doesn't exist
        """
        if on_progress:
            on_progress(message=f"Reading {path}")

        records = cls.parse_par(path, encoding=encoding)

        if on_progress:
            on_progress(message="Compiling", completed=0, total=len(records))

        grid = Grid(compile_records(records, warnings=warnings))

        if on_progress:
            on_progress(completed=len(records), total=len(records))

        return grid

    # -------------------------------------------------------------------------
    # Saving Methods (Grid -> File)
    # -------------------------------------------------------------------------

    @classmethod
    def save_grid(cls, grid: Grid, path: Path) -> None:
        """Write a grid as a flat binary table."""
        path.write_bytes(to_bytes(grid.records))
        logger.info("Wrote %d grid points to %s", len(grid), path)

    @classmethod
    def save_log(cls, grid: Grid, path: Path) -> None:
        """Write the human-readable compile log of a grid."""
        path.write_text(format_records(grid), encoding=TEXT_ENCODING)

    # -------------------------------------------------------------------------
    # Loading Methods (File -> Grid)
    # -------------------------------------------------------------------------

    @classmethod
    def load_grid(cls, path: Path) -> Grid:
        """Load a compiled binary table.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a whole number of records
        """
        grid = Grid.from_bytes(path.read_bytes())
        logger.debug("Loaded %d grid points from %s", len(grid), path)
        return grid

    @classmethod
    def load_default(cls, name: GridName) -> Grid:
        """Load one of the published grids, caching it for the process.

        Raises:
            FileNotFoundError: If the grid has not been compiled into the
                data directory
        """
        if (grid := _grid_cache.get(name)) is not None:
            return grid

        path = data_dir() / name.grid_filename
        if not path.exists():
            raise FileNotFoundError(
                f"Grid {name.value} not found at {path}. Compile it with "
                f"`jgd_lib compile -i {name.par_filename} -o {path}` or set "
                f"{DATA_DIR_ENV_VAR}."
            )

        grid = cls.load_grid(path)
        _grid_cache[name] = grid
        return grid

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all loaded default grids."""
        _grid_cache.clear()
