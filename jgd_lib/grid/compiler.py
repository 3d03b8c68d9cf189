# -*- coding: utf-8 -*-
"""Compile parsed parameter records into a sorted binary table.

The GSI source files are not reliably sorted (TKY2JGD.par is out of order
from line 378632 onwards) and may repeat records. Input is therefore
treated as an unordered multiset:

- exact repeats of a (mesh, shift) record collapse to one point;
- a mesh that appears again with a *different* shift aborts compilation;
- the output is sorted by (lat, lon) mesh order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from jgd_lib.enums import Severity
from jgd_lib.errors import GridCompileError
from jgd_lib.errors import GridCompileException
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import RECORD_DTYPE
from jgd_lib.grid.models import ParRecord
from jgd_lib.grid.shift import MicroSecond
from jgd_lib.grid.table import Grid

logger = logging.getLogger(__name__)


def compile_records(
    records: Iterable[ParRecord],
    *,
    warnings: list[GridCompileError] | None = None,
) -> np.ndarray:
    """Deduplicate and sort records into a structured array.

    Args:
        records: Parsed records in any order
        warnings: If given, WARNING records are appended for unsorted input
            and dropped duplicates

    Returns:
        Array of ``RECORD_DTYPE`` strictly ascending by mesh

    Raises:
        GridCompileException: If a mesh is given two different shifts
    """
    shifts: dict[Mesh3, MicroSecond] = {}
    duplicates = 0
    out_of_order = 0
    previous: Mesh3 | None = None

    for record in records:
        mesh, shift = record.mesh, record.shift

        if previous is not None and mesh < previous:
            out_of_order += 1
        previous = mesh

        if (known := shifts.get(mesh)) is None:
            shifts[mesh] = shift
            continue

        if known != shift:
            raise GridCompileException(
                f"Conflicting shifts for mesh {tuple(mesh)}: "
                f"{tuple(known)} and {tuple(shift)}"
            )
        duplicates += 1
        logger.debug("Dropped duplicate record for mesh %s", tuple(mesh))

    reports: list[GridCompileError] = []
    if out_of_order:
        reports.append(
            GridCompileError(
                severity=Severity.WARNING,
                message=(
                    f"{out_of_order} records were out of order and have been sorted"
                ),
            )
        )
    if duplicates:
        reports.append(
            GridCompileError(
                severity=Severity.WARNING,
                message=f"Dropped {duplicates} duplicate records",
            )
        )
    for report in reports:
        logger.warning("%s", report.message)
    if warnings is not None:
        warnings.extend(reports)

    rows = [
        (mesh.lat, mesh.lon, shift.lat, shift.lon)
        for mesh, shift in sorted(shifts.items())
    ]
    logger.info("Compiled %d grid points", len(rows))
    return np.array(rows, dtype=RECORD_DTYPE)


def compile_grid(
    records: Iterable[ParRecord],
    *,
    warnings: list[GridCompileError] | None = None,
) -> Grid:
    """Compile records straight into a queryable :class:`Grid`."""
    return Grid(compile_records(records, warnings=warnings))
