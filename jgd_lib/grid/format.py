# -*- coding: utf-8 -*-
"""Formatting (serialization) for compiled grids.

- Binary: flat little-endian 12 byte records ``{i16, i16, i32, i32}``,
  no header, no padding. The record count is the length divided by 12.
- Text: one ``lat,lon,dlat,dlon`` line per point, the compile log that is
  kept next to each binary table for review.
"""

from collections.abc import Iterable

import numpy as np

from jgd_lib.grid.models import RECORD_DTYPE
from jgd_lib.grid.models import GridPoint


def to_bytes(records: np.ndarray) -> bytes:
    """Encode a structured array of records as the binary table."""
    return np.ascontiguousarray(records, dtype=RECORD_DTYPE).tobytes()


def format_record(point: GridPoint) -> str:
    """Format a point as a compile log line.

    Example:
        ``GridPoint(Mesh3(5463, 11356), MicroSecond(7875320, -13995610))``
        is written as ``5463,11356,07875320,-13995610``.
    """
    mesh, shift = point
    return f"{mesh.lat:04d},{mesh.lon:04d},{shift.lat:08d},{shift.lon:08d}"


def format_records(points: Iterable[GridPoint]) -> str:
    """Format points as a compile log, one line per point."""
    lines = [format_record(point) for point in points]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
