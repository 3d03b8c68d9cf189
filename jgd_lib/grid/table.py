# -*- coding: utf-8 -*-
"""Sorted, immutable table of grid points.

The table is a single contiguous numpy structured array whose rows are
sorted by ``(lat, lon)`` with no duplicate meshes. That order is established
by the compiler and is **not** re-checked here: an unsorted table silently
yields misses or wrong corners.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from typing import TYPE_CHECKING

import numpy as np

from jgd_lib.constants import RECORD_SIZE
from jgd_lib.grid.interpolation import BILINEAR
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import RECORD_DTYPE
from jgd_lib.grid.models import GridPoint
from jgd_lib.grid.shift import MicroSecond

if TYPE_CHECKING:
    from jgd_lib.models import LatLon

# Offset that maps a signed int16 longitude into [0, 65536)
_LON_BIAS = 1 << 15
_LAT_STRIDE = 1 << 16


def _mesh_key(lat: int, lon: int) -> int:
    """Integer key whose natural order is the (lat, lon) mesh order."""
    return lat * _LAT_STRIDE + (lon + _LON_BIAS)


class Grid:
    """Parameter grid backed by a read-only array of packed records.

    Example:
        grid = Grid.from_bytes(Path("TKY2JGD.in").read_bytes())
        shift = grid.bilinear(LatLon(35.0, 135.0))
    """

    def __init__(self, records: np.ndarray) -> None:
        if records.dtype != RECORD_DTYPE:
            records = records.astype(RECORD_DTYPE)
        records = np.ascontiguousarray(records)
        records.flags.writeable = False
        self._records = records

        keys = _mesh_key(
            records["lat"].astype(np.int64),
            records["lon"].astype(np.int64),
        )
        keys.flags.writeable = False
        self._keys = keys

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes) -> Grid:
        """Load a grid from a compiled binary blob.

        Raises:
            ValueError: If the blob is not a whole number of records
        """
        if len(data) % RECORD_SIZE:
            raise ValueError(
                f"Grid data length {len(data)} is not a multiple of {RECORD_SIZE}"
            )
        return cls(np.frombuffer(data, dtype=RECORD_DTYPE))

    @classmethod
    def from_points(cls, points: Iterable[GridPoint]) -> Grid:
        """Build a grid from points that are already sorted by mesh."""
        rows = [
            (mesh.lat, mesh.lon, shift.lat, shift.lon) for mesh, shift in points
        ]
        return cls(np.array(rows, dtype=RECORD_DTYPE))

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> GridPoint:
        lat, lon, dlat, dlon = self._records[index].tolist()
        return GridPoint(Mesh3(lat, lon), MicroSecond(dlat, dlon))

    def __iter__(self) -> Iterator[GridPoint]:
        for lat, lon, dlat, dlon in self._records.tolist():
            yield GridPoint(Mesh3(lat, lon), MicroSecond(dlat, dlon))

    def __repr__(self) -> str:
        return f"Grid(points={len(self)})"

    @property
    def records(self) -> np.ndarray:
        """The underlying read-only structured array."""
        return self._records

    def to_bytes(self) -> bytes:
        return self._records.tobytes()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def search_after(self, first: int, mesh: Mesh3) -> int | None:
        """Binary search for ``mesh`` among the points from ``first`` on.

        Returns:
            Absolute index of the point, or None if absent
        """
        if not 0 <= first <= len(self._keys):
            return None
        key = _mesh_key(mesh.lat, mesh.lon)
        keys = self._keys[first:]
        i = int(np.searchsorted(keys, key))
        if i < len(keys) and keys[i] == key:
            return first + i
        return None

    def search_at(self, index: int, mesh: Mesh3) -> int | None:
        """Return ``index`` if the point stored there is exactly ``mesh``."""
        if not 0 <= index < len(self._keys):
            return None
        if self._keys[index] != _mesh_key(mesh.lat, mesh.lon):
            return None
        return index

    def shift_at(self, index: int) -> MicroSecond:
        row = self._records[index]
        return MicroSecond(int(row["dlat"]), int(row["dlon"]))

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def bilinear(self, p: LatLon) -> LatLon | None:
        """Bilinear interpolation of the shift at ``p``.

        All four corners of the mesh containing ``p`` must be present in
        the grid; if any of them is missing the result is None.
        """
        return BILINEAR.interpolate(self, p)
