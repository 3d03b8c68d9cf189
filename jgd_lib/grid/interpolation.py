# -*- coding: utf-8 -*-
"""Interpolation of shifts from a parameter grid.

To implement a new interpolation method:

1. Subclass ``GridInterpolator``.
2. Implement the ``interpolate`` method.

An interpolator receives a :class:`~jgd_lib.grid.table.Grid` and a query
coordinate and returns the shift in degrees, or None when the grid does
not cover the coordinate. A coverage miss is a normal result, never an
exception; the caller decides on a fallback.
"""

from __future__ import annotations

import logging
from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING

from jgd_lib.grid.mesh import Mesh3

if TYPE_CHECKING:
    from jgd_lib.grid.table import Grid
    from jgd_lib.models import LatLon

logger = logging.getLogger(__name__)


class GridInterpolator(ABC):
    """Abstract base class for grid interpolation methods."""

    @property
    def name(self) -> str:
        """Human-readable name of the method (for logging)."""
        return self.__class__.__name__

    @abstractmethod
    def interpolate(self, grid: Grid, p: LatLon) -> LatLon | None:
        """Interpolate the shift at ``p``.

        Args:
            grid: Sorted parameter grid
            p: Query coordinate in degrees

        Returns:
            Shift in degrees, or None if the grid does not cover ``p``
        """
        ...


class BilinearInterpolator(GridInterpolator):
    """Bilinear interpolation over the four corners of a 3rd level mesh.

    The corners are looked up in table order (SW, SE, NW, NE), each search
    starting after the previous hit. SE and NE must sit right after SW and
    NW respectively, since nothing sorts between (lat, lon) and
    (lat, lon + 1).
    """

    def interpolate(self, grid: Grid, p: LatLon) -> LatLon | None:
        mesh = Mesh3.floor(p)

        i = grid.search_after(0, mesh)
        if i is None:
            return self._miss(mesh, "south-west")
        sw_shift = grid.shift_at(i)

        i = grid.search_at(i + 1, mesh.east())
        if i is None:
            return self._miss(mesh, "south-east")
        se_shift = grid.shift_at(i)

        i = grid.search_after(i + 1, mesh.north())
        if i is None:
            return self._miss(mesh, "north-west")
        nw_shift = grid.shift_at(i)

        i = grid.search_at(i + 1, mesh.north().east())
        if i is None:
            return self._miss(mesh, "north-east")
        ne_shift = grid.shift_at(i)

        # Complements are measured from the NE corner, not as 1 - weight.
        n_weight, e_weight = mesh.diagonal_weight(p)
        s_weight, w_weight = mesh.north().east().diagonal_weight(p)

        return (
            sw_shift.to_degrees() * s_weight * w_weight
            + se_shift.to_degrees() * s_weight * e_weight
            + nw_shift.to_degrees() * n_weight * w_weight
            + ne_shift.to_degrees() * n_weight * e_weight
        )

    @staticmethod
    def _miss(mesh: Mesh3, corner: str) -> None:
        logger.debug("No %s corner for mesh %s", corner, mesh)
        return None


#: Shared stateless instance
BILINEAR = BilinearInterpolator()
