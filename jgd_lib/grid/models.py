# -*- coding: utf-8 -*-
"""Grid data models.

- RECORD_DTYPE: numpy layout of one packed 12 byte binary record
- GridPoint: a mesh corner and its measured shift
- ParRecord: one validated line of a GSI parameter (.par) file

``ParRecord`` bounds every field to the width it is packed into, so a
value that would overflow the binary table is rejected while parsing.
"""

from __future__ import annotations

from typing import Annotated
from typing import NamedTuple

import numpy as np
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from jgd_lib.constants import INT16_MAX
from jgd_lib.constants import INT16_MIN
from jgd_lib.constants import INT32_MAX
from jgd_lib.constants import INT32_MIN
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.shift import MicroSecond

#: One binary record, little-endian, no padding
RECORD_DTYPE = np.dtype(
    [
        ("lat", "<i2"),
        ("lon", "<i2"),
        ("dlat", "<i4"),
        ("dlon", "<i4"),
    ]
)

Int16 = Annotated[int, Field(ge=INT16_MIN, le=INT16_MAX)]
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class GridPoint(NamedTuple):
    """A parameter on the south-west corner of a 3rd level mesh."""

    mesh: Mesh3
    shift: MicroSecond


class ParRecord(BaseModel):
    """A single record of a parameter file, ready to be packed.

    Attributes:
        mesh_lat: serial latitude index of the mesh
        mesh_lon: serial longitude index of the mesh
        shift_lat: latitude shift (dB) in micro-arcseconds
        shift_lon: longitude shift (dL) in micro-arcseconds
    """

    model_config = ConfigDict(frozen=True, strict=True)

    mesh_lat: Int16
    mesh_lon: Int16
    shift_lat: Int32
    shift_lon: Int32

    @property
    def mesh(self) -> Mesh3:
        return Mesh3(self.mesh_lat, self.mesh_lon)

    @property
    def shift(self) -> MicroSecond:
        return MicroSecond(self.shift_lat, self.shift_lon)

    def to_point(self) -> GridPoint:
        return GridPoint(self.mesh, self.shift)
