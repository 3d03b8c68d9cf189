# -*- coding: utf-8 -*-
"""Tests for compiling parsed records into a sorted table."""

import logging
import random

import numpy as np
import pytest

from jgd_lib.enums import Severity
from jgd_lib.errors import GridCompileException
from jgd_lib.grid.compiler import compile_grid
from jgd_lib.grid.compiler import compile_records
from jgd_lib.grid.format import format_record
from jgd_lib.grid.format import format_records
from jgd_lib.grid.format import to_bytes
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.grid.models import RECORD_DTYPE
from jgd_lib.grid.models import GridPoint
from jgd_lib.grid.models import ParRecord
from jgd_lib.grid.parser import ParFileParser
from jgd_lib.grid.shift import MicroSecond
from jgd_lib.grid.table import Grid
from jgd_lib.models import LatLon


def record(lat: int, lon: int, dlat: int = 0, dlon: int = 0) -> ParRecord:
    return ParRecord(mesh_lat=lat, mesh_lon=lon, shift_lat=dlat, shift_lon=dlon)


def meshes(records: np.ndarray) -> list[tuple[int, int]]:
    return list(zip(records["lat"].tolist(), records["lon"].tolist()))


class TestCompileRecords:
    """Tests for compile_records."""

    def test_sorted_input(self):
        records = compile_records([record(0, 0), record(0, 1), record(1, 0)])
        assert records.dtype == RECORD_DTYPE
        assert meshes(records) == [(0, 0), (0, 1), (1, 0)]

    def test_shuffled_input(self):
        """Test that any input order yields a strictly ascending table."""
        expected = [(lat, lon) for lat in range(5) for lon in range(-3, 4)]
        shuffled = [record(lat, lon, lat, lon) for lat, lon in expected]
        random.Random(1234).shuffle(shuffled)

        records = compile_records(shuffled)
        assert meshes(records) == expected

    def test_sorted_tail(self):
        """Test a file that runs out of order near its end."""
        records = compile_records(
            [record(0, 0), record(2, 0), record(3, 0), record(1, 0), record(1, 1)]
        )
        assert meshes(records) == [(0, 0), (1, 0), (1, 1), (2, 0), (3, 0)]

    def test_out_of_order_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="jgd_lib.grid.compiler"):
            compile_records([record(1, 0), record(0, 0)])
        assert "out of order" in caplog.text

    def test_duplicates_dropped(self):
        """Test that exact repeats collapse to one point."""
        records = compile_records(
            [record(0, 0, 5, 6), record(0, 1, 1, 1), record(0, 0, 5, 6)]
        )
        assert meshes(records) == [(0, 0), (0, 1)]
        assert records["dlat"].tolist() == [5, 1]

    def test_conflicting_duplicate(self):
        with pytest.raises(GridCompileException, match="Conflicting shifts"):
            compile_records([record(0, 0, 5, 6), record(0, 0, 5, 7)])

    def test_warning_records(self):
        """Test that unsorted input and duplicates are reported as warnings."""
        warnings = []
        compile_records(
            [record(1, 0), record(0, 0), record(1, 0)],
            warnings=warnings,
        )
        assert [w.severity for w in warnings] == [Severity.WARNING] * 2
        assert "out of order" in warnings[0].message
        assert warnings[1].message == "Dropped 1 duplicate records"

    def test_no_warnings(self):
        warnings = []
        compile_records([record(0, 0), record(0, 1)], warnings=warnings)
        assert warnings == []

    def test_duplicate_text_lines(self):
        """Test that a line repeated verbatim in a file compiles to one point."""
        records = ParFileParser().parse_string(
            "MeshCode   dB(sec)   dL(sec)\n"
            "52354000  11.64532  -9.98765\n"
            "52354000  11.64532  -9.98765\n"
        )
        compiled = compile_records(records)
        assert len(compiled) == 1
        assert compiled[0].tolist() == (4200, 10800, 11_645_320, -9_987_650)

    def test_conflicting_text_lines(self):
        records = ParFileParser().parse_string(
            "MeshCode   dB(sec)   dL(sec)\n"
            "52354000  11.64532  -9.98765\n"
            "52354000  11.64532  -9.98766\n"
        )
        with pytest.raises(GridCompileException, match="Conflicting shifts"):
            compile_records(records)

    def test_empty(self):
        records = compile_records([])
        assert len(records) == 0
        assert records.dtype == RECORD_DTYPE

    def test_values_preserved(self):
        records = compile_records([record(4200, 10800, 11_645_320, -9_987_650)])
        assert records[0].tolist() == (4200, 10800, 11_645_320, -9_987_650)


class TestCompileGrid:
    """Tests for compile_grid."""

    def test_compile_and_lookup(self, par_text):
        records = ParFileParser().parse_string(par_text)
        grid = compile_grid(reversed(records))

        assert isinstance(grid, Grid)
        assert [p.mesh for p in grid] == [
            Mesh3(4200, 10800),
            Mesh3(4200, 10801),
            Mesh3(4201, 10800),
            Mesh3(4201, 10801),
        ]

        # South-west corner at 35°N 135°E
        shift = grid.bilinear(LatLon(35.0, 135.0))
        assert shift is not None
        expected = MicroSecond(11_645_320, -9_987_650).to_degrees()
        assert shift.lat == pytest.approx(expected.lat)
        assert shift.lon == pytest.approx(expected.lon)

    def test_matches_points(self, smallest_points):
        records = [
            record(p.mesh.lat, p.mesh.lon, p.shift.lat, p.shift.lon)
            for p in reversed(smallest_points)
        ]
        assert list(compile_grid(records)) == smallest_points


class TestFormat:
    """Tests for the binary and compile log formats."""

    def test_to_bytes_size(self, smallest_grid):
        assert len(to_bytes(smallest_grid.records)) == 48

    def test_to_bytes_matches_grid(self, smallest_grid):
        assert to_bytes(smallest_grid.records) == smallest_grid.to_bytes()

    def test_format_record(self):
        point = GridPoint(Mesh3(5463, 11356), MicroSecond(7875320, -13995610))
        assert format_record(point) == "5463,11356,07875320,-13995610"

    def test_format_record_padding(self):
        point = GridPoint(Mesh3(1, 2), MicroSecond(3, -4))
        assert format_record(point) == "0001,0002,00000003,-0000004"

    def test_format_records(self, smallest_grid):
        text = format_records(smallest_grid)
        lines = text.splitlines()
        assert len(lines) == 4
        assert lines[0] == "0000,0000,-0000006,00000000"
        assert text.endswith("\n")

    def test_format_records_empty(self):
        assert format_records([]) == ""
