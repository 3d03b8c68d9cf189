# -*- coding: utf-8 -*-
"""Tests for GridInterface and the io wrappers."""

import pytest

from jgd_lib.enums import GridName
from jgd_lib.errors import GridCompileException
from jgd_lib.grid.mesh import Mesh3
from jgd_lib.interface import PACKAGE_DATA_DIR
from jgd_lib.interface import GridInterface
from jgd_lib.interface import data_dir
from jgd_lib.io import compile_par_file
from jgd_lib.io import load_default_grid
from jgd_lib.io import read_grid_file
from jgd_lib.io import write_grid_file


class TestDataDir:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("JGD_LIB_DATA_DIR", raising=False)
        assert data_dir() == PACKAGE_DATA_DIR

    def test_env_var(self, monkeypatch, tmp_path):
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(tmp_path))
        assert data_dir() == tmp_path


class TestCompile:
    """Tests for GridInterface.compile_par."""

    def test_compile(self, par_file):
        grid = GridInterface.compile_par(par_file)
        assert len(grid) == 4
        assert grid[0].mesh == Mesh3(4200, 10800)

    def test_progress(self, par_file):
        """Test that progress is reported while compiling."""
        calls = []

        def on_progress(message=None, completed=None, total=None):
            calls.append((message, completed, total))

        GridInterface.compile_par(par_file, on_progress=on_progress)
        assert calls[0][0].startswith("Reading")
        assert calls[-1] == (None, 4, 4)

    def test_malformed(self, tmp_path):
        path = tmp_path / "bad.par"
        path.write_text(
            "MeshCode   dB(sec)   dL(sec)\n52354000  11.64532\n", encoding="ascii"
        )
        with pytest.raises(GridCompileException) as exc_info:
            GridInterface.compile_par(path)
        assert exc_info.value.location.source == str(path)

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GridInterface.compile_par(tmp_path / "missing.par")

    def test_parse_par(self, par_file):
        records = GridInterface.parse_par(par_file)
        assert len(records) == 4


class TestSaveLoad:
    """Tests for writing and reading binary grids."""

    def test_round_trip(self, tmp_path, smallest_grid, smallest_points):
        path = tmp_path / "grid.in"
        GridInterface.save_grid(smallest_grid, path)
        assert path.stat().st_size == 48

        loaded = GridInterface.load_grid(path)
        assert list(loaded) == smallest_points

    def test_load_bad_length(self, tmp_path):
        path = tmp_path / "grid.in"
        path.write_bytes(b"\x00" * 13)
        with pytest.raises(ValueError, match="multiple of 12"):
            GridInterface.load_grid(path)

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GridInterface.load_grid(tmp_path / "missing.in")

    def test_save_log(self, tmp_path, smallest_grid):
        path = tmp_path / "grid.in.log"
        GridInterface.save_log(smallest_grid, path)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "0000,0000,-0000006,00000000",
            "0000,0001,00000000,00000006",
            "0001,0000,00000000,00000000",
            "0001,0001,00000006,00000006",
        ]


class TestLoadDefault:
    """Tests for GridInterface.load_default."""

    def test_load(self, monkeypatch, grid_dir):
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(grid_dir))
        grid = GridInterface.load_default(GridName.TKY2JGD)
        assert len(grid) == 4

    def test_cached(self, monkeypatch, grid_dir):
        """Test that a default grid is only loaded once."""
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(grid_dir))
        first = GridInterface.load_default(GridName.TKY2JGD)
        (grid_dir / GridName.TKY2JGD.grid_filename).unlink()
        assert GridInterface.load_default(GridName.TKY2JGD) is first

    def test_clear_cache(self, monkeypatch, grid_dir):
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(grid_dir))
        GridInterface.load_default(GridName.TKY2JGD)
        (grid_dir / GridName.TKY2JGD.grid_filename).unlink()
        GridInterface.clear_cache()
        with pytest.raises(FileNotFoundError):
            GridInterface.load_default(GridName.TKY2JGD)

    def test_missing(self, monkeypatch, tmp_path):
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(tmp_path))
        with pytest.raises(FileNotFoundError) as exc_info:
            GridInterface.load_default(GridName.TOUHOKUTAIHEIYOUOKI2011)
        message = str(exc_info.value)
        assert "touhokutaiheiyouoki2011.par" in message
        assert "JGD_LIB_DATA_DIR" in message


class TestIO:
    """Tests for the function wrappers in jgd_lib.io."""

    def test_compile_write_read(self, tmp_path, par_file):
        grid = compile_par_file(par_file)
        path = tmp_path / "out.in"
        write_grid_file(path, grid)
        assert list(read_grid_file(path)) == list(grid)

    def test_load_default_grid_by_name(self, monkeypatch, grid_dir):
        monkeypatch.setenv("JGD_LIB_DATA_DIR", str(grid_dir))
        assert len(load_default_grid("TKY2JGD")) == 4

    def test_load_default_grid_unknown(self):
        with pytest.raises(ValueError):
            load_default_grid("NOT_A_GRID")
