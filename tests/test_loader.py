"""Tests for utils/loader.py"""

import json

import pytest

from decomposition import build
from localtypes import Coord
from utils.loader import path_to_grid, path_to_source


def write_json(path, data) -> str:
    path.write_text(json.dumps(data))
    return str(path)


class TestPathToGrid:
    def test_read(self, tmp_path):
        path = write_json(tmp_path / "maze.json", [[2, 0], [1, 2]])
        assert path_to_grid(path) == [[2, 0], [1, 2]]

    def test_not_a_list_of_rows(self, tmp_path):
        path = write_json(tmp_path / "bad.json", {"grid": [[0]]})
        with pytest.raises(ValueError, match="list of rows"):
            path_to_grid(path)

    def test_non_integer_colors(self, tmp_path):
        path = write_json(tmp_path / "bad.json", [[0, "red"]])
        with pytest.raises(ValueError, match="non integer"):
            path_to_grid(path)

    def test_boolean_colors(self, tmp_path):
        path = write_json(tmp_path / "bad.json", [[True, False]])
        with pytest.raises(ValueError, match="non integer"):
            path_to_grid(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            path_to_grid(str(tmp_path / "missing.json"))


class TestPathToSource:
    def test_build_from_file(self, tmp_path):
        path = write_json(tmp_path / "maze.json", [[2, 0, 0], [1, 1, 2]])
        model = build(path_to_source(path))
        assert model.entry == Coord(0, 0)
        assert model.exit == Coord(2, 1)
        assert model.has_solution()

    def test_custom_colors(self, tmp_path):
        path = write_json(tmp_path / "maze.json", [[8, 5, 8]])
        model = build(path_to_source(path, background=5, marker=8))
        assert model.has_solution()
