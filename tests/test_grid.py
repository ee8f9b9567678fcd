"""Tests for utils/grid.py"""

import numpy as np
import pytest

from localtypes import Classification, PixelSource
from utils.grid import ColorGridSource, GridOperations, MaskSource


class TestGridOperations:
    def test_proportions(self):
        assert GridOperations.proportions([[0, 1, 2], [3, 4, 5]]) == (3, 2)
        assert GridOperations.proportions([]) == (0, 0)

    def test_copy_is_deep(self):
        grid = [[0, 1], [2, 3]]
        copy = GridOperations.copy(grid)
        copy[0][0] = 9
        assert grid == [[0, 1], [2, 3]]

    def test_ragged_grid(self):
        with pytest.raises(ValueError, match="Row 1"):
            GridOperations.check_rectangular([[0, 0], [0]])

    def test_empty_rows(self):
        with pytest.raises(ValueError, match="empty rows"):
            GridOperations.check_rectangular([[], []])


class TestColorGridSource:
    def test_is_pixel_source(self):
        assert isinstance(ColorGridSource([[0]]), PixelSource)

    def test_proportions(self):
        source = ColorGridSource([[0, 1, 2], [3, 4, 5]])
        assert source.width() == 3
        assert source.height() == 2

    def test_classification(self):
        source = ColorGridSource([[0, 1, 5]])
        assert source.classification(0, 0) == Classification.BACKGROUND
        assert source.classification(1, 0) == Classification.FOREGROUND
        assert source.classification(2, 0) == Classification.FOREGROUND

    def test_marker(self):
        source = ColorGridSource([[0, 2]])
        assert not source.is_marker(0, 0)
        assert source.is_marker(1, 0)
        source.clear_marker(1, 0)
        assert not source.is_marker(1, 0)
        assert source.classification(1, 0) == Classification.BACKGROUND

    def test_custom_colors(self):
        source = ColorGridSource([[7, 0, 4]], background=7, marker=4)
        assert source.classification(0, 0) == Classification.BACKGROUND
        assert source.classification(1, 0) == Classification.FOREGROUND
        assert source.is_marker(2, 0)
        source.clear_marker(2, 0)
        assert source.grid == [[7, 0, 7]]

    def test_input_not_mutated(self):
        grid = [[2, 0]]
        source = ColorGridSource(grid)
        source.clear_marker(0, 0)
        assert grid == [[2, 0]]

    def test_same_background_and_marker(self):
        with pytest.raises(ValueError, match="must differ"):
            ColorGridSource([[0]], background=3, marker=3)

    def test_ragged_grid(self):
        with pytest.raises(ValueError):
            ColorGridSource([[0, 0, 0], [0, 0]])


class TestMaskSource:
    def test_is_pixel_source(self):
        assert isinstance(MaskSource(np.zeros((1, 1), dtype=bool)), PixelSource)

    def test_from_lists(self):
        source = MaskSource([[True, False, False], [False, False, True]])
        assert source.width() == 3
        assert source.height() == 2
        assert source.classification(0, 0) == Classification.FOREGROUND
        assert source.classification(1, 0) == Classification.BACKGROUND
        assert source.classification(2, 1) == Classification.FOREGROUND

    def test_markers(self):
        source = MaskSource([[True, True]], markers=[(1, 0)])
        assert source.is_marker(1, 0)
        assert not source.is_marker(0, 0)
        source.clear_marker(1, 0)
        assert not source.is_marker(1, 0)
        assert source.classification(1, 0) == Classification.BACKGROUND

    def test_mask_is_copied(self):
        mask = np.ones((2, 2), dtype=bool)
        source = MaskSource(mask, markers=[(0, 0)])
        source.clear_marker(0, 0)
        assert mask.all()
        assert not source.mask[0, 0]

    def test_not_2d(self):
        with pytest.raises(ValueError, match="2D"):
            MaskSource(np.zeros(4, dtype=bool))

    def test_marker_out_of_bounds(self):
        with pytest.raises(ValueError, match="does not fit"):
            MaskSource(np.zeros((2, 2), dtype=bool), markers=[(2, 0)])
