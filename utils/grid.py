r"""
Grid Sources

Concrete PixelSource implementations feeding the connectivity builder,
together with the basic grid operations they rely on.

Two representations are supported:
    1\ ColorGridSource: a ColorGrid (grid[row][col] -> color) where one color
       is the background, one color flags markers and any other color is
       foreground
    2\ MaskSource: a numpy boolean array (True = foreground) with the marker
       coordinates given apart
"""

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from constants import BACKGROUND_COLOR, MARKER_COLOR
from localtypes import Classification, Color, ColorGrid, Coord, Proportions


# helpers
def matrix_to_proportions(matrix: list[list]) -> Proportions:
    height = len(matrix)
    width = len(matrix[0]) if height else 0
    return Proportions(width, height)


# Grid Base Operations
class GridOperations:
    """Basic grid operations and constructors"""

    # Constructors
    @staticmethod
    def copy(grid: ColorGrid) -> ColorGrid:
        width, height = GridOperations.proportions(grid)
        return [
            [grid[row][col] for col in range(width)] for row in range(height)
        ]

    # Operations
    @staticmethod
    def proportions(grid: ColorGrid) -> Proportions:
        return matrix_to_proportions(grid)

    @staticmethod
    def check_rectangular(grid: ColorGrid) -> None:
        """Raise a ValueError unless all rows are non-empty and of the same length"""
        width, height = GridOperations.proportions(grid)
        if height and width == 0:
            raise ValueError("The grid has empty rows")
        for row in range(height):
            if len(grid[row]) != width:
                raise ValueError(
                    f"Row {row} has length {len(grid[row])}, expected: {width}"
                )


class ColorGridSource:
    """
    PixelSource over a ColorGrid.

    The grid is copied, so clearing markers never touches the caller's grid.

    Example:
        >>> source = ColorGridSource([[2, 0, 2]])
        >>> source.is_marker(0, 0)
        True
        >>> source.clear_marker(0, 0)
        >>> source.classification(0, 0)
        <Classification.BACKGROUND: 'background'>
    """

    def __init__(
        self,
        grid: ColorGrid,
        background: Color = BACKGROUND_COLOR,
        marker: Color = MARKER_COLOR,
    ) -> None:
        if background == marker:
            raise ValueError(
                f"Background and marker colors must differ, both are: {background}"
            )
        GridOperations.check_rectangular(grid)
        self._grid = GridOperations.copy(grid)
        self._proportions = GridOperations.proportions(grid)
        self.background = background
        self.marker = marker

    @property
    def grid(self) -> ColorGrid:
        """Copy of the current grid, with the markers cleared so far"""
        return GridOperations.copy(self._grid)

    def width(self) -> int:
        return self._proportions.width

    def height(self) -> int:
        return self._proportions.height

    def classification(self, x: int, y: int) -> Classification:
        if self._grid[y][x] == self.background:
            return Classification.BACKGROUND
        return Classification.FOREGROUND

    def is_marker(self, x: int, y: int) -> bool:
        return self._grid[y][x] == self.marker

    def clear_marker(self, x: int, y: int) -> None:
        self._grid[y][x] = self.background


class MaskSource:
    """
    PixelSource over a boolean array, True marking foreground cells.

    Markers are given as (col, row) coordinates; they read as background once
    cleared, whatever the mask holds underneath.
    """

    def __init__(
        self, mask: npt.ArrayLike, markers: Iterable[tuple[int, int]] = ()
    ) -> None:
        array = np.array(mask, dtype=bool)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D mask, got {array.ndim} dimensions")
        self._mask = array
        height, width = array.shape
        self._proportions = Proportions(width, height)

        self._markers: set[Coord] = set()
        for col, row in markers:
            if not (0 <= col < width and 0 <= row < height):
                raise ValueError(
                    f"Marker {(col, row)} does not fit within a grid of proportions "
                    f"{tuple(self._proportions)}"
                )
            self._markers.add(Coord(col, row))

    @property
    def mask(self) -> npt.NDArray[np.bool_]:
        return self._mask.copy()

    def width(self) -> int:
        return self._proportions.width

    def height(self) -> int:
        return self._proportions.height

    def classification(self, x: int, y: int) -> Classification:
        if self._mask[y, x]:
            return Classification.FOREGROUND
        return Classification.BACKGROUND

    def is_marker(self, x: int, y: int) -> bool:
        return Coord(x, y) in self._markers

    def clear_marker(self, x: int, y: int) -> None:
        self._markers.discard(Coord(x, y))
        self._mask[y, x] = False
