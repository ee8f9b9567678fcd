"""
Connectivity definitions for decomposition.

Cells of a grid are identified by integers through a row-major bijection,
and the adjacency relation is 4-connectivity (orthogonal neighbors only):

- TOWER: the 4 orthogonal directions of DIRECTIONS_FREEMAN → 4-connectivity
- FORWARD: the down and right halves of TOWER, in the order a raster scan
  visits them

A row-major scan that links every cell to its FORWARD neighbors covers every
edge of the TOWER adjacency exactly once: the up and left edges of a cell were
already visited as the down and right edges of earlier cells.
"""

from collections.abc import Iterator
from typing import Final, Literal

from localtypes import CellId, Coord, Proportions
from utils.union_find import IndexOutOfRange

# Directions

Tower = Literal[0, 1, 2, 3]

FORWARD: Final[list[Tower]] = [3, 2]  # down, then right

DIRECTIONS_FREEMAN: Final[dict[Tower, Coord]] = {
    0: Coord(-1, 0),  # left
    1: Coord(0, -1),  # up
    2: Coord(1, 0),  # right
    3: Coord(0, 1),  # down
}


def in_bounds(coord: Coord, proportions: Proportions) -> bool:
    col, row = coord
    return 0 <= col < proportions.width and 0 <= row < proportions.height


def coord_to_cell_id(coord: Coord, proportions: Proportions) -> CellId:
    """
    Row-major identifier of a cell: row * width + col.

    Raises:
        IndexOutOfRange: if the coordinate lies outside the grid.
    """
    if not in_bounds(coord, proportions):
        raise IndexOutOfRange(
            f"Coordinate {tuple(coord)} is outside a grid of proportions "
            f"{tuple(proportions)}"
        )
    return coord.row * proportions.width + coord.col


def cell_id_to_coord(cell_id: CellId, proportions: Proportions) -> Coord:
    """Inverse of coord_to_cell_id."""
    if not 0 <= cell_id < proportions.width * proportions.height:
        raise IndexOutOfRange(
            f"Cell id {cell_id} is outside [0, {proportions.width * proportions.height})"
        )
    row, col = divmod(cell_id, proportions.width)
    return Coord(col, row)


def forward_neighbors(coord: Coord, proportions: Proportions) -> Iterator[Coord]:
    """
    Yield the down and right neighbors of coord that lie inside the grid.

    Example:
        >>> list(forward_neighbors(Coord(1, 0), Proportions(2, 2)))
        [Coord(col=1, row=1)]
    """
    for direction in FORWARD:
        delta = DIRECTIONS_FREEMAN[direction]
        neighbor = Coord(coord.col + delta.col, coord.row + delta.row)
        if in_bounds(neighbor, proportions):
            yield neighbor


def num_forward_edges(proportions: Proportions) -> int:
    """Number of union attempts of a full scan: 2·w·h − w − h."""
    width, height = proportions
    if width == 0 or height == 0:
        return 0
    return 2 * width * height - width - height
