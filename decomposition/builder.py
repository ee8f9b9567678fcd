"""
Decomposition of a two-state grid into 4-connected components.

Algorithm overview:
    One raster pass (top to bottom, left to right). Each cell is compared
    with its down neighbor then its right neighbor, and unioned with each one
    sharing its classification. The up and left comparisons of a cell were
    already made from the earlier cells, so 2·w·h − w − h union attempts
    give full 4-connectivity.

Markers:
    A marker is discovered the first time the scan looks at it as a down or
    right neighbor, and is normalized by the source before the comparison.
    The first discovery becomes the entry, the second the exit. The origin
    (0, 0) is nobody's neighbor, so it is checked before the pass.
"""

import logging
from typing import Optional

from localtypes import Coord, PixelSource, Proportions
from utils.union_find import DisjointSet, InvalidSize

from .connectivity import coord_to_cell_id, forward_neighbors
from .model import ConnectivityModel

logger = logging.getLogger(__name__)


class GridConnectivityBuilder:
    """Builds a ConnectivityModel from a PixelSource in a single pass."""

    def __init__(self) -> None:
        self._entry: Optional[Coord] = None
        self._exit: Optional[Coord] = None

    def _discover(self, source: PixelSource, coord: Coord) -> None:
        """Normalize a marker cell and record it as entry or exit."""
        if not source.is_marker(*coord):
            return
        source.clear_marker(*coord)

        if self._entry is None:
            self._entry = coord
            logger.debug(f"Entry marker at {tuple(coord)}")
        elif self._exit is None:
            self._exit = coord
            logger.debug(f"Exit marker at {tuple(coord)}")
        else:
            logger.warning(
                f"Extra marker at {tuple(coord)} ignored, entry: {tuple(self._entry)}, "
                f"exit: {tuple(self._exit)}"
            )

    def build(self, source: PixelSource) -> ConnectivityModel:
        """
        Decompose the grid of source into its connected components.

        Args:
            source: Grid data; its marker cells are cleared during the scan.

        Returns:
            A ConnectivityModel over the cells of the grid.

        Raises:
            InvalidSize: if the source reports negative proportions.
        """
        self._entry, self._exit = None, None
        width, height = source.width(), source.height()
        if width < 0 or height < 0:
            raise InvalidSize(f"Grid proportions must be non-negative, got: {(width, height)}")
        disjoint_set = DisjointSet(width * height)
        proportions = Proportions(width, height)
        logger.debug(f"Scanning a grid of proportions {tuple(proportions)}")

        if width == 0 or height == 0:
            return ConnectivityModel(disjoint_set, proportions)

        self._discover(source, Coord(0, 0))

        for row in range(height):
            for col in range(width):
                coord = Coord(col, row)
                cell_id = coord_to_cell_id(coord, proportions)
                classification = source.classification(col, row)

                for neighbor in forward_neighbors(coord, proportions):
                    self._discover(source, neighbor)
                    if classification == source.classification(*neighbor):
                        disjoint_set.union(
                            cell_id, coord_to_cell_id(neighbor, proportions)
                        )

        logger.debug(
            f"Found {disjoint_set.num_sets} components, "
            f"entry: {self._entry}, exit: {self._exit}"
        )
        return ConnectivityModel(disjoint_set, proportions, self._entry, self._exit)


def build(source: PixelSource) -> ConnectivityModel:
    """Shorthand for GridConnectivityBuilder().build(source)"""
    return GridConnectivityBuilder().build(source)
