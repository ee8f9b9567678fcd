"""
Query surface over a decomposed grid.

A ConnectivityModel is produced once by GridConnectivityBuilder.build and is
read-only afterward: the only mutation left is path compression inside the
disjoint set, which reshapes the forest without changing its partition.

Since path compression writes to the forest, a live model is not safe for
concurrent queries. `freeze` flattens it into a FrozenConnectivity whose
representative array is never written again and can be shared freely.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt

from localtypes import CellId, Coord, Proportions, Quotient
from utils.union_find import DisjointSet, IndexOutOfRange

from .connectivity import cell_id_to_coord, coord_to_cell_id


class MissingMarker(LookupError):
    """Raised when a solution is asked for but fewer than two markers were found."""

    pass


def _check_markers(entry: Optional[Coord], exit: Optional[Coord]) -> tuple[Coord, Coord]:
    if entry is None or exit is None:
        found = sum(marker is not None for marker in (entry, exit))
        raise MissingMarker(f"Expected an entry and an exit marker, found {found}")
    return entry, exit


@dataclass(frozen=True, eq=False)
class FrozenConnectivity:
    """
    Read-only snapshot of a ConnectivityModel.

    representatives[row, col] holds the representative of the cell, as
    component_id_of would have returned it at freeze time.
    """

    representatives: npt.NDArray[np.intp]
    num_sets: int
    entry: Optional[Coord] = None
    exit: Optional[Coord] = None

    @property
    def proportions(self) -> Proportions:
        height, width = self.representatives.shape
        return Proportions(width, height)

    def num_components(self) -> int:
        return self.num_sets

    def component_id_of(self, x: int, y: int) -> int:
        cell_id = coord_to_cell_id(Coord(x, y), self.proportions)
        return int(self.representatives.flat[cell_id])

    def are_connected(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        return self.component_id_of(x1, y1) == self.component_id_of(x2, y2)

    def has_solution(self) -> bool:
        entry, exit = _check_markers(self.entry, self.exit)
        return self.are_connected(*entry, *exit)


class ConnectivityModel:
    """
    Facade pairing a DisjointSet over the cells of a grid with the
    entry and exit markers discovered while building it.

    Cells are addressed by (x, y) = (col, row) coordinates.
    """

    def __init__(
        self,
        disjoint_set: DisjointSet,
        proportions: Proportions,
        entry: Optional[Coord] = None,
        exit: Optional[Coord] = None,
    ) -> None:
        if len(disjoint_set) != proportions.width * proportions.height:
            raise ValueError(
                f"Disjoint set of size {len(disjoint_set)} does not match "
                f"a grid of proportions {tuple(proportions)}"
            )
        self._disjoint_set = disjoint_set
        self._proportions = proportions
        self._entry = entry
        self._exit = exit

    def __repr__(self) -> str:
        return (
            f"ConnectivityModel(proportions={tuple(self._proportions)}, "
            f"num_components={self.num_components()}, "
            f"entry={self._entry}, exit={self._exit})"
        )

    @property
    def proportions(self) -> Proportions:
        return self._proportions

    @property
    def entry(self) -> Optional[Coord]:
        """First marker discovered by the scan, if any"""
        return self._entry

    @property
    def exit(self) -> Optional[Coord]:
        """Second marker discovered by the scan, if any"""
        return self._exit

    def cell_id(self, x: int, y: int) -> CellId:
        return coord_to_cell_id(Coord(x, y), self._proportions)

    def coord_of(self, cell_id: CellId) -> Coord:
        return cell_id_to_coord(cell_id, self._proportions)

    def num_components(self) -> int:
        return self._disjoint_set.num_sets

    def component_id_of(self, x: int, y: int) -> int:
        """
        Representative of the component holding (x, y).

        The value is stable across calls but carries no meaning regarding
        ordering or magnitude; consumers should only compare it for equality.
        """
        return self._disjoint_set.find(self.cell_id(x, y))

    def are_connected(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        return self._disjoint_set.connected(self.cell_id(x1, y1), self.cell_id(x2, y2))

    def has_solution(self) -> bool:
        """
        Whether the entry and exit markers lie in the same component.

        Raises:
            MissingMarker: if the scan discovered fewer than two markers.
        """
        entry, exit = _check_markers(self._entry, self._exit)
        return self.are_connected(*entry, *exit)

    def components(self) -> Quotient[int, Coord]:
        """Mapping from each representative to the coordinates of its component."""
        return {
            root: frozenset(self.coord_of(cell_id) for cell_id in members)
            for root, members in self._disjoint_set.get_all_sets().items()
        }

    def freeze(self) -> FrozenConnectivity:
        """Flatten every cell to its representative in a read-only array."""
        width, height = self._proportions
        flat = np.fromiter(
            (self._disjoint_set.find(cell_id) for cell_id in range(width * height)),
            dtype=np.intp,
            count=width * height,
        )
        representatives = flat.reshape((height, width))
        representatives.flags.writeable = False
        return FrozenConnectivity(
            representatives, self.num_components(), self._entry, self._exit
        )


__all__ = [
    "ConnectivityModel",
    "FrozenConnectivity",
    "MissingMarker",
    "IndexOutOfRange",
]
