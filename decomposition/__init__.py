"""
Grid decomposition into connected components.

This package turns a two-state grid into a partition of its cells:

**Connectivity** (connectivity.py)
    Row-major cell identifiers and the down/right halves of 4-connectivity.
    - coord_to_cell_id / cell_id_to_coord: the cell bijection
    - forward_neighbors: neighbors a raster scan links a cell to

**Builder** (builder.py)
    Single raster pass filling a DisjointSet and discovering the markers.
    - GridConnectivityBuilder.build(source) -> ConnectivityModel

**Model** (model.py)
    Query surface over the decomposition.
    - ConnectivityModel: num_components, are_connected, has_solution,
      component_id_of
    - FrozenConnectivity: read-only snapshot for lock-free queries

The DisjointSet itself lives in utils/union_find.py, concrete grid sources
in utils/grid.py.
"""

from utils.union_find import DisjointSet, IndexOutOfRange, InvalidSize

from .builder import GridConnectivityBuilder, build
from .connectivity import (
    cell_id_to_coord,
    coord_to_cell_id,
    forward_neighbors,
    num_forward_edges,
)
from .model import ConnectivityModel, FrozenConnectivity, MissingMarker

__all__ = [
    # Connectivity
    "coord_to_cell_id",
    "cell_id_to_coord",
    "forward_neighbors",
    "num_forward_edges",
    # Builder
    "GridConnectivityBuilder",
    "build",
    # Model
    "ConnectivityModel",
    "FrozenConnectivity",
    # Union-Find
    "DisjointSet",
    # Errors
    "InvalidSize",
    "IndexOutOfRange",
    "MissingMarker",
]
