"""
Type definitions for grid connectivity.

This module contains all custom types used throughout the project,
organized by their primary use cases.

Coordinate Convention:
    All coordinates use (col, row) order, i.e. (x, y), where:
    - col: x-axis, increases rightward (0 to width-1)
    - row: y-axis, increases downward (0 to height-1)
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import NamedTuple, Protocol, runtime_checkable

# Color-related types
type Color = int

# Grid representations
type ColorGrid = list[list[Color]]  # Functional: grid[row][col] -> color


# Coordinate systems
class Coord(NamedTuple):
    col: int
    row: int


class Proportions(NamedTuple):
    width: int
    height: int


# Integer identifier of a cell, see decomposition.connectivity.coord_to_cell_id
type CellId = int

# Maps representatives to their equivalence classes
type Quotient[U, T] = Mapping[U, frozenset[T]]


class Classification(Enum):
    """Two-state classification of a grid cell."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


@runtime_checkable
class PixelSource(Protocol):
    """
    Grid data consumed by the connectivity builder.

    Marker cells are flagged by the source and normalized through
    `clear_marker` before they take part in any adjacency comparison.
    """

    def width(self) -> int: ...

    def height(self) -> int: ...

    def classification(self, x: int, y: int) -> Classification: ...

    def is_marker(self, x: int, y: int) -> bool: ...

    def clear_marker(self, x: int, y: int) -> None:
        """Normalize a marker cell so it reads as ordinary terrain afterward"""
        ...


__all__ = [
    # Basic types
    "Color",
    # Grid types
    "ColorGrid",
    # Coordinate types
    "Coord",
    "Proportions",
    "CellId",
    # Category theory types
    "Quotient",
    # Grid data
    "Classification",
    "PixelSource",
]
