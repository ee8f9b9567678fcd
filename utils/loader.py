"""
Module used to import grids stored as JSON lists of rows
"""

import json
import os

from constants import DATA
from localtypes import ColorGrid
from utils.grid import ColorGridSource


def path_to_grid(path: str) -> ColorGrid:
    """
    Read a grid from a JSON file. Relative paths are resolved against DATA.

    Raises:
        ValueError: if the file does not hold a list of lists of integers.
    """
    with open(os.path.join(DATA, path), "r") as file:
        data = json.load(file)

    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise ValueError(f"Error: {path} does not hold a list of rows")
    if not all(
        isinstance(cell, int) and not isinstance(cell, bool)
        for row in data
        for cell in row
    ):
        raise ValueError(f"Error: {path} holds non integer colors")

    return data


def path_to_source(path: str, **kwargs) -> ColorGridSource:
    """Read a grid from a JSON file and wrap it in a ColorGridSource"""
    return ColorGridSource(path_to_grid(path), **kwargs)
