"""
Global constants used throughout the project
"""
import os

# Palette values of a color grid, using the ARC convention
BACKGROUND_COLOR = 0  # Black (#000000)
MARKER_COLOR = 2  # Red (#F93C31)

DATA = os.getenv("GRID_DATA", "../grids")
