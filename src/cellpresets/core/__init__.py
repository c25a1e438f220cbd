"""Preset table and simulation core."""

from .presets import BoundaryMode, SeedMode, Preset, PresetTable, PRESETS, N_PRESETS, GRID_ROWS, GRID_COLS
from .grid import Grid
from .game import GameOfLife

__all__ = [
    "BoundaryMode",
    "SeedMode",
    "Preset",
    "PresetTable",
    "PRESETS",
    "N_PRESETS",
    "GRID_ROWS",
    "GRID_COLS",
    "Grid",
    "GameOfLife",
]
