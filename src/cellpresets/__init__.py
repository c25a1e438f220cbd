"""Game of Life starting presets and the engine that runs them."""

__version__ = "0.1.0"

from .core.presets import BoundaryMode, SeedMode, Preset, PresetTable, PRESETS, N_PRESETS
from .core.grid import Grid
from .core.game import GameOfLife

__all__ = ["BoundaryMode", "SeedMode", "Preset", "PresetTable", "PRESETS", "N_PRESETS", "Grid", "GameOfLife"]
