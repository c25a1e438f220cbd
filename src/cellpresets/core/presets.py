"""Built-in starting configurations for the Game of Life board."""

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple
import threading

import numpy as np

GRID_ROWS = 5
GRID_COLS = 7


class BoundaryMode(Enum):
    """How cells beyond the board edges are treated."""

    DEAD = "dead"
    WRAPPED = "wrapped"


class SeedMode(Enum):
    """How the board is populated when a simulation (re)starts."""

    PRESET = "preset"
    RANDOM = "random"


class Preset:
    """A named starting configuration.

    When ``seed`` is ``SeedMode.RANDOM`` the grid is filler: the engine
    ignores it and fills the board randomly instead.
    """

    def __init__(
        self,
        name: str,
        boundary: BoundaryMode,
        seed: SeedMode,
        grid: Sequence[Sequence[int]],
        description: str = "",
    ) -> None:
        """Initialize a preset.

        Args:
            name: Preset name
            boundary: Edge behavior used while simulating
            seed: Seeding behavior at simulation start
            grid: GRID_ROWS rows of GRID_COLS cells (0 dead, 1 alive)
            description: Optional description

        Raises:
            TypeError: If boundary or seed is not an enum member
            ValueError: If the grid has the wrong shape or cell values
        """
        if not isinstance(boundary, BoundaryMode):
            raise TypeError(f"boundary must be a BoundaryMode, got {boundary!r}")
        if not isinstance(seed, SeedMode):
            raise TypeError(f"seed must be a SeedMode, got {seed!r}")

        self._name = name
        self._boundary = boundary
        self._seed = seed
        self._grid = self._validate_grid(grid)
        self._description = description

    @property
    def name(self) -> str:
        """Preset name."""
        return self._name

    @property
    def boundary(self) -> BoundaryMode:
        """Edge behavior used while simulating."""
        return self._boundary

    @property
    def seed(self) -> SeedMode:
        """Seeding behavior at simulation start."""
        return self._seed

    @property
    def grid(self) -> Tuple[Tuple[int, ...], ...]:
        """Literal grid as GRID_ROWS tuples of GRID_COLS cells."""
        return self._grid

    @property
    def description(self) -> str:
        return self._description

    @staticmethod
    def _validate_grid(grid: Sequence[Sequence[int]]) -> Tuple[Tuple[int, ...], ...]:
        if len(grid) != GRID_ROWS:
            raise ValueError(f"Preset grid must have {GRID_ROWS} rows, got {len(grid)}")

        rows = []
        for y, row in enumerate(grid):
            if len(row) != GRID_COLS:
                raise ValueError(f"Row {y} must have {GRID_COLS} cells, got {len(row)}")
            for value in row:
                if value not in (0, 1) or isinstance(value, float):
                    raise ValueError(f"Row {y} has invalid cell value {value!r} (expected 0 or 1)")
            rows.append(tuple(int(value) for value in row))

        return tuple(rows)

    @property
    def population(self) -> int:
        """Number of living cells in the literal grid."""
        return sum(sum(row) for row in self.grid)

    def cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of living cells.

        Returns:
            List of (x, y) tuples, x being the column and y the row
        """
        return [(x, y) for y, row in enumerate(self.grid) for x, value in enumerate(row) if value]

    def to_array(self) -> np.ndarray:
        """Get the literal grid as a (rows, cols) int8 array."""
        return np.array(self.grid, dtype=np.int8)

    def to_dict(self) -> Dict[str, Any]:
        """Convert preset to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "boundary": self.boundary.name,
            "seed": self.seed.name,
            "grid": [list(row) for row in self.grid],
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preset":
        """Create preset from dictionary.

        Args:
            data: Dictionary with preset data

        Returns:
            New Preset instance

        Raises:
            ValueError: If a mode name is unknown or the grid is malformed
        """
        boundary_name, seed_name = data["boundary"], data["seed"]
        if boundary_name not in BoundaryMode.__members__:
            raise ValueError(f"Unknown boundary mode: {boundary_name!r}")
        if seed_name not in SeedMode.__members__:
            raise ValueError(f"Unknown seed mode: {seed_name!r}")

        return cls(
            name=data["name"],
            boundary=BoundaryMode[boundary_name],
            seed=SeedMode[seed_name],
            grid=data["grid"],
            description=data.get("description", ""),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Preset):
            return False
        return (
            self.name == other.name
            and self.boundary is other.boundary
            and self.seed is other.seed
            and self.grid == other.grid
        )

    def __hash__(self) -> int:
        return hash((self.name, self.boundary, self.seed, self.grid))

    def __repr__(self) -> str:
        return f"Preset({self.name!r}, {self.boundary.name}, {self.seed.name})"

    def __str__(self) -> str:
        """Literal grid with living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if value else "." for value in row) for row in self.grid)


PRESETS: Tuple[Preset, ...] = (
    Preset(
        "flower",
        BoundaryMode.DEAD,
        SeedMode.PRESET,
        [
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 1, 0, 0, 0],
            [0, 1, 1, 1, 0, 0, 0],
            [0, 0, 0, 1, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
        ],
        "A nice flower",
    ),
    Preset(
        "glider",
        BoundaryMode.WRAPPED,
        SeedMode.PRESET,
        [
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 1, 0, 0, 0, 0],
            [0, 0, 0, 1, 0, 0, 0],
            [0, 1, 1, 1, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
        ],
        "Glider travelling across a wrapped board",
    ),
    Preset(
        "random",
        BoundaryMode.DEAD,
        SeedMode.RANDOM,
        [[0] * GRID_COLS for _ in range(GRID_ROWS)],
        "Random soup",
    ),
)

N_PRESETS = len(PRESETS)


class PresetTable:
    """Ordered collection of presets with a current selection.

    Only the selection is mutable. Index checks are strict: wrap-around
    is available through next_preset()/previous_preset(), never through
    get() or set_active().
    """

    def __init__(self, presets: Optional[Sequence[Preset]] = None) -> None:
        """Initialize the table.

        Args:
            presets: Presets to hold (defaults to the built-in PRESETS)

        Raises:
            ValueError: If no presets are given or an entry is not a Preset
        """
        presets = tuple(PRESETS if presets is None else presets)
        if not presets:
            raise ValueError("Preset table needs at least one preset")
        for index, preset in enumerate(presets):
            if not isinstance(preset, Preset):
                raise ValueError(f"Entry {index} is not a Preset: {preset!r}")

        self._presets = presets
        self._active_index = 0
        self._lock = threading.Lock()

    @property
    def active_index(self) -> int:
        """Index of the currently selected preset."""
        return self._active_index

    def count(self) -> int:
        """Number of presets in the table."""
        return len(self._presets)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Preset index must be an integer, got {index!r}")
        if not 0 <= index < len(self._presets):
            raise IndexError(f"Preset index {index} out of range (0-{len(self._presets) - 1})")

    def get(self, index: int) -> Preset:
        """Get a preset by index.

        Args:
            index: Position in the table

        Returns:
            Preset at that position

        Raises:
            IndexError: If index is outside [0, count())
        """
        self._check_index(index)
        return self._presets[index]

    def active(self) -> Preset:
        """Get the currently selected preset."""
        with self._lock:
            return self._presets[self._active_index]

    def set_active(self, index: int) -> None:
        """Select a preset.

        Args:
            index: Position in the table

        Raises:
            IndexError: If index is outside [0, count()); selection is unchanged
        """
        self._check_index(index)
        with self._lock:
            self._active_index = int(index)

    def _shift(self, delta: int) -> Preset:
        with self._lock:
            self._active_index = (self._active_index + delta) % len(self._presets)
            return self._presets[self._active_index]

    def next_preset(self) -> Preset:
        """Select the following preset, wrapping to the first one."""
        return self._shift(1)

    def previous_preset(self) -> Preset:
        """Select the preceding preset, wrapping to the last one."""
        return self._shift(-1)

    def find(self, name: str) -> int:
        """Get the index of a preset by name (case-insensitive).

        Raises:
            KeyError: If no preset has that name
        """
        wanted = name.lower()
        for index, preset in enumerate(self._presets):
            if preset.name.lower() == wanted:
                return index
        raise KeyError(name)

    def names(self) -> List[str]:
        """Get preset names in table order."""
        return [preset.name for preset in self._presets]

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Preset]:
        return iter(self._presets)

    def __getitem__(self, index: int) -> Preset:
        return self.get(index)
