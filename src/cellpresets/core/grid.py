"""Board data structure honoring preset boundary modes."""

from typing import Optional
import numpy as np
import torch
import torch.nn.functional as F

from .presets import GRID_COLS, GRID_ROWS, BoundaryMode, Preset, SeedMode


class Grid:
    """A 2D board of cells.

    Cells live in a numpy array indexed ``[x, y]``. A WRAPPED board is
    toroidal; on a DEAD board everything past the edges counts as dead.
    """

    def __init__(self, width: int, height: int, boundary: BoundaryMode = BoundaryMode.WRAPPED) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            boundary: Edge behavior
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.boundary = boundary
        self._cells = np.zeros((width, height), dtype=np.int8)

        torch.set_num_threads(1)
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def from_preset(
        cls,
        preset: Preset,
        probability: float = 0.5,
        rng: Optional[np.random.Generator] = None,
    ) -> "Grid":
        """Build a board seeded from a preset.

        Args:
            preset: Source preset
            probability: Live-cell chance when the preset seeds randomly
            rng: Random generator for random seeding

        Returns:
            New Grid with the preset's boundary and initial cells
        """
        grid = cls(GRID_COLS, GRID_ROWS, boundary=preset.boundary)
        if preset.seed is SeedMode.RANDOM:
            grid.randomize(probability, rng)
        else:
            grid._cells[:] = preset.to_array().T
        return grid

    @property
    def wrap_edges(self) -> bool:
        """Whether edges wrap around (toroidal topology)."""
        return self.boundary is BoundaryMode.WRAPPED

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def shape(self):
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def _resolve(self, x: int, y: int):
        if self.wrap_edges:
            return x % self.width, y % self.height
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return x, y

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds on a DEAD board
        """
        x, y = self._resolve(x, y)
        return bool(self._cells[x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds on a DEAD board
        """
        x, y = self._resolve(x, y)
        self._cells[x, y] = 1 if alive else 0

    def toggle_cell(self, x: int, y: int) -> bool:
        """Toggle a cell and return its new state."""
        new_state = not self.get_cell(x, y)
        self.set_cell(x, y, new_state)
        return new_state

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random generator (a fresh unseeded one if omitted)
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = rng or np.random.default_rng()
        mask = rng.random((self.width, self.height)) < probability
        self._cells[:] = mask.astype(np.int8)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a single cell (0-8)."""
        count = 0
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if self.wrap_edges:
                    count += self._cells[nx % self.width, ny % self.height]
                elif 0 <= nx < self.width and 0 <= ny < self.height:
                    count += self._cells[nx, ny]

        return int(count)

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells with a torch convolution.

        Returns:
            (width, height) array with neighbor counts for each cell
        """
        # torch works in (height, width), so transpose in and out
        self._torch_input[0, 0] = torch.from_numpy((self._cells.T > 0).astype(np.float32))

        if self.wrap_edges:
            padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
            neighbors = F.conv2d(padded, self._torch_kernel)
        else:
            neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def to_list(self) -> list:
        """Convert grid to a nested list indexed [x][y]."""
        return self._cells.tolist()

    def to_rows(self) -> list:
        """Convert grid to a row-major nested list, the layout presets use."""
        return self._cells.T.tolist()

    def from_list(self, data: list) -> None:
        """Load grid from a nested list indexed [x][y].

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=np.int8)
        if arr.shape != (self.width, self.height):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")

        self._cells[:] = arr

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return (
            self.shape == other.shape
            and self.boundary is other.boundary
            and np.array_equal(self._cells, other._cells)
        )

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join(
            "".join("*" if self._cells[x, y] else "." for x in range(self.width)) for y in range(self.height)
        )
