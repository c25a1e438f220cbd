"""Conway's Game of Life engine driven by the active preset."""

from typing import Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .grid import Grid
from .presets import Preset, PresetTable


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The board comes from the table's active preset each time the game
    is restarted, so selecting another preset takes effect on restart().
    """

    def __init__(self, table: PresetTable, probability: float = 0.5, seed: Optional[int] = None) -> None:
        """Initialize the game and seed it from the active preset.

        Args:
            table: Preset table to read the active preset from
            probability: Live-cell chance for randomly seeded presets
            seed: Seed for the random generator
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        self.table = table
        self.probability = probability
        self._rng = np.random.default_rng(seed)
        self._population_history: Deque[int] = deque(maxlen=100)
        self._seen_states: Dict[bytes, int] = {}
        self.restart()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_length > 0

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def restart(self) -> Preset:
        """Rebuild the board from the active preset.

        Returns:
            The preset the board was built from
        """
        self.preset = self.table.active()
        self.grid = Grid.from_preset(self.preset, self.probability, self._rng)

        self._generation = 0
        self._cycle_length = 0
        self._cycle_start_generation = 0
        self._seen_states.clear()
        self._population_history.clear()
        self._population_history.append(self.population)
        return self.preset

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._check_for_cycles()
        self._apply_rules()

        self._generation += 1
        self._population_history.append(self.population)

    def _apply_rules(self) -> None:
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.cells

        birth_mask = (cells == 0) & (neighbor_counts == 3)
        death_mask = (cells > 0) & ((neighbor_counts < 2) | (neighbor_counts > 3))

        cells[death_mask] = 0
        cells[birth_mask] = 1

    def _check_for_cycles(self) -> None:
        if self.cycle_detected:
            return

        # boards are tiny, so every state is kept
        current_state = self.grid.cells.tobytes()
        first_occurrence = self._seen_states.get(current_state)
        if first_occurrence is not None:
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._seen_states[current_state] = self._generation

    def run_until_stable(self, max_generations: int = 1000) -> Tuple[int, str]:
        """Run simulation until it dies out or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        return {
            "preset": self.preset.name,
            "boundary": self.preset.boundary.name,
            "seed_mode": self.preset.seed.name,
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "cycle_detected": self.cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.width * self.grid.height),
        }
