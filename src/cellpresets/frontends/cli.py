"""Command-line interface for selecting and running presets."""

import argparse
import re
import sys
import time
from typing import Optional, Tuple

from ..core.game import GameOfLife
from ..core.presets import PresetTable, SeedMode


class CLIPresetRunner:
    """Command-line front end for the preset table."""

    def __init__(self, table: Optional[PresetTable] = None):
        """Initialize CLI interface.

        Args:
            table: Preset table to select from (defaults to the built-in table)
        """
        self.table = table or PresetTable()

    def select(self, preset: Optional[str] = None, forward: int = 0, backward: int = 0) -> int:
        """Select a preset by index or name, then cycle through the table.

        Args:
            preset: Index ("1") or name ("glider") of the preset to select
            forward: Number of next-preset steps to apply afterwards
            backward: Number of previous-preset steps to apply afterwards

        Returns:
            Index of the selected preset

        Raises:
            IndexError: If the index is out of range
            KeyError: If no preset has the given name
        """
        if preset is not None:
            if re.fullmatch(r"-?[0-9]+", preset):
                self.table.set_active(int(preset))
            else:
                self.table.set_active(self.table.find(preset))

        for _ in range((forward - backward) % self.table.count()):
            self.table.next_preset()

        return self.table.active_index

    def run_simulation(
        self,
        max_generations: int,
        population_rate: float = 0.5,
        seed: Optional[int] = None,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run the active preset.

        Args:
            max_generations: Maximum generations to run
            population_rate: Live-cell chance for randomly seeded presets
            seed: Random seed for reproducibility
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        game = GameOfLife(self.table, probability=population_rate, seed=seed)
        preset = game.preset

        if verbose:
            print(f"Running preset [{self.table.active_index}] {preset.name}")
            print(f"  Boundary: {preset.boundary.name}, seed: {preset.seed.name}")
            if preset.seed is SeedMode.RANDOM:
                print(f"  Random population (rate: {population_rate:.2%})")

        initial_population = game.population

        if show_grid:
            print("\nInitial grid:")
            print(game.grid)

        start_time = time.time()
        final_generation, reason = game.run_until_stable(max_generations)
        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["initial_population"] = initial_population

        if show_grid and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(game.grid)

        return final_generation, reason, stats

    def list_presets(self) -> None:
        """Print the preset table."""
        print("Available presets:")
        for index, preset in enumerate(self.table):
            marker = "*" if index == self.table.active_index else " "
            if preset.seed is SeedMode.RANDOM:
                cells = "random fill"
            else:
                cells = f"{preset.population} cells"
            print(f" {marker}[{index}] {preset.name}: {preset.boundary.name.lower()} edges, {cells}")
            if preset.description:
                print(f"      {preset.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Game of Life presets from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the presets
  cellpresets --list-presets

  # Run the glider on its wrapped board
  cellpresets --preset glider --show-grid

  # Start from the first preset and cycle back one (wraps to the last)
  cellpresets --preset 0 --previous 1 --seed 42
        """,
    )

    parser.add_argument("-p", "--preset", type=str, default=None, help="Preset index or name (default: 0)")
    parser.add_argument("--next", type=int, default=0, dest="forward", metavar="N", help="Cycle N presets forward")
    parser.add_argument(
        "--previous", type=int, default=0, dest="backward", metavar="N", help="Cycle N presets backward"
    )
    parser.add_argument(
        "-g", "--max-generations", type=int, default=1000, help="Maximum generations to run (default: 1000)"
    )
    parser.add_argument(
        "--population",
        type=float,
        default=0.5,
        help="Initial population rate for random presets, 0.0-1.0 (default: 0.5)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")
    parser.add_argument("--show-grid", action="store_true", help="Show initial and final grid states")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--list-presets", action="store_true", help="List available presets and exit")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.forward < 0:
        errors.append("--next must be non-negative")

    if args.backward < 0:
        errors.append("--previous must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format a finish reason for display."""
    if reason == "cycle":
        length = stats["cycle_length"]
        if length == 1:
            return "Stable (still life)"
        return f"Cycle of length {length} (starting at generation {stats['cycle_start_generation']})"
    if reason == "extinction":
        return "Extinction (all cells died)"
    if reason == "max_generations":
        return "Reached maximum generations"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results."""
    print(f"\nPreset '{stats['preset']}' finished after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]} ({stats['boundary'].lower()} edges)")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")


def main(argv=None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIPresetRunner()

    if not validate_args(args):
        return 1

    try:
        cli.select(args.preset, args.forward, args.backward)
    except IndexError as e:
        print(f"Error: {e}")
        return 1
    except KeyError:
        print(f"Error: Preset '{args.preset}' not found")
        print(f"Available presets: {', '.join(cli.table.names())}")
        return 1

    if args.list_presets:
        cli.list_presets()
        return 0

    try:
        final_generation, reason, stats = cli.run_simulation(
            max_generations=args.max_generations,
            population_rate=args.population,
            seed=args.seed,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
