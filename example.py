#!/usr/bin/env python3
"""
Example usage of the cellpresets package.
"""

from cellpresets import GameOfLife, PresetTable


def main():
    """Run a few generations of every preset."""
    table = PresetTable()

    for _ in range(table.count()):
        game = GameOfLife(table, seed=1)
        preset = game.preset
        print(f"[{table.active_index}] {preset.name} ({preset.boundary.name}, {preset.seed.name})")
        print(game.grid)

        for _ in range(4):
            game.step()
        print(f"Generation {game.generation}, population {game.population}:")
        print(game.grid)
        print()

        table.next_preset()


if __name__ == "__main__":
    main()
