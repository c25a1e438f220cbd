"""Tests for the CLI frontend."""

import argparse
from unittest.mock import patch
from io import StringIO

import pytest
from cellpresets.frontends.cli import (
    CLIPresetRunner,
    create_parser,
    format_finish_reason,
    print_results,
    validate_args,
    main,
)


class TestCLIPresetRunner:
    """Test cases for the CLI preset runner."""

    def test_initialization(self):
        """Test CLI initialization."""
        cli = CLIPresetRunner()
        assert cli.table.count() == 3
        assert cli.table.active_index == 0

    def test_select_by_index(self):
        """Test selecting a preset by index."""
        cli = CLIPresetRunner()
        assert cli.select("1") == 1
        assert cli.table.active().name == "glider"

    def test_select_by_name(self):
        """Test selecting a preset by name."""
        cli = CLIPresetRunner()
        assert cli.select("Random") == 2

    def test_select_cycling_wraps(self):
        """Cycling past either end wraps around."""
        cli = CLIPresetRunner()
        assert cli.select("2", forward=1) == 0
        assert cli.select("0", backward=1) == 2
        assert cli.select(None, forward=4) == 0

    def test_select_large_cycle_counts(self):
        """Huge cycle counts reduce to a net shift around the table."""
        cli = CLIPresetRunner()
        assert cli.select("0", forward=10**9) == 1
        assert cli.select("0", backward=10**9) == 2
        assert cli.select("1", forward=10**9, backward=10**9) == 1

    def test_select_out_of_range(self):
        """Invalid indices are rejected without changing the selection."""
        cli = CLIPresetRunner()
        cli.select("1")
        with pytest.raises(IndexError):
            cli.select("7")
        with pytest.raises(IndexError):
            cli.select("-1")
        assert cli.table.active_index == 1

    def test_select_unknown_name(self):
        """Test that unknown names are rejected."""
        cli = CLIPresetRunner()
        with pytest.raises(KeyError):
            cli.select("pulsar")

    def test_run_simulation_glider(self):
        """Test running the glider preset."""
        cli = CLIPresetRunner()
        cli.select("glider")

        final_gen, reason, stats = cli.run_simulation(max_generations=500)

        assert reason == "cycle"
        assert final_gen == 141
        assert stats["preset"] == "glider"
        assert stats["initial_population"] == 5
        assert "duration_seconds" in stats

    def test_run_simulation_random(self):
        """Test running the random preset with a seed."""
        cli = CLIPresetRunner()
        cli.select("2")

        _, reason, stats = cli.run_simulation(max_generations=200, population_rate=1.0, seed=5)

        assert stats["initial_population"] == 35
        assert reason in ["extinction", "cycle", "max_generations"]

    @patch("sys.stdout", new_callable=StringIO)
    def test_run_simulation_show_grid(self, mock_stdout):
        """Test grid output."""
        cli = CLIPresetRunner()
        cli.run_simulation(max_generations=1, verbose=True, show_grid=True)

        output = mock_stdout.getvalue()
        assert "Running preset [0] flower" in output
        assert "Initial grid:" in output
        assert ".***..." in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_list_presets(self, mock_stdout):
        """Test preset listing."""
        cli = CLIPresetRunner()
        cli.select("1")
        cli.list_presets()

        output = mock_stdout.getvalue()
        assert "Available presets:" in output
        assert "[0] flower: dead edges, 5 cells" in output
        assert "*[1] glider: wrapped edges" in output
        assert "[2] random: dead edges, random fill" in output


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_defaults(self):
        """Test default values."""
        args = create_parser().parse_args([])
        assert args.preset is None
        assert args.forward == 0
        assert args.backward == 0
        assert args.max_generations == 1000
        assert args.population == 0.5
        assert args.seed is None
        assert args.list_presets is False

    def test_parse_args(self):
        """Test parsing the full argument set."""
        args = create_parser().parse_args(
            ["-p", "glider", "--next", "2", "--previous", "1", "-g", "50", "--seed", "9", "-v", "--show-grid"]
        )
        assert args.preset == "glider"
        assert args.forward == 2
        assert args.backward == 1
        assert args.max_generations == 50
        assert args.seed == 9
        assert args.verbose is True
        assert args.show_grid is True


class TestValidation:
    """Test argument validation."""

    def _args(self, **overrides):
        values = dict(population=0.5, max_generations=100, forward=0, backward=0)
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_valid(self):
        """Test validation with valid arguments."""
        assert validate_args(self._args()) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid(self, mock_stdout):
        """Test validation collects every error."""
        assert validate_args(self._args(population=1.5, max_generations=0, forward=-1)) is False

        output = mock_stdout.getvalue()
        assert "Population rate must be between 0.0 and 1.0" in output
        assert "Max generations must be positive" in output
        assert "--next must be non-negative" in output


class TestFormatting:
    """Test result formatting."""

    def test_format_finish_reason(self):
        """Test finish reason messages."""
        assert format_finish_reason("cycle", {"cycle_length": 1}) == "Stable (still life)"
        assert "length 140" in format_finish_reason("cycle", {"cycle_length": 140, "cycle_start_generation": 0})
        assert "Extinction" in format_finish_reason("extinction", {})
        assert "maximum" in format_finish_reason("max_generations", {})

    @patch("sys.stdout", new_callable=StringIO)
    def test_print_results(self, mock_stdout):
        """Test verbose results output."""
        stats = {
            "preset": "flower",
            "boundary": "DEAD",
            "grid_size": (7, 5),
            "initial_population": 5,
            "population": 4,
            "population_density": 4 / 35,
            "duration_seconds": 0.01,
            "cycle_length": 0,
        }
        print_results(12, "max_generations", stats, verbose=True)

        output = mock_stdout.getvalue()
        assert "Preset 'flower' finished after 12 generations" in output
        assert "Grid size: 7x5 (dead edges)" in output


class TestMain:
    """Test the main entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_list_presets(self, mock_stdout):
        """Test --list-presets."""
        assert main(["--list-presets"]) == 0
        assert "glider" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_run(self, mock_stdout):
        """Test a plain run."""
        assert main(["--preset", "glider", "-g", "500"]) == 0
        output = mock_stdout.getvalue()
        assert "Preset 'glider' finished after 141 generations" in output
        assert "Cycle of length 140" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_out_of_range_rejected(self, mock_stdout):
        """Out-of-range selections are reported, not raised."""
        assert main(["--preset", "3"]) == 1
        assert "Error: Preset index 3 out of range (0-2)" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_unknown_name_rejected(self, mock_stdout):
        """Unknown preset names are reported with the available names."""
        assert main(["--preset", "pulsar"]) == 1
        output = mock_stdout.getvalue()
        assert "Error: Preset 'pulsar' not found" in output
        assert "flower, glider, random" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_malformed_index_rejected(self, mock_stdout):
        """Malformed numeric selections are reported, not raised."""
        assert main(["--preset=--1"]) == 1
        assert main(["--preset", "\u00b2"]) == 1
        output = mock_stdout.getvalue()
        assert "Error: Preset '--1' not found" in output
        assert "Error: Preset '\u00b2' not found" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_invalid_arguments(self, mock_stdout):
        """Invalid arguments exit with an error code."""
        assert main(["--population", "2.0"]) == 1
        assert "Error: Invalid arguments:" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_seeded_random_run(self, mock_stdout):
        """Seeded random runs are reproducible."""
        assert main(["--preset", "0", "--previous", "1", "--seed", "11", "-g", "200"]) == 0
        first = mock_stdout.getvalue()
        mock_stdout.truncate(0)
        mock_stdout.seek(0)

        assert main(["--preset", "0", "--previous", "1", "--seed", "11", "-g", "200"]) == 0
        assert "Preset 'random'" in first
        assert mock_stdout.getvalue() == first
