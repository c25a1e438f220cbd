"""User interface frontends for the preset runner."""

from .cli import CLIPresetRunner

__all__ = ["CLIPresetRunner"]
