"""CLI utilities for cellframe."""

from cellframe.cli.utils.context import CLIContext
from cellframe.cli.utils.printer import CliPrinter, format_cell, sample_to_json

__all__ = ["CLIContext", "CliPrinter", "format_cell", "sample_to_json"]
