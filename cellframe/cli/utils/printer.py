"""CLI Printer for consistent output formatting."""

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cellframe.core.cell import Cell, CellKind, cell_to_json
from cellframe.core.column import Column
from cellframe.core.series import Series

CELL_STYLES = {
    CellKind.VALUE: "green",
    CellKind.NA: "yellow",
    CellKind.NM: "red",
}


def format_cell(cell: Cell[Any]) -> str:
    """Render a cell with rich markup."""
    style = CELL_STYLES[cell.kind]
    return f"[{style}]{escape(repr(cell))}[/{style}]"


def sample_to_json(sample: Any) -> Any:
    """Convert a generated cell, column or series into JSON-friendly data."""
    if isinstance(sample, Cell):
        return cell_to_json(sample)
    if isinstance(sample, Column):
        return [cell_to_json(cell) for cell in sample]
    if isinstance(sample, Series):
        return [{"key": key, "cell": cell_to_json(cell)} for key, cell in sample]
    raise TypeError(f"Cannot render sample of type {type(sample).__name__}")


class CliPrinter:
    """Centralized printer for CLI output.

    Handles table and JSON rendering of generated samples so commands
    stay free of formatting logic.
    """

    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def print_samples(self, samples: list[Any], title: str) -> None:
        """Print samples as a rich table, one row per sample."""
        table = Table(title=title, show_lines=False)
        table.add_column("#", justify="right")
        table.add_column("size", justify="right")
        table.add_column("value/NA/NM", justify="center")
        table.add_column("sample", overflow="fold")

        for index, sample in enumerate(samples, start=1):
            cells = self._cells_of(sample)
            counts = "/".join(str(sum(1 for c in cells if c.kind is kind)) for kind in CellKind)
            table.add_row(str(index), str(len(cells)), counts, self._render(sample))

        self.console.print(table)

    def print_json(self, samples: list[Any]) -> None:
        """Print samples as a JSON array on stdout."""
        typer.echo(json.dumps([sample_to_json(s) for s in samples], indent=2, default=str))

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {message}")

    def _cells_of(self, sample: Any) -> list[Cell[Any]]:
        if isinstance(sample, Cell):
            return [sample]
        if isinstance(sample, Series):
            return sample.cells
        return list(sample)

    def _render(self, sample: Any) -> str:
        if isinstance(sample, Cell):
            return format_cell(sample)
        if isinstance(sample, Series):
            return ", ".join(f"{escape(repr(key))} -> {format_cell(cell)}" for key, cell in sample)
        return ", ".join(format_cell(cell) for cell in sample)
