"""
CLI Context for cellframe.

Provides shared console, printer and logging setup for all CLI commands.
"""

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.logging import RichHandler

from cellframe.cli.utils.printer import CliPrinter


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    Created once by the app callback and handed to commands through
    ``ctx.obj``.

    Attributes:
        console: Rich console for output
        verbose: Enable debug logging
        printer: CLI printer for formatted output
    """

    console: Console
    verbose: bool = False
    printer: CliPrinter = field(init=False)

    def __post_init__(self):
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)
        self.configure_logging()

    def configure_logging(self) -> None:
        """Route log records through rich on stderr."""
        logging.basicConfig(
            level=logging.DEBUG if self.verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )
