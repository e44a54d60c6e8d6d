"""cellframe CLI - Typer-based command line interface."""

from typing import Annotated

import typer
from rich.console import Console

from cellframe.cli.commands import sample_command
from cellframe.cli.utils import CLIContext

# Create main app and console
app = typer.Typer(
    name="cellframe",
    help="cellframe: preview property-based generators for cells, columns and series",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
):
    """
    cellframe CLI callback - sets up context for all commands.

    Commands access the shared CLIContext through ctx.obj.
    """
    ctx.obj = CLIContext(console=console, verbose=verbose)


app.command(name="sample")(sample_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
