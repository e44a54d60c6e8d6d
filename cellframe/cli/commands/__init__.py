"""CLI commands module for cellframe."""

from cellframe.cli.commands.sample import sample_command

__all__ = [
    "sample_command",
]
