"""Command line interface for cellframe."""
