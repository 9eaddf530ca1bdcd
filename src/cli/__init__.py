"""Command-line entry points (Typer + Rich)."""
