"""CLI entry point."""

import typer

app = typer.Typer(
    name="loc-analyzer",
    help="Analyze lines of code in a directory",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main  # noqa: F401, E402
