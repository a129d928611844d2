"""Spinner shown while a directory is being scanned."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


@contextmanager
def analysis_spinner(
    message: str, console: Console | None = None, enabled: bool = True
) -> Iterator[None]:
    """Show a transient spinner on stderr for the duration of the block."""
    if not enabled:
        yield
        return

    progress = Progress(
        SpinnerColumn(style="green"),
        TextColumn("{task.description}"),
        TimeElapsedColumn(),
        console=console or Console(stderr=True),
        transient=True,
    )
    with progress:
        progress.add_task(message, total=None)
        yield
