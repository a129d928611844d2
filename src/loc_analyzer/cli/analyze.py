"""Main command: analyze one directory, or compare two."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..api import analyze, resolve_root
from ..comparison import compare
from ..exceptions import LocAnalyzerError
from ..formatters import render, render_comparison
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, resolve_config
from .progress import analysis_spinner

SORT_KEYS = ("code", "files", "comments", "blanks", "total")
FORMATS = ("table", "json", "csv", "html")


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="The path to analyze (default: current directory)",
        show_default=False,
    ),
    compare_path: Optional[Path] = typer.Argument(
        None,
        help="Optional second path; prints a comparison table instead of a report",
        show_default=False,
    ),
    detailed: bool = typer.Option(
        False,
        "--detailed",
        "-d",
        help="Show detailed breakdown including blank lines and comments",
    ),
    sort_by: Optional[str] = typer.Option(
        None,
        "--sort-by",
        "-s",
        help=f"Sort languages by: {' | '.join(SORT_KEYS)} (default: code)",
    ),
    min_lines: Optional[int] = typer.Option(
        None,
        "--min-lines",
        help="Minimum lines of code for a language to be listed",
        min=0,
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="File extension or language to exclude (repeatable)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (default: table)",
        click_type=click.Choice(FORMATS, case_sensitive=False),
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: standard output)",
        dir_okay=False,
    ),
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        help="HTML report template",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        hidden=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only report errors; no spinner",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Disable the progress spinner",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Analyze lines of code in a directory.

    Counts code, comment and blank lines per language and ranks languages
    by their share of the codebase. Given a second path, prints a
    comparison of the two trees instead (any --format is ignored).

    [bold cyan]Examples:[/bold cyan]

      loc-analyzer

      loc-analyzer src --detailed --sort-by total

      loc-analyzer . --format json --output loc.json

      loc-analyzer old/ new/
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]loc-analyzer[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet)
    cwd = Path.cwd()

    try:
        settings = resolve_config(
            cwd,
            config=config,
            sort_by=sort_by,
            min_lines=min_lines,
            exclude=exclude,
            detailed=detailed,
            output_format=output_format.lower() if output_format else None,
            template=template,
            verbose=verbose,
            quiet=quiet,
        )
        show_progress = not (quiet or no_progress)

        # Validate every path before any analysis begins
        root = resolve_root(path if path is not None else cwd)
        compare_root = resolve_root(compare_path) if compare_path is not None else None

        with analysis_spinner("Analyzing directory...", console=err_console, enabled=show_progress):
            result = analyze(root, config=settings)

        if compare_root is not None:
            if settings.output_format != "table":
                logger.warning(
                    f"Comparison mode always prints a table; ignoring format "
                    f"{settings.output_format!r}"
                )
            try:
                with analysis_spinner(
                    "Analyzing directory...", console=err_console, enabled=show_progress
                ):
                    second = analyze(compare_root, config=settings)
            except LocAnalyzerError:
                err_console.print(
                    f"[yellow]Analysis of {escape(str(root))} completed "
                    f"({result.total_files} files, {result.total_code} lines of code); "
                    f"comparison aborted.[/yellow]"
                )
                raise

            render_comparison(compare(result, second), destination=output, console=console)
            if output is not None and not quiet:
                err_console.print(f"Comparison saved to: [bold green]{escape(str(output))}[/bold green]")
            return

        render(
            result,
            settings.output_format,
            detailed=settings.detailed,
            destination=output,
            console=console,
            template_path=settings.html_template,
        )
        if output is not None and not quiet:
            err_console.print(f"Report saved to: [bold green]{escape(str(output))}[/bold green]")

    except typer.Exit:
        raise

    except LocAnalyzerError as e:
        logger.debug(f"{e.__class__.__name__}: {e}", exc_info=verbose)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
