"""Report rendering: pick a formatter once, then write the result.

The format switch lives here and nowhere else. Comparison mode has its own
entry point and never consults the requested format.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console

from ..logging_config import get_logger
from ..models import AnalysisResult, ComparisonResult
from ..output import write_output
from .base import BaseFormatter, OutputFormat
from .comparison_formatter import ComparisonFormatter
from .csv_formatter import CsvFormatter
from .html_formatter import HtmlFormatter
from .json_formatter import JsonFormatter
from .table_formatter import TableFormatter

logger = get_logger(__name__)

Destination = Optional[Union[str, Path]]


def get_formatter(
    fmt: Union[OutputFormat, str], template_path: Optional[Union[str, Path]] = None
) -> BaseFormatter:
    """Get a formatter instance by format.

    Args:
        fmt: One of "table", "json", "csv", "html"
        template_path: Alternate HTML template (html only)

    Raises:
        InvalidConfigError: If fmt is not recognized
    """
    output_format = OutputFormat.parse(fmt)
    if output_format is OutputFormat.TABLE:
        return TableFormatter()
    if output_format is OutputFormat.JSON:
        return JsonFormatter()
    if output_format is OutputFormat.CSV:
        return CsvFormatter()
    if output_format is OutputFormat.HTML:
        return HtmlFormatter(template_path)
    raise AssertionError(f"unhandled output format: {output_format}")


def render(
    result: AnalysisResult,
    fmt: Union[OutputFormat, str] = OutputFormat.TABLE,
    detailed: bool = False,
    destination: Destination = None,
    stream: Optional[TextIO] = None,
    console: Optional[Console] = None,
    template_path: Optional[Union[str, Path]] = None,
) -> None:
    """Render ``result`` in ``fmt`` to a file, a stream or stdout.

    Args:
        result: Analysis to render
        fmt: Output format
        detailed: Expand the table view with comment/blank columns
        destination: File to write (overwritten atomically); None writes to stdout
        stream: Stream used instead of stdout
        console: Rich console for the table view on a terminal (keeps colour)
        template_path: Alternate HTML template

    Raises:
        RenderError: If the report cannot be produced or written
    """
    output_format = OutputFormat.parse(fmt)
    formatter = get_formatter(output_format, template_path=template_path)

    if console is not None and destination is None and isinstance(formatter, TableFormatter):
        console.print(*formatter.renderables(result, detailed))
        return

    text = formatter.format(result, detailed=detailed)
    write_output(text, destination, stream=stream, fmt=output_format.value)


def render_comparison(
    comparison: ComparisonResult,
    destination: Destination = None,
    stream: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> None:
    """Render the table-style comparison view; no other format applies."""
    formatter = ComparisonFormatter()
    if console is not None and destination is None:
        console.print(*formatter.renderables(comparison))
        return
    write_output(formatter.format(comparison), destination, stream=stream, fmt="comparison")
