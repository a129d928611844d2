"""Box-drawn table formatter for terminal output."""

from typing import List

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..models import AnalysisResult
from ..number_format import format_count, format_duration
from .base import BaseFormatter, render_plain

COMPACT_HEADERS = ("Language", "Files", "Lines of Code", "% of Codebase")
DETAILED_HEADERS = ("Language", "Files", "Code", "Comments", "Blanks", "Total", "% of Codebase")


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


class TableFormatter(BaseFormatter):
    """Language summary table followed by a timing block.

    Rows appear in the order of ``result.languages``; ranking is the
    aggregator's job.
    """

    def format(self, result: AnalysisResult, detailed: bool = False) -> str:
        return render_plain(self.renderables(result, detailed))

    def renderables(self, result: AnalysisResult, detailed: bool = False) -> List[RenderableType]:
        return [
            Text("\nDirectory Analysis Summary", style="bold"),
            self.build_table(result, detailed),
            Text("\nPerformance:", style="bold"),
            Text(f"  Time taken: {format_duration(result.duration_seconds)}\n"),
        ]

    def build_table(self, result: AnalysisResult, detailed: bool = False) -> Table:
        table = Table(box=box.SQUARE, show_lines=True, header_style="bold")
        headers = DETAILED_HEADERS if detailed else COMPACT_HEADERS
        for i, header in enumerate(headers):
            table.add_column(header, justify="left" if i == 0 else "right")

        for lang in result.languages:
            if detailed:
                cells = [
                    format_count(lang.file_count),
                    format_count(lang.code),
                    format_count(lang.comments),
                    format_count(lang.blanks),
                    format_count(lang.total),
                ]
            else:
                cells = [format_count(lang.file_count), format_count(lang.code)]
            table.add_row(
                Text(lang.name, style="green"),
                *cells,
                format_percentage(lang.percentage),
            )

        return table
