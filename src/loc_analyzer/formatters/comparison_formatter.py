"""Comparison formatter: grand-total deltas between two directories."""

from typing import List

from rich import box
from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from ..comparison import format_delta
from ..models import ComparisonResult
from ..number_format import format_count
from .base import render_plain


def _delta_style(delta: int) -> str:
    if delta > 0:
        return "green"
    if delta < 0:
        return "red"
    return "dim"


class ComparisonFormatter:
    """Table-style comparison view, the only view comparison mode produces."""

    def format(self, comparison: ComparisonResult) -> str:
        return render_plain(self.renderables(comparison))

    def renderables(self, comparison: ComparisonResult) -> List[RenderableType]:
        table = Table(box=box.SQUARE, show_lines=True, header_style="bold")
        table.add_column("Metric")
        table.add_column("Directory 1", justify="right")
        table.add_column("Directory 2", justify="right")
        table.add_column("Difference", justify="right")

        for row in comparison.rows:
            table.add_row(
                row.metric,
                format_count(row.value_a),
                format_count(row.value_b),
                Text(format_delta(row.delta), style=_delta_style(row.delta)),
            )

        return [
            Text("\nDirectory Comparison", style="bold"),
            Text(f"  Directory 1: {comparison.path_a}", style="dim"),
            Text(f"  Directory 2: {comparison.path_b}", style="dim"),
            table,
        ]
