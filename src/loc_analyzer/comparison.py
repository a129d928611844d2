"""Comparison engine: grand-total deltas between two analysis results."""

from typing import Tuple

from .models import AnalysisResult, ComparisonResult, ComparisonRow

# (row label, AnalysisResult attribute), in display order
COMPARISON_METRICS: Tuple[Tuple[str, str], ...] = (
    ("Total Files", "total_files"),
    ("Lines of Code", "total_code"),
    ("Comments", "total_comments"),
    ("Blank Lines", "total_blanks"),
)


def compare(a: AnalysisResult, b: AnalysisResult) -> ComparisonResult:
    """Compare two results metric by metric; ``delta = b - a``."""
    rows = []
    for label, attr in COMPARISON_METRICS:
        value_a = int(getattr(a, attr))
        value_b = int(getattr(b, attr))
        rows.append(ComparisonRow(metric=label, value_a=value_a, value_b=value_b, delta=value_b - value_a))
    return ComparisonResult(path_a=a.root_path, path_b=b.root_path, rows=tuple(rows))


def format_delta(delta: int) -> str:
    """Signed delta for display: explicit ``+`` for gains, ``-`` for losses."""
    if delta > 0:
        return f"+{delta}"
    return str(delta)
