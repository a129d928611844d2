"""
loc-analyzer - per-language line counts for a directory tree

Counts code, comment and blank lines per language, ranks languages by
their share of the codebase, and renders the result as a table, JSON, CSV
or an HTML report. Two trees can be compared side by side.
"""

__version__ = "0.1.0"

from .aggregator import SortKey, StatsAggregator, aggregate
from .api import analyze, resolve_root
from .comparison import compare, format_delta
from .formatters import OutputFormat, render, render_comparison
from .models import AnalysisResult, ComparisonResult, ComparisonRow, FileRecord, LanguageSummary
from .number_format import calculate_percentage, format_count, format_duration

__all__ = [
    "analyze",  # Main entry point
    "resolve_root",
    "aggregate",
    "StatsAggregator",
    "SortKey",
    "compare",
    "format_delta",
    "render",
    "render_comparison",
    "OutputFormat",
    "AnalysisResult",
    "LanguageSummary",
    "FileRecord",
    "ComparisonResult",
    "ComparisonRow",
    "format_count",
    "format_duration",
    "calculate_percentage",
]
