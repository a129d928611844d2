"""Output formatters for loc-analyzer."""

from .base import BaseFormatter, OutputFormat
from .comparison_formatter import ComparisonFormatter
from .csv_formatter import CsvFormatter
from .html_formatter import HtmlFormatter
from .json_formatter import JsonFormatter
from .renderer import get_formatter, render, render_comparison
from .table_formatter import TableFormatter

__all__ = [
    "BaseFormatter",
    "OutputFormat",
    "TableFormatter",
    "JsonFormatter",
    "CsvFormatter",
    "HtmlFormatter",
    "ComparisonFormatter",
    "get_formatter",
    "render",
    "render_comparison",
]
