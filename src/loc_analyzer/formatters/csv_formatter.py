"""CSV formatter for loc-analyzer."""

import csv
import io

from ..models import AnalysisResult
from .base import BaseFormatter

CSV_COLUMNS = (
    "name",
    "file_count",
    "code_lines",
    "comment_lines",
    "blank_lines",
    "total_lines",
    "percentage",
)


class CsvFormatter(BaseFormatter):
    """One row per language. Per-file detail is never emitted in CSV."""

    def format(self, result: AnalysisResult, detailed: bool = False) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        for lang in result.languages:
            writer.writerow([
                lang.name,
                lang.file_count,
                lang.code,
                lang.comments,
                lang.blanks,
                lang.total,
                lang.percentage,
            ])
        return output.getvalue()
