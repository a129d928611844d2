"""Aggregation of raw per-file counts into an AnalysisResult.

The aggregator is pure apart from two injected callables: ``clock`` for
measuring duration and ``now`` for the result timestamp. Tests replace both.
"""

from __future__ import annotations

import time
from datetime import datetime
from enum import Enum
from typing import Callable, List, Mapping, Optional, Sequence, Union

from .logging_config import get_logger
from .models import AnalysisResult, FileRecord, LanguageSummary

logger = get_logger(__name__)

# Scanner output: language name -> file records, in first-encountered order
PerLanguageFiles = Mapping[str, Sequence[FileRecord]]


class SortKey(str, Enum):
    """Field a language listing is ranked by (always descending)."""

    CODE = "code"
    FILES = "files"
    COMMENTS = "comments"
    BLANKS = "blanks"
    TOTAL = "total"

    @classmethod
    def parse(cls, value: Union["SortKey", str, None]) -> "SortKey":
        """Resolve a sort key, falling back to CODE for unset or unknown values."""
        if isinstance(value, SortKey):
            return value
        if value is None or value == "":
            return cls.CODE
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        # Config files can carry any TOML type here
        logger.warning(
            f"Unknown sort key {value!r}; sorting by code instead "
            f"(choose from: {', '.join(k.value for k in cls)})"
        )
        return cls.CODE

    def value_of(self, summary: LanguageSummary) -> int:
        if self is SortKey.FILES:
            return summary.file_count
        return getattr(summary, self.value)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class StatsAggregator:
    """Turns scanner output into a ranked, percentage-annotated result."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        now: Callable[[], datetime] = _local_now,
    ):
        self.clock = clock
        self.now = now

    def aggregate(
        self,
        per_language_files: PerLanguageFiles,
        root_path: str,
        min_lines: Optional[int] = None,
        sort_by: Union[SortKey, str, None] = None,
        started_at: Optional[float] = None,
    ) -> AnalysisResult:
        """Build an AnalysisResult.

        Args:
            per_language_files: Language name -> file records, in the order the
                languages were first encountered.
            root_path: Canonical path of the analyzed tree.
            min_lines: Keep only languages with at least this many code lines.
                Totals and percentages are unaffected.
            sort_by: Ranking field; unknown values fall back to ``code``.
            started_at: Clock reading taken when raw-count collection began.
                Defaults to the start of this call.
        """
        if started_at is None:
            started_at = self.clock()
        key = SortKey.parse(sort_by)

        # Grand totals come first and cover every language.
        total_code = sum(f.code for files in per_language_files.values() for f in files)
        total_comments = sum(f.comments for files in per_language_files.values() for f in files)
        total_blanks = sum(f.blanks for files in per_language_files.values() for f in files)
        total_files = sum(len(files) for files in per_language_files.values())

        summaries: List[LanguageSummary] = [
            LanguageSummary.from_files(name, files, total_code)
            for name, files in per_language_files.items()
        ]

        if min_lines is not None:
            summaries = [s for s in summaries if s.code >= min_lines]

        # sorted() is stable under reverse=True, so ties keep encounter order
        summaries = sorted(summaries, key=key.value_of, reverse=True)

        duration = max(0.0, self.clock() - started_at)

        logger.debug(
            f"Aggregated {len(per_language_files)} languages "
            f"({len(summaries)} listed): {total_files} files, {total_code} code lines"
        )

        return AnalysisResult(
            timestamp=self.now().isoformat(),
            root_path=root_path,
            duration_seconds=duration,
            languages=tuple(summaries),
            total_files=total_files,
            total_code=total_code,
            total_comments=total_comments,
            total_blanks=total_blanks,
        )


def aggregate(
    per_language_files: PerLanguageFiles,
    root_path: str,
    min_lines: Optional[int] = None,
    sort_by: Union[SortKey, str, None] = None,
    started_at: Optional[float] = None,
) -> AnalysisResult:
    """Aggregate with the default clock and timestamp source."""
    return StatsAggregator().aggregate(
        per_language_files,
        root_path,
        min_lines=min_lines,
        sort_by=sort_by,
        started_at=started_at,
    )


__all__ = ["PerLanguageFiles", "SortKey", "StatsAggregator", "aggregate"]

