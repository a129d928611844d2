"""Data models for loc-analyzer.

All models are frozen: a result is built once by its producing component and
handed downstream by reference. Sequences are tuples for the same reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

from .number_format import calculate_percentage, format_duration


@dataclass(frozen=True)
class FileRecord:
    """Raw line counts for a single source file, as produced by a Scanner."""

    name: str
    code: int
    comments: int
    blanks: int

    @property
    def total(self) -> int:
        return self.code + self.comments + self.blanks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "comments": self.comments,
            "blanks": self.blanks,
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileRecord":
        return cls(
            name=d["name"],
            code=int(d["code"]),
            comments=int(d["comments"]),
            blanks=int(d["blanks"]),
        )


@dataclass(frozen=True)
class LanguageSummary:
    """Per-language totals over a sequence of files.

    Use :meth:`from_files` to build one; the sums are derived from ``files``
    there and nowhere else.
    """

    name: str
    files: Tuple[FileRecord, ...]
    file_count: int
    code: int
    comments: int
    blanks: int
    total: int
    percentage: float

    @classmethod
    def from_files(
        cls, name: str, files: Iterable[FileRecord], grand_total_code: int
    ) -> "LanguageSummary":
        records = tuple(files)
        code = sum(f.code for f in records)
        comments = sum(f.comments for f in records)
        blanks = sum(f.blanks for f in records)
        return cls(
            name=name,
            files=records,
            file_count=len(records),
            code=code,
            comments=comments,
            blanks=blanks,
            total=code + comments + blanks,
            percentage=calculate_percentage(code, grand_total_code),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "files": [f.to_dict() for f in self.files],
            "file_count": self.file_count,
            "code": self.code,
            "comments": self.comments,
            "blanks": self.blanks,
            "total": self.total,
            "percentage": self.percentage,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LanguageSummary":
        files = tuple(FileRecord.from_dict(f) for f in d.get("files", []))
        return cls(
            name=d["name"],
            files=files,
            file_count=int(d["file_count"]),
            code=int(d["code"]),
            comments=int(d["comments"]),
            blanks=int(d["blanks"]),
            total=int(d["total"]),
            percentage=float(d["percentage"]),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one directory tree.

    Grand totals cover every language the scanner reported, including
    languages later dropped from ``languages`` by ``min_lines`` filtering.
    """

    timestamp: str
    root_path: str
    duration_seconds: float
    languages: Tuple[LanguageSummary, ...] = ()
    total_files: int = 0
    total_code: int = 0
    total_comments: int = 0
    total_blanks: int = 0

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_seconds)

    @property
    def total_lines(self) -> int:
        return self.total_code + self.total_comments + self.total_blanks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "root_path": self.root_path,
            "duration_seconds": self.duration_seconds,
            "formatted_duration": self.formatted_duration,
            "total_files": self.total_files,
            "total_code": self.total_code,
            "total_comments": self.total_comments,
            "total_blanks": self.total_blanks,
            "languages": [lang.to_dict() for lang in self.languages],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "AnalysisResult":
        return cls(
            timestamp=d["timestamp"],
            root_path=d["root_path"],
            duration_seconds=float(d["duration_seconds"]),
            languages=tuple(LanguageSummary.from_dict(lang) for lang in d.get("languages", [])),
            total_files=int(d["total_files"]),
            total_code=int(d["total_code"]),
            total_comments=int(d["total_comments"]),
            total_blanks=int(d["total_blanks"]),
        )


@dataclass(frozen=True)
class ComparisonRow:
    """One metric compared between two analysis results."""

    metric: str
    value_a: int
    value_b: int
    delta: int  # value_b - value_a


@dataclass(frozen=True)
class ComparisonResult:
    """Grand-total deltas between two directory trees."""

    path_a: str
    path_b: str
    rows: Tuple[ComparisonRow, ...] = field(default_factory=tuple)

    def row(self, metric: str) -> ComparisonRow:
        for r in self.rows:
            if r.metric == metric:
                return r
        raise KeyError(metric)
