"""Public API for loc-analyzer.

Example:
    >>> from loc_analyzer import analyze
    >>>
    >>> result = analyze("/path/to/code")
    >>> result.total_code
    12345
    >>>
    >>> # With customization
    >>> result = analyze("/path/to/code", exclude=["md", "json"], sort_by="files", min_lines=100)
"""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Optional, Union

from .aggregator import SortKey, StatsAggregator
from .config import AnalysisConfig
from .exceptions import InvalidPathError, LocAnalyzerError, ScannerError
from .logging_config import get_logger
from .models import AnalysisResult
from .scanning import LineScanner, Scanner

logger = get_logger(__name__)


def resolve_root(path: Union[str, Path]) -> Path:
    """Return the canonical absolute form of a directory to analyze.

    Raises:
        InvalidPathError: If the path does not exist or is not a directory
    """
    candidate = Path(path).expanduser()
    if not candidate.exists():
        raise InvalidPathError(candidate, "path does not exist")
    if not candidate.is_dir():
        raise InvalidPathError(candidate, "path is not a directory")
    try:
        return candidate.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(candidate, f"cannot resolve path: {e}")


def analyze(
    path: Union[str, Path],
    *,
    scanner: Optional[Scanner] = None,
    exclude: Optional[Collection[str]] = None,
    min_lines: Optional[int] = None,
    sort_by: Union[SortKey, str, None] = None,
    config: Optional[AnalysisConfig] = None,
    aggregator: Optional[StatsAggregator] = None,
) -> AnalysisResult:
    """Analyze one directory tree.

    The path is validated before any scanning starts. Arguments left as None
    take their value from ``config`` (defaults when no config is given).

    Args:
        path: Directory to analyze
        scanner: Line counter to use (default: LineScanner)
        exclude: Extensions or language names to leave out
        min_lines: Hide languages with fewer code lines
        sort_by: Ranking field (code, files, comments, blanks, total)
        config: Loaded configuration
        aggregator: Aggregator to use (tests inject a fixed clock)

    Returns:
        Immutable AnalysisResult

    Raises:
        InvalidPathError: If ``path`` is not an existing directory
        ScannerError: If the scanner fails on this path
    """
    config = config or AnalysisConfig()
    root = resolve_root(path)
    scanner = scanner or LineScanner(config)
    aggregator = aggregator or StatsAggregator()

    exclusions = list(config.exclude if exclude is None else exclude)
    logger.info(f"Analyzing {root}")

    started_at = aggregator.clock()
    try:
        per_language = scanner.scan(root, exclusions)
    except LocAnalyzerError:
        raise
    except (OSError, UnicodeError) as e:
        raise ScannerError(root, str(e)) from e

    return aggregator.aggregate(
        per_language,
        root_path=str(root),
        min_lines=config.min_lines if min_lines is None else min_lines,
        sort_by=config.sort_by if sort_by is None else sort_by,
        started_at=started_at,
    )

