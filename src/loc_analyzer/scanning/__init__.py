"""Scanning: turn a directory tree into per-language file line counts."""

from .base import Scanner
from .languages import LANGUAGES, LanguageConfig, get_language_config, language_for
from .lines import LineCounts, classify_lines
from .scanner import LineScanner, normalize_exclusions

__all__ = [
    "Scanner",
    "LineScanner",
    "LanguageConfig",
    "LANGUAGES",
    "language_for",
    "get_language_config",
    "LineCounts",
    "classify_lines",
    "normalize_exclusions",
]
