"""Analysis-related exceptions: scanning and file access."""

from pathlib import Path

from .base import LocAnalyzerError


class AnalysisError(LocAnalyzerError):
    """Base class for analysis-related errors."""
    pass


class ScannerError(AnalysisError):
    """Raised when the scanner cannot produce counts for a directory tree."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Failed to scan directory: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class FileAccessError(AnalysisError):
    """Raised when a single file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
