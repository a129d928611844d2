"""Root of the loc-analyzer error hierarchy."""

from typing import Dict, Optional


class LocAnalyzerError(Exception):
    """Raised for any failure the CLI reports as a one-line error.

    ``details`` carries machine-readable context (path, reason, ...) and is
    appended to the message as ``key=value`` pairs.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
