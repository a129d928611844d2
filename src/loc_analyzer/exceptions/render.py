"""Rendering exceptions: template expansion and output writing."""

from pathlib import Path
from typing import Optional

from .base import LocAnalyzerError


class RenderError(LocAnalyzerError):
    """Raised when a report cannot be rendered in the requested format."""

    def __init__(self, fmt: str, reason: str, message: Optional[str] = None):
        super().__init__(
            message or f"Failed to render {fmt} report",
            details={"format": fmt, "reason": reason},
        )
        self.fmt = fmt
        self.reason = reason


class TemplateRenderError(RenderError):
    """Raised when the HTML template is unreadable or cannot be fully bound."""

    def __init__(self, template: str, reason: str):
        super().__init__("html", reason, message=f"Failed to render HTML template: {template}")
        self.template = template


class OutputWriteError(RenderError):
    """Raised when the report cannot be written to its destination."""

    def __init__(self, path: Path, reason: str, fmt: str = "report"):
        super().__init__(fmt, reason, message=f"Cannot write output file: {path}")
        self.details["path"] = str(path)
        self.path = path
