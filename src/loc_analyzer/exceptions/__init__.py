"""Exception hierarchy for loc-analyzer."""

from .analysis import AnalysisError, FileAccessError, ScannerError
from .base import LocAnalyzerError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError
from .render import OutputWriteError, RenderError, TemplateRenderError

__all__ = [
    "LocAnalyzerError",
    "AnalysisError",
    "ScannerError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "RenderError",
    "TemplateRenderError",
    "OutputWriteError",
]
