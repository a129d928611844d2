"""Base formatter interface and output format variants."""

import io
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Union

from rich.console import Console, RenderableType

from ..exceptions import InvalidConfigError
from ..models import AnalysisResult

# Width used when a rich table is rendered to a file or string
TEXT_WIDTH = 120


class OutputFormat(str, Enum):
    """The closed set of report representations."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    HTML = "html"

    @classmethod
    def parse(cls, value: Union["OutputFormat", str]) -> "OutputFormat":
        if isinstance(value, OutputFormat):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidConfigError(
                "format", value, f"choose from: {', '.join(f.value for f in cls)}"
            )


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, result: AnalysisResult, detailed: bool = False) -> str:
        """Return the complete report as a string."""


def render_plain(renderables: Iterable[RenderableType], width: int = TEXT_WIDTH) -> str:
    """Render rich objects to plain text (no colour codes)."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    for renderable in renderables:
        console.print(renderable)
    return buffer.getvalue()
