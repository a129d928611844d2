"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

# Reports go to stdout; diagnostics and the spinner go to stderr
console = Console()
err_console = Console(stderr=True)


def resolve_config(
    cwd: Path,
    config: Optional[Path] = None,
    sort_by: Optional[str] = None,
    min_lines: Optional[int] = None,
    exclude: Optional[List[str]] = None,
    detailed: bool = False,
    output_format: Optional[str] = None,
    template: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options; unset options defer to config files."""
    overrides = {
        "sort_by": sort_by,
        "min_lines": min_lines,
        "exclude": list(exclude) if exclude else None,
        "detailed": True if detailed else None,
        "output_format": output_format,
        "html_template": str(template) if template else None,
    }
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, cwd=cwd, **overrides)
