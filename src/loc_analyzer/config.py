"""Configuration loading and management for loc-analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.loc-analyzer.toml)
    3. Project config (./loc-analyzer.toml)
    4. Explicit config file
    5. Environment variables (LOC_ANALYZER_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(sort_by="files", min_lines=100)
    >>> config.sort_by
    'files'
    >>> config.min_lines
    100
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import LocAnalyzerError

Verbosity = Literal["quiet", "normal", "verbose"]

OUTPUT_FORMATS = ("table", "json", "csv", "html")

ENV_PREFIX = "LOC_ANALYZER_"
GLOBAL_CONFIG_NAME = ".loc-analyzer.toml"
PROJECT_CONFIG_NAME = "loc-analyzer.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Reporting:
            sort_by: Field languages are ranked by (unknown values sort by code)
            min_lines: Hide languages with fewer code lines (totals unaffected)
            detailed: Show comment/blank breakdown in the table view
            output_format: One of table, json, csv, html
            html_template: Alternate HTML report template

        Scanning:
            exclude: File extensions or language names to leave out
            skip_dirs: Directory names never descended into
            allow_hidden_files: Include dot-files and dot-directories
            follow_symlinks: Follow symbolic links during the walk
            max_file_size_mb: Larger files are skipped

        Output control:
            verbosity: Logging verbosity level
    """

    # Reporting
    sort_by: str = "code"
    min_lines: Optional[int] = None
    detailed: bool = False
    output_format: str = "table"
    html_template: Optional[str] = None

    # Scanning
    exclude: list[str] = field(default_factory=list)
    skip_dirs: list[str] = field(
        default_factory=lambda: [
            ".git",
            ".hg",
            ".svn",
            "node_modules",
            "vendor",
            "target",
            "__pycache__",
            "venv",
            ".venv",
            ".tox",
            ".mypy_cache",
            ".pytest_cache",
            ".ruff_cache",
            "dist",
            "build",
            ".eggs",
        ]
    )
    allow_hidden_files: bool = False
    follow_symlinks: bool = False
    max_file_size_mb: float = 10.0

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.min_lines is not None and self.min_lines < 0:
            raise ValueError("min_lines must be non-negative")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(
    config_file: Optional[Path] = None, cwd: Optional[Path] = None, **overrides
) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        cwd: Directory searched for the project config (default: current directory)
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset flags do not mask file settings

    Returns:
        Validated AnalysisConfig instance

    Raises:
        LocAnalyzerError: If a config file or value is invalid
    """
    merged: dict = {}

    # 1. Global config
    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except LocAnalyzerError:
            raise
        except Exception as e:
            raise LocAnalyzerError(f"Invalid global config '{global_config}': {e}")

    # 2. Project config
    project_config = (cwd or Path.cwd()) / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except LocAnalyzerError:
            raise
        except Exception as e:
            raise LocAnalyzerError(f"Invalid project config '{project_config}': {e}")

    # 3. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise LocAnalyzerError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except LocAnalyzerError:
            raise
        except Exception as e:
            raise LocAnalyzerError(f"Invalid config file '{config_file}': {e}")

    # 4. Environment variables
    merged.update(_load_env_vars())

    # 5. CLI overrides
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise LocAnalyzerError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LOC_ANALYZER_* environment variables.

    Supported environment variables:
        LOC_ANALYZER_SORT_BY: str
        LOC_ANALYZER_MIN_LINES: int
        LOC_ANALYZER_DETAILED: bool (true/false/1/0)
        LOC_ANALYZER_OUTPUT_FORMAT: table/json/csv/html
        LOC_ANALYZER_HTML_TEMPLATE: path
        LOC_ANALYZER_ALLOW_HIDDEN_FILES: bool
        LOC_ANALYZER_FOLLOW_SYMLINKS: bool
        LOC_ANALYZER_MAX_FILE_SIZE_MB: float
        LOC_ANALYZER_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any LOC_ANALYZER_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise LocAnalyzerError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass
        field_name: Field name for error messages

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # List fields (exclude, skip_dirs) belong in TOML
    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        LocAnalyzerError: If neither tomllib nor tomli is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise LocAnalyzerError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    # Allow settings to live under a [loc-analyzer] table as well as top level
    section = data.get("loc-analyzer")
    if isinstance(section, dict):
        return section
    return data
