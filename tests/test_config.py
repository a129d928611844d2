"""Tests for configuration loading and merging."""

import os

import pytest

from loc_analyzer.config import AnalysisConfig, load_config
from loc_analyzer.exceptions import LocAnalyzerError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Empty home and working directory, no LOC_ANALYZER_* variables."""
    home = tmp_path / "home"
    cwd = tmp_path / "work"
    home.mkdir()
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("LOC_ANALYZER_"):
            monkeypatch.delenv(key)
    return home, cwd


class TestAnalysisConfig:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.sort_by == "code"
        assert config.min_lines is None
        assert config.output_format == "table"
        assert config.detailed is False
        assert ".git" in config.skip_dirs
        assert config.max_file_size_bytes == 10 * 1024 * 1024

    def test_negative_min_lines(self):
        with pytest.raises(ValueError):
            AnalysisConfig(min_lines=-1)

    def test_unknown_output_format(self):
        with pytest.raises(ValueError):
            AnalysisConfig(output_format="xml")

    def test_non_positive_file_size(self):
        with pytest.raises(ValueError):
            AnalysisConfig(max_file_size_mb=0)


class TestLoadConfig:
    def test_no_sources_gives_defaults(self, isolated):
        _, cwd = isolated
        assert load_config(cwd=cwd) == AnalysisConfig()

    def test_project_file_overrides_global(self, isolated):
        home, cwd = isolated
        (home / ".loc-analyzer.toml").write_text('sort_by = "files"\nmin_lines = 5\n')
        (cwd / "loc-analyzer.toml").write_text("min_lines = 50\n")
        config = load_config(cwd=cwd)
        assert config.sort_by == "files"
        assert config.min_lines == 50

    def test_section_table_accepted(self, isolated):
        _, cwd = isolated
        (cwd / "loc-analyzer.toml").write_text('[loc-analyzer]\nexclude = ["md", "json"]\n')
        assert load_config(cwd=cwd).exclude == ["md", "json"]

    def test_explicit_file(self, isolated, tmp_path):
        _, cwd = isolated
        explicit = tmp_path / "custom.toml"
        explicit.write_text('output_format = "csv"\n')
        assert load_config(config_file=explicit, cwd=cwd).output_format == "csv"

    def test_missing_explicit_file(self, isolated, tmp_path):
        _, cwd = isolated
        with pytest.raises(LocAnalyzerError, match="Config file not found"):
            load_config(config_file=tmp_path / "nope.toml", cwd=cwd)

    def test_malformed_toml(self, isolated):
        _, cwd = isolated
        (cwd / "loc-analyzer.toml").write_text("sort_by = \n")
        with pytest.raises(LocAnalyzerError, match="Invalid project config"):
            load_config(cwd=cwd)

    def test_env_overrides_files(self, isolated, monkeypatch):
        _, cwd = isolated
        (cwd / "loc-analyzer.toml").write_text("min_lines = 50\ndetailed = false\n")
        monkeypatch.setenv("LOC_ANALYZER_MIN_LINES", "7")
        monkeypatch.setenv("LOC_ANALYZER_DETAILED", "yes")
        config = load_config(cwd=cwd)
        assert config.min_lines == 7
        assert config.detailed is True

    def test_invalid_env_bool(self, isolated, monkeypatch):
        _, cwd = isolated
        monkeypatch.setenv("LOC_ANALYZER_FOLLOW_SYMLINKS", "maybe")
        with pytest.raises(LocAnalyzerError, match="LOC_ANALYZER_FOLLOW_SYMLINKS"):
            load_config(cwd=cwd)

    def test_overrides_win_and_none_is_ignored(self, isolated, monkeypatch):
        _, cwd = isolated
        monkeypatch.setenv("LOC_ANALYZER_SORT_BY", "blanks")
        config = load_config(cwd=cwd, sort_by="total", min_lines=None)
        assert config.sort_by == "total"
        assert config.min_lines is None

    def test_verbose_and_quiet_map_to_verbosity(self, isolated):
        _, cwd = isolated
        assert load_config(cwd=cwd, verbose=True).verbosity == "verbose"
        assert load_config(cwd=cwd, quiet=True).verbosity == "quiet"

    def test_invalid_value_wrapped(self, isolated):
        _, cwd = isolated
        with pytest.raises(LocAnalyzerError, match="Invalid configuration"):
            load_config(cwd=cwd, output_format="pdf")

    def test_unknown_key_wrapped(self, isolated):
        _, cwd = isolated
        (cwd / "loc-analyzer.toml").write_text("colour = true\n")
        with pytest.raises(LocAnalyzerError, match="Invalid configuration"):
            load_config(cwd=cwd)
