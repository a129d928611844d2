"""Tests for the formatters package."""

import csv
import io
import json

import pytest
from rich.console import Console

from loc_analyzer.exceptions import InvalidConfigError, TemplateRenderError
from loc_analyzer.formatters import (
    CsvFormatter,
    HtmlFormatter,
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    get_formatter,
    render,
)
from loc_analyzer.models import AnalysisResult


@pytest.fixture
def result(fixed_aggregator, per_language_files):
    return fixed_aggregator.aggregate(per_language_files, "/src/project")


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("table"), TableFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("csv"), CsvFormatter)
        assert isinstance(get_formatter(OutputFormat.HTML), HtmlFormatter)

    def test_case_insensitive(self):
        assert OutputFormat.parse("JSON") is OutputFormat.JSON

    def test_unknown_format(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            get_formatter("yaml")
        assert exc_info.value.key == "format"


class TestTableFormatter:
    def test_compact_table(self, result):
        text = TableFormatter().format(result)
        assert "Directory Analysis Summary" in text
        for header in ("Language", "Files", "Lines of Code", "% of Codebase"):
            assert header in text
        assert "Comments" not in text
        assert "60.0%" in text
        assert "Performance:" in text
        assert "Time taken: 250.000 ms" in text

    def test_rows_follow_result_order(self, result):
        text = TableFormatter().format(result)
        assert text.index("Rust") < text.index("Python") < text.index("Markdown")

    def test_detailed_table(self, result):
        text = TableFormatter().format(result, detailed=True)
        for header in ("Code", "Comments", "Blanks", "Total"):
            assert header in text
        assert "690" in text

    def test_large_counts_use_prefixes(self, fixed_aggregator):
        from loc_analyzer.models import FileRecord

        big = fixed_aggregator.aggregate(
            {"C": [FileRecord("big.c", code=1_234_567, comments=0, blanks=0)]}, "/c"
        )
        text = TableFormatter().format(big)
        assert "1.2M" in text
        assert "100.0%" in text

    def test_empty_result_still_renders(self, fixed_aggregator):
        text = TableFormatter().format(fixed_aggregator.aggregate({}, "/empty"))
        assert "Language" in text
        assert "Time taken" in text

    def test_plain_text_has_no_colour(self, result):
        assert "\x1b[" not in TableFormatter().format(result)


class TestJsonFormatter:
    def test_document_shape(self, result):
        data = json.loads(JsonFormatter().format(result))
        assert data["root_path"] == "/src/project"
        assert data["timestamp"] == "2024-05-17T12:30:00+00:00"
        assert data["formatted_duration"] == "250.000 ms"
        assert data["total_code"] == 1000
        assert [lang["name"] for lang in data["languages"]] == ["Rust", "Python", "Markdown"]

    def test_includes_per_file_records(self, result):
        data = json.loads(JsonFormatter().format(result))
        python = data["languages"][1]
        assert python["files"][0] == {
            "name": "app/main.py",
            "code": 120,
            "comments": 30,
            "blanks": 20,
            "total": 170,
        }

    def test_loads_back_into_equal_result(self, result):
        data = json.loads(JsonFormatter().format(result))
        assert AnalysisResult.from_dict(data) == result

    def test_non_ascii_paths_kept(self, fixed_aggregator):
        text = JsonFormatter().format(fixed_aggregator.aggregate({}, "/home/zoë"))
        assert "zoë" in text


class TestCsvFormatter:
    def test_header_and_rows(self, result):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(result))))
        assert rows[0] == [
            "name",
            "file_count",
            "code_lines",
            "comment_lines",
            "blank_lines",
            "total_lines",
            "percentage",
        ]
        assert rows[1] == ["Rust", "1", "600", "50", "40", "690", "60.0"]
        assert len(rows) == 4

    def test_language_names_are_quoted_when_needed(self, fixed_aggregator):
        from loc_analyzer.models import FileRecord

        odd = fixed_aggregator.aggregate({"Lang, Inc": [FileRecord("x", 1, 0, 0)]}, "/x")
        text = CsvFormatter().format(odd)
        assert '"Lang, Inc"' in text

    def test_empty_result_has_only_header(self, fixed_aggregator):
        text = CsvFormatter().format(fixed_aggregator.aggregate({}, "/empty"))
        assert text.strip().count("\n") == 0


class TestHtmlFormatter:
    def test_default_template(self, result):
        html = HtmlFormatter().format(result)
        assert html.startswith("<!DOCTYPE html>")
        assert "Directory Analysis Summary" in html
        assert "/src/project" in html
        assert "app/main.py" in html
        assert "250.000 ms" in html
        assert "${" not in html

    def test_values_are_escaped(self, fixed_aggregator):
        html = HtmlFormatter().format(fixed_aggregator.aggregate({}, "/tmp/<x>&y"))
        assert "/tmp/&lt;x&gt;&amp;y" in html
        assert "<x>" not in html

    def test_custom_template(self, result, tmp_path):
        template = tmp_path / "mini.html"
        template.write_text("$total_code lines in ${language_count} languages, $$0 cost")
        html = HtmlFormatter(template).format(result)
        assert html == "1000 lines in 3 languages, $0 cost"

    def test_unbound_placeholder_fails(self, result, tmp_path):
        template = tmp_path / "bad.html"
        template.write_text("<p>${author}</p>")
        with pytest.raises(TemplateRenderError) as exc_info:
            HtmlFormatter(template).format(result)
        assert "author" in str(exc_info.value)

    def test_malformed_placeholder_fails(self, result, tmp_path):
        template = tmp_path / "bad.html"
        template.write_text("<p>price: $ 5</p>")
        with pytest.raises(TemplateRenderError):
            HtmlFormatter(template).format(result)

    def test_missing_template_fails(self, result, tmp_path):
        with pytest.raises(TemplateRenderError):
            HtmlFormatter(tmp_path / "missing.html").format(result)


class TestRender:
    def test_json_to_stream(self, result):
        buffer = io.StringIO()
        render(result, "json", stream=buffer)
        assert json.loads(buffer.getvalue())["total_files"] == 5

    def test_table_through_console(self, result):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        render(result, "table", console=console)
        assert "Directory Analysis Summary" in buffer.getvalue()

    def test_console_ignored_for_other_formats(self, result):
        console_buffer = io.StringIO()
        stream = io.StringIO()
        console = Console(file=console_buffer, width=120, color_system=None)
        render(result, "csv", stream=stream, console=console)
        assert console_buffer.getvalue() == ""
        assert stream.getvalue().startswith("name,")

    def test_html_to_file(self, result, tmp_path):
        target = tmp_path / "report.html"
        render(result, "html", destination=target)
        assert "Rust" in target.read_text(encoding="utf-8")
