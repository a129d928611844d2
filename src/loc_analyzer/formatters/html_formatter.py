"""HTML formatter: expands a report template with the analysis result.

Templates use ``string.Template`` placeholders (``$name`` / ``${name}``);
a literal dollar sign is written ``$$``. Expansion is strict: a placeholder
with no binding, or a malformed one, fails the whole render.

Placeholders bound for every report:
    timestamp, root_path, duration_seconds, formatted_duration,
    total_files, total_code, total_comments, total_blanks, total_lines,
    language_count, languages (table rows), file_details (per-language
    file listings)
"""

from html import escape
from pathlib import Path
from string import Template
from typing import Dict, Optional, Union

from ..exceptions import TemplateRenderError
from ..logging_config import get_logger
from ..models import AnalysisResult, LanguageSummary
from ..number_format import format_count
from .base import BaseFormatter

logger = get_logger(__name__)

DEFAULT_TEMPLATE = Path(__file__).resolve().parent.parent / "templates" / "report.html"


class HtmlFormatter(BaseFormatter):
    """Render the result through a report template."""

    def __init__(self, template_path: Optional[Union[str, Path]] = None):
        self.template_path = Path(template_path) if template_path else DEFAULT_TEMPLATE

    def format(self, result: AnalysisResult, detailed: bool = False) -> str:
        template = self._load_template()
        bindings = self.bindings(result)
        try:
            return template.substitute(bindings)
        except KeyError as e:
            raise TemplateRenderError(
                str(self.template_path), f"no value bound for placeholder ${{{e.args[0]}}}"
            ) from e
        except ValueError as e:
            raise TemplateRenderError(str(self.template_path), f"malformed template: {e}") from e

    def bindings(self, result: AnalysisResult) -> Dict[str, str]:
        return {
            "timestamp": escape(result.timestamp),
            "root_path": escape(result.root_path),
            "duration_seconds": repr(result.duration_seconds),
            "formatted_duration": escape(result.formatted_duration),
            "total_files": str(result.total_files),
            "total_code": str(result.total_code),
            "total_comments": str(result.total_comments),
            "total_blanks": str(result.total_blanks),
            "total_lines": str(result.total_lines),
            "language_count": str(len(result.languages)),
            "languages": "\n".join(_language_row(lang) for lang in result.languages),
            "file_details": "\n".join(_file_details(lang) for lang in result.languages),
        }

    def _load_template(self) -> Template:
        try:
            text = self.template_path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateRenderError(str(self.template_path), f"cannot read template: {e}") from e
        logger.debug(f"Loaded HTML template {self.template_path}")
        return Template(text)


def _language_row(lang: LanguageSummary) -> str:
    return (
        "<tr>"
        f'<td class="lang">{escape(lang.name)}</td>'
        f'<td class="num">{lang.file_count}</td>'
        f'<td class="num" title="{lang.code}">{format_count(lang.code)}</td>'
        f'<td class="num" title="{lang.comments}">{format_count(lang.comments)}</td>'
        f'<td class="num" title="{lang.blanks}">{format_count(lang.blanks)}</td>'
        f'<td class="num" title="{lang.total}">{format_count(lang.total)}</td>'
        f'<td class="num">{lang.percentage:.1f}%</td>'
        f'<td class="bar"><div style="width: {lang.percentage:.2f}%"></div></td>'
        "</tr>"
    )


def _file_details(lang: LanguageSummary) -> str:
    rows = "\n".join(
        "<tr>"
        f"<td>{escape(f.name)}</td>"
        f'<td class="num">{f.code}</td>'
        f'<td class="num">{f.comments}</td>'
        f'<td class="num">{f.blanks}</td>'
        f'<td class="num">{f.total}</td>'
        "</tr>"
        for f in lang.files
    )
    return (
        f"<details><summary>{escape(lang.name)} "
        f"({lang.file_count} file{'s' if lang.file_count != 1 else ''})</summary>\n"
        "<table><thead><tr><th>File</th><th>Code</th><th>Comments</th>"
        "<th>Blanks</th><th>Total</th></tr></thead>\n"
        f"<tbody>\n{rows}\n</tbody></table></details>"
    )
