"""Line classification: code, comment or blank.

A line is blank when it holds only whitespace, a comment when every
non-whitespace character belongs to a comment, and code otherwise. Block
comments may span lines; nesting is not tracked. Single-line string literals
are skipped, so a comment delimiter inside quotes is code. Lines break on
line feeds only; a trailing carriage return is stripped as whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .languages import LanguageConfig


@dataclass(frozen=True)
class LineCounts:
    code: int = 0
    comments: int = 0
    blanks: int = 0

    @property
    def total(self) -> int:
        return self.code + self.comments + self.blanks


def classify_lines(text: str, config: LanguageConfig) -> LineCounts:
    """Count code, comment and blank lines of ``text`` using ``config``'s syntax."""
    code = comments = blanks = 0
    open_block: Optional[str] = None  # closing delimiter we are waiting for

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    for raw in lines:
        line = raw.strip()
        if not line:
            blanks += 1
            continue

        has_code, open_block = _scan_line(line, config, open_block)
        if has_code:
            code += 1
        else:
            comments += 1

    return LineCounts(code=code, comments=comments, blanks=blanks)


def _scan_line(
    line: str, config: LanguageConfig, open_block: Optional[str]
) -> tuple[bool, Optional[str]]:
    """Walk one stripped line; return (has_code, block still open after it)."""
    has_code = False
    i = 0
    n = len(line)

    while i < n:
        if open_block is not None:
            end = line.find(open_block, i)
            if end == -1:
                return has_code, open_block
            i = end + len(open_block)
            open_block = None
            continue

        # Block openers first: Lua's "--[[" beats "--", Python's """ beats "
        opener = _match_block_open(line, i, config)
        if opener is not None:
            start, close = opener
            i += len(start)
            open_block = close
            continue

        quote = _match_quote(line, i, config)
        if quote is not None:
            start, close = quote
            has_code = True
            i = _skip_string(line, i + len(start), close)
            continue

        if any(line.startswith(prefix, i) for prefix in config.line_comments):
            return has_code, None

        if not line[i].isspace():
            has_code = True
        i += 1

    return has_code, open_block


def _match_block_open(
    line: str, i: int, config: LanguageConfig
) -> Optional[tuple[str, str]]:
    for start, close in config.block_comments:
        if line.startswith(start, i):
            return start, close
    return None


def _match_quote(
    line: str, i: int, config: LanguageConfig
) -> Optional[tuple[str, str]]:
    for start, close in config.quotes:
        if line.startswith(start, i):
            return start, close
    return None


def _skip_string(line: str, i: int, close: str) -> int:
    """Return the index just past the string closed by ``close``; unclosed runs to EOL."""
    n = len(line)
    while i < n:
        if line[i] == "\\":
            i += 2
            continue
        if line.startswith(close, i):
            return i + len(close)
        i += 1
    return n
