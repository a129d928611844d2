"""Tests for scanning/lines.py and the language table."""

from pathlib import Path

import pytest

from loc_analyzer.scanning import LineCounts, classify_lines, get_language_config, language_for

PYTHON = get_language_config("Python")
C = get_language_config("C")
LUA = get_language_config("Lua")
JSON = get_language_config("JSON")
HTML = get_language_config("HTML")
JAVASCRIPT = get_language_config("JavaScript")
RUST = get_language_config("Rust")


class TestClassifyLines:
    def test_empty_text(self):
        assert classify_lines("", PYTHON) == LineCounts()

    def test_whitespace_only_lines_are_blank(self):
        assert classify_lines("   \n\t\n", PYTHON) == LineCounts(blanks=2)

    def test_line_comments(self):
        text = "# header\nx = 1\n    # indented comment\n"
        assert classify_lines(text, PYTHON) == LineCounts(code=1, comments=2)

    def test_trailing_comment_is_code(self):
        assert classify_lines("x = 1  # set x\n", PYTHON) == LineCounts(code=1)

    def test_multiline_docstring(self):
        text = 'def f():\n    """\n    Summary.\n\n    """\n    return 1\n'
        assert classify_lines(text, PYTHON) == LineCounts(code=2, comments=3, blanks=1)

    def test_block_comment_spanning_lines(self):
        text = "/*\n * licence\n */\nint main(void) {\n}\n"
        assert classify_lines(text, C) == LineCounts(code=2, comments=3)

    def test_code_around_inline_block(self):
        text = "int x; /* note */\n/* note */ int y;\n/* a */ /* b */\n"
        assert classify_lines(text, C) == LineCounts(code=2, comments=1)

    def test_code_after_block_close(self):
        text = "/* start\nend */ int z;\n"
        assert classify_lines(text, C) == LineCounts(code=1, comments=1)

    def test_block_opener_wins_over_line_prefix(self):
        text = "--[[ long\ncomment\n]]\n-- short\nlocal x = 1\n"
        assert classify_lines(text, LUA) == LineCounts(code=1, comments=4)

    def test_language_without_comments(self):
        text = '{\n  "a": 1\n}\n'
        assert classify_lines(text, JSON) == LineCounts(code=3)

    def test_xml_comments(self):
        text = "<!-- nav -->\n<div>\n<!--\n  old\n-->\n</div>\n"
        assert classify_lines(text, HTML) == LineCounts(code=2, comments=4)

    def test_crlf_line_endings(self):
        assert classify_lines("a = 1\r\n\r\nb = 2\r\n", PYTHON) == LineCounts(code=2, blanks=1)

    def test_form_feed_does_not_split_lines(self):
        assert classify_lines("x = 1\x0cy = 2\n", PYTHON) == LineCounts(code=1)

    def test_unicode_line_separator_does_not_split_lines(self):
        assert classify_lines("a = '\u2028'\n", PYTHON) == LineCounts(code=1)

    def test_total(self):
        assert LineCounts(code=3, comments=2, blanks=1).total == 6


class TestLanguageLookup:
    @pytest.mark.parametrize(
        "filename,language",
        [
            ("main.py", "Python"),
            ("LIB.RS", "Rust"),
            ("index.tsx", "TSX"),
            ("Makefile", "Makefile"),
            ("Dockerfile", "Dockerfile"),
            ("CMakeLists.txt", "CMake"),
            ("notes.txt", "Plain Text"),
        ],
    )
    def test_language_for(self, filename, language):
        assert language_for(Path("src") / filename).name == language

    def test_unknown_extension(self):
        assert language_for(Path("archive.xyz")) is None

    def test_get_language_config_case_insensitive(self):
        assert get_language_config("python") is PYTHON

    def test_get_language_config_unknown(self):
        with pytest.raises(KeyError):
            get_language_config("Brainfuck")


class TestStringLiterals:
    def test_glob_pattern_does_not_open_block(self):
        text = 'const files = glob("src/*.js");\nconst a = 1;\nconst b = 2;\nexport { a, b };\n'
        assert classify_lines(text, JAVASCRIPT) == LineCounts(code=4)

    def test_block_opener_inside_c_string(self):
        text = 'char *s = "/*";\nint x;\n/* real */\n'
        assert classify_lines(text, C) == LineCounts(code=2, comments=1)

    def test_line_prefix_inside_string(self):
        text = 'const url = "http://example.com";\n'
        assert classify_lines(text, JAVASCRIPT) == LineCounts(code=1)

    def test_hash_inside_python_string(self):
        text = 'x = "#not a comment"\ny = \'#\'  # real comment\n# only comment\n'
        assert classify_lines(text, PYTHON) == LineCounts(code=2, comments=1)

    def test_escaped_quote_keeps_string_open(self):
        text = 'char *s = "a\\"/*";\nint y;\n'
        assert classify_lines(text, C) == LineCounts(code=2)

    def test_template_literal(self):
        text = "const re = `/*`;\nlet n = 0;\n"
        assert classify_lines(text, JAVASCRIPT) == LineCounts(code=2)

    def test_quote_inside_comment_is_ignored(self):
        text = "// don't stop\n/* it's\nfine */\nint z;\n"
        assert classify_lines(text, C) == LineCounts(code=1, comments=3)

    def test_rust_lifetime_is_not_a_string(self):
        text = "fn f<'a>(s: &'a str) {} // keep\n// comment\n"
        assert classify_lines(text, RUST) == LineCounts(code=1, comments=1)

    def test_docstring_still_a_comment(self):
        text = '"""Summary with a "quote"."""\nx = 1\n'
        assert classify_lines(text, PYTHON) == LineCounts(code=1, comments=1)
