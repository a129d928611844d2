"""Language configurations: the single source of truth for comment syntax.

Adding a new language:
  1. Add a LanguageConfig entry to LANGUAGES below.
  2. That's it. LineScanner picks it up automatically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass(frozen=True)
class LanguageConfig:
    """Everything the scanner needs to know about a language."""

    name: str
    extensions: tuple[str, ...]

    # Prefixes that start a comment running to end of line
    line_comments: tuple[str, ...] = ()

    # (open, close) delimiter pairs of block comments
    block_comments: tuple[tuple[str, str], ...] = ()

    # (open, close) delimiters of single-line string literals; comment
    # syntax inside them is ignored. A backslash escapes the next character.
    quotes: tuple[tuple[str, str], ...] = ()

    # Exact file names recognised regardless of extension
    filenames: tuple[str, ...] = field(default_factory=tuple)


# ── Re-usable building blocks ──────────────────────────────────────

_C_LINE = ("//",)
_C_BLOCK = (("/*", "*/"),)
_HASH = ("#",)
_DASH = ("--",)
_XML_BLOCK = (("<!--", "-->"),)
_PY_DOCSTRINGS = (('"""', '"""'), ("'''", "'''"))
_DQ = (('"', '"'),)
_QUOTES = (('"', '"'), ("'", "'"))
_JS_QUOTES = _QUOTES + (("`", "`"),)


def _c_like(
    name: str, *extensions: str, quotes: tuple[tuple[str, str], ...] = _QUOTES
) -> LanguageConfig:
    return LanguageConfig(
        name=name,
        extensions=extensions,
        line_comments=_C_LINE,
        block_comments=_C_BLOCK,
        quotes=quotes,
    )


def _hash_like(
    name: str,
    *extensions: str,
    filenames: tuple[str, ...] = (),
    quotes: tuple[tuple[str, str], ...] = _QUOTES,
) -> LanguageConfig:
    return LanguageConfig(
        name=name,
        extensions=extensions,
        line_comments=_HASH,
        quotes=quotes,
        filenames=filenames,
    )


# ── Language definitions ───────────────────────────────────────────

LANGUAGES: Dict[str, LanguageConfig] = {
    cfg.name: cfg
    for cfg in (
        _c_like("C", ".c"),
        _c_like("C Header", ".h"),
        _c_like("C++", ".cc", ".cpp", ".cxx", ".c++"),
        _c_like("C++ Header", ".hh", ".hpp", ".hxx", ".inl"),
        _c_like("C#", ".cs"),
        _c_like("Go", ".go", quotes=_JS_QUOTES),
        _c_like("Java", ".java"),
        _c_like("JavaScript", ".js", ".mjs", ".cjs", quotes=_JS_QUOTES),
        _c_like("JSX", ".jsx", quotes=_JS_QUOTES),
        _c_like("TypeScript", ".ts", ".mts", ".cts", quotes=_JS_QUOTES),
        _c_like("TSX", ".tsx", quotes=_JS_QUOTES),
        _c_like("Kotlin", ".kt", ".kts"),
        # ' also starts lifetimes
        _c_like("Rust", ".rs", quotes=_DQ),
        _c_like("Scala", ".scala", ".sc"),
        _c_like("Swift", ".swift"),
        _c_like("Dart", ".dart"),
        _c_like("Protocol Buffers", ".proto"),
        _c_like("Sass", ".scss"),
        LanguageConfig(
            name="PHP",
            extensions=(".php",),
            line_comments=("//", "#"),
            block_comments=_C_BLOCK,
            quotes=_QUOTES,
        ),
        LanguageConfig(
            name="Python",
            extensions=(".py", ".pyi", ".pyw"),
            line_comments=_HASH,
            block_comments=_PY_DOCSTRINGS,
            quotes=_QUOTES,
        ),
        LanguageConfig(
            name="Ruby",
            extensions=(".rb", ".rake", ".gemspec"),
            line_comments=_HASH,
            block_comments=(("=begin", "=end"),),
            quotes=_QUOTES,
            filenames=("Rakefile", "Gemfile"),
        ),
        _hash_like("Shell", ".sh", ".bash", ".zsh"),
        _hash_like("Perl", ".pl", ".pm"),
        _hash_like("R", ".r"),
        _hash_like("TOML", ".toml"),
        _hash_like("YAML", ".yaml", ".yml"),
        _hash_like(
            "Makefile",
            ".mk",
            ".mak",
            filenames=("Makefile", "makefile", "GNUmakefile"),
            quotes=(),
        ),
        _hash_like("Dockerfile", ".dockerfile", filenames=("Dockerfile",), quotes=_DQ),
        _hash_like("CMake", ".cmake", filenames=("CMakeLists.txt",), quotes=_DQ),
        _hash_like("INI", ".ini", ".cfg", quotes=()),
        LanguageConfig(
            name="SQL",
            extensions=(".sql",),
            line_comments=_DASH,
            block_comments=_C_BLOCK,
            quotes=_QUOTES,
        ),
        LanguageConfig(
            name="Lua",
            extensions=(".lua",),
            line_comments=_DASH,
            block_comments=(("--[[", "]]"),),
            quotes=_QUOTES,
        ),
        LanguageConfig(
            name="Haskell",
            extensions=(".hs",),
            line_comments=_DASH,
            block_comments=(("{-", "-}"),),
            quotes=_DQ,
        ),
        LanguageConfig(
            name="CSS",
            extensions=(".css",),
            block_comments=_C_BLOCK,
            quotes=_QUOTES,
        ),
        LanguageConfig(
            name="HTML",
            extensions=(".html", ".htm", ".xhtml"),
            block_comments=_XML_BLOCK,
        ),
        LanguageConfig(
            name="XML",
            extensions=(".xml", ".xsd", ".svg"),
            block_comments=_XML_BLOCK,
        ),
        LanguageConfig(name="Markdown", extensions=(".md", ".markdown")),
        LanguageConfig(name="JSON", extensions=(".json",)),
        LanguageConfig(name="Plain Text", extensions=(".txt",)),
    )
}

# ── Lookup tables ──────────────────────────────────────────────────

_BY_FILENAME: Dict[str, LanguageConfig] = {
    fname: cfg for cfg in LANGUAGES.values() for fname in cfg.filenames
}
_BY_EXTENSION: Dict[str, LanguageConfig] = {
    ext: cfg for cfg in LANGUAGES.values() for ext in cfg.extensions
}


def language_for(path: Path) -> Optional[LanguageConfig]:
    """Return the language of ``path``: exact filename first, then extension."""
    cfg = _BY_FILENAME.get(path.name)
    if cfg is not None:
        return cfg
    return _BY_EXTENSION.get(path.suffix.lower())


def get_language_config(name: str) -> LanguageConfig:
    """Look a language up by name (case-insensitive)."""
    for cfg in LANGUAGES.values():
        if cfg.name.lower() == name.lower():
            return cfg
    raise KeyError(f"Unknown language: {name!r}")
