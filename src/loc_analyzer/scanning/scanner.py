"""Line scanner: walks a directory tree and counts lines per file.

Language detection and comment syntax come from LanguageConfig entries
(languages.py); this module only decides which files to read.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Collection, Dict, List, Optional

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, ScannerError
from ..logging_config import get_logger
from ..models import FileRecord
from .languages import LanguageConfig, language_for
from .lines import classify_lines

logger = get_logger(__name__)

# Binary extensions: never try to read these as text.
BINARY_EXTENSIONS = frozenset(
    {
        ".exe",
        ".dll",
        ".so",
        ".dylib",
        ".o",
        ".a",
        ".lib",
        ".class",
        ".jar",
        ".pyc",
        ".pyo",
        ".wasm",
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".bmp",
        ".ico",
        ".webp",
        ".mp3",
        ".mp4",
        ".wav",
        ".zip",
        ".tar",
        ".gz",
        ".bz2",
        ".xz",
        ".7z",
        ".pdf",
        ".ttf",
        ".otf",
        ".woff",
        ".woff2",
        ".db",
        ".sqlite",
        ".bin",
    }
)

_SNIFF_BYTES = 8192


def normalize_exclusions(exclusions: Collection[str]) -> frozenset[str]:
    """Lower-case exclusion identifiers and strip a leading dot.

    ``"py"``, ``".py"`` and ``"Python"`` are all accepted; the first two match
    by extension, the last by language name.
    """
    return frozenset(e.strip().lower().lstrip(".") for e in exclusions if e.strip())


class LineScanner:
    """Default Scanner: a sorted os.walk plus per-language line classification."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self._skip_dirs = frozenset(self.config.skip_dirs)

    def scan(self, root: Path, exclusions: Collection[str] = ()) -> Dict[str, List[FileRecord]]:
        """
        Count lines of every recognised source file under ``root``.

        Args:
            root: Directory to walk
            exclusions: Extensions or language names to leave out

        Returns:
            Language name -> file records, languages in first-encountered order

        Raises:
            ScannerError: If the root itself cannot be listed
        """
        root = Path(root)
        excluded = normalize_exclusions(exclusions)
        grouped: Dict[str, List[FileRecord]] = {}
        files_read = files_skipped = files_errored = 0
        # Track visited directories to break symlink loops when following links
        visited: set[tuple[int, int]] = set()

        def on_error(err: OSError) -> None:
            if err.filename and Path(err.filename) == root:
                raise ScannerError(root, err.strerror or str(err))
            logger.warning(f"Cannot list directory {err.filename}: {err.strerror or err}")

        walker = os.walk(root, onerror=on_error, followlinks=self.config.follow_symlinks)
        for dirpath, dirnames, filenames in walker:
            if self.config.follow_symlinks and not self._first_visit(dirpath, visited):
                dirnames[:] = []
                continue
            dirnames[:] = sorted(d for d in dirnames if not self._skip_dir(d))
            current = Path(dirpath)

            for filename in sorted(filenames):
                filepath = current / filename
                lang = self._language_for(filepath, excluded)
                if lang is None:
                    files_skipped += 1
                    continue

                try:
                    record = self._count_file(root, filepath, lang)
                except FileAccessError as e:
                    files_errored += 1
                    logger.warning(str(e))
                    continue

                if record is None:
                    files_skipped += 1
                    continue

                grouped.setdefault(lang.name, []).append(record)
                files_read += 1

        logger.debug(
            f"Scanned {root}: {files_read} files counted, {files_skipped} skipped, "
            f"{files_errored} unreadable"
        )
        return grouped

    # ── Skip logic ─────────────────────────────────────────────

    @staticmethod
    def _first_visit(dirpath: str, visited: set[tuple[int, int]]) -> bool:
        try:
            st = os.stat(dirpath)
        except OSError:
            return False
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug(f"Skipped (already visited via symlink): {dirpath}")
            return False
        visited.add(key)
        return True

    def _skip_dir(self, name: str) -> bool:
        if name in self._skip_dirs:
            return True
        return name.startswith(".") and not self.config.allow_hidden_files

    def _language_for(self, filepath: Path, excluded: frozenset[str]) -> Optional[LanguageConfig]:
        name = filepath.name
        if name.startswith(".") and not self.config.allow_hidden_files:
            return None
        if filepath.suffix.lower() in BINARY_EXTENSIONS:
            return None
        if filepath.is_symlink() and not self.config.follow_symlinks:
            return None

        lang = language_for(filepath)
        if lang is None:
            return None
        if excluded and (
            filepath.suffix.lower().lstrip(".") in excluded or lang.name.lower() in excluded
        ):
            return None
        return lang

    # ── Counting ───────────────────────────────────────────────

    def _count_file(self, root: Path, filepath: Path, lang: LanguageConfig) -> Optional[FileRecord]:
        try:
            size = filepath.stat().st_size
            if size > self.config.max_file_size_bytes:
                logger.debug(f"Skipped (too large, {size} bytes): {filepath}")
                return None
            with open(filepath, "rb") as f:
                data = f.read()
        except OSError as e:
            raise FileAccessError(filepath, f"Cannot read file: {e}")

        if b"\x00" in data[:_SNIFF_BYTES]:
            logger.debug(f"Skipped (binary): {filepath}")
            return None

        counts = classify_lines(data.decode("utf-8", errors="replace"), lang)
        return FileRecord(
            name=filepath.relative_to(root).as_posix(),
            code=counts.code,
            comments=counts.comments,
            blanks=counts.blanks,
        )
