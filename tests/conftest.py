"""Shared test fixtures for loc-analyzer tests."""

from datetime import datetime, timezone

import pytest

from loc_analyzer.aggregator import StatsAggregator
from loc_analyzer.models import FileRecord

FIXED_NOW = datetime(2024, 5, 17, 12, 30, 0, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock that advances by ``step`` seconds per reading."""

    def __init__(self, start=100.0, step=0.25):
        self.value = start
        self.step = step

    def __call__(self):
        current = self.value
        self.value += self.step
        return current


@pytest.fixture
def fixed_aggregator():
    """Aggregator with a deterministic clock and timestamp."""
    return StatsAggregator(clock=FakeClock(), now=lambda: FIXED_NOW)


@pytest.fixture
def per_language_files():
    """Scanner output for a small mixed tree, in encounter order."""
    return {
        "Python": [
            FileRecord("app/main.py", code=120, comments=30, blanks=20),
            FileRecord("app/util.py", code=80, comments=10, blanks=10),
        ],
        "Rust": [
            FileRecord("core/lib.rs", code=600, comments=50, blanks=40),
        ],
        "Markdown": [
            FileRecord("README.md", code=0, comments=0, blanks=0),
            FileRecord("docs/guide.md", code=200, comments=0, blanks=60),
        ],
    }


@pytest.fixture
def sample_tree(tmp_path):
    """A small on-disk source tree with known line counts.

    main.py     code=3 comments=2 blanks=1
    lib.rs      code=2 comments=3 blanks=1
    pkg/util.py code=1 comments=0 blanks=0
    """
    root = tmp_path / "project"
    (root / "pkg").mkdir(parents=True)
    (root / "main.py").write_text(
        "# entry point\n"
        "import sys\n"
        "\n"
        '"""Module docstring."""\n'
        "def main():\n"
        "    return sys.argv\n"
    )
    (root / "lib.rs").write_text(
        "// crate root\n"
        "/* block\n"
        "   comment */\n"
        "\n"
        "fn add(a: i32, b: i32) -> i32 {\n"
        "}\n"
    )
    (root / "pkg" / "util.py").write_text("VALUE = 1\n")
    return root
