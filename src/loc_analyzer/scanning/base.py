"""Scanner protocol: the narrow seam between file walking and aggregation."""

from pathlib import Path
from typing import Collection, Dict, List, Protocol

from ..models import FileRecord


class Scanner(Protocol):
    """Walks a tree and returns per-file line counts grouped by language.

    Languages must be keyed in the order they were first encountered; the
    aggregator relies on it to break sort ties deterministically.
    """

    def scan(self, root: Path, exclusions: Collection[str] = ()) -> Dict[str, List[FileRecord]]: ...
