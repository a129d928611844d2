"""JSON formatter for loc-analyzer."""

import json

from ..models import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the full result, per-file records included, as indented JSON."""

    def format(self, result: AnalysisResult, detailed: bool = False) -> str:
        # JSON is always maximally detailed; ``detailed`` is accepted for interface parity
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
