"""JSON report formatter.

WHY: History storage, dashboards and other tools want the full analysis
as structured data. The JSON report is the machine-readable form of a
FillerAnalysisResult.

HOW: Serializes result.to_dict() with 2-space indentation. The shape is
described by FillerReport_format_spec.json at the repository root.

RULES:
- Keys are snake_case, matching the HTTP API response
- category_counts always lists all four categories
- Output suffix: "-fillers.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from typing import List

from filler_analyzer.core.models import FillerAnalysisResult
from filler_analyzer.formatters.base import BaseFormatter, FormatterOutput


class JSONReportFormatter(BaseFormatter):
    """Formatter that produces the JSON analysis report."""

    @property
    def name(self) -> str:
        return "JSON Report"

    @property
    def suffix(self) -> str:
        return "-fillers.json"

    def format(self, transcript: str, result: FillerAnalysisResult) -> List[FormatterOutput]:
        content = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=content + "\n",
                media_type="application/json",
            )
        ]
