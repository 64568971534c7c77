"""Plain text filler report with a highlighted transcript.

WHY: Speakers reviewing a practice session want a readable summary (how
many fillers, which kinds, where they cluster, what to work on) and
the transcript itself with every flagged filler marked. No JSON, no
tooling required.

HOW: Builds the report section by section from the FillerAnalysisResult:
totals, categories with percentages, the top five specific fillers, the
beginning/middle/end distribution with a one-line interpretation, the
detection summary, pattern insights, and finally the transcript with
fillers wrapped in square brackets (via the highlight adapter).

RULES:
- Fillers per minute shown with one decimal
- Category percentages are of the total filler count (0% when none)
- Top fillers: count descending, ties in first-seen order, at most five
- Distribution insight ties resolve beginning > middle > end
- Output suffix: "-fillers.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from filler_analyzer.adapters.highlight import FILLER, build_highlight_segments
from filler_analyzer.core.models import DistributionAnalysis, FillerAnalysisResult, FillerCategory
from filler_analyzer.formatters.base import BaseFormatter, FormatterOutput

CATEGORY_LABELS: Dict[FillerCategory, str] = {
    FillerCategory.HESITATION: "Hesitation",
    FillerCategory.DISCOURSE: "Discourse",
    FillerCategory.TEMPORAL: "Temporal",
    FillerCategory.THINKING: "Thinking",
}

TOP_FILLER_LIMIT = 5


def distribution_insight(dist: DistributionAnalysis) -> str:
    """One-sentence reading of the beginning/middle/end distribution."""
    total = dist.beginning + dist.middle + dist.end
    if total == 0:
        return "No fillers detected."
    if dist.beginning == dist.middle == dist.end:
        return "Fillers are spread evenly through your speech."
    highest = max(dist.beginning, dist.middle, dist.end)
    if highest == dist.beginning:
        return (
            "You use more fillers at the beginning. Consider pausing to "
            "gather your thoughts before starting."
        )
    if highest == dist.middle:
        return "Most fillers appear in the middle. Practicing mid-speech pauses could help."
    return "You use more fillers toward the end. Try wrapping up with a clear conclusion."


def top_fillers(counts: Dict[str, int], limit: int = TOP_FILLER_LIMIT) -> List[Tuple[str, int]]:
    """Most frequent specific fillers; sorted() keeps first-seen order on ties."""
    return sorted(counts.items(), key=lambda item: -item[1])[:limit]


def highlight_transcript(transcript: str, result: FillerAnalysisResult) -> str:
    """The transcript with each flagged filler wrapped in [ ]."""
    parts: List[str] = []
    for segment in build_highlight_segments(transcript, result.filler_positions):
        if segment.kind == FILLER:
            parts.append("[{}]".format(segment.text))
        else:
            parts.append(segment.text)
    return "".join(parts)


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces a human-readable filler report."""

    @property
    def name(self) -> str:
        return "Plain Text Report"

    @property
    def suffix(self) -> str:
        return "-fillers.txt"

    def format(self, transcript: str, result: FillerAnalysisResult) -> List[FormatterOutput]:
        total = result.total_filler_words
        lines: List[str] = [
            "Filler Word Report",
            "==================",
            "",
            "Total filler words: {}".format(total),
            "Fillers per minute: {:.1f}".format(result.fillers_per_minute),
            "",
            "Categories:",
        ]

        for category, count in result.category_counts.items():
            share = (count / total * 100) if total else 0.0
            lines.append("  {}: {} ({:.0f}%)".format(CATEGORY_LABELS[category], count, share))

        lines.append("")
        lines.append("Top fillers:")
        ranked = top_fillers(result.specific_filler_counts)
        if ranked:
            for word, count in ranked:
                lines.append("  {}: {}".format(word, count))
        else:
            lines.append("  (none)")

        dist = result.distribution_analysis
        lines.append("")
        lines.append("Distribution: beginning {}, middle {}, end {}".format(
            dist.beginning, dist.middle, dist.end,
        ))
        lines.append("  {}".format(distribution_insight(dist)))

        lines.append("")
        lines.append("Detection: {}".format(result.detection_summary))

        lines.append("")
        lines.append("Insights:")
        if result.patterns.insights:
            for insight in result.patterns.insights:
                lines.append("  - {}".format(insight))
        else:
            lines.append("  (none)")

        lines.append("")
        lines.append("Transcript:")
        lines.append(highlight_transcript(transcript, result))

        content = "\n".join(line.rstrip() for line in lines) + "\n"
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=content,
                media_type="text/plain",
            )
        ]
