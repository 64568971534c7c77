"""Value objects for filler detection and the analysis report.

WHY: Every stage of the engine (tokenizer, matcher, contextual filter,
aggregator, pattern analyzer) hands data to the next one. Typed,
immutable records make those hand-offs explicit and keep each stage a
pure function of its inputs.

HOW: Frozen dataclasses form a small hierarchy:
  WordToken             one run of letters/apostrophes with offsets
  RawMatch              a catalog hit before overlap/context filtering
  FlaggedFiller         a RawMatch that survived both filters
  FillerPosition        the (word, position) pair reported to callers
  DistributionAnalysis  beginning/middle/end thirds
  PositionPatterns      start/mid/end of speech buckets
  ContextPatterns       rhetorical context buckets
  FillerPatternAnalysis position + context buckets and insights
  FillerAnalysisResult  the complete report

RULES:
- All offsets are character offsets into the transcript string
- Nothing here is mutated after construction
- to_dict() produces the snake_case JSON shape used by the JSON report
  and the HTTP API
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class FillerCategory(str, Enum):
    """Semantic group a filler belongs to.

    RULES:
    - Exactly four members, declared in reporting order
    - Values are the lowercase names used in JSON output
    """

    HESITATION = "hesitation"
    DISCOURSE = "discourse"
    TEMPORAL = "temporal"
    THINKING = "thinking"


@dataclass(frozen=True)
class WordToken:
    """A maximal run of ASCII letters and apostrophes.

    end is exclusive, so text == transcript[start:end].
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class RawMatch:
    """A candidate filler occurrence straight from the regex scan.

    WHY: The matcher collects every catalog hit, including overlapping
    ones ("kind of" and "of" never both survive, but both are found).
    Overlap resolution and the contextual filter decide which survive.

    RULES:
    - text: the matched slice exactly as it appears in the transcript
    - start/length: transcript[start:start + length] == text
    """

    text: str
    category: FillerCategory
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class FlaggedFiller(RawMatch):
    """A match confirmed as a genuine filler. Same fields as RawMatch."""

    @classmethod
    def from_match(cls, match: RawMatch) -> "FlaggedFiller":
        return cls(
            text=match.text,
            category=match.category,
            start=match.start,
            length=match.length,
        )


@dataclass(frozen=True)
class FillerPosition:
    """Where one flagged filler occurs (word as written, character offset)."""

    word: str
    position: int


@dataclass(frozen=True)
class DistributionAnalysis:
    """Flagged-filler counts per third of the transcript."""

    beginning: int = 0
    middle: int = 0
    end: int = 0


@dataclass(frozen=True)
class PositionPatterns:
    """Fillers in the first 20%, the last 20%, and in between."""

    start_of_speech: int = 0
    mid_speech: int = 0
    end_of_speech: int = 0


@dataclass(frozen=True)
class ContextPatterns:
    """Rhetorical contexts in which fillers appeared.

    Buckets are not mutually exclusive; a filler may count in several.
    Field order is the tie-break order used when ranking buckets.
    """

    when_explaining: int = 0
    when_listing: int = 0
    when_transitioning: int = 0
    when_answering: int = 0
    mid_sentence: int = 0


@dataclass(frozen=True)
class FillerPatternAnalysis:
    """Position buckets, context buckets, and derived insight strings."""

    position_patterns: PositionPatterns = field(default_factory=PositionPatterns)
    context_patterns: ContextPatterns = field(default_factory=ContextPatterns)
    insights: tuple[str, ...] = ()


@dataclass(frozen=True)
class FillerAnalysisResult:
    """The complete output of analyze().

    WHY: Callers (CLI, HTTP API, report formatters, history storage)
    consume one self-contained record per analysis and never need to
    call back into the engine.

    RULES:
    - category_counts has all four categories, in declaration order
    - sum(category_counts) == sum(specific_filler_counts) == total_filler_words
    - filler_positions is ordered by position and never overlaps
    - detection_accuracy is an int in [0, 100]
    """

    total_filler_words: int
    fillers_per_minute: float
    category_counts: Dict[FillerCategory, int]
    specific_filler_counts: Dict[str, int]
    filler_positions: tuple[FillerPosition, ...]
    distribution_analysis: DistributionAnalysis
    detection_accuracy: int
    detection_summary: str
    patterns: FillerPatternAnalysis

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain JSON-serializable data (snake_case keys)."""
        position = self.patterns.position_patterns
        context = self.patterns.context_patterns
        return {
            "total_filler_words": self.total_filler_words,
            "fillers_per_minute": self.fillers_per_minute,
            "category_counts": {
                category.value: count
                for category, count in self.category_counts.items()
            },
            "specific_filler_counts": dict(self.specific_filler_counts),
            "filler_positions": [
                {"word": p.word, "position": p.position}
                for p in self.filler_positions
            ],
            "distribution_analysis": {
                "beginning": self.distribution_analysis.beginning,
                "middle": self.distribution_analysis.middle,
                "end": self.distribution_analysis.end,
            },
            "detection_accuracy": self.detection_accuracy,
            "detection_summary": self.detection_summary,
            "patterns": {
                "position_patterns": {
                    "start_of_speech": position.start_of_speech,
                    "mid_speech": position.mid_speech,
                    "end_of_speech": position.end_of_speech,
                },
                "context_patterns": {
                    "when_explaining": context.when_explaining,
                    "when_listing": context.when_listing,
                    "when_transitioning": context.when_transitioning,
                    "when_answering": context.when_answering,
                    "mid_sentence": context.mid_sentence,
                },
                "insights": list(self.patterns.insights),
            },
        }
