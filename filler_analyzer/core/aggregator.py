"""Tallies over the flagged fillers.

WHY: The report needs totals, a per-minute rate, per-category and
per-word counts, the ordered positions, and a beginning/middle/end
distribution. These are simple counts but they carry the report's
invariants, so they live in one place.

HOW: aggregate() walks the flagged fillers once. The rate and the
distribution are separate pure helpers so they can be tested on their
own.

RULES:
- Non-positive (or NaN) duration → rate 0.0, never a division error
- category counts include all four categories, zero or not
- per-word keys are the lowercased matched text
- distribution thresholds: offset < length/3 → beginning,
  offset < 2*length/3 → middle, else end; length <= 0 → all zero
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from filler_analyzer.core.catalog import CATEGORY_ORDER
from filler_analyzer.core.models import (
    DistributionAnalysis,
    FillerCategory,
    FillerPosition,
    FlaggedFiller,
)


@dataclass(frozen=True)
class FillerTally:
    """Everything aggregate() computes for one analysis."""

    total: int
    fillers_per_minute: float
    category_counts: Dict[FillerCategory, int]
    specific_counts: Dict[str, int]
    positions: tuple[FillerPosition, ...]
    distribution: DistributionAnalysis


def fillers_per_minute(total: int, duration_minutes: float) -> float:
    """Filler rate, or 0.0 when the duration is not a positive number."""
    if duration_minutes > 0:
        return total / duration_minutes
    return 0.0


def compute_distribution(transcript_length: int, positions: Iterable[int]) -> DistributionAnalysis:
    """Count positions falling in each third of the transcript."""
    if transcript_length <= 0:
        return DistributionAnalysis(beginning=0, middle=0, end=0)

    third = transcript_length / 3
    beginning = middle = end = 0
    for pos in positions:
        if pos < third:
            beginning += 1
        elif pos < 2 * third:
            middle += 1
        else:
            end += 1
    return DistributionAnalysis(beginning=beginning, middle=middle, end=end)


def aggregate(
    fillers: Sequence[FlaggedFiller],
    transcript_length: int,
    duration_minutes: float,
) -> FillerTally:
    """Accumulate all counts for a list of flagged fillers.

    Args:
        fillers: Flagged fillers ordered by start offset.
        transcript_length: len(transcript), in characters.
        duration_minutes: Spoken duration used for the per-minute rate.
    """
    category_counts: Dict[FillerCategory, int] = {c: 0 for c in CATEGORY_ORDER}
    specific_counts: Dict[str, int] = {}
    positions: List[FillerPosition] = []

    for filler in fillers:
        category_counts[filler.category] += 1
        key = filler.text.lower()
        specific_counts[key] = specific_counts.get(key, 0) + 1
        positions.append(FillerPosition(word=filler.text, position=filler.start))

    return FillerTally(
        total=len(fillers),
        fillers_per_minute=fillers_per_minute(len(fillers), duration_minutes),
        category_counts=category_counts,
        specific_counts=specific_counts,
        positions=tuple(positions),
        distribution=compute_distribution(transcript_length, (f.start for f in fillers)),
    )
