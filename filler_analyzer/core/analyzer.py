"""Filler analysis entry point: analyze(transcript, duration_minutes).

WHY: Callers want one function that turns a transcript into a complete,
self-contained report. This module wires the pipeline stages together
and adds the detection-confidence summary.

HOW: tokenize → find_filler_matches (scan + overlap resolution) →
filter_matches (contextual rules) → aggregate (counts, rate,
distribution) → analyze_filler_patterns (buckets, insights) →
FillerAnalysisResult.

RULES:
- Pure and deterministic: same inputs, equal results
- Never raises for str/number input; empty text and zero or negative
  durations give zero-valued results
- detection_accuracy = 100 when there are no candidates, otherwise
  round-half-up(flagged / candidates * 100)
- "Candidates" are the matches left after overlap resolution
"""

from __future__ import annotations

import logging
import math

from filler_analyzer.core.aggregator import aggregate
from filler_analyzer.core.context_filter import filter_matches
from filler_analyzer.core.matcher import find_filler_matches
from filler_analyzer.core.models import FillerAnalysisResult
from filler_analyzer.core.patterns import analyze_filler_patterns
from filler_analyzer.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


def detection_accuracy(candidate_count: int, flagged_count: int) -> int:
    """Percentage of candidates confirmed as fillers, rounded half up."""
    if candidate_count == 0:
        return 100
    return int(math.floor((flagged_count / candidate_count) * 100 + 0.5))


def detection_summary(candidate_count: int, flagged_count: int, accuracy: int) -> str:
    return (
        "Analyzed {} potential fillers, flagged {} as actual fillers "
        "({}% detection confidence)".format(candidate_count, flagged_count, accuracy)
    )


def analyze(transcript: str, duration_minutes: float) -> FillerAnalysisResult:
    """Detect, classify and summarize filler words in a transcript.

    Args:
        transcript: Full transcript text (any Unicode; offsets are
                    Python string indices).
        duration_minutes: Spoken duration. Callers normally pass
                          max(0.1, seconds / 60); values <= 0 give a
                          rate of 0.

    Returns:
        The complete FillerAnalysisResult.
    """
    tokens = tokenize(transcript)
    candidates = find_filler_matches(transcript)
    flagged = filter_matches(transcript, candidates, tokens)

    tally = aggregate(flagged, len(transcript), duration_minutes)
    accuracy = detection_accuracy(len(candidates), len(flagged))

    logger.debug(
        "Filler analysis: %d chars, %d tokens, %d candidates, %d flagged",
        len(transcript), len(tokens), len(candidates), len(flagged),
    )

    return FillerAnalysisResult(
        total_filler_words=tally.total,
        fillers_per_minute=tally.fillers_per_minute,
        category_counts=tally.category_counts,
        specific_filler_counts=tally.specific_counts,
        filler_positions=tally.positions,
        distribution_analysis=tally.distribution,
        detection_accuracy=accuracy,
        detection_summary=detection_summary(len(candidates), len(flagged), accuracy),
        patterns=analyze_filler_patterns(transcript, tally.positions, tokens),
    )
