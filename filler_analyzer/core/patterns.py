"""Positional and rhetorical-context analysis of flagged fillers.

WHY: A raw count says how often a speaker fills pauses, not when. Coaching
is more useful when it can say "mostly while starting to speak" or
"mostly while listing things". This module buckets each filler by where
it falls in the speech and by what the speaker was doing around it, then
turns the buckets into short insight strings.

HOW: Position buckets compare the filler offset with 20% / 80% of the
transcript length. Context buckets look at the 3-token window around the
filler's token (plus character windows for commas, "and", question marks
and sentence punctuation). Insights fire on fixed ratio thresholds.

RULES:
- Position: offset < 0.2*len → start, offset >= 0.8*len → end, else mid
- Context buckets are independent; one filler may count in several
- Explaining/listing/transitioning need the filler's token to exist
- Answering: 0 < offset <= 0.15*len, or within 40 chars after a "?"
- Mid-sentence: no . ! ? in the 40 chars before or after the filler
- Insight ratios use total = max(1, filler count) and strict "> 0.40"
- The top context bucket (ties in field order) yields an insight only
  for explaining, listing or transitioning; all-zero buckets rank
  explaining first
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

from filler_analyzer.core.models import (
    ContextPatterns,
    FillerPatternAnalysis,
    FillerPosition,
    PositionPatterns,
    WordToken,
)
from filler_analyzer.core.tokenizer import find_token_index, tokenize, window_words

START_OF_SPEECH_FRACTION = 0.2
END_OF_SPEECH_FRACTION = 0.8
ANSWERING_FRACTION = 0.15
CHAR_RADIUS = 40
INSIGHT_THRESHOLD = 0.40

EXPLANATION_CUES = frozenset({"because", "since", "essentially", "basically"})
EXPLANATION_PHRASES = ("the reason", "in other words")
LISTING_CUES = frozenset({"first", "second", "third", "also", "and", "or"})
TRANSITION_CUES = frozenset({"so", "now", "then", "moving", "on", "anyway", "but", "however"})
TRANSITION_PHRASES = ("moving on", "anyway")

OPENING_INSIGHT = (
    "Most fillers appeared when starting to speak. Try taking a breath "
    "before beginning."
)
MID_SENTENCE_INSIGHT = (
    "Many fillers mid-sentence suggest thinking while speaking. Slow down "
    "slightly."
)
CONTEXT_INSIGHTS: Dict[str, str] = {
    "when_explaining": (
        "You used more fillers when explaining concepts. Practice explaining "
        "complex ideas beforehand."
    ),
    "when_listing": (
        "Fillers increased when listing multiple items. Try organizing lists "
        "mentally first."
    ),
    "when_transitioning": (
        "Fillers appeared when changing topics. Plan your transitions ahead "
        "of time."
    ),
}

_AND_RE = re.compile(r"(?<![A-Za-z0-9_])and(?![A-Za-z0-9_])", re.IGNORECASE | re.ASCII)
_SENTENCE_END_RE = re.compile(r"[.!?]")


def _is_explaining(words: List[str]) -> bool:
    joined = " ".join(words)
    return any(w in EXPLANATION_CUES for w in words) or any(
        p in joined for p in EXPLANATION_PHRASES
    )


def _is_listing(transcript: str, token: WordToken, words: List[str]) -> bool:
    if any(w in LISTING_CUES for w in words):
        return True
    window = transcript[max(0, token.start - CHAR_RADIUS):token.end + CHAR_RADIUS]
    return window.count(",") >= 2 or len(_AND_RE.findall(window)) >= 2


def _is_transitioning(words: List[str]) -> bool:
    joined = " ".join(words)
    return any(w in TRANSITION_CUES for w in words) or any(
        p in joined for p in TRANSITION_PHRASES
    )


def _is_answering(position: int, transcript_length: int, question_marks: Sequence[int]) -> bool:
    if position <= 0:
        return False
    if position <= transcript_length * ANSWERING_FRACTION:
        return True
    return any(0 <= position - q < CHAR_RADIUS for q in question_marks)


def _is_mid_sentence(transcript: str, position: int, length: int) -> bool:
    before = transcript[max(0, position - CHAR_RADIUS):position]
    after = transcript[position + length:position + length + CHAR_RADIUS]
    return not (_SENTENCE_END_RE.search(before) or _SENTENCE_END_RE.search(after))


def top_context(context: ContextPatterns) -> str:
    """Name of the highest context bucket; ties go to the earlier field."""
    counts = [
        ("when_explaining", context.when_explaining),
        ("when_listing", context.when_listing),
        ("when_transitioning", context.when_transitioning),
        ("when_answering", context.when_answering),
        ("mid_sentence", context.mid_sentence),
    ]
    best_name, best_count = counts[0]
    for name, count in counts[1:]:
        if count > best_count:
            best_name, best_count = name, count
    return best_name


def derive_insights(
    positions: PositionPatterns,
    context: ContextPatterns,
    filler_count: int,
) -> List[str]:
    """Turn bucket tallies into ordered coaching insights."""
    total = max(1, filler_count)
    insights: List[str] = []

    if positions.start_of_speech / total > INSIGHT_THRESHOLD:
        insights.append(OPENING_INSIGHT)

    best = top_context(context)
    if best in CONTEXT_INSIGHTS:
        insights.append(CONTEXT_INSIGHTS[best])

    if context.mid_sentence / total > INSIGHT_THRESHOLD:
        insights.append(MID_SENTENCE_INSIGHT)

    return insights


def analyze_filler_patterns(
    transcript: str,
    filler_positions: Sequence[FillerPosition],
    tokens: Sequence[WordToken] | None = None,
) -> FillerPatternAnalysis:
    """Bucket fillers by position and context and derive insights.

    Args:
        transcript: Full transcript text.
        filler_positions: Flagged fillers as (word, position) pairs.
        tokens: tokenize(transcript), if the caller already has it.

    Returns:
        FillerPatternAnalysis with position buckets, context buckets and
        insight strings.
    """
    if tokens is None:
        tokens = tokenize(transcript)

    length = len(transcript)
    start_cutoff = length * START_OF_SPEECH_FRACTION
    end_cutoff = length * END_OF_SPEECH_FRACTION
    question_marks = [i for i, ch in enumerate(transcript) if ch == "?"]

    start = mid = end = 0
    explaining = listing = transitioning = answering = mid_sentence = 0

    for filler in filler_positions:
        if filler.position < start_cutoff:
            start += 1
        elif filler.position >= end_cutoff:
            end += 1
        else:
            mid += 1

        token_index = find_token_index(tokens, filler.position)
        if token_index >= 0:
            words = window_words(tokens, token_index)
            if _is_explaining(words):
                explaining += 1
            if _is_listing(transcript, tokens[token_index], words):
                listing += 1
            if _is_transitioning(words):
                transitioning += 1

        if _is_answering(filler.position, length, question_marks):
            answering += 1
        if _is_mid_sentence(transcript, filler.position, len(filler.word)):
            mid_sentence += 1

    position_patterns = PositionPatterns(
        start_of_speech=start,
        mid_speech=mid,
        end_of_speech=end,
    )
    context_patterns = ContextPatterns(
        when_explaining=explaining,
        when_listing=listing,
        when_transitioning=transitioning,
        when_answering=answering,
        mid_sentence=mid_sentence,
    )
    return FillerPatternAnalysis(
        position_patterns=position_patterns,
        context_patterns=context_patterns,
        insights=tuple(derive_insights(position_patterns, context_patterns, len(filler_positions))),
    )
