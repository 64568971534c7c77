"""Adapter: filler positions to highlighted transcript segments.

WHY: A results view (or a plain-text report) shows the transcript with
each flagged filler marked. It needs the transcript cut into alternating
plain and filler pieces, optionally only up to a "visible" length when
the transcript is revealed progressively.

HOW: Each FillerPosition becomes a [position, position + len(word))
range. Ranges are sorted by start, clipped to the visible length, and
the text between them is emitted as "normal" pieces.

RULES:
- Concatenated segment texts == transcript[:visible_length]
- visible_length defaults to len(transcript); <= 0 yields no segments
- Ranges that end at or before 0, or start at or after the visible
  length, are ignored
- Overlapping ranges merge; no character is emitted twice
- Input positions are never modified
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from filler_analyzer.core.models import FillerPosition

NORMAL = "normal"
FILLER = "filler"


@dataclass(frozen=True)
class HighlightSegment:
    """One contiguous piece of the transcript; kind is "normal" or "filler"."""

    kind: str
    text: str


def build_highlight_segments(
    transcript: str,
    positions: Sequence[FillerPosition],
    visible_length: Optional[int] = None,
) -> List[HighlightSegment]:
    """Split the visible part of the transcript into plain and filler pieces.

    Args:
        transcript: Full transcript text.
        positions: Flagged filler positions from the analysis result.
        visible_length: Number of leading characters to cover.

    Returns:
        Ordered HighlightSegment list.
    """
    if visible_length is None:
        visible_length = len(transcript)
    if visible_length <= 0:
        return []

    ranges = sorted(
        (
            (p.position, p.position + len(p.word))
            for p in positions
            if p.position + len(p.word) > 0 and p.position < visible_length
        ),
        key=lambda r: r[0],
    )

    segments: List[HighlightSegment] = []
    pos = 0
    for start, end in ranges:
        # overlapping ranges continue from the end of the previous one
        clip_start = max(start, pos)
        clip_end = min(end, visible_length)
        if pos < clip_start:
            segments.append(HighlightSegment(NORMAL, transcript[pos:clip_start]))
        if clip_start < clip_end:
            segments.append(HighlightSegment(FILLER, transcript[clip_start:clip_end]))
        pos = max(pos, clip_end)
    if pos < visible_length:
        segments.append(HighlightSegment(NORMAL, transcript[pos:visible_length]))
    return segments
