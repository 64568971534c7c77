"""Adapter modules for reshaping analysis results for presentation.

WHY: The engine reports fillers as (word, offset) pairs. Report
formatters and API clients need the transcript split into plain and
filler pieces instead. Adapters keep that conversion out of both the
core engine and the formatters.

HOW: Each adapter module provides a conversion function from core
dataclasses to a presentation-friendly shape.

RULES:
- Adapters are pure data transformations, no I/O, no side effects.
- Adapters must not modify the source result objects.
"""

from filler_analyzer.adapters.highlight import HighlightSegment, build_highlight_segments

__all__ = ["HighlightSegment", "build_highlight_segments"]
