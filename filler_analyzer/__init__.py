"""Filler Analyzer: filler-word detection and speech-pattern analysis.

WHY: Speakers practicing for talks and interviews want to know how often
they fill pauses ("um", "like", "you know"), which kinds of fillers they
lean on, and when they reach for them. A plain word count over-reports,
because most filler words also have legitimate uses.

HOW: Three-stage design: analyze (core engine: tokenize, match, filter,
aggregate, pattern analysis), format (pluggable report formatters), and
serve (CLI and HTTP API). Each stage is independently testable.

RULES:
- The engine is a pure function of (transcript, duration_minutes)
- All surfaces consume the same FillerAnalysisResult
- Adding a report format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
