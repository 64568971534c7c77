"""Core filler detection engine.

WHY: The core package is the stable heart of the analyzer: the value
objects, the static catalog, and the pipeline stages that turn a
transcript into a FillerAnalysisResult.

HOW: models.py defines the data structures, catalog.py the filler table,
tokenizer.py / matcher.py / context_filter.py find and disambiguate
fillers, aggregator.py and patterns.py compute statistics, and
analyzer.py assembles the result.

RULES:
- No I/O, no global mutable state
- Stages communicate only through the dataclasses in models.py
"""

from filler_analyzer.core.analyzer import analyze

__all__ = ["analyze"]
