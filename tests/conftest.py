"""Shared test fixtures for the filler_analyzer test suite.

WHY: Several test modules need the same hand-checked transcript and its
analysis. Centralizing them here keeps the expected numbers in one place.

HOW: SAMPLE_TRANSCRIPT contains one filler per interesting case: a
hesitation at offset 0, a "so" that is not a sentence opener, a "like"
followed by a determiner (suppressed), and the two-word "kind of".

RULES:
- Offsets: "Um"@0, "so"@4, "like"@16, "kind of"@30; length 44
- Expected: 4 candidates, 3 flagged, 75% detection accuracy
"""

import pytest

from filler_analyzer.core.analyzer import analyze

SAMPLE_TRANSCRIPT = "Um, so I think, like, this is kind of great."
SAMPLE_DURATION_MINUTES = 1.0


@pytest.fixture
def sample_transcript():
    return SAMPLE_TRANSCRIPT


@pytest.fixture
def sample_result():
    """The FillerAnalysisResult for SAMPLE_TRANSCRIPT over one minute."""
    return analyze(SAMPLE_TRANSCRIPT, SAMPLE_DURATION_MINUTES)
