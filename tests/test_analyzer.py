"""End-to-end tests for analyze().

WHY: analyze() is the one entry point every surface calls. These tests
pin the complete result for hand-checked transcripts and the invariants
that must hold for any input.

HOW: Scenario tests compare individual fields against values computed by
hand; invariant tests run a handful of varied transcripts through the
engine and check relationships between fields.
"""

import pytest

from filler_analyzer.core.analyzer import analyze, detection_accuracy, detection_summary
from filler_analyzer.core.models import DistributionAnalysis, FillerCategory, PositionPatterns
from filler_analyzer.core.patterns import CONTEXT_INSIGHTS

VARIED_TRANSCRIPTS = [
    "",
    "Hello there.",
    "Um, so I think, like, this is kind of great.",
    "So, I went home. Well, you know, it was, uh, basically fine.",
    "Let me think. Hmm, okay, alright then, now we can, like, um, start?",
    "I would like to explain. Actually not. I mean that it works as well.",
]


class TestDetectionAccuracy:

    def test_no_candidates_is_100(self):
        assert detection_accuracy(0, 0) == 100

    def test_rounds_half_up(self):
        assert detection_accuracy(8, 1) == 13  # 12.5
        assert detection_accuracy(8, 3) == 38  # 37.5

    def test_rounds_down_below_half(self):
        assert detection_accuracy(3, 1) == 33

    def test_summary_wording(self):
        assert detection_summary(4, 3, 75) == (
            "Analyzed 4 potential fillers, flagged 3 as actual fillers "
            "(75% detection confidence)"
        )


class TestSampleScenario:

    def test_totals(self, sample_result):
        assert sample_result.total_filler_words == 3
        assert sample_result.fillers_per_minute == 3.0
        assert sample_result.detection_accuracy == 75
        assert sample_result.detection_summary == (
            "Analyzed 4 potential fillers, flagged 3 as actual fillers "
            "(75% detection confidence)"
        )

    def test_category_counts(self, sample_result):
        assert sample_result.category_counts == {
            FillerCategory.HESITATION: 1,
            FillerCategory.DISCOURSE: 1,
            FillerCategory.TEMPORAL: 1,
            FillerCategory.THINKING: 0,
        }

    def test_specific_counts_and_positions(self, sample_result):
        assert sample_result.specific_filler_counts == {"um": 1, "so": 1, "kind of": 1}
        assert [(p.word, p.position) for p in sample_result.filler_positions] == [
            ("Um", 0), ("so", 4), ("kind of", 30),
        ]

    def test_distribution_and_position_patterns(self, sample_result):
        assert sample_result.distribution_analysis == DistributionAnalysis(beginning=2, middle=0, end=1)
        assert sample_result.patterns.position_patterns == PositionPatterns(
            start_of_speech=2, mid_speech=1, end_of_speech=0,
        )


class TestScenarios:

    def test_empty_transcript(self):
        result = analyze("", 1.0)
        assert result.total_filler_words == 0
        assert result.fillers_per_minute == 0.0
        assert result.detection_accuracy == 100
        assert set(result.category_counts.values()) == {0}
        assert result.specific_filler_counts == {}
        assert result.filler_positions == ()
        assert result.distribution_analysis == DistributionAnalysis(0, 0, 0)
        assert result.patterns.insights == (CONTEXT_INSIGHTS["when_explaining"],)

    def test_verb_like_only(self):
        result = analyze("I would like to explain.", 1.0)
        assert result.total_filler_words == 0
        assert result.detection_accuracy == 0
        assert result.detection_summary.startswith("Analyzed 1 potential fillers, flagged 0")

    def test_so_opener_only(self):
        result = analyze("So, I went home.", 1.0)
        assert result.total_filler_words == 0
        assert result.detection_accuracy == 0

    def test_zero_duration(self):
        result = analyze("Um, uh, hmm.", 0)
        assert result.total_filler_words == 3
        assert result.fillers_per_minute == 0.0

    def test_negative_duration(self):
        assert analyze("Um.", -2).fillers_per_minute == 0.0

    def test_rate_uses_duration(self):
        result = analyze("Um, uh, hmm.", 0.5)
        assert result.fillers_per_minute == 6.0

    def test_deterministic(self, sample_transcript):
        assert analyze(sample_transcript, 2.0) == analyze(sample_transcript, 2.0)

    def test_does_not_match_inside_words(self):
        result = analyze("Her umbrella was likely soaked.", 1.0)
        assert result.total_filler_words == 0
        assert result.detection_accuracy == 100


class TestInvariants:

    @pytest.mark.parametrize("transcript", VARIED_TRANSCRIPTS)
    def test_counts_agree(self, transcript):
        result = analyze(transcript, 1.0)
        total = result.total_filler_words
        assert sum(result.category_counts.values()) == total
        assert sum(result.specific_filler_counts.values()) == total
        assert len(result.filler_positions) == total
        dist = result.distribution_analysis
        assert dist.beginning + dist.middle + dist.end == total
        pos = result.patterns.position_patterns
        assert pos.start_of_speech + pos.mid_speech + pos.end_of_speech == total

    @pytest.mark.parametrize("transcript", VARIED_TRANSCRIPTS)
    def test_positions_ordered_and_disjoint(self, transcript):
        positions = analyze(transcript, 1.0).filler_positions
        for a, b in zip(positions, positions[1:]):
            assert a.position + len(a.word) <= b.position

    @pytest.mark.parametrize("transcript", VARIED_TRANSCRIPTS)
    def test_words_slice_from_transcript(self, transcript):
        for p in analyze(transcript, 1.0).filler_positions:
            assert transcript[p.position:p.position + len(p.word)] == p.word

    @pytest.mark.parametrize("transcript", VARIED_TRANSCRIPTS)
    def test_accuracy_in_range(self, transcript):
        assert 0 <= analyze(transcript, 1.0).detection_accuracy <= 100

    def test_all_categories_present(self):
        result = analyze("Hello there.", 1.0)
        assert list(result.category_counts) == list(FillerCategory)
