"""Tests for the highlight adapter (filler positions to transcript segments)."""

from filler_analyzer.adapters.highlight import FILLER, NORMAL, HighlightSegment, build_highlight_segments
from filler_analyzer.core.models import FillerPosition


class TestBuildHighlightSegments:

    def test_sample_segments(self, sample_transcript, sample_result):
        segments = build_highlight_segments(sample_transcript, sample_result.filler_positions)
        assert segments == [
            HighlightSegment(FILLER, "Um"),
            HighlightSegment(NORMAL, ", "),
            HighlightSegment(FILLER, "so"),
            HighlightSegment(NORMAL, " I think, like, this is "),
            HighlightSegment(FILLER, "kind of"),
            HighlightSegment(NORMAL, " great."),
        ]

    def test_segments_concatenate_to_transcript(self, sample_transcript, sample_result):
        segments = build_highlight_segments(sample_transcript, sample_result.filler_positions)
        assert "".join(s.text for s in segments) == sample_transcript

    def test_visible_length_clips_filler(self):
        segments = build_highlight_segments("ok um yes", [FillerPosition("um", 3)], visible_length=4)
        assert segments == [HighlightSegment(NORMAL, "ok "), HighlightSegment(FILLER, "u")]

    def test_filler_past_visible_length_ignored(self):
        segments = build_highlight_segments("ok um yes", [FillerPosition("um", 3)], visible_length=2)
        assert segments == [HighlightSegment(NORMAL, "ok")]

    def test_unsorted_positions(self):
        positions = [FillerPosition("uh", 6), FillerPosition("um", 0)]
        segments = build_highlight_segments("um ok uh", positions)
        assert [s.kind for s in segments] == [FILLER, NORMAL, FILLER]

    def test_no_fillers(self):
        assert build_highlight_segments("plain", []) == [HighlightSegment(NORMAL, "plain")]

    def test_zero_visible_length(self):
        assert build_highlight_segments("um", [FillerPosition("um", 0)], visible_length=0) == []

    def test_empty_transcript(self):
        assert build_highlight_segments("", []) == []

    def test_overlapping_ranges_merge(self):
        positions = [FillerPosition("abc", 0), FillerPosition("bcd", 1)]
        segments = build_highlight_segments("abcde", positions)
        assert segments == [
            HighlightSegment(FILLER, "abc"),
            HighlightSegment(FILLER, "d"),
            HighlightSegment(NORMAL, "e"),
        ]
        assert "".join(s.text for s in segments) == "abcde"

    def test_contained_range_adds_nothing(self):
        positions = [FillerPosition("abcd", 0), FillerPosition("b", 1)]
        segments = build_highlight_segments("abcde", positions)
        assert segments == [HighlightSegment(FILLER, "abcd"), HighlightSegment(NORMAL, "e")]
