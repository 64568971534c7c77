"""Tests for contextual disambiguation of filler candidates.

WHY: The rules decide whether "like", "so", "well", "actually",
"basically" and "i mean" are fillers or ordinary words. Each rule gets a
positive case (flagged) and the negative cases that suppress it.

HOW: Each helper scans a sentence with the real matcher, then asks
should_flag_filler about the first candidate whose normalized text
equals the filler under test.
"""

import pytest

from filler_analyzer.core.context_filter import (
    RULES,
    filter_matches,
    is_sentence_start,
    normalize_match,
    should_flag_filler,
)
from filler_analyzer.core.matcher import find_filler_matches
from filler_analyzer.core.models import FlaggedFiller
from filler_analyzer.core.tokenizer import tokenize


def _flag(transcript, filler):
    tokens = tokenize(transcript)
    for match in find_filler_matches(transcript):
        if normalize_match(match.text) == filler:
            return should_flag_filler(transcript, match, tokens)
    raise AssertionError("{!r} not found in {!r}".format(filler, transcript))


class TestHelpers:

    def test_normalize_match(self):
        assert normalize_match("You  Know") == "you know"
        assert normalize_match("I'd,") == "i'd"

    def test_sentence_start_at_offset_zero(self):
        assert is_sentence_start("So, yes.", 0)

    def test_sentence_start_after_period(self):
        assert is_sentence_start("Done. So, next.", 6)

    def test_not_sentence_start_after_letter(self):
        assert not is_sentence_start("Um, so next.", 4)

    def test_rule_table_keys(self):
        assert set(RULES) == {"you know", "like", "so", "well", "actually", "basically", "i mean"}


class TestLikeRule:

    def test_filler_like(self):
        assert _flag("We had, um, like, ready answers.", "like")

    def test_after_be_verb(self):
        assert not _flag("She was like really happy.", "like")

    def test_before_determiner(self):
        assert not _flag("I think, like, this is great.", "like")

    def test_before_pronoun(self):
        assert not _flag("Dogs like them a lot.", "like")

    def test_would_like(self):
        assert not _flag("I would like to explain.", "like")

    def test_id_like(self):
        assert not _flag("I'd like to go home.", "like")


class TestSoRule:

    def test_filler_so(self):
        assert _flag("Um, so I think it works.", "so")

    def test_so_that(self):
        assert not _flag("I left early so that I could rest.", "so")

    def test_sentence_opener_with_comma(self):
        assert not _flag("So, I went home.", "so")

    def test_sentence_opener_without_comma_is_flagged(self):
        assert _flag("So I went home.", "so")

    def test_opener_after_previous_sentence(self):
        assert not _flag("It rained. So, I went home.", "so")

    def test_before_intensifier(self):
        assert not _flag("I am so happy today.", "so")


class TestWellRule:

    def test_filler_well(self):
        assert _flag("Well, I tried.", "well")

    def test_as_well(self):
        assert not _flag("I tried it as well.", "well")

    def test_might_as_well(self):
        assert not _flag("We might as well go.", "well")


class TestCorrectionAndClarification:

    @pytest.mark.parametrize("filler", ["actually", "basically"])
    def test_flagged_without_cue(self, filler):
        assert _flag("I {} went there.".format(filler), filler)

    @pytest.mark.parametrize("filler", ["actually", "basically"])
    def test_suppressed_before_correction(self, filler):
        assert not _flag("It is {} not true.".format(filler), filler)

    def test_i_mean_before_clarification(self):
        assert not _flag("I mean that it works.", "i mean")

    def test_i_mean_flagged(self):
        assert _flag("It works, I mean, mostly.", "i mean")

    def test_you_know_always_flagged(self):
        assert _flag("You know, that is it.", "you know")

    def test_unruled_filler_always_flagged(self):
        assert _flag("Um the thing.", "um")


class TestFilterMatches:

    def test_sample_keeps_order_and_drops_like(self, sample_transcript):
        flagged = filter_matches(sample_transcript, find_filler_matches(sample_transcript))
        assert [(f.text, f.start) for f in flagged] == [("Um", 0), ("so", 4), ("kind of", 30)]
        assert all(isinstance(f, FlaggedFiller) for f in flagged)

    def test_empty(self):
        assert filter_matches("", []) == []
