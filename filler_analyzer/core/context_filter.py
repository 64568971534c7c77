"""Rule-based disambiguation of filler candidates.

WHY: Most catalog words have legitimate uses. "like" is a verb in "I
would like to", "so" is a conjunction in "so that", "well" is part of
"as well". Counting those would punish good speech, so every resolved
match is checked against its surroundings before it is flagged.

HOW: RULES maps a normalized filler string to a predicate over a
MatchContext (the transcript, the match, and the lowercase words up to 3
tokens before and after it). A predicate returns False to suppress the
match. Fillers without an entry are always flagged.

RULES:
- Default is "flag" (True); rules only ever suppress
- "you know" is always flagged
- "like": suppressed after a be-verb, before a determiner/pronoun, or
  inside "would like" / "i'd like" / "id like" / "i would like"
- "so": suppressed before "that", as a sentence opener followed by a
  comma, or before an intensifying adjective (checked independently)
- "well": suppressed inside "as well" / "might as well"
- "actually" / "basically": suppressed before a correction cue
- "i mean": suppressed before a clarification cue
- "Before"/"after" checks look anywhere in the 3-token window
- Purely a predicate: no side effects
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Sequence

from filler_analyzer.core.models import FlaggedFiller, RawMatch, WordToken
from filler_analyzer.core.tokenizer import find_token_index, tokenize, word_context

logger = logging.getLogger(__name__)

# Character window scanned for fixed phrases around a match.
PHRASE_WINDOW_BEFORE = 20
PHRASE_WINDOW_AFTER = 40

BE_LIKE_VERBS: FrozenSet[str] = frozenset({
    "was", "is", "were", "are", "am", "be", "been", "being",
    "looks", "look", "looked", "sounds", "sound", "sounded",
    "feels", "feel", "felt",
})

DETERMINERS: FrozenSet[str] = frozenset({
    "this", "that", "these", "those", "my", "your", "his", "her", "its",
    "our", "their", "a", "an", "the", "some", "any", "each", "every", "no",
    "another", "either", "neither", "both", "few", "many", "much", "several",
})

PRONOUNS: FrozenSet[str] = frozenset({
    "him", "her", "them", "me", "us", "you", "i", "he", "she", "we", "they",
    "it", "someone", "somebody", "something", "anyone", "anybody", "anything",
})

LIKE_SKIP_PHRASES = ("would like", "i'd like", "id like", "i would like")

_LIKE_FOLLOWERS = DETERMINERS | PRONOUNS
_THAT = frozenset({"that"})

INTENSIFIERS: FrozenSet[str] = frozenset({
    "good", "bad", "happy", "sad", "great", "small", "big", "tired",
    "excited", "important", "funny", "hard", "easy", "simple", "beautiful",
})

WELL_SKIP_PHRASES = ("as well", "might as well")

CORRECTION_CUES: FrozenSet[str] = frozenset({
    "not", "no", "just", "rather", "specifically", "in", "because",
})

CLARIFICATION_CUES: FrozenSet[str] = frozenset({
    "that", "because", "if", "when", "what", "where", "why", "how",
    "to", "for", "by",
})

_SENTENCE_END = frozenset(".!?")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s']")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class MatchContext:
    """Everything a rule may look at for one match."""

    transcript: str
    match: RawMatch
    before: List[str]
    after: List[str]

    def preceded_by(self, words: FrozenSet[str]) -> bool:
        return any(w in words for w in self.before)

    def followed_by(self, words: FrozenSet[str]) -> bool:
        return any(w in words for w in self.after)

    def near_phrase(self, phrases: Sequence[str]) -> bool:
        """True if any phrase occurs in the character window around the match."""
        start = max(0, self.match.start - PHRASE_WINDOW_BEFORE)
        window = self.transcript[start:self.match.start + PHRASE_WINDOW_AFTER].lower()
        return any(p in window for p in phrases)


def normalize_match(text: str) -> str:
    """Lowercase, strip punctuation (keeping apostrophes), collapse spaces."""
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def is_sentence_start(transcript: str, position: int) -> bool:
    """True if no letter sits between position and the previous . ! ? (or start)."""
    for i in range(position - 1, -1, -1):
        ch = transcript[i]
        if ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
            return False
        if ch in _SENTENCE_END:
            return True
    return True


# ---------------------------------------------------------------------------
# Per-filler rules
# ---------------------------------------------------------------------------


def _like_rule(ctx: MatchContext) -> bool:
    if ctx.preceded_by(BE_LIKE_VERBS):
        return False
    if ctx.followed_by(_LIKE_FOLLOWERS):
        return False
    if ctx.near_phrase(LIKE_SKIP_PHRASES):
        return False
    return True


def _so_rule(ctx: MatchContext) -> bool:
    if ctx.followed_by(_THAT):
        return False
    # "So, ..." as a deliberate opener
    end = ctx.match.end
    if is_sentence_start(ctx.transcript, ctx.match.start) and "," in ctx.transcript[end:end + 2]:
        return False
    if ctx.followed_by(INTENSIFIERS):
        return False
    return True


def _well_rule(ctx: MatchContext) -> bool:
    return not ctx.near_phrase(WELL_SKIP_PHRASES)


def _correction_rule(ctx: MatchContext) -> bool:
    return not ctx.followed_by(CORRECTION_CUES)


def _clarification_rule(ctx: MatchContext) -> bool:
    return not ctx.followed_by(CLARIFICATION_CUES)


RULES: Dict[str, Callable[[MatchContext], bool]] = {
    "you know": lambda ctx: True,
    "like": _like_rule,
    "so": _so_rule,
    "well": _well_rule,
    "actually": _correction_rule,
    "basically": _correction_rule,
    "i mean": _clarification_rule,
}


def should_flag_filler(
    transcript: str,
    match: RawMatch,
    tokens: Sequence[WordToken],
) -> bool:
    """Decide whether a resolved match is a genuine filler.

    Args:
        transcript: Full transcript text.
        match: A match that survived overlap resolution.
        tokens: tokenize(transcript), computed once by the caller.

    Returns:
        True to flag the match as a filler, False to treat it as a
        legitimate use of the word.
    """
    rule = RULES.get(normalize_match(match.text))
    if rule is None:
        return True

    before, after = word_context(tokens, find_token_index(tokens, match.start))
    return rule(MatchContext(
        transcript=transcript,
        match=match,
        before=before,
        after=after,
    ))


def filter_matches(
    transcript: str,
    matches: Sequence[RawMatch],
    tokens: Sequence[WordToken] | None = None,
) -> List[FlaggedFiller]:
    """Keep only the matches that should be flagged, preserving order."""
    if tokens is None:
        tokens = tokenize(transcript)

    flagged: List[FlaggedFiller] = []
    for match in matches:
        if should_flag_filler(transcript, match, tokens):
            flagged.append(FlaggedFiller.from_match(match))
        else:
            logger.debug("Not a filler: %r at %d", match.text, match.start)
    return flagged
