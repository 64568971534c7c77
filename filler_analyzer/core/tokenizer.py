"""Word tokenization and token-window lookups.

WHY: The contextual filter and pattern analyzer reason about "the words
around this filler". They need word boundaries with character offsets
so a regex match (which only knows its offset) can be mapped back to a
word and its neighbours.

HOW: A word is a maximal run of ASCII letters and apostrophes. Digits,
punctuation and whitespace are separators and never part of a token.
iter_word_tokens() is a lazy generator over the transcript; tokenize()
materializes it once per analysis for indexed lookups.

RULES:
- Tokens are ordered, non-overlapping, and never empty
- "I'd" is one token; "well-known" is two ("well", "known")
- Window lookups are by token index, not character distance
- Windows are lowercase
"""

from __future__ import annotations

import re
from typing import Iterator, List, Sequence, Tuple

from filler_analyzer.core.models import WordToken

_WORD_RE = re.compile(r"[A-Za-z']+")

# Number of tokens on each side of a match used for disambiguation.
CONTEXT_WINDOW = 3


def iter_word_tokens(transcript: str) -> Iterator[WordToken]:
    """Yield WordTokens lazily, left to right.

    Calling again restarts the scan from the beginning.
    """
    for m in _WORD_RE.finditer(transcript):
        yield WordToken(text=m.group(0), start=m.start(), end=m.end())


def tokenize(transcript: str) -> List[WordToken]:
    """Return all WordTokens of the transcript as a list."""
    return list(iter_word_tokens(transcript))


def find_token_index(tokens: Sequence[WordToken], position: int) -> int:
    """Index of the token containing position, or -1.

    A token contains position when start <= position < end.
    """
    for index, token in enumerate(tokens):
        if token.start > position:
            break
        if position < token.end:
            return index
    return -1


def word_context(
    tokens: Sequence[WordToken],
    token_index: int,
    size: int = CONTEXT_WINDOW,
) -> Tuple[List[str], List[str]]:
    """Lowercase words before and after the token at token_index.

    HOW: Up to ``size`` tokens immediately before and after. An index of
    -1 (no containing token) yields two empty windows.

    Returns:
        (before, after) lists of lowercase words, in transcript order.
    """
    if token_index < 0:
        return [], []
    before = [t.text.lower() for t in tokens[max(0, token_index - size):token_index]]
    after = [t.text.lower() for t in tokens[token_index + 1:token_index + 1 + size]]
    return before, after


def window_words(tokens: Sequence[WordToken], token_index: int) -> List[str]:
    """The context window including the anchor token itself, lowercase."""
    if token_index < 0:
        return []
    before, after = word_context(tokens, token_index)
    return before + [tokens[token_index].text.lower()] + after
