"""Catalog scanning and overlap resolution.

WHY: Catalog entries can overlap in the text (a phrase and a single word
inside it, or two phrases sharing a word). Each stretch of text must be
charged to at most one filler, and a longer phrase must win over a
shorter hit that starts at the same offset.

HOW: For each catalog entry (longest first) a case-insensitive regex with
word boundaries on both ends finds every occurrence. All hits are then
sorted by (start ascending, length descending) and swept left to right:
a hit is kept only if it starts at or after the end of the previously
kept hit.

RULES:
- Word boundary = the neighbouring character is not [A-Za-z0-9_]
  ("like" never matches inside "likely" or "like_this")
- Interior spaces of a phrase match one or more whitespace characters
  (ASCII and the Unicode space separators, e.g. NBSP)
- Case folding is ASCII-only: long s (U+017F), the Kelvin sign (U+212A)
  and dotted capital I (U+0130) never match catalog letters
- The sweep is greedy left-to-right, not a global optimum: an earlier
  short hit that is kept first still blocks a later, longer one
- Empty transcript → no matches (not an error)
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from filler_analyzer.core.catalog import catalog_entries
from filler_analyzer.core.models import FillerCategory, RawMatch

# ASCII word characters, matching JavaScript-style \b semantics.
_WORD_CHARS = "A-Za-z0-9_"

# Whitespace between phrase words. re.ASCII narrows \s, so the Unicode
# separators are listed explicitly.
_PHRASE_GAP = (
    r"[\t\n\v\f\r\x1c-\x1f \x85\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def pattern_for_filler(filler: str) -> "re.Pattern[str]":
    """Compile the whole-word, case-insensitive pattern for one filler.

    Example: "kind of" → (?<![A-Za-z0-9_])kind[...whitespace...]+of(?![A-Za-z0-9_])

    RULES:
    - re.ASCII keeps IGNORECASE from folding non-ASCII letters such as
      U+017F (long s) or U+212A (Kelvin sign) onto catalog letters
    """
    parts = [re.escape(part) for part in filler.split()]
    body = _PHRASE_GAP.join(parts)
    return re.compile(
        r"(?<![{w}]){body}(?![{w}])".format(w=_WORD_CHARS, body=body),
        re.IGNORECASE | re.ASCII,
    )


def find_raw_matches(
    transcript: str,
    entries: Optional[Iterable[Tuple[str, FillerCategory]]] = None,
) -> List[RawMatch]:
    """Every catalog hit in the transcript, overlaps included.

    Args:
        transcript: Full transcript text.
        entries: (phrase, category) pairs to scan for. Defaults to the
                 full catalog, longest phrase first.

    Returns:
        RawMatch list in scan order (entry by entry, then by offset).
    """
    if entries is None:
        entries = catalog_entries()

    matches: List[RawMatch] = []
    for filler, category in entries:
        for m in pattern_for_filler(filler).finditer(transcript):
            matches.append(RawMatch(
                text=m.group(0),
                category=category,
                start=m.start(),
                length=m.end() - m.start(),
            ))
    return matches


def resolve_overlaps(matches: Sequence[RawMatch]) -> List[RawMatch]:
    """Drop overlapping hits with the greedy left-to-right sweep.

    HOW: Sort by (start, -length) so the longest hit at a given start
    comes first, then keep each hit whose start is >= the end of the last
    kept hit.

    Returns:
        Non-overlapping matches ordered by start offset.
    """
    ordered = sorted(matches, key=lambda m: (m.start, -m.length))

    kept: List[RawMatch] = []
    last_end = -1
    for match in ordered:
        if match.start >= last_end:
            kept.append(match)
            last_end = match.end
    return kept


def find_filler_matches(transcript: str) -> List[RawMatch]:
    """Scan the full catalog and return resolved, non-overlapping candidates."""
    return resolve_overlaps(find_raw_matches(transcript))
