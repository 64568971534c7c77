"""Static catalog of filler words and phrases, grouped by category.

WHY: Every filler the engine can report comes from this one table.
Keeping it as plain data (not buried in matcher logic) makes it easy to
audit and extend.

HOW: FILLER_CATEGORIES maps each FillerCategory to a tuple of lowercase
canonical strings. catalog_entries() flattens the table into
(phrase, category) pairs ordered longest-first, so "let me think" is
scanned before "let", and "kind of" before any single word.

RULES:
- Strings are lowercase; multi-word phrases use single spaces
- The table is read-only and safe to share across concurrent analyses
- Ordering is stable: equal-length phrases keep category declaration
  order, then their order within the category
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from filler_analyzer.core.models import FillerCategory

CATEGORY_ORDER: tuple[FillerCategory, ...] = (
    FillerCategory.HESITATION,
    FillerCategory.DISCOURSE,
    FillerCategory.TEMPORAL,
    FillerCategory.THINKING,
)

FILLER_CATEGORIES: Mapping[FillerCategory, tuple[str, ...]] = MappingProxyType({
    FillerCategory.HESITATION: ("um", "uh", "er", "ah", "hmm"),
    FillerCategory.DISCOURSE: (
        "like",
        "you know",
        "i mean",
        "sort of",
        "kind of",
        "basically",
        "actually",
        "literally",
    ),
    FillerCategory.TEMPORAL: ("so", "well", "now", "then", "okay", "alright"),
    FillerCategory.THINKING: ("let me think", "let me see", "how do i say"),
})


def catalog_entries() -> list[tuple[str, FillerCategory]]:
    """Return every (phrase, category) pair, longest phrase first."""
    entries = [
        (phrase, category)
        for category in CATEGORY_ORDER
        for phrase in FILLER_CATEGORIES[category]
    ]
    # sorted() is stable, so ties keep declaration order
    return sorted(entries, key=lambda entry: len(entry[0]), reverse=True)

