"""Configuration constants, duration helpers, and .env loading.

WHY: Centralizes the few configurable values (default duration, log
level, API bind address) so the CLI and the HTTP API agree on them and
deployments can override them without code changes.

HOW: python-dotenv loads the .env file on import. Defaults are
module-level constants read from the environment. Small helpers convert
recorded seconds into the minutes the engine expects and parse
comma-separated report format lists.

RULES:
- Every default can be overridden via a FILLER_* environment variable
- Recorded durations are floored at MIN_DURATION_MINUTES (0.1) so short
  clips do not produce absurd per-minute rates
- Helpers raise ValueError with a human-readable message on bad input
"""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Analysis defaults
# ---------------------------------------------------------------------------

MIN_DURATION_MINUTES = 0.1
"""Floor applied when converting a recording length to minutes."""

DEFAULT_DURATION_MINUTES = float(os.getenv("FILLER_DEFAULT_DURATION_MINUTES", "1.0"))
"""Duration assumed when the caller does not know how long the speech was."""

# ---------------------------------------------------------------------------
# Logging and server defaults
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("FILLER_LOG_LEVEL", "WARNING").upper()
API_HOST = os.getenv("FILLER_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("FILLER_API_PORT", "8000"))


def duration_minutes_from_seconds(seconds: float) -> float:
    """Convert a recording length in seconds to analysis minutes.

    RULES:
    - Result is max(0.1, seconds / 60)
    - Negative input is allowed and yields the floor
    """
    return max(MIN_DURATION_MINUTES, seconds / 60.0)


def parse_format_keys(value: str, available: Iterable[str]) -> List[str]:
    """Split a comma-separated format list and validate every key.

    Args:
        value: e.g. "json_report, plain_text".
        available: Registered formatter keys.

    Returns:
        The keys in the given order, whitespace stripped, blanks dropped.

    Raises:
        ValueError: If a key is not in ``available`` or the list is empty.
    """
    known = set(available)
    keys = [k.strip() for k in value.split(",") if k.strip()]
    if not keys:
        raise ValueError("No output format given.")
    for key in keys:
        if key not in known:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(known))
                )
            )
    return keys
