"""Abstract base formatter and output container.

WHY: Every report format consumes the same transcript and
FillerAnalysisResult but produces different file content. This base
class enforces a consistent interface so the CLI and the HTTP API can
work with any formatter generically.

HOW: BaseFormatter is an ABC with ``name`` and ``suffix`` properties
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable), ``suffix`` and ``format()``
- ``format()`` returns a list; current formatters return one item
- ``suffix`` starts with a hyphen, e.g. ``"-fillers.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from filler_analyzer.core.models import FillerAnalysisResult


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-fillers.json"`` → ``"talk-fillers.json"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new report format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format(), name and suffix
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'JSON Report'."""

    @property
    @abstractmethod
    def suffix(self) -> str:
        """File suffix of the (first) output, e.g. '-fillers.json'."""

    @abstractmethod
    def format(self, transcript: str, result: FillerAnalysisResult) -> list[FormatterOutput]:
        """Render an analysis result into one or more output files.

        Args:
            transcript: The analysed transcript text.
            result: The FillerAnalysisResult returned by analyze().

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string, and MIME type.
        """
