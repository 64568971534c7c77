"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: AnalysisRequest is the JSON body for both analysis endpoints.
AnalysisResponse mirrors FillerAnalysisResult.to_dict() field for field,
so a response is built with AnalysisResponse.model_validate(result.to_dict()).

RULES:
- All models use Field(description=...) for OpenAPI documentation
- duration_minutes and duration_seconds are mutually exclusive
- Response field names are snake_case, same as the JSON report
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class AnalysisRequest(BaseModel):
    """Transcript and duration to analyse.

    RULES:
    - transcript may be empty (yields a zero-valued result)
    - duration_seconds converts with max(0.1, seconds / 60)
    - With neither duration field the server default applies
    """

    transcript: str = Field(description="Full transcript text.")
    duration_minutes: Optional[float] = Field(
        default=None,
        description="Spoken duration in minutes. Values <= 0 give a rate of 0.",
    )
    duration_seconds: Optional[float] = Field(
        default=None,
        description="Spoken duration in seconds (alternative to duration_minutes).",
    )

    @model_validator(mode="after")
    def _one_duration(self) -> "AnalysisRequest":
        if self.duration_minutes is not None and self.duration_seconds is not None:
            raise ValueError("Give duration_minutes or duration_seconds, not both.")
        return self

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "transcript": "Um, so I think, like, this is kind of great.",
                "duration_seconds": 42,
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FillerPositionModel(BaseModel):
    word: str = Field(description="The filler as written in the transcript.")
    position: int = Field(description="Character offset of the filler.")


class DistributionModel(BaseModel):
    """Flagged fillers per third of the transcript."""

    beginning: int = Field(description="Fillers in the first third.")
    middle: int = Field(description="Fillers in the middle third.")
    end: int = Field(description="Fillers in the last third.")


class PositionPatternsModel(BaseModel):
    start_of_speech: int = Field(description="Fillers in the first 20% of the transcript.")
    mid_speech: int = Field(description="Fillers between 20% and 80%.")
    end_of_speech: int = Field(description="Fillers in the last 20%.")


class ContextPatternsModel(BaseModel):
    """Rhetorical contexts; a filler may count in several."""

    when_explaining: int = Field(description="Fillers near explanation cues.")
    when_listing: int = Field(description="Fillers near listing cues or dense commas/'and'.")
    when_transitioning: int = Field(description="Fillers near transition cues.")
    when_answering: int = Field(description="Fillers early in the speech or right after a question.")
    mid_sentence: int = Field(description="Fillers with no sentence boundary within 40 characters.")


class PatternsModel(BaseModel):
    position_patterns: PositionPatternsModel
    context_patterns: ContextPatternsModel
    insights: List[str] = Field(description="Coaching insights derived from the patterns.")


class AnalysisResponse(BaseModel):
    """Complete filler analysis.

    RULES:
    - category_counts always has hesitation, discourse, temporal, thinking
    - detection_accuracy is an integer percentage in [0, 100]
    """

    total_filler_words: int = Field(description="Number of flagged fillers.")
    fillers_per_minute: float = Field(description="Flagged fillers per spoken minute.")
    category_counts: Dict[str, int] = Field(description="Flagged fillers per category.")
    specific_filler_counts: Dict[str, int] = Field(description="Flagged fillers per lowercase filler text.")
    filler_positions: List[FillerPositionModel] = Field(description="Flagged fillers in transcript order.")
    distribution_analysis: DistributionModel
    detection_accuracy: int = Field(description="Share of candidates confirmed as fillers (percent).")
    detection_summary: str = Field(description="One-line detection summary.")
    patterns: PatternsModel


class FormatInfo(BaseModel):
    """Description of an available report format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-fillers.json').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
