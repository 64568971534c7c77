"""FastAPI application exposing the filler analysis engine over HTTP.

WHY: The practice web app, coaching tools, and curl users need to submit
a transcript and get the analysis back without installing the package.
FastAPI provides request validation and automatic OpenAPI documentation.

HOW: A single FastAPI app exposes four endpoints grouped by tags. Analysis
is synchronous and fast, so there is no job store: POST /analyses returns
the result directly and POST /analyses/report renders it with one of the
registered formatters.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- Unknown report format keys are a 400, not a 422
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Annotated, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from filler_analyzer import __version__
from filler_analyzer.config import (
    API_HOST,
    API_PORT,
    DEFAULT_DURATION_MINUTES,
    LOG_LEVEL,
    duration_minutes_from_seconds,
)
from filler_analyzer.core.analyzer import analyze
from filler_analyzer.core.models import FillerAnalysisResult
from filler_analyzer.formatters import FORMATTERS
from filler_analyzer.server.models import (
    AnalysisRequest,
    AnalysisResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
)

logger = logging.getLogger(__name__)

REPORT_STEM = "transcript"

app = FastAPI(
    title="Filler Analyzer API",
    description=(
        "REST API for detecting and categorizing filler words in speech "
        "transcripts. Submit a transcript with its spoken duration and get "
        "counts, rates, distribution, contextual patterns, and coaching "
        "insights, or a rendered report (JSON, plain text)."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _request_duration(request: AnalysisRequest) -> float:
    """Duration in minutes for a request, falling back to the default."""
    if request.duration_seconds is not None:
        return duration_minutes_from_seconds(request.duration_seconds)
    if request.duration_minutes is not None:
        return request.duration_minutes
    return DEFAULT_DURATION_MINUTES


def _run_analysis(request: AnalysisRequest) -> FillerAnalysisResult:
    duration = _request_duration(request)
    result = analyze(request.transcript, duration)
    logger.info(
        "Analyzed %d chars (%.2f min): %d fillers",
        len(request.transcript), duration, result.total_filler_words,
    )
    return result


# ---------------------------------------------------------------------------
# Endpoints: Analyses
# ---------------------------------------------------------------------------


@app.post(
    "/analyses",
    response_model=AnalysisResponse,
    tags=["analyses"],
    summary="Analyze a transcript",
    description=(
        "Detect filler words in the transcript, filter out legitimate uses "
        "by context, and return counts, rate, distribution, and patterns. "
        "Give duration_minutes or duration_seconds, not both."
    ),
    responses={
        422: {"description": "Invalid request body"},
    },
)
async def create_analysis(request: AnalysisRequest) -> AnalysisResponse:
    result = _run_analysis(request)
    return AnalysisResponse.model_validate(result.to_dict())


@app.post(
    "/analyses/report",
    tags=["analyses"],
    summary="Analyze a transcript and render a report",
    description=(
        "Run the same analysis as POST /analyses and return the report "
        "produced by the chosen formatter as a downloadable attachment. "
        "See GET /formats for the available keys."
    ),
    responses={
        200: {"description": "Rendered report", "content": {
            "application/json": {}, "text/plain": {},
        }},
        400: {"model": ErrorResponse, "description": "Unknown report format"},
        500: {"model": ErrorResponse, "description": "Report rendering failed"},
        422: {"description": "Invalid request body"},
    },
)
async def create_report(
    request: AnalysisRequest,
    format_key: Annotated[
        str,
        Query(alias="format", description="Report format key (e.g. 'json_report', 'plain_text')."),
    ] = "json_report",
) -> Response:
    formatter_cls = FORMATTERS.get(format_key)
    if formatter_cls is None:
        raise HTTPException(
            status_code=400,
            detail="Unknown format '{}'. Available formats: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )

    result = _run_analysis(request)
    try:
        output = formatter_cls().format(request.transcript, result)[0]
    except Exception as exc:
        logger.exception("Formatter %s failed", format_key)
        raise HTTPException(
            status_code=500,
            detail="Report rendering failed: {}".format(exc),
        ) from exc
    filename = "{}{}".format(REPORT_STEM, output.suffix)
    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available report formats",
    description=(
        "Returns all supported report formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(key=key, name=formatter.name, suffix=formatter.suffix))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the filler-analyzer-api console script."""
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting API on %s:%d", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT)
