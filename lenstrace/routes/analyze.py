"""Media analysis routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from lenstrace.analysis.pipeline import MediaAnalyzer
from lenstrace.config import config
from lenstrace.media.probe import MediaProbe
from lenstrace.media.validator import validate_media_url
from lenstrace.search.serper import SerperClient

router: APIRouter = APIRouter(prefix="/api", tags=["analyze"])


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    media_url: str | None = Field(default=None, alias="mediaUrl")


def get_analyzer() -> MediaAnalyzer:
    """Build an analyzer from the current configuration."""
    search = None
    if config.SERPER_API_KEY:
        search = SerperClient(
            config.SERPER_API_KEY,
            base_url=config.SERPER_BASE_URL,
            timeout=config.SEARCH_TIMEOUT,
            country=config.SEARCH_COUNTRY,
            language=config.SEARCH_LANGUAGE,
        )

    probe = None
    if config.PROBE_ENABLED:
        probe = MediaProbe(max_bytes=config.PROBE_MAX_BYTES)

    return MediaAnalyzer(
        search=search,
        probe=probe,
        ignored_domains=config.IGNORED_DOMAINS,
        max_matches=config.MAX_REPORTED_MATCHES,
        viral_threshold=config.VIRAL_THRESHOLD,
    )


@router.options("/analyze")
async def analyze_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("/analyze")
async def analyze(
    payload: AnalyzeRequest,
    analyzer: MediaAnalyzer = Depends(get_analyzer),
) -> JSONResponse:
    """Analyze a media URL and report its web footprint."""
    media_url = (payload.media_url or "").strip()
    if not media_url:
        return JSONResponse(
            {"error": "No mediaUrl"}, status_code=status.HTTP_400_BAD_REQUEST
        )

    is_valid, reason = validate_media_url(media_url)
    if not is_valid:
        return JSONResponse(
            {"error": f"Invalid mediaUrl: {reason}"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    report = await analyzer.analyze(media_url)
    # Failures are reported in the body; the caller always gets a payload.
    return JSONResponse(report.to_dict(), status_code=status.HTTP_200_OK)
