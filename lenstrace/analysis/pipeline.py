"""Media analysis pipeline.

Runs the analysis phases for a single media URL:

1. Filename forensics (generator keywords in the file name)
2. Header probe (dimensions from the first bytes of the file)
3. Visual search (Google Lens via Serper)
4. Text fallback (Google Images search on the cleaned file name)
5. Filtering, shaping and context matching on the search results
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from lenstrace.analysis.generators import identify_generator
from lenstrace.analysis.matches import (
    DEFAULT_IGNORED_DOMAINS,
    context_text,
    filter_matches,
    shape_matches,
)
from lenstrace.analysis.models import (
    AnalysisReport,
    FootprintAnalysis,
    SearchMethod,
    TimelineIntel,
)
from lenstrace.media.probe import MediaProbe
from lenstrace.media.validator import filename_query, media_filename
from lenstrace.search.links import manual_search_links
from lenstrace.search.serper import SearchError, SerperClient

logger = logging.getLogger("lenstrace.analysis")

DEFAULT_MAX_MATCHES = 8
DEFAULT_VIRAL_THRESHOLD = 20
# Shorter file name queries are too generic to search for.
MIN_QUERY_LENGTH = 4


class MediaAnalyzer:
    """Analyzes a media URL against reverse image search results.

    Example:
        analyzer = MediaAnalyzer(search=SerperClient(api_key), probe=MediaProbe())
        report = await analyzer.analyze("https://example.com/midjourney_cat.png")
        print(report.footprint.ai_generator_name)
    """

    def __init__(
        self,
        *,
        search: SerperClient | None = None,
        probe: MediaProbe | None = None,
        ignored_domains: Sequence[str] = DEFAULT_IGNORED_DOMAINS,
        max_matches: int = DEFAULT_MAX_MATCHES,
        viral_threshold: int = DEFAULT_VIRAL_THRESHOLD,
    ) -> None:
        """Initialize the analyzer.

        Args:
            search: Search client; without one only filename forensics run
            probe: Media probe; without one no dimensions are reported
            ignored_domains: Substrings that disqualify a match
            max_matches: Number of matches kept in the report
            viral_threshold: Match count above which media counts as viral
        """
        self.search = search
        self.probe = probe
        self.ignored_domains = list(ignored_domains)
        self.max_matches = max_matches
        self.viral_threshold = viral_threshold

    async def analyze(self, media_url: str) -> AnalysisReport:
        """Analyze ``media_url`` and return the report.

        Search failures fall through to the next phase. Any other error ends
        the analysis early; the report then carries the error message and
        whatever was found up to that point.
        """
        report = AnalysisReport(
            media_url=media_url,
            manual_links=manual_search_links(media_url),
        )
        footprint = report.footprint

        try:
            filename = media_filename(media_url)
            generator = identify_generator(filename)
            if generator:
                footprint.ai_generator_name = f"{generator} (Filename Trace)"

            if self.probe is not None:
                report.media_header = await self.probe.probe(media_url)

            if self.search is not None:
                raw_matches = await self._search(
                    self.search, media_url, filename, footprint
                )
                self._summarize(raw_matches, footprint)

            report.timeline = TimelineIntel.from_matches(footprint.matches)
        except Exception as exc:
            logger.exception("Analysis failed for %s", media_url)
            report.error = str(exc) or exc.__class__.__name__

        logger.info(
            "Analyzed %s: %s matches via %s, generator %s",
            media_url,
            footprint.total_matches,
            footprint.method.value,
            footprint.ai_generator_name,
        )
        return report

    async def _search(
        self,
        search: SerperClient,
        media_url: str,
        filename: str,
        footprint: FootprintAnalysis,
    ) -> list[dict[str, Any]]:
        raw_matches: list[dict[str, Any]] = []

        try:
            visual = await search.lens(media_url)
        except SearchError as exc:
            logger.info("Lens search failed for %s: %s", media_url, exc)
            visual = None
        if visual is not None:
            raw_matches = visual
            footprint.method = SearchMethod.VISUAL

        if raw_matches:
            return raw_matches

        query = filename_query(filename)
        if len(query) < MIN_QUERY_LENGTH:
            logger.debug("Skipping text fallback, query %r too short", query)
            return raw_matches

        try:
            images = await search.images(query)
        except SearchError as exc:
            logger.info("Text search failed for %r: %s", query, exc)
            images = None
        if images is not None:
            raw_matches = images
            footprint.method = SearchMethod.FILENAME

        return raw_matches

    def _summarize(
        self, raw_matches: list[dict[str, Any]], footprint: FootprintAnalysis
    ) -> None:
        clean = filter_matches(raw_matches, self.ignored_domains)

        footprint.total_matches = len(clean)
        footprint.is_viral = len(clean) > self.viral_threshold
        footprint.matches = shape_matches(clean, self.max_matches)

        if not footprint.generator_known:
            generator = identify_generator(context_text(clean))
            if generator:
                footprint.ai_generator_name = f"{generator} (Context Match)"


__all__ = ["MediaAnalyzer"]
