"""Data models for media analysis reports.

The reports are plain dataclasses; ``to_dict`` produces the JSON payload
returned by the analyze endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from lenstrace.media.dimensions import ImageHeader

UNKNOWN_GENERATOR = "Unknown"

SERVICE_NAME = "osint-dual-engine-v3"
FAILURE_SERVICE_NAME = "osint-critical-failure"


class SearchMethod(str, Enum):
    """How the reported matches were found."""

    NONE = "None"
    VISUAL = "Visual Fingerprint"
    FILENAME = "Filename Lookup"


@dataclass
class WebMatch:
    """A single web page where the media appears."""

    source_name: str
    title: str
    url: str
    posted_time: str

    def to_dict(self) -> dict[str, str]:
        return {
            "source_name": self.source_name,
            "title": self.title,
            "url": self.url,
            "posted_time": self.posted_time,
        }


@dataclass
class FootprintAnalysis:
    """Summary of where the media was found and who likely made it."""

    total_matches: int = 0
    is_viral: bool = False
    ai_generator_name: str = UNKNOWN_GENERATOR
    matches: list[WebMatch] = field(default_factory=list)
    method: SearchMethod = SearchMethod.NONE

    @property
    def generator_known(self) -> bool:
        return self.ai_generator_name != UNKNOWN_GENERATOR

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMatches": self.total_matches,
            "isViral": self.is_viral,
            "ai_generator_name": self.ai_generator_name,
            "matches": [match.to_dict() for match in self.matches],
            "method": self.method.value,
        }


@dataclass
class TimelineIntel:
    """Coarse first/last seen hints."""

    first_seen: str
    last_seen: str = "Just Now"

    @classmethod
    def from_matches(cls, matches: list[WebMatch]) -> TimelineIntel:
        return cls(first_seen="Found Publicly" if matches else "Unique/Private")

    def to_dict(self) -> dict[str, str]:
        return {"first_seen": self.first_seen, "last_seen": self.last_seen}


@dataclass
class AnalysisReport:
    """Full result of analyzing one media URL."""

    media_url: str
    footprint: FootprintAnalysis = field(default_factory=FootprintAnalysis)
    timeline: TimelineIntel | None = None
    media_header: ImageHeader | None = None
    manual_links: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def service(self) -> str:
        return FAILURE_SERVICE_NAME if self.error else SERVICE_NAME

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "service": self.service,
            "footprintAnalysis": self.footprint.to_dict(),
        }
        if self.error:
            payload["error"] = self.error
            return payload

        timeline = self.timeline or TimelineIntel.from_matches(self.footprint.matches)
        payload["timelineIntel"] = timeline.to_dict()
        payload["mediaHeader"] = (
            self.media_header.as_dict() if self.media_header else None
        )
        payload["manualSearchLinks"] = dict(self.manual_links)
        return payload


__all__ = [
    "AnalysisReport",
    "FootprintAnalysis",
    "SearchMethod",
    "TimelineIntel",
    "UNKNOWN_GENERATOR",
    "WebMatch",
]
