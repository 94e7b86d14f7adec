"""Filtering and shaping of raw search matches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from lenstrace.analysis.models import WebMatch
from lenstrace.media.validator import hostname_of, is_valid_media_url

DEFAULT_IGNORED_DOMAINS: tuple[str, ...] = (
    "cloudinary",
    "vercel",
    "blob:",
    "discord",
    "whatsapp",
    "telegram",
)
DEFAULT_TITLE = "External Match"
DEFAULT_POSTED_TIME = "Online Discovery"


def is_ignored(raw: dict[str, Any], ignored_domains: Iterable[str]) -> bool:
    """Check whether a match points at an ignored host or source."""
    link = str(raw.get("link") or "")
    source = str(raw.get("source") or "")
    return any(domain in link or domain in source for domain in ignored_domains)


def filter_matches(
    raw_matches: Iterable[dict[str, Any]], ignored_domains: Sequence[str]
) -> list[dict[str, Any]]:
    """Drop matches from ignored domains, keeping the original order."""
    return [raw for raw in raw_matches if not is_ignored(raw, ignored_domains)]


def to_web_match(raw: dict[str, Any]) -> WebMatch | None:
    """Shape a raw search entry, or None if it has no usable link."""
    link = raw.get("link")
    if not isinstance(link, str) or not is_valid_media_url(link):
        return None

    source_name = raw.get("source") or hostname_of(link) or link
    return WebMatch(
        source_name=str(source_name),
        title=str(raw.get("title") or DEFAULT_TITLE),
        url=link,
        posted_time=DEFAULT_POSTED_TIME,
    )


def shape_matches(raw_matches: Iterable[dict[str, Any]], limit: int) -> list[WebMatch]:
    """Shape up to ``limit`` matches, skipping entries without a link."""
    shaped: list[WebMatch] = []
    for raw in raw_matches:
        if len(shaped) >= limit:
            break
        match = to_web_match(raw)
        if match is not None:
            shaped.append(match)
    return shaped


def context_text(raw_matches: Iterable[dict[str, Any]]) -> str:
    """Join titles and sources of all matches for keyword scanning."""
    return " ".join(
        f"{raw.get('title') or ''} {raw.get('source') or ''}".lower()
        for raw in raw_matches
    )
