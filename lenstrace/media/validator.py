"""Media URL validation utilities.

Validates media URLs and derives the filename hints used by the analysis.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from urllib.parse import unquote, urlparse

_QUERY_SEPARATORS = re.compile(r"[-_]+")


def is_valid_media_url(url: str) -> bool:
    """Ensure the media URL uses http(s) and has a host."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def validate_media_url(url: str) -> tuple[bool, str | None]:
    """Validate a media URL and return status with reason.

    Args:
        url: URL to validate

    Returns:
        Tuple of (is_valid, reason_if_invalid)
    """
    if not url:
        return False, "URL is empty"

    parsed = urlparse(url)

    if parsed.scheme not in {"http", "https"}:
        return False, f"Invalid scheme: {parsed.scheme}"

    if not parsed.netloc:
        return False, "Missing host"

    return True, None


def media_filename(url: str) -> str:
    """Return the lower-cased last path segment of a media URL."""
    path = urlparse(url).path if "://" in url else url.split("?", 1)[0]
    return unquote(PurePosixPath(path).name).lower()


def filename_query(filename: str) -> str:
    """Turn a filename into a plain text search query.

    The extension is dropped and dashes/underscores become spaces, so
    ``"sunset_over-tokyo.jpg"`` becomes ``"sunset over tokyo"``.
    """
    stem = filename.split(".", 1)[0]
    return _QUERY_SEPARATORS.sub(" ", stem).strip()


def hostname_of(url: str) -> str | None:
    """Return the host of ``url`` without a leading ``www.``."""
    host = urlparse(url).hostname
    if not host:
        return None
    return host.removeprefix("www.")


__all__ = [
    "filename_query",
    "hostname_of",
    "is_valid_media_url",
    "media_filename",
    "validate_media_url",
]
