"""Media inspection utilities.

Header-only dimension sniffing for PNG/JPEG plus a probe that streams just
the leading bytes of remote media.

Example:
    from lenstrace.media import MediaProbe, sniff_dimensions

    header = sniff_dimensions(open("cat.png", "rb").read(64))
    remote = await MediaProbe().probe("https://example.com/cat.jpg")
"""

from __future__ import annotations

# Constants
from lenstrace.media.constants import (
    PROBE_CHUNK_SIZE,
    PROBE_HEADERS,
    PROBE_MAX_BYTES,
    PROBE_TIMEOUT,
)

# Header sniffing
from lenstrace.media.dimensions import (
    ImageFormat,
    ImageHeader,
    detect_format,
    sniff_dimensions,
)

# Remote probing
from lenstrace.media.probe import MediaProbe

# Validation utilities
from lenstrace.media.validator import (
    filename_query,
    hostname_of,
    is_valid_media_url,
    media_filename,
    validate_media_url,
)

__all__ = [
    # Constants
    "PROBE_CHUNK_SIZE",
    "PROBE_HEADERS",
    "PROBE_MAX_BYTES",
    "PROBE_TIMEOUT",
    # Sniffing
    "ImageFormat",
    "ImageHeader",
    "detect_format",
    "sniff_dimensions",
    # Probing
    "MediaProbe",
    # Validation
    "filename_query",
    "hostname_of",
    "is_valid_media_url",
    "media_filename",
    "validate_media_url",
]
