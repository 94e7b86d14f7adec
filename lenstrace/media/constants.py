"""Media probe constants.

All remote media probing configuration in one place for consistency.
"""

from __future__ import annotations

# Size limits
PROBE_MAX_BYTES = 64 * 1024  # enough for headers behind typical EXIF/ICC blocks
PROBE_CHUNK_SIZE = 4 * 1024

# Timeouts
PROBE_TIMEOUT = 10  # seconds

# HTTP headers for media requests
PROBE_HEADERS = {
    "User-Agent": "Lenstrace Probe/0.1",
    "Accept": "image/*,video/*;q=0.8,*/*;q=0.5",
}

__all__ = [
    "PROBE_CHUNK_SIZE",
    "PROBE_HEADERS",
    "PROBE_MAX_BYTES",
    "PROBE_TIMEOUT",
]
