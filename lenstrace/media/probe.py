"""Remote media probing.

Streams only the leading bytes of a remote file and reads its dimensions
from the header, so large images and videos are never downloaded in full.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from lenstrace.media.constants import (
    PROBE_CHUNK_SIZE,
    PROBE_HEADERS,
    PROBE_MAX_BYTES,
    PROBE_TIMEOUT,
)
from lenstrace.media.dimensions import (
    ImageFormat,
    ImageHeader,
    detect_format,
    sniff_dimensions,
)
from lenstrace.media.validator import is_valid_media_url

logger = logging.getLogger("lenstrace.media")

# Enough bytes to tell PNG and JPEG signatures apart from anything else.
_SIGNATURE_BYTES = 8


class MediaProbe:
    """Reads image dimensions from the first bytes of a remote file.

    Example:
        probe = MediaProbe(max_bytes=32 * 1024)
        header = await probe.probe("https://example.com/cat.png")
        if header is not None:
            print(header.width, header.height)
    """

    def __init__(
        self,
        *,
        timeout: int = PROBE_TIMEOUT,
        max_bytes: int = PROBE_MAX_BYTES,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            timeout: HTTP request timeout in seconds
            max_bytes: Maximum number of leading bytes to read
            headers: Optional extra HTTP headers
        """
        self.timeout = timeout
        self.max_bytes = max_bytes
        self._headers = dict(PROBE_HEADERS)
        if headers:
            self._headers.update(headers)

    async def probe(self, url: str) -> ImageHeader | None:
        """Return the header of the image at ``url``, or None.

        Network failures, HTTP errors and unsupported formats are logged and
        reported as None.
        """
        if not is_valid_media_url(url):
            logger.debug("Skipping probe for invalid URL: %s", url)
            return None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._headers,
            ) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()
                    return await self._read_header(url, response)
        except httpx.HTTPError as exc:
            logger.info("Probe request failed for %s: %s", url, exc)
            return None

    async def _read_header(
        self, url: str, response: httpx.Response
    ) -> ImageHeader | None:
        prefix = bytearray()
        async for chunk in response.aiter_bytes(PROBE_CHUNK_SIZE):
            prefix += chunk[: self.max_bytes - len(prefix)]

            header = sniff_dimensions(prefix)
            if header is not None:
                logger.debug(
                    "Probed %s: %sx%s %s after %s bytes",
                    url,
                    header.width,
                    header.height,
                    header.format.value,
                    len(prefix),
                )
                return header

            if (
                len(prefix) >= _SIGNATURE_BYTES
                and detect_format(prefix) is ImageFormat.UNKNOWN
            ):
                logger.debug("Unsupported media format at %s", url)
                return None

            if len(prefix) >= self.max_bytes:
                break

        logger.debug("No image header within %s bytes of %s", len(prefix), url)
        return None


__all__ = ["MediaProbe"]
