"""Serper (Google Lens / Google Images) search client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger("lenstrace.search")

SERPER_BASE_URL = "https://google.serper.dev"
SERPER_TIMEOUT = 15


class SearchError(Exception):
    """Exception raised when a search request fails."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Error message
            endpoint: Search endpoint that failed (e.g. "lens")
        """
        super().__init__(message)
        self.endpoint = endpoint


class SerperClient:
    """Thin async client for the Serper lens and images endpoints."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = SERPER_BASE_URL,
        timeout: int = SERPER_TIMEOUT,
        country: str = "us",
        language: str = "en",
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.country = country
        self.language = language

    async def lens(self, media_url: str) -> list[dict[str, Any]] | None:
        """Run a visual (Google Lens) search for ``media_url``.

        Returns:
            The ``visualMatches`` list, or None if the response has none

        Raises:
            SearchError: If the request or response decoding fails
        """
        payload = await self._post("lens", {"url": media_url})
        return _extract_results(payload, "visualMatches")

    async def images(self, query: str) -> list[dict[str, Any]] | None:
        """Run a Google Images text search.

        Returns:
            The ``images`` list, or None if the response has none

        Raises:
            SearchError: If the request or response decoding fails
        """
        payload = await self._post("images", {"q": query})
        return _extract_results(payload, "images")

    async def _post(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        headers = {"X-API-KEY": self.api_key, "Content-Type": "application/json"}
        payload = {**body, "gl": self.country, "hl": self.language}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise SearchError(
                f"HTTP {exc.response.status_code} from {endpoint}",
                endpoint=endpoint,
            ) from exc
        except httpx.HTTPError as exc:
            raise SearchError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except ValueError as exc:
            raise SearchError(
                f"Invalid JSON from {endpoint}",
                endpoint=endpoint,
            ) from exc

        if not isinstance(data, dict):
            raise SearchError(f"Unexpected payload from {endpoint}", endpoint=endpoint)

        logger.debug("Serper %s responded with keys %s", endpoint, sorted(data))
        return data


def _extract_results(payload: dict[str, Any], key: str) -> list[dict[str, Any]] | None:
    results = payload.get(key)
    if not isinstance(results, list):
        return None
    return [item for item in results if isinstance(item, dict)]


__all__ = ["SearchError", "SerperClient"]
