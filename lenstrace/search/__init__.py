"""Reverse image search providers."""

from __future__ import annotations

from lenstrace.search.links import manual_search_links
from lenstrace.search.serper import SearchError, SerperClient

__all__ = ["SearchError", "SerperClient", "manual_search_links"]
