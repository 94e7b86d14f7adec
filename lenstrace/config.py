"""Configuration management for Lenstrace."""

import os

from dotenv import load_dotenv

from lenstrace.analysis.matches import DEFAULT_IGNORED_DOMAINS
from lenstrace.analysis.pipeline import DEFAULT_MAX_MATCHES, DEFAULT_VIRAL_THRESHOLD
from lenstrace.media.constants import PROBE_MAX_BYTES

# Load environment variables from .env file
load_dotenv()


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Application configuration."""

    # Application
    HOST: str = os.getenv("BIND_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("BIND_PORT", os.getenv("PORT", "7680")))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    # Level name or number; falls back to DEBUG/INFO depending on DEBUG.
    LOG_LEVEL: str | None = os.getenv("LOG_LEVEL") or None

    # Search provider
    SERPER_API_KEY: str | None = os.getenv("SERPER_API_KEY") or None
    SERPER_BASE_URL: str = os.getenv("SERPER_BASE_URL", "https://google.serper.dev")
    SEARCH_TIMEOUT: int = int(os.getenv("SEARCH_TIMEOUT", "15"))
    SEARCH_COUNTRY: str = os.getenv("SEARCH_COUNTRY", "us")
    SEARCH_LANGUAGE: str = os.getenv("SEARCH_LANGUAGE", "en")

    # Match filtering
    IGNORED_DOMAINS: list[str] = _split_csv(
        os.getenv("IGNORED_DOMAINS", ",".join(DEFAULT_IGNORED_DOMAINS))
    )
    MAX_REPORTED_MATCHES: int = int(
        os.getenv("MAX_REPORTED_MATCHES", str(DEFAULT_MAX_MATCHES))
    )
    VIRAL_THRESHOLD: int = int(
        os.getenv("VIRAL_THRESHOLD", str(DEFAULT_VIRAL_THRESHOLD))
    )

    # Dimension probe
    PROBE_ENABLED: bool = os.getenv("PROBE_ENABLED", "true").lower() == "true"
    PROBE_MAX_BYTES: int = int(os.getenv("PROBE_MAX_BYTES", str(PROBE_MAX_BYTES)))

    # Security
    CORS_ALLOW_ORIGINS: list[str] = _split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))


config = Config()
