from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens for the dashboard.
# Sentiment colors are used consistently across every chart.
#
THEME = {
    "bg_primary": "#F4F3EE",     # page background
    "bg_card": "#FFFFFF",       # card surface
    "accent_primary": "#1D9BF0",
    "accent_secondary": "#4CB0F4",
    "navy_900": "#0B1220",
    "navy_800": "#111C33",
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E6E4E0",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Sentiment labels
    "positive": "#067647",
    "neutral": "#6B7280",
    "negative": "#B42318",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    # Connection (required for live mode)
    vertica_host: str
    vertica_port: int
    vertica_database: Optional[str]
    vertica_username: Optional[str]
    vertica_password: Optional[str]

    # Where the tweets / tweet_sentiment tables live
    vertica_schema: str

    # Row cap for tweet retrieval queries
    tweet_limit: int

    # Defaults
    default_use_mock: bool
    log_level: str

    @property
    def fq_schema(self) -> str:
        return f'"{self.vertica_schema}"'


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    v = _getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {v!r}") from None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - VERTICA_* names follow the vertica.hostname / vertica.database /
      vertica.username / vertica.password connection properties
    """
    load_dotenv(override=False)

    return AppConfig(
        vertica_host=_getenv("VERTICA_HOST", "localhost") or "localhost",
        vertica_port=_getint("VERTICA_PORT", 5433),
        vertica_database=_getenv("VERTICA_DATABASE"),
        vertica_username=_getenv("VERTICA_USERNAME"),
        vertica_password=_getenv("VERTICA_PASSWORD"),
        vertica_schema=_getenv("VERTICA_SCHEMA", "public") or "public",
        tweet_limit=_getint("TWEET_LIMIT", 1000),
        default_use_mock=(_getenv("USE_MOCK_DATA", "true") or "true").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    """Configure the root logger from config (level + shared format)."""
    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT)
    # vertica_python logs every message exchange at DEBUG
    logging.getLogger("vertica_python").setLevel(logging.WARNING)
