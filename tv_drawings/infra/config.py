"""
Configuration.

Single Responsibility: only manages settings.  All user-tunable values live
here as environment-variable-backed class attributes so they can be changed
via ``.env`` without touching code.
"""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings read from environment variables.

    Every attribute has a default so the parser and builder work with no
    environment at all; only saving / fetching needs ``TV_SESSION``.
    """

    # -- Session credentials ---------------------------------------------------
    tv_session: str = os.getenv("TV_SESSION", "")
    tv_signature: str = os.getenv("TV_SIGNATURE", "")
    tv_user_id: int = int(os.getenv("TV_USER_ID", "-1"))

    # -- API endpoints ---------------------------------------------------------
    charts_storage_url: str = os.getenv(
        "CHARTS_STORAGE_URL",
        "https://charts-storage.tradingview.com/charts-storage",
    )
    chart_token_url: str = os.getenv(
        "CHART_TOKEN_URL", "https://www.tradingview.com/chart-token"
    )
    default_chart_id: str = os.getenv("DEFAULT_CHART_ID", "_shared")

    # -- HTTP timeouts (seconds) -----------------------------------------------
    http_timeout: int = int(os.getenv("HTTP_TIMEOUT", "15"))

    # -- Logging ---------------------------------------------------------------
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
