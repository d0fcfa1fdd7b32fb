"""
Configuration management for the DART proxy.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from sources.dart.client import API_KEY_ENV, BASE_URL

BASE_DIR: Path = Path(__file__).parent.parent
load_dotenv(BASE_DIR / ".env")


class Settings:
    """Proxy server configuration."""

    # Server
    API_TITLE: str = "DART Proxy"
    API_DESCRIPTION: str = "Server-side proxy for the DART OpenAPI (corp codes and financial statements)"
    API_VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Upstream
    API_KEY_ENV: str = API_KEY_ENV
    DART_BASE_URL: str = os.getenv("DART_BASE_URL", BASE_URL)
    UPSTREAM_TIMEOUT: float = float(os.getenv("DART_TIMEOUT", "30"))

    # Responses
    CHUNK_SIZE: int = 64 * 1024
    CORP_CODE_FILENAME: str = "CORPCODE.zip"
    CACHE_CONTROL: str = "s-maxage=60, stale-while-revalidate"

    @property
    def api_key(self) -> str:
        """Read on every access so the key is never cached in process state."""
        return os.getenv(self.API_KEY_ENV, "")


settings = Settings()
