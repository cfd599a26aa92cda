"""Centralized configuration — all env vars in one place."""

import os

DEFAULT_TICKER_URL = "https://api2.binance.com/api/v3/ticker/24hr"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "4000"))

        # Upstream exchange + cache
        self.ticker_url: str = os.getenv("TICKER_URL", DEFAULT_TICKER_URL)
        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "300"))
        self.crypto_list_limit: int = int(os.getenv("CRYPTO_LIST_LIMIT", "25"))
        self.http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of problems with the current settings."""
        problems = []
        if self.cache_ttl_seconds <= 0:
            problems.append(f"CACHE_TTL_SECONDS must be positive (got {self.cache_ttl_seconds})")
        if self.crypto_list_limit < 0:
            problems.append(f"CRYPTO_LIST_LIMIT must be >= 0 (got {self.crypto_list_limit})")
        if self.http_timeout_seconds <= 0:
            problems.append(f"HTTP_TIMEOUT_SECONDS must be positive (got {self.http_timeout_seconds})")
        return problems


settings = Settings()
