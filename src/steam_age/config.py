import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv
from redis.asyncio import Redis

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "steam_ids")

    # Steam Web API
    steam_api_key: str = os.getenv("STEAM_API_KEY", "")
    steam_api_base_url: str = os.getenv("STEAM_API_BASE_URL", "https://api.steampowered.com")
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # API
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")
    log_format: str = os.getenv("LOG_FORMAT", "console")

    @property
    def has_steam_api_key(self) -> bool:
        """Check whether a Steam Web API key is configured."""
        return bool(self.steam_api_key)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.upstream_timeout <= 0:
            raise ValueError("UPSTREAM_TIMEOUT must be greater than 0 seconds")

        if not 1 <= self.api_port <= 65535:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")

        if self.log_format not in ("console", "json"):
            raise ValueError(f"LOG_FORMAT must be 'console' or 'json', got {self.log_format!r}")

        if not self.cache_key_prefix:
            raise ValueError("CACHE_KEY_PREFIX must not be empty")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> Redis:
    """Create an async Redis client backed by its own connection pool."""
    return Redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
