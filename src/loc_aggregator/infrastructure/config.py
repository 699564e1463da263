"""Application configuration, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Not validated here: missing credentials surface as upstream errors.
    github_username: str | None = None
    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    line_counter_url: str = "https://api.codetabs.com/v1/loc"
    http_timeout: float = 120.0
    cache_file: Path = Path("cache.json")
    blacklist_file: Path = Path("blacklist.json")
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def github_auth(self) -> tuple[str, str] | None:
        """Basic-auth pair, or *None* when either half is missing."""
        if self.github_username and self.github_token:
            return (self.github_username, self.github_token.get_secret_value())
        return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
