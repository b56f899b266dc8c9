"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """Explicit GitHub client configuration handed to the REST adapter."""

    api_url: str = "https://api.github.com"
    token: str | None = None
    timeout: float = 30.0


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    max_files_per_repo: int = 20
    max_concurrent_fetches: int = 20
    request_timeout: float = 30.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    def github_config(self) -> GitHubConfig:
        token = self.github_token.get_secret_value() if self.github_token else None
        return GitHubConfig(
            api_url=self.github_api_url.rstrip("/"),
            token=token,
            timeout=self.request_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
