"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / ".stockboard"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Stockboard"
    app_version: str = "0.1.0"

    # Data directory (quote cache lives here)
    data_dir: Optional[Path] = None

    # Database URL for the sqlite cache backend (derived from data_dir if not set)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Upstream provider. Blank, "DEMO" or the placeholder key selects synthetic quotes.
    alpha_vantage_api_key: Optional[str] = None
    alpha_vantage_base_url: str = "https://www.alphavantage.co/query"
    upstream_timeout_seconds: float = 10.0

    # Quote cache
    quote_cache_ttl_seconds: int = 60 * 60
    quote_cache_backend: str = "json"  # "json" or "sqlite"
    quote_cache_file_name: str = "cache.json"

    # Portfolio display
    base_currency: str = "JPY"
    usd_jpy_rate: float = 150.0
    refresh_max_workers: int = 8

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "quote_cache.db"
        return f"sqlite:///{db_path}"

    def get_cache_file(self) -> Path:
        """Get the path of the JSON quote cache file."""
        return self.get_data_dir() / self.quote_cache_file_name


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
