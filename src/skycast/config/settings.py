from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """Skycast configuration."""

    log_level: str = "INFO"

    # WeatherAPI.com
    weather_api_base_url: str = "https://api.weatherapi.com/v1"
    weather_api_key: str = ""
    # Any timeout comes from the HTTP client, surfaced as a Timeout error
    weather_api_timeout: float = Field(default=10.0, gt=0)
    forecast_days: int = Field(default=3, ge=1, le=14)

    # Local cache database
    data_dir: Path = Path("data")
    database_url_override: str | None = Field(
        default=None, validation_alias="SKYCAST_DATABASE_URL"
    )
    database_echo: bool = False

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL of the local cache database."""
        if self.database_url_override:
            return self.database_url_override
        return f"sqlite+aiosqlite:///{self.data_dir / 'skycast.db'}"

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="SKYCAST_",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings (tests and env reloads)."""
    get_settings.cache_clear()
