"""
DisasterWatch - Configuration Management
Centralized configuration using pydantic-settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Reports backend
    reports_api_url: str = "https://disaster-watch-backend.onrender.com/api"
    request_timeout_seconds: float = 30.0

    # Basemap preference storage
    basemap_storage_path: Optional[str] = ".disasterwatch/preferences.json"
    basemap_storage_key: str = "basemap"

    # Map view
    map_center_latitude: float = 20.5937
    map_center_longitude: float = 78.9629
    map_default_zoom: int = 5
    fly_to_zoom: int = 9
    fly_to_duration_seconds: float = 1.5

    # Analytics
    top_regions_limit: int = 5
    date_format: str = "%m/%d/%Y"
    timestamp_format: str = "%m/%d/%Y, %I:%M:%S %p"

    # Media
    placeholder_image_url: str = "/placeholder.jpg"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def map_center(self) -> tuple[float, float]:
        return (self.map_center_latitude, self.map_center_longitude)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
