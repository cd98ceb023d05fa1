"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "MeteoQuery"
    app_version: str = "0.1.0"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000
    # Single fixed location (Riga); override the whole URL to move it.
    weather_api_url: str = (
        "https://api.met.no/weatherapi/locationforecast/2.0/compact?lat=56.9496&lon=24.1052"
    )
    weather_api_key: str = ""
    weather_user_agent: str = "MeteoQuery/0.1.0"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

__all__ = ["settings", "Settings"]
