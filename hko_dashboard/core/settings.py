from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="HKO Weather Dashboard", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_payload_max_chars: int = Field(default=200, alias="LOG_PAYLOAD_MAX_CHARS")
    hko_base_url: str = Field(
        default="https://data.weather.gov.hk/weatherAPI/opendata/weather.php",
        alias="HKO_BASE_URL",
    )
    hko_lang: str = Field(default="tc", alias="HKO_LANG")
    hko_timeout_s: float = Field(default=10.0, alias="HKO_TIMEOUT_S")
    display_timezone: str | None = Field(default="Asia/Hong_Kong", alias="DISPLAY_TIMEZONE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
