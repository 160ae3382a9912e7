"""Environment-driven settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="JSON:API Pages", alias="APP_NAME")

    # Pagination
    default_page_size: int = Field(default=20, ge=1, alias="JSONAPI_DEFAULT_PAGE_SIZE")
    max_page_size: Optional[int] = Field(default=100, ge=1, alias="JSONAPI_MAX_PAGE_SIZE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")


@lru_cache
def get_settings() -> Settings:
    return Settings()
