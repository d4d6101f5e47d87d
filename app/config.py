"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)

    app_port: int = Field(8000, alias="APP_PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    max_sources: int = Field(8, alias="MAX_SOURCES")
    max_schemes: int = Field(6, alias="MAX_SCHEMES")
    citation_min_chars: int = Field(60, alias="CITATION_MIN_CHARS")
    tabs_min_chars: int = Field(420, alias="TABS_MIN_CHARS")
    tabs_min_count: int = Field(2, alias="TABS_MIN_COUNT")
    max_answer_chars: int = Field(20000, alias="MAX_ANSWER_CHARS")
    short_label_chars: int = Field(46, alias="SHORT_LABEL_CHARS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
