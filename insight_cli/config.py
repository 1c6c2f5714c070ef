"""
Configuration settings for insight-cli.

Uses Pydantic Settings to load identity strings (author, version), logging
options, and the names of the record sources wired into each command.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from insight_cli import __author__, __version__
from insight_cli.sources.registry import available_sources


class Settings(BaseSettings):
    # Identity
    app_name: str = Field("insight-cli", alias="INSIGHT_APP_NAME")
    display_name: str = Field("Insight CLI", alias="INSIGHT_DISPLAY_NAME")
    author: str = Field(__author__, alias="INSIGHT_AUTHOR")
    version: str = Field(__version__, alias="INSIGHT_VERSION")

    # Logging
    log_level: str = Field("WARNING", alias="INSIGHT_LOG_LEVEL")
    json_logs: bool = Field(False, alias="INSIGHT_JSON_LOGS")

    # Record sources
    analysis_source: str = Field("sample", alias="INSIGHT_ANALYSIS_SOURCE")
    report_source: str = Field("report_sample", alias="INSIGHT_REPORT_SOURCE")

    # Exit with status 1 when a report cannot be serialized
    strict_exit: bool = Field(False, alias="INSIGHT_STRICT_EXIT")

    @field_validator("analysis_source", "report_source")
    @classmethod
    def _known_source(cls, value: str) -> str:
        names = available_sources()
        if value not in names:
            raise ValueError(f"Unknown record source '{value}'. Available: {', '.join(names)}")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
