"""
Configuration settings for the roster query engine.

Uses Pydantic Settings to load environment variables for logging, table
paging defaults, and the generative-text search service (endpoint, credential,
generation parameters, and the location whitelist rendered into the search
instructions).
"""
from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ALLOWED_LOCATIONS = [
    "India – Mumbai",
    "India – Hyderabad",
    "India – Coimbatore",
]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Roster table
    page_size: int = Field(10, alias="ROSTER_PAGE_SIZE", gt=0)
    page_size_options: List[int] = Field(
        default_factory=lambda: [10, 20, 50, 100], alias="ROSTER_PAGE_SIZE_OPTIONS"
    )

    # Search service
    search_api_key: str = Field("", alias="SEARCH_API_KEY")
    search_base_url: str = Field(
        "https://generativelanguage.googleapis.com/v1beta", alias="SEARCH_BASE_URL"
    )
    search_model: str = Field("gemini-1.5-pro", alias="SEARCH_MODEL")
    search_temperature: float = Field(0.1, alias="SEARCH_TEMPERATURE")
    search_top_k: int = Field(40, alias="SEARCH_TOP_K")
    search_top_p: float = Field(0.95, alias="SEARCH_TOP_P")
    search_max_output_tokens: int = Field(8192, alias="SEARCH_MAX_OUTPUT_TOKENS")
    # Passed to the HTTP transport; the search pipeline itself never times out.
    search_timeout_seconds: float = Field(60.0, alias="SEARCH_TIMEOUT_SECONDS")
    search_page_size: int = Field(5, alias="SEARCH_PAGE_SIZE", gt=0)
    search_allowed_locations: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_LOCATIONS),
        alias="SEARCH_ALLOWED_LOCATIONS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def search_endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.search_base_url.rstrip('/')}/models/{self.search_model}:generateContent"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_ALLOWED_LOCATIONS", "Settings", "get_settings"]
