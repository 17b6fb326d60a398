"""Configuration settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values accepted by the search endpoint
SearchOrder = Literal["date", "rating", "relevance", "title", "videoCount", "viewCount"]
SafeSearch = Literal["moderate", "none", "strict"]


class Settings(BaseSettings):
    """Search settings loaded from the environment.

    The launcher exports workflow variables as lowercase environment
    variables (``api_key``, ``max_results``, ``order``); lookups are
    case-insensitive so the uppercase spellings work as well.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # YouTube Data API
    api_key: str = Field(min_length=1)
    api_base_url: str = "https://www.googleapis.com/youtube/v3"

    # Search parameters
    max_results: int = Field(ge=0, le=50)
    order: SearchOrder
    safe_search: SafeSearch = "moderate"

    # HTTP
    request_timeout: float = Field(default=10.0, gt=0)


def get_settings() -> Settings:
    """Load settings from the environment.

    Raises:
        pydantic.ValidationError: If a required setting is missing or invalid
    """
    return Settings()
