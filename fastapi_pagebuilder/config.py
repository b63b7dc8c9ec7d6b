"""
Pagination defaults using Pydantic Settings.

Loads configuration from environment variables with validation:
- PAGINATION_MAX_NAVIGATE: Page links shown in a navigation widget (default: 5)
- PAGINATION_PARAMETER_NAME: Query parameter carrying the page (default: "page")
- PAGINATION_PER_PAGE: Items per page for query-backed views (default: 10)
- PAGINATION_REFERENCE_TYPE: Kind of generated URL (default: "absolute_path")
- PAGINATION_LOG_LEVEL: Level applied by setup_logging() (default: "WARNING")

Usage:
    from fastapi_pagebuilder.config import get_settings

    builder = PaginationBuilder.from_settings(get_settings())
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_pagebuilder.links.factory import ReferenceType


class PaginationSettings(BaseSettings):
    """Pagination defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        extra="ignore",
    )

    max_navigate: int = Field(
        default=5,
        ge=1,
        description="Max number of page links in a navigation widget",
    )
    parameter_name: str = Field(
        default="page",
        min_length=1,
        description="Query parameter carrying the current page",
    )
    per_page: int = Field(
        default=10,
        ge=1,
        description="Items per page for query-backed views",
    )
    reference_type: ReferenceType = Field(
        default=ReferenceType.ABSOLUTE_PATH,
        description="Kind of URL generated for page links",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> PaginationSettings:
    """Return the cached settings instance."""
    return PaginationSettings()
