"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Catalog
    page_size: int = Field(default=12, ge=1)
    max_visible_pages: int = Field(default=5, ge=1)
    default_language: str = "uk"
    supported_languages: list[str] = ["uk", "en", "ru"]
    suggestion_limit: int = Field(default=8, ge=1)

    # Product source: fixture directory, or the seeded demo catalog when unset
    products_dir: str | None = None
    demo_seed: int = 42
    demo_products_per_category: int = Field(default=10, ge=0)

    model_config = {
        "env_prefix": "TECHSTORE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
