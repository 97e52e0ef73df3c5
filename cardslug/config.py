from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDSLUG_")

    app_name: str = "CardSlug"
    debug: bool = False

    log_level: str = "INFO"

    # JSON file extending or replacing the built-in classification tables.
    # Unset: built-in tables only.
    dictionaries_path: Path | None = None


settings = Settings()


# =============================================================================
# API LIMITS
# =============================================================================

# Maximum slugs accepted by one batch decomposition request
MAX_BATCH_SLUGS = 500
