"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validation settings loaded from environment variables."""

    # Message joining
    FIELD_ERROR_SEPARATOR: str = "\n"
    FORM_ERROR_SEPARATOR: str = "\n"

    # Synthetic messages for broken rules
    PATTERN_ERROR_TEMPLATE: str = "Invalid validation pattern '{pattern}': {error}"
    PREDICATE_ERROR_TEMPLATE: str = "Validation rule '{rule}' failed: {error}"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {
        "env_prefix": "FORMVALIDATION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
