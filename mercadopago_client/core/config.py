"""Client configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    Every field can be overridden with a ``MERCADOPAGO_`` prefixed
    environment variable or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MERCADOPAGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    base_url: str = "https://api.mercadopago.com"
    timeout: float = 10.0

    # Credentials
    client_id: str = ""
    client_secret: str = ""
    sandbox: bool = True

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
