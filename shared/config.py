"""
Shared configuration management for the Translations Lookup service.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSLATIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Remote translation API
    api_url: str = Field(default="https://api.example.com/translate")
    host_version: str = Field(default="6.4")
    default_locale: str = Field(default="en_US")
    fetch_timeout_seconds: float = Field(default=30.0)
    support_url: str = Field(default="https://wordpress.org/support/forums/")

    # Cache store
    cache_backend: str = Field(default="redis")
    cache_ttl_seconds: int = Field(default=3 * 60 * 60)
    redis_url: str = Field(default="redis://localhost:6379/0")

    # Observability
    enable_tracing: bool = Field(default=False)


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
