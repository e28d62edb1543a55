"""
Configuration module for the initials avatar service.

Uses pydantic-settings for environment-based configuration with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: PORT=8080 STRICT_VALIDATION=true
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Address the HTTP server binds to"
    )
    PORT: int = Field(
        default=9090,
        description="Port the HTTP server listens on"
    )

    # Service metadata
    SERVICE_NAME: str = Field(
        default="initials-avatar",
        description="Service name for logging and health checks"
    )
    SERVICE_VERSION: str = Field(
        default="1.0.0",
        description="Service version"
    )

    # API documentation
    API_TITLE: str = Field(
        default="Avatar image generator",
        description="Title shown in the OpenAPI document"
    )
    API_DESCRIPTION: str = Field(
        default="Avatar generator according to the properties provided",
        description="Description shown in the OpenAPI document"
    )
    CONTACT_NAME: str = Field(
        default="Santiago Zapata",
        description="Maintainer name published in the OpenAPI document"
    )
    CONTACT_EMAIL: str = Field(
        default="dev.santizapata@gmail.com",
        description="Maintainer email published in the OpenAPI document"
    )
    DOCS_URL: str = Field(
        default="/api-docs",
        description="Path of the interactive Swagger UI"
    )

    # CORS - tighten in production
    CORS_ALLOW_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # Validation
    STRICT_VALIDATION: bool = Field(
        default=False,
        description="Reject malformed avatar parameters with 422 instead of defaulting them"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root logging level"
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parsed CORS_ALLOW_ORIGINS."""
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

    @property
    def public_url(self) -> str:
        """Server URL advertised in the OpenAPI document."""
        return f"http://localhost:{self.PORT}/"


# Singleton settings instance
settings = Settings()
