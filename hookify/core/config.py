"""
Application configuration using Pydantic Settings.

Loads environment variables for the webhook secret, signature
transport and the API server.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hookify.core.security import SUPPORTED_ENCODINGS


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application.
        debug: Enable debug mode.
        webhook_secret: Shared secret for validating webhook signatures.
        signature_header: Request header carrying the signature.
        signature_encoding: Transport encoding of the signature header.
        api_host: Host to bind the API server.
        api_port: Port to bind the API server.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = Field(default="Hookify", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Webhook Validation
    webhook_secret: SecretStr = Field(
        ...,
        description="Secret for validating webhook signatures",
        json_schema_extra={"env": "WEBHOOK_SECRET"},
    )
    signature_header: str = Field(
        default="X-Signature",
        description="Header carrying the webhook signature",
    )
    signature_encoding: str = Field(
        default="hex",
        description="Encoding of the signature header (hex or base64)",
    )

    # Server Configuration
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(
        default=8080,
        description="API server port",
        validation_alias=AliasChoices("port", "api_port"),
    )

    @field_validator("signature_encoding", mode="before")
    @classmethod
    def validate_signature_encoding(cls, v: str) -> str:
        """Normalize the encoding name and reject unknown ones."""
        v = str(v).strip().lower()
        if v not in SUPPORTED_ENCODINGS:
            raise ValueError(
                f"signature_encoding must be one of {', '.join(SUPPORTED_ENCODINGS)}"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
