"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (API credentials, sender persona, etc.)
- Resolves which external dependencies are available
- Validates configuration on startup
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal
import logging

logger = logging.getLogger("smsdesk.core.config")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Missing credentials degrade the matching dependency instead of failing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # OpenAI (message composition)
    OPENAI_API_KEY: Optional[str] = Field(
        default=None,
        description="Completion API key; template messages are used when unset"
    )
    OPENAI_API_BASE_URL: str = Field(
        default="https://api.openai.com/v1",
        description="Completion API base URL"
    )
    OPENAI_MODEL: str = Field(
        default="gpt-4",
        description="Completion model name"
    )
    OPENAI_MAX_TOKENS: int = Field(
        default=150,
        description="Upper bound on generated message length in tokens"
    )
    OPENAI_TEMPERATURE: float = Field(
        default=0.7,
        description="Sampling temperature for generated messages"
    )
    OPENAI_TIMEOUT: float = Field(
        default=30.0,
        description="Completion request timeout in seconds"
    )

    # Sender persona
    YOUR_NAME: str = Field(
        default="the business owner",
        description="Name used to sign messages"
    )
    YOUR_BUSINESS: str = Field(
        default="our business",
        description="Business the sender speaks for"
    )

    # Twilio (SMS delivery)
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_PHONE_NUMBER: Optional[str] = Field(
        default=None,
        description="Twilio sender phone number (+15555550111)"
    )
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com",
        description="Twilio REST API base URL"
    )
    TWILIO_TIMEOUT: float = Field(
        default=10.0,
        description="Twilio request timeout in seconds"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @field_validator(
        "OPENAI_API_KEY",
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_PHONE_NUMBER",
        mode="before",
    )
    @classmethod
    def blank_as_unset(cls, v):
        """Treat empty or whitespace-only credentials as not configured."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("OPENAI_API_BASE_URL", "TWILIO_API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def composer_available(self) -> bool:
        """True when generated messages can be requested from OpenAI."""
        return bool(self.OPENAI_API_KEY)

    @property
    def gateway_available(self) -> bool:
        """True when all Twilio credentials are present (otherwise demo mode)."""
        return bool(
            self.TWILIO_ACCOUNT_SID
            and self.TWILIO_AUTH_TOKEN
            and self.TWILIO_PHONE_NUMBER
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Dependency accessor for the global settings."""
    return settings


def validate_settings(config: Optional[Settings] = None) -> bool:
    """
    Validates critical settings on application startup.

    Missing credentials are not errors: they are reported as warnings
    and the affected dependency falls back to its local behaviour.

    Raises:
        ValueError: If any setting holds an unusable value
    """
    config = config or settings
    errors = []

    if config.OPENAI_TIMEOUT <= 0:
        errors.append("OPENAI_TIMEOUT must be positive")
    if config.TWILIO_TIMEOUT <= 0:
        errors.append("TWILIO_TIMEOUT must be positive")
    if config.OPENAI_MAX_TOKENS <= 0:
        errors.append("OPENAI_MAX_TOKENS must be positive")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    if not config.composer_available:
        logger.warning("OPENAI_API_KEY not set, messages will use templates")
    if not config.gateway_available:
        logger.warning("Twilio not configured, running in demo mode")

    return True
