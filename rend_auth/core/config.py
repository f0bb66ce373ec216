"""
Configuration management using Pydantic Settings.

Configuration is loaded from environment variables once per process and then
turned into small immutable config objects (``SessionTokenConfig``,
``FederatedProviderConfig``) that are handed to the services that need them.
Services never read settings themselves.

Usage:
    from rend_auth.core.config import get_settings

    settings = get_settings()
    session_config = settings.session_token_config()

    if settings.is_production:
        # Production-only behavior
        ...
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rend_auth.core.constants import MIN_SECRET_KEY_LENGTH
from rend_auth.core.enums import Environment


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionTokenConfig:
    """Immutable signing configuration for session tokens.

    Attributes:
        secret_key: HMAC signing secret (at least 32 characters).
        algorithm: JWT algorithm (HS256).
        expire_days: Token lifetime in days.
    """

    secret_key: str
    algorithm: str = "HS256"
    expire_days: int = 30


@dataclass(frozen=True, slots=True, kw_only=True)
class FederatedProviderConfig:
    """Immutable OAuth client configuration for the federated provider.

    All three client fields must be present for the provider to count as
    configured.
    """

    client_id: str | None
    client_secret: str | None
    redirect_uri: str | None
    jwks_url: str
    token_url: str
    auth_url: str
    issuers: tuple[str, ...]

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret and self.redirect_uri)


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(default="rend-auth", description="Application name")
    service_name: str = Field(
        default="Rend",
        description="Service name embedded in wallet challenge messages",
    )

    # Session tokens
    secret_key: str = Field(description="Secret key for session token signing")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    session_token_expire_days: int = Field(
        default=30,
        ge=1,
        description="Session token lifetime in days",
    )

    # Wallet challenges
    nonce_ttl_seconds: int = Field(
        default=300,
        ge=1,
        description="Lifetime of a wallet challenge nonce in seconds",
    )
    nonce_backend: str = Field(
        default="memory",
        description="Nonce store backend (memory, redis)",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL, required when nonce_backend=redis",
    )

    # Passwords and reset tokens
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds",
    )
    reset_token_expire_minutes: int = Field(
        default=60,
        ge=1,
        description="Password reset token lifetime in minutes",
    )
    reset_url_base: str = Field(
        default="http://localhost:5000",
        description="Base URL for password reset links",
    )

    # Email
    email_backend: str = Field(
        default="stub",
        description="Notification sink backend (stub, ses)",
    )
    email_from: str = Field(
        default="no-reply@rend.local",
        description="Sender address for outbound email",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for SES")

    # Federated identity (Google)
    google_client_id: str | None = Field(default=None)
    google_client_secret: str | None = Field(default=None)
    google_redirect_uri: str | None = Field(default=None)
    google_jwks_url: str = Field(default="https://www.googleapis.com/oauth2/v3/certs")
    google_token_url: str = Field(default="https://oauth2.googleapis.com/token")
    google_auth_url: str = Field(
        default="https://accounts.google.com/o/oauth2/v2/auth"
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject signing secrets shorter than 256 bits."""
        if len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"secret_key must be at least {MIN_SECRET_KEY_LENGTH} characters"
            )
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Validate bcrypt rounds are within a usable range."""
        if not 4 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 4 and 20")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_upper

    @field_validator("nonce_backend")
    @classmethod
    def validate_nonce_backend(cls, v: str) -> str:
        if v not in ("memory", "redis"):
            raise ValueError("nonce_backend must be 'memory' or 'redis'")
        return v

    @field_validator("email_backend")
    @classmethod
    def validate_email_backend(cls, v: str) -> str:
        if v not in ("stub", "ses"):
            raise ValueError("email_backend must be 'stub' or 'ses'")
        return v

    @field_validator("reset_url_base")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    def session_token_config(self) -> SessionTokenConfig:
        """Build the immutable session signing configuration."""
        return SessionTokenConfig(
            secret_key=self.secret_key,
            algorithm=self.algorithm,
            expire_days=self.session_token_expire_days,
        )

    def federated_provider_config(self) -> FederatedProviderConfig:
        """Build the immutable Google OAuth client configuration."""
        return FederatedProviderConfig(
            client_id=self.google_client_id,
            client_secret=self.google_client_secret,
            redirect_uri=self.google_redirect_uri,
            jwks_url=self.google_jwks_url,
            token_url=self.google_token_url,
            auth_url=self.google_auth_url,
            issuers=("accounts.google.com", "https://accounts.google.com"),
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance, loaded once per process.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
