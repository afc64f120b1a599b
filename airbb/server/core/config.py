"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class SessionConfig(BaseModel):
    """Browser session configuration."""

    secret_key: str = Field(
        default="airbb-dev-session-secret",
        alias="AIRBB_SESSION_SECRET",
        description="Secret used to sign the session cookie",
    )
    cookie_name: str = Field(default="airbb_session", alias="AIRBB_SESSION_COOKIE", description="Session cookie name")
    idle_timeout_minutes: int = Field(
        default=30,
        ge=1,
        alias="AIRBB_SESSION_IDLE_TIMEOUT_MINUTES",
        description="Minutes of inactivity after which the session expires",
    )
    https_only: bool = Field(
        default=False, alias="AIRBB_SESSION_HTTPS_ONLY", description="Only send the session cookie over HTTPS"
    )

    model_config = {"populate_by_name": True}

    @property
    def max_age_seconds(self) -> int:
        return self.idle_timeout_minutes * 60


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class BookingConfig(BaseModel):
    """Booking behaviour configuration."""

    default_user_id: int = Field(
        default=1,
        ge=1,
        alias="AIRBB_DEFAULT_USER_ID",
        description="User that staged reservations are booked for",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # AirBB Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="AirBB server host address to bind to",
        alias="AIRBB_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="AirBB server port number",
        alias="AIRBB_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="AirBB server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="AIRBB_LOG_LEVEL",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment (development or production)",
        alias="AIRBB_ENVIRONMENT",
    )
    https_redirect: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS",
        alias="AIRBB_HTTPS_REDIRECT",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./AirBB.db",
        description="Async SQLAlchemy connection URL for application database",
        alias="DATABASE_URL",
    )
    sqlite_path: Optional[str] = Field(
        default=None,
        description="SQLite file or 'Data Source=...' string; takes precedence over DATABASE_URL",
        alias="SQLITE_PATH",
    )
    apply_migrations: bool = Field(
        default=False,
        description="Create missing tables when the server starts",
        alias="APPLY_MIGRATIONS",
    )

    # =====================================================================
    # Session & Booking Configuration (flat fields bound by alias)
    # =====================================================================
    session_secret: str = Field(default="airbb-dev-session-secret", alias="AIRBB_SESSION_SECRET")
    session_cookie: str = Field(default="airbb_session", alias="AIRBB_SESSION_COOKIE")
    session_idle_timeout_minutes: int = Field(default=30, alias="AIRBB_SESSION_IDLE_TIMEOUT_MINUTES")
    session_https_only: bool = Field(default=False, alias="AIRBB_SESSION_HTTPS_ONLY")
    default_user_id: int = Field(default=1, alias="AIRBB_DEFAULT_USER_ID")

    # =====================================================================
    # CORS Configuration (flat fields bound by alias)
    # =====================================================================
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def effective_database_url(self) -> str:
        """Connection URL after applying the SQLITE_PATH override."""
        return self.sqlite_path or self.database_url

    @property
    def session(self) -> SessionConfig:
        """Get session configuration from environment variables."""
        return SessionConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def booking(self) -> BookingConfig:
        """Get booking configuration from environment variables."""
        return BookingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
