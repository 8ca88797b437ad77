"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the relational database.
        database_user: Optional user overriding the one in database_url.
        database_password: Optional password overriding the one in database_url.
        database_in_memory: Use a private in-memory SQLite database (test mode).
        jwt_secret: HMAC secret used to sign bearer tokens.
        jwt_issuer: Value of the ``iss`` claim.
        jwt_audience: Value of the ``aud`` claim.
        jwt_realm: Realm advertised in ``WWW-Authenticate`` challenges.
        jwt_expiration_hours: Lifetime of an issued token.
        bcrypt_rounds: Cost factor for password hashing.
        rate_limit_enabled: Toggle for the slowapi limiter.
        rate_limit_login: Rate limit applied to the login endpoint.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Library Management API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "postgresql://localhost:5432/library"
    database_user: Optional[str] = None
    database_password: Optional[str] = None
    database_in_memory: bool = False

    jwt_secret: str = "change-me"
    jwt_issuer: str = "http://localhost:8080/"
    jwt_audience: str = "jwt-audience"
    jwt_realm: str = "library-app"
    jwt_expiration_hours: int = 24

    bcrypt_rounds: int = 12

    rate_limit_enabled: bool = True
    rate_limit_login: str = "10/minute"

    @property
    def jwt_expiration_seconds(self) -> int:
        """Token lifetime expressed in seconds."""
        return self.jwt_expiration_hours * 3600


settings = Settings()
