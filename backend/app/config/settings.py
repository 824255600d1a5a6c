"""
Application Settings for ClickNGoAI

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Authentication accepts JWTs signed by the identity provider:
    - AUTH_JWKS_URL set: asymmetric keys fetched from the JWKS endpoint
    - otherwise: HS256 with JWT_SECRET
    """

    # Application Settings
    app_name: str = "ClickNGoAI"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # Database Configuration (SQLModel/SQLAlchemy)
    database_url: Optional[str] = "sqlite+aiosqlite:///./clickngoai.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_timeout: int = 30
    database_echo: bool = False

    # Auth Configuration
    jwt_secret: str = "dev-secret-change-me-before-deploying-to-production"
    jwt_algorithm: str = "HS256"
    jwt_audience: Optional[str] = "authenticated"
    jwt_issuer: Optional[str] = None
    auth_jwks_url: Optional[str] = None
    session_cookie_name: str = "app_session_id"

    # External identity promoted to superadmin on upsert
    owner_open_id: Optional[str] = None

    # Google AI Configuration (accepts GOOGLE_API_KEY or GEMINI_API_KEY)
    google_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.0-flash"
    ai_temperature: float = 0.8
    ai_max_output_tokens: int = 2048

    # Build simulation
    default_build_estimate_seconds: int = 120

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def normalize_keys(self) -> "Settings":
        """Normalize API keys and reject unsafe production secrets."""
        # Normalize gemini_api_key to google_api_key
        if not self.google_api_key and self.gemini_api_key:
            self.google_api_key = self.gemini_api_key

        if self.is_production and self.jwt_secret.startswith("dev-") and not self.auth_jwks_url:
            raise ValueError(
                "JWT_SECRET or AUTH_JWKS_URL must be configured when ENVIRONMENT=production"
            )

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
