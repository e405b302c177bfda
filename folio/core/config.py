# folio/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic import PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables and `.env`.
    """
    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_case=True, extra="ignore"
    )

    # --- Database ---
    # DATABASE_URL wins when set; otherwise the DSN is built from POSTGRES_*.
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_PORT: int = 5432
    DB_STATEMENT_TIMEOUT_MS: int = 5000

    # --- JWT Settings ---
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # --- OpenID Connect identity provider ---
    OIDC_ISSUER_URL: Optional[str] = None
    OIDC_CLIENT_ID: Optional[str] = None
    OIDC_CLIENT_SECRET: Optional[str] = None

    # --- HTTP / public site ---
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    SITE_URL: str = "http://localhost:5173"
    SITE_TITLE: str = "Folio"
    SITE_DESCRIPTION: str = "Articles and notes"

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILES: bool = True

    @computed_field
    @property
    def DATABASE_URI(self) -> str:
        """
        SQLAlchemy connection URI.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not (self.POSTGRES_USER and self.POSTGRES_SERVER and self.POSTGRES_DB):
            raise ValueError("Set DATABASE_URL or POSTGRES_USER/POSTGRES_SERVER/POSTGRES_DB")
        dsn = PostgresDsn.build(
            scheme="postgresql+psycopg2",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD,
            host=self.POSTGRES_SERVER,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DB,
        )
        return str(dsn)

    @property
    def oidc_enabled(self) -> bool:
        return bool(self.OIDC_ISSUER_URL and self.OIDC_CLIENT_ID)


@lru_cache
def get_settings() -> Settings:
    return Settings()
