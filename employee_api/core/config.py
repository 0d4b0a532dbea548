from functools import lru_cache
from pathlib import Path
import os
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]  # repo root

ENV_FILE = os.getenv("ENV_FILE", str(BASE_DIR / ".env"))

EXAMPLE_DATABASE_URL = "postgresql+psycopg://<username>:<password>@<host>:5432/employeeDB"

MISSING_DATABASE_URL_MESSAGE = (
    "FATAL: DATABASE_URL environment variable is not set.\n"
    "Please create a .env file in the project root (see .env.example) with:\n"
    f'DATABASE_URL="{EXAMPLE_DATABASE_URL}"'
)


class ConfigurationError(RuntimeError):
    pass


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILE, extra="ignore")

    APP_ENV: str = "local"
    # Checked at connect time so the app can be built without it
    DATABASE_URL: str | None = None
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    FRONTEND_DIR: Path = BASE_DIR / "dist" / "FrontEnd"
    LIST_QUERY_TIMEOUT_SECONDS: float = Field(default=20.0, gt=0)
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # Comma-separated list of allowed origins, or "*" for all

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list, handling '*' for development"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


def require_database_url(settings: Settings) -> str:
    """Return the connection URL, or raise ConfigurationError when it is unset or blank."""
    url = (settings.DATABASE_URL or "").strip()
    if not url:
        raise ConfigurationError(MISSING_DATABASE_URL_MESSAGE)
    return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
