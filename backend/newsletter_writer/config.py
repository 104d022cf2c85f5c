import json
import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from newsletter_writer.utils import extract_origin


PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOCAL_ENV_FILE = PROJECT_ROOT / ".env.local"

if LOCAL_ENV_FILE.exists():
    load_dotenv(LOCAL_ENV_FILE, override=True)

DEFAULT_JWT_SECRET = "change-me"


class Settings(BaseSettings):
    class Config:
        env_file = ".env"
        extra = "ignore"
    database_url: str = "sqlite:///./newsletter.db"
    environment: str = "development"
    jwt_secret_key: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24 * 7)  # 7 days
    frontend_base_url: str = Field(default="http://localhost:3000")
    additional_cors_origins: str | None = Field(default=None)

    def get_database_url(self) -> str:
        """Return DATABASE_URL from the environment, falling back to the configured value."""
        return os.getenv("DATABASE_URL") or self.database_url

    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def get_additional_cors_origins(self) -> list[str]:
        value = self.additional_cors_origins
        if not value:
            return []

        stripped = value.strip()
        if not stripped:
            return []
        if stripped.startswith("[") and stripped.endswith("]"):
            try:
                parsed = json.loads(stripped)
                if isinstance(parsed, list):
                    return [
                        str(origin).strip()
                        for origin in parsed
                        if str(origin).strip()
                    ]
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in stripped.split(",") if item.strip()]


def get_cors_origins(settings: Settings) -> List[str]:
    """
    Build the list of allowed CORS origins.

    Combines frontend_base_url with any additional origins, keeping only
    values that parse to a scheme + host origin and dropping duplicates.
    """
    origins: List[str] = []
    candidates = [settings.frontend_base_url, *settings.get_additional_cors_origins()]
    for candidate in candidates:
        origin = extract_origin(candidate)
        if origin and origin not in origins:
            origins.append(origin)
    return origins


def check_production_settings(settings: Settings) -> None:
    """Refuse to serve production traffic with the placeholder JWT secret."""
    if settings.is_production() and settings.jwt_secret_key == DEFAULT_JWT_SECRET:
        raise RuntimeError("JWT_SECRET_KEY must be set when ENVIRONMENT=production")


@lru_cache()
def get_settings():
    return Settings()
