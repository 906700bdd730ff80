"""
school_access.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., bootstrap teacher password).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, prefix `SCHOOL_`.
    Defaults are safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="SCHOOL_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "school-access"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./school.db"
    directory_backend: Literal["sql", "memory"] = "sql"

    # Auth
    password_schemes: list[str] = Field(default_factory=lambda: ["pbkdf2_sha256"])
    # Authenticated-but-denied maps to 400 (client contract); 403 is the alternative.
    deny_status_code: int = 400

    # Optional TEACHER account provisioned at startup.
    bootstrap_teacher_username: str | None = None
    bootstrap_teacher_password: str | None = Field(default=None, repr=False)
    bootstrap_teacher_name: str = "Teacher"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every layer reads configuration from here; nothing else touches os.environ.
