"""Portfolio Settings - one BaseSettings object read from env vars and .env.

Invariants:
    - database_url always names an async driver (postgresql+asyncpg or sqlite+aiosqlite)
    - get_settings() returns the same instance for the life of the process
    - Tests and scripts build Settings(...) directly and pass it to create_app()

Design Decisions:
    - CORS_ORIGINS accepts a JSON list or a comma-separated string
"""

import json
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


class Settings(BaseSettings):
    """Portfolio API settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    database_url: str = "postgresql+asyncpg://portfolio:portfolio@db:5432/portfolio"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # HTTP
    api_prefix: str = "/api"
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:5173"]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        if isinstance(v, str):
            for prefix, replacement in ASYNC_DRIVERS.items():
                if v.startswith(prefix):
                    return replacement + v[len(prefix):]
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
