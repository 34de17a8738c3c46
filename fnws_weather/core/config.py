from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FNWS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    open_meteo_url: str = Field(default=OPEN_METEO_URL)
    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    http_max_connections: int = Field(default=50, ge=1, le=500)
    http_max_keepalive_connections: int = Field(default=20, ge=0, le=500)

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # Inbound limit per client address, slowapi syntax.
    rate_limit: str = Field(default="120/minute")

    log_level: str = Field(default="INFO")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        # Allow FNWS_CORS_ORIGINS as JSON array or comma-separated string.
        if not isinstance(value, str):
            return value
        parsed = value.strip()
        if parsed.startswith("["):
            try:
                return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
            except json.JSONDecodeError:
                pass
        return [s.strip() for s in parsed.split(",") if s.strip()]

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
