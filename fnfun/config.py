"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - enterprise_port is a valid TCP port (1-65535)

Design Decisions:
    - Defaults provided for every setting: works out-of-the-box on localhost
    - The enterprise host/port are only read by the wiring code (main.lifespan),
      never by the lookup itself
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Enterprise directory (injected into lookup_enterprise)
    enterprise_host: str = "localhost"
    enterprise_port: int = 8080

    @field_validator("enterprise_host", mode="before")
    @classmethod
    def strip_host(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("enterprise_host cannot be empty")
        return v

    @field_validator("enterprise_port")
    @classmethod
    def check_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError(f"enterprise_port must be in 1-65535, got {v}")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
