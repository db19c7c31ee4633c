"""
basic_gate.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Carry the role allow-list source string for the Basic-Auth gate.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Enterprise pattern:
    - Strict env-driven configuration
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="BASIC_GATE_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "basic-gate"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Gate
    # Comma separated; parsed once at app construction (see `auth.roles.configure`).
    role_names_comma_sep: str | None = "app-user"
    protected_path_prefix: str = "/api"
    realm: str = "api"
    # Off: a password containing ":" is rejected. On: split on the first ":" only.
    split_on_first_separator: bool = False

    # User directory
    database_url: str = "sqlite+aiosqlite:///./basic_gate.db"
    # Argon2id cost; memory is in KiB.
    password_hash_time_cost: int = Field(default=3, ge=1)
    password_hash_memory_kib: int = Field(default=64 * 1024, ge=8)
    password_hash_parallelism: int = Field(default=2, ge=1)

    @field_validator("protected_path_prefix")
    @classmethod
    def prefix_is_a_subpath(cls, value: str) -> str:
        # "/" would put health probes and dev routes behind the gate as well.
        prefix = value.rstrip("/")
        if not prefix.startswith("/"):
            raise ValueError("protected_path_prefix must be a path below /, e.g. /api")
        return prefix


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The gate reads only `role_names_comma_sep`, `protected_path_prefix`, `realm` and
# `split_on_first_separator`; everything else belongs to the hosting service.
