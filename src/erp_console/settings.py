"""
erp_console.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the console and its clients.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `ERP_`), defaults safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="ERP_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "erp-console"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Backend REST API (categories, products, ...). Paths are joined onto this base.
    api_base_url: str = "http://localhost:5000/api"
    request_timeout_s: float = Field(default=10.0, gt=0)

    # Session
    login_path: str = "/auth/login"
    session_cookie: str = "auth_token"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The login path is configurable for hosting under a prefix; the gate itself
# defaults to `/auth/login` when used outside the web layer.
