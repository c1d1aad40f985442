"""
core/config.py -- Centralized application configuration via pydantic-settings.

All environment variable reads for the relay happen here. No module should
call os.getenv() or os.environ.get() directly -- import get_settings() instead.

Design patterns used:
  Singleton via lru_cache: get_settings() instantiates Settings once at first
      call and returns the cached instance on every subsequent call. This is
      the official FastAPI dependency injection pattern for config.

  BaseSettings (pydantic-settings): Reads values from environment variables
      and an optional .env file automatically. Field names map to env var names
      (e.g. todo_api_url -> TODO_API_URL). Type coercion and validation are
      built in.

  @field_validator(mode="before"): PORT is commonly exported as an empty
      string by process managers. Empty means "not configured", so it falls
      back to the default instead of failing int coercion.

Layer rule: core/ is the kernel. This module may not import from api/, web/,
or auth/.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("todorelay.config")

DEFAULT_PORT = 3000
DEFAULT_TODO_API_URL = "https://hunter-todo-api.herokuapp.com"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    All fields have defaults so Settings() can be instantiated in test
    environments without a real .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    # Proxies whose X-Forwarded-For uvicorn trusts ("*" behind a PaaS router).
    # Rate limiting keys on the client address this yields.
    forwarded_allow_ips: str = "127.0.0.1"

    # ------------------------------------------------------------------
    # Upstream to-do API
    # ------------------------------------------------------------------

    todo_api_url: str = DEFAULT_TODO_API_URL
    # Bounds every upstream call. Expiry surfaces as UpstreamUnavailable.
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    # ------------------------------------------------------------------
    # Session cookie
    # ------------------------------------------------------------------

    session_cookie_name: str = "Authentication"
    secure_cookies: bool = False

    # ------------------------------------------------------------------
    # Rate limiting
    # ------------------------------------------------------------------

    auth_rate_limit: str = "10/minute"

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    @field_validator("port", mode="before")
    @classmethod
    def empty_port_uses_default(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        return value

    @field_validator("todo_api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Paths are appended verbatim ("/todo-item"), so the base must not end in "/"."""
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return the application Settings singleton.

    In tests: call get_settings.cache_clear() between test cases if you need
    to inject different environment variables.
    """
    settings = Settings()
    logger.debug("Settings loaded (upstream=%s, port=%d)", settings.todo_api_url, settings.port)
    return settings
