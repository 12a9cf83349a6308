"""Configuration loading from YAML and environment.

Every section is a pydantic-settings model, so each value can also be
overridden with an environment variable (e.g. HTTP_TIMEOUT, FETCH_REPLY_BATCH_SIZE).
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)

# Injected by load_config so ${VAR} placeholders can be resolved
_current_env: dict[str, str] = {}


class HttpConfig(BaseSettings):
    """HTTP transport settings shared by page fetches and RPC calls."""

    model_config = SettingsConfigDict(env_prefix="HTTP_", extra="ignore")

    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="Desktop browser User-Agent")
    base_url: str = Field(default="https://www.youtube.com", description="Platform origin")
    api_path: str = Field(default="/youtubei/v1/next", description="Internal continuation endpoint")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow redirects on page fetch")


class InnerTubeConfig(BaseSettings):
    """Client context sent with every continuation request."""

    model_config = SettingsConfigDict(env_prefix="INNERTUBE_", extra="ignore")

    client_name: str = Field(default="WEB", description="Client name reported to the API")
    hl: str = Field(default="en", description="Interface language")
    gl: str = Field(default="US", description="Content region")


class FetchConfig(BaseSettings):
    """Comment acquisition settings."""

    model_config = SettingsConfigDict(env_prefix="FETCH_", extra="ignore")

    reply_batch_size: int = Field(default=5, ge=1, le=50, description="Concurrent reply fetches per batch")
    fetch_replies: bool = Field(default=True, description="Fetch replies after top-level comments")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    http: HttpConfig = Field(default_factory=HttpConfig)
    innertube: InnerTubeConfig = Field(default_factory=InnerTubeConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file is not an error: every section falls back to its
    defaults (still subject to env overrides).
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    return AppConfig(
        http=HttpConfig(**(raw.get("http") or {})),
        innertube=InnerTubeConfig(**(raw.get("innertube") or {})),
        fetch=FetchConfig(**(raw.get("fetch") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
