"""
Settings loading and validation for the GraphQL server.

Settings are resolved once at startup from, in order of precedence:
explicit CLI flags, ``GS_``-prefixed environment variables, an optional
dotenv file and the defaults below. The resulting object is frozen and is
passed explicitly to every component that needs it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from uvicorn.config import LOG_LEVELS

from .errors import ConfigurationError

ENV_PREFIX = "GS_"
DEFAULT_ENV_FILE = ".env"


class Settings(BaseSettings):
    """Server settings loaded from flags and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Variant selector, validated by the entry dispatch
    server_type: str = ""

    # Server
    host: str = "0.0.0.0"
    server_port: int = Field(default=8080, ge=0, le=65535)
    cors: bool = False

    # Logging
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if value.lower() not in LOG_LEVELS:
            raise ValueError(
                f"unknown log level: {value} (expected one of: {', '.join(LOG_LEVELS)})"
            )
        return value.upper()

    def get(self, key: str) -> Any:
        """Look up a setting by its flag-style key, e.g. ``server-port``."""
        name = key.replace("-", "_").replace(".", "_")
        if name not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, name)


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    env_file: Optional[str] = DEFAULT_ENV_FILE,
) -> Settings:
    """
    Resolve settings once for this process.

    Args:
        overrides: Explicit values (usually CLI flags). ``None`` values are
            treated as unset so the environment can fill them.
        env_file: Dotenv file to read; missing files are ignored.

    Returns:
        Frozen Settings instance

    Raises:
        ConfigurationError: If any value fails validation
    """
    values = {
        key.replace("-", "_"): value
        for key, value in (overrides or {}).items()
        if value is not None
    }
    try:
        return Settings(_env_file=env_file, **values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from e
