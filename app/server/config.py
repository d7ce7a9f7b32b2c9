"""
Configuration loading for the backend API service.

The service never reads process-wide settings from inside a request
handler. Instead a `ServerConfig` is resolved once at startup and handed to
`create_app`. Values are resolved using the following precedence:

1. Explicit keyword overrides passed to `load_config`
2. Environment variables (`PORT`, `NODE_ENV`, `HOST`, `LOG_LEVEL`, `LOG_FORMAT`)
3. Built-in defaults
"""

from __future__ import annotations

import os
from typing import Any, Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

__all__ = [
    "ConfigError",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_PORT",
    "ServerConfig",
    "load_config",
]


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENVIRONMENT = "development"

# Field name -> environment variables checked in order
_ENV_VARS: dict[str, tuple[str, ...]] = {
    "port": ("PORT",),
    "host": ("HOST",),
    "environment": ("NODE_ENV", "APP_ENV"),
    "log_level": ("LOG_LEVEL",),
    "log_format": ("LOG_FORMAT",),
}


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


class ServerConfig(BaseModel):
    """Settings the API service is constructed with."""

    host: str = Field(DEFAULT_HOST, description="Interface to bind", min_length=1)
    port: int = Field(DEFAULT_PORT, description="TCP port to bind", ge=1, le=65535)
    environment: str = Field(
        DEFAULT_ENVIRONMENT,
        description="Environment name surfaced by /api/hello",
        min_length=1,
    )
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["console", "json"] = Field(
        "console", description="Log renderer"
    )

    model_config = ConfigDict(frozen=True)


def _from_environment(environ: Mapping[str, str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for field_name, names in _ENV_VARS.items():
        for name in names:
            raw = environ.get(name)
            # Empty variables behave like unset ones
            if raw:
                values[field_name] = raw
                break
    return values


def load_config(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> ServerConfig:
    """
    Resolve the server configuration.

    Args:
        environ: Mapping to read variables from. Defaults to `os.environ`
            after loading a `.env` file from the working directory, if any.
        **overrides: Explicit field values that win over the environment.

    Raises:
        ConfigError: If a value cannot be validated (e.g. `PORT=abc`).
    """

    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values: dict[str, Any] = _from_environment(environ)
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ServerConfig(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid server configuration: {exc}") from exc
