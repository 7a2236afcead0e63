"""
Core definitions for graphql-server: settings and errors.
"""

from __future__ import annotations

from .config import DEFAULT_ENV_FILE, ENV_PREFIX, Settings, load_settings
from .errors import (
    ConfigurationError,
    GraphQLServerError,
    InvalidServerTypeError,
    ServerBindError,
)

__all__ = [
    # Settings
    "Settings",
    "load_settings",
    "ENV_PREFIX",
    "DEFAULT_ENV_FILE",
    # Errors
    "GraphQLServerError",
    "InvalidServerTypeError",
    "ConfigurationError",
    "ServerBindError",
]
