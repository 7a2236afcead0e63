"""
Custom exceptions for the GraphQL server.
"""

from __future__ import annotations

from typing import Iterable, Optional


class GraphQLServerError(Exception):
    """Base exception for all graphql-server errors."""
    pass


class InvalidServerTypeError(GraphQLServerError):
    """Raised when the server type selector is not a supported variant."""

    def __init__(self, server_type: Optional[str], supported: Iterable[str] = ()):
        self.server_type = server_type
        self.supported = tuple(supported)
        message = f"invalid server type: {server_type!r}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class ConfigurationError(GraphQLServerError):
    """Raised when settings are invalid or a server cannot be configured."""
    pass


class ServerBindError(GraphQLServerError):
    """Raised when the HTTP listener cannot bind its address."""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        super().__init__(f"Could not bind {host}:{port}: {reason}")
