"""
Service-backed GraphQL server.

GraphQL queries and mutations are meant to be resolved by calling
microservice endpoints over HTTP; the microservices in this mode talk
to each other directly. Today the schema only carries a placeholder
``hello`` field.
"""

from __future__ import annotations

import logging
import socket
from typing import Optional

import uvicorn
from fastapi import FastAPI

from ..core.config import Settings
from ..core.errors import ConfigurationError, ServerBindError
from ..web.app import create_graphql_app
from ..web.schema import build_schema
from .base import Server, ServerType

logger = logging.getLogger(__name__)


class ServiceServer(Server):
    """HTTP server exposing the GraphQL schema through FastAPI."""

    server_type = ServerType.SERVICE

    def __init__(self):
        self.app: Optional[FastAPI] = None
        self.host: str = ""
        self.port: int = 0
        self.log_level: str = "info"

    def configure(self, settings: Settings) -> None:
        schema = build_schema()
        self.app = create_graphql_app(
            schema,
            server_type=self.server_type.value,
            cors=settings.cors,
        )
        self.host = settings.get("host")
        self.port = settings.get("server-port")
        self.log_level = settings.get("log-level").lower()

    def _bind(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        try:
            return socket.create_server((self.host, self.port), family=family)
        except OSError as e:
            raise ServerBindError(self.host, self.port, e.strerror or str(e)) from e

    def run(self) -> None:
        """
        Serve HTTP until the process is stopped.

        Raises:
            ConfigurationError: If called before configure()
            ServerBindError: If the listening socket cannot be bound
        """
        if self.app is None:
            raise ConfigurationError("ServiceServer.run() called before configure()")

        sock = self._bind()
        logger.info("Starting GraphQL Server with Microservices on port %s...", self.port)

        config = uvicorn.Config(self.app, log_level=self.log_level)
        server = uvicorn.Server(config)
        try:
            server.run(sockets=[sock])
        finally:
            sock.close()
