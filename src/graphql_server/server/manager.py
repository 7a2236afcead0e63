"""
Server manager: runs the build step of an injected builder.

Usage:

    builder = get_builder("SERVICE")
    manager = ServerManager(builder)
    manager.create_server(settings)
    result = builder.get_result()
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.config import Settings
from ..core.errors import ConfigurationError
from .builder import ServerBuilder

logger = logging.getLogger(__name__)


class ServerManager:
    """Directs the creation of a GraphQL server through a builder."""

    def __init__(self, builder: Optional[ServerBuilder]):
        if builder is None:
            raise ConfigurationError("ServerManager requires a server builder")
        self.builder = builder

    def create_server(self, settings: Settings) -> None:
        """Build the server with the given settings."""
        logger.debug("Creating server with %s", type(self.builder).__name__)
        self.builder.build(settings)
