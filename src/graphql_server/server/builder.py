"""
Server builders.

A builder produces exactly one configured server for its variant and
remembers that it did so::

    builder = ServiceServerBuilder()
    builder.build(settings)
    result = builder.get_result()
    if isinstance(result, Built):
        result.server.run()

Use get_builder() to pick a builder from a selector string.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from ..core.config import Settings
from ..core.errors import ConfigurationError, GraphQLServerError
from .base import Server, ServerType
from .kafka import KafkaServer
from .service import ServiceServer

logger = logging.getLogger(__name__)


class NotBuilt:
    """Build state before build() has completed."""

    _instance: NotBuilt | None = None

    def __new__(cls) -> NotBuilt:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_BUILT"

    def __bool__(self) -> bool:
        return False


NOT_BUILT = NotBuilt()


@dataclass(frozen=True)
class Built:
    """Build state holding the configured server."""

    server: Server


BuildResult = Union[NotBuilt, Built]


class ServerBuilder(ABC):
    """Builds and holds a single configured server."""

    def __init__(self):
        self._result: BuildResult = NOT_BUILT

    @property
    def built(self) -> bool:
        return isinstance(self._result, Built)

    @abstractmethod
    def _create_server(self) -> Server:
        """Instantiate this builder's (unconfigured) server variant."""

    def build(self, settings: Settings) -> None:
        """
        Create and configure the server. Further calls are no-ops.

        Raises:
            ConfigurationError: If the server fails to configure
        """
        if self.built:
            return

        server = self._create_server()
        try:
            server.configure(settings)
        except ConfigurationError:
            raise
        except GraphQLServerError as e:
            raise ConfigurationError(str(e)) from e
        except Exception as e:
            raise ConfigurationError(
                f"Could not configure {server.server_type.value} server: {e}"
            ) from e

        self._result = Built(server)
        logger.debug("Built %s server", server.server_type.value)

    def get_result(self) -> BuildResult:
        """Return the build state: NOT_BUILT or Built(server)."""
        return self._result


class ServiceServerBuilder(ServerBuilder):
    """Builds a server that resolves GraphQL through microservice endpoints."""

    def _create_server(self) -> Server:
        return ServiceServer()


class KafkaServerBuilder(ServerBuilder):
    """Builds a server that resolves GraphQL through Kafka topics."""

    def _create_server(self) -> Server:
        return KafkaServer()


BUILDERS: dict[ServerType, type[ServerBuilder]] = {
    ServerType.SERVICE: ServiceServerBuilder,
    ServerType.KAFKA: KafkaServerBuilder,
}


def get_builder(server_type: str | ServerType) -> ServerBuilder:
    """
    Create a fresh builder for the given selector.

    Raises:
        InvalidServerTypeError: If the selector is not a supported variant
    """
    if not isinstance(server_type, ServerType):
        server_type = ServerType.parse(server_type)
    return BUILDERS[server_type]()
