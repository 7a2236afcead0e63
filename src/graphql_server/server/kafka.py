"""
Kafka-backed GraphQL server.

In this mode queries and mutations would be resolved through Kafka topics,
with the microservices talking to each other over Kafka. Topic
subscription and dispatch are not implemented yet: the server configures
nothing and returns from run() immediately.
"""

from __future__ import annotations

import logging

from ..core.config import Settings
from .base import Server, ServerType

logger = logging.getLogger(__name__)


class KafkaServer(Server):
    """Placeholder server for the Kafka backend."""

    server_type = ServerType.KAFKA

    def configure(self, settings: Settings) -> None:
        logger.debug("Kafka server has nothing to configure")

    def run(self) -> None:
        logger.info("GraphQL Server Running with Kafka...")
