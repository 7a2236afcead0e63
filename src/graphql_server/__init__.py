"""
graphql-server - configurable GraphQL gateway.

Starts a GraphQL server backed either by HTTP microservices ("SERVICE")
or by Kafka topics ("KAFKA").

Usage:
    from graphql_server import get_builder, load_settings, ServerManager

    settings = load_settings({"server_type": "SERVICE", "server_port": 4000})
    builder = get_builder(settings.server_type)
    ServerManager(builder).create_server(settings)
    builder.get_result().server.run()
"""

from __future__ import annotations

from .core import (
    ConfigurationError,
    GraphQLServerError,
    InvalidServerTypeError,
    ServerBindError,
    Settings,
    load_settings,
)
from .server import (
    NOT_BUILT,
    Built,
    KafkaServer,
    KafkaServerBuilder,
    NotBuilt,
    Server,
    ServerBuilder,
    ServerManager,
    ServerType,
    ServiceServer,
    ServiceServerBuilder,
    get_builder,
)
from .version import VERSION, formatted_message
from .web import build_schema, create_graphql_app

__version__ = VERSION

__all__ = [
    # Settings
    "Settings",
    "load_settings",
    # Errors
    "GraphQLServerError",
    "InvalidServerTypeError",
    "ConfigurationError",
    "ServerBindError",
    # Servers
    "Server",
    "ServerType",
    "ServiceServer",
    "KafkaServer",
    # Builders
    "ServerBuilder",
    "ServiceServerBuilder",
    "KafkaServerBuilder",
    "get_builder",
    "NotBuilt",
    "NOT_BUILT",
    "Built",
    # Manager
    "ServerManager",
    # Web
    "build_schema",
    "create_graphql_app",
    # Version
    "formatted_message",
]
