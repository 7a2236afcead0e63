"""
Server variants, their builders and the manager that drives them.
"""

from __future__ import annotations

from .base import Server, ServerType
from .builder import (
    BUILDERS,
    NOT_BUILT,
    Built,
    BuildResult,
    KafkaServerBuilder,
    NotBuilt,
    ServerBuilder,
    ServiceServerBuilder,
    get_builder,
)
from .kafka import KafkaServer
from .manager import ServerManager
from .service import ServiceServer

__all__ = [
    "Server",
    "ServerType",
    "ServiceServer",
    "KafkaServer",
    "ServerBuilder",
    "ServiceServerBuilder",
    "KafkaServerBuilder",
    "BUILDERS",
    "get_builder",
    "NotBuilt",
    "NOT_BUILT",
    "Built",
    "BuildResult",
    "ServerManager",
]
