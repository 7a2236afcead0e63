"""
Server variants and the interface they share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from ..core.config import Settings
from ..core.errors import InvalidServerTypeError


class ServerType(str, Enum):
    """Supported server backends. Values are matched case-sensitively."""

    SERVICE = "SERVICE"
    KAFKA = "KAFKA"

    @classmethod
    def parse(cls, value: str | None) -> ServerType:
        """
        Resolve a selector string to a ServerType.

        Raises:
            InvalidServerTypeError: If value is not exactly one of the members
        """
        for member in cls:
            if member.value == value:
                return member
        raise InvalidServerTypeError(value, [member.value for member in cls])


class Server(ABC):
    """A GraphQL server variant produced by a builder."""

    server_type: ClassVar[ServerType]

    @abstractmethod
    def configure(self, settings: Settings) -> None:
        """Set up schema, routes and listening address from settings."""

    @abstractmethod
    def run(self) -> None:
        """Run the server. Raises GraphQLServerError on failure."""
