"""
GraphQL schema served by the HTTP server.

Example Query:
    query {
        hello
    }
"""

from __future__ import annotations

from typing import Optional

import strawberry

from ..core.errors import ConfigurationError


@strawberry.type(name="RootQuery")
class RootQuery:
    """Root query object."""

    @strawberry.field
    def hello(self) -> Optional[str]:
        return "world"


def build_schema() -> strawberry.Schema:
    """
    Create the GraphQL schema from the fixed root query.

    Raises:
        ConfigurationError: If the schema cannot be constructed
    """
    try:
        return strawberry.Schema(query=RootQuery)
    except Exception as e:
        raise ConfigurationError(f"Could not build GraphQL schema: {e}") from e
