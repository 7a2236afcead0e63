"""
HTTP surface of the service-backed server.
"""

from __future__ import annotations

from .app import (
    GRAPHQL_PATH,
    HEALTH_PATH,
    PLAYGROUND_PATH,
    HealthcheckLogFilter,
    create_graphql_app,
)
from .cors import CORS_HEADERS, DisableCorsMiddleware
from .schema import RootQuery, build_schema

__all__ = [
    "create_graphql_app",
    "HealthcheckLogFilter",
    "GRAPHQL_PATH",
    "PLAYGROUND_PATH",
    "HEALTH_PATH",
    "DisableCorsMiddleware",
    "CORS_HEADERS",
    "RootQuery",
    "build_schema",
]
