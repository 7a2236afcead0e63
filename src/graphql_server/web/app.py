"""
App factory for the service-backed GraphQL server.

Creates a pre-configured FastAPI application with:
- GraphQL execution endpoint
- Interactive GraphiQL playground
- Health check endpoint
- Optional permissive CORS handling
- Logging filter to suppress noisy healthcheck logs
"""

from __future__ import annotations


import logging
from contextlib import asynccontextmanager

import strawberry
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from .cors import DisableCorsMiddleware

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/graphql"
PLAYGROUND_PATH = "/playground"
HEALTH_PATH = "/health"


class HealthcheckLogFilter(logging.Filter):
    """Filter out noisy healthcheck logs."""

    FILTERED_PATHS = (HEALTH_PATH,)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        for path in self.FILTERED_PATHS:
            if f'"{path}' in message or f" {path} " in message:
                return False
        return True


def _setup_logging_filter():
    """Add filter to uvicorn access logger to suppress healthcheck logs."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthcheckLogFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(HealthcheckLogFilter())


def create_graphql_app(
    schema: strawberry.Schema,
    *,
    server_type: str = "SERVICE",
    cors: bool = False,
) -> FastAPI:
    """
    Create a FastAPI app serving the given GraphQL schema.

    Args:
        schema: Schema executed by both GraphQL routes
        server_type: Variant name reported by the health endpoint
        cors: Whether to open CORS for every origin

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _setup_logging_filter()
        logger.info("GraphQL endpoint ready at %s", GRAPHQL_PATH)
        yield
        logger.info("GraphQL server stopped")

    app = FastAPI(
        title="GraphQL Server",
        description="GraphQL server and Services API",
        lifespan=lifespan,
    )

    if cors:
        app.add_middleware(DisableCorsMiddleware)

    graphql_router = GraphQLRouter(schema, path=GRAPHQL_PATH, graphql_ide=None)
    app.include_router(graphql_router)

    playground_router = GraphQLRouter(schema, path=PLAYGROUND_PATH, graphql_ide="graphiql")
    app.include_router(playground_router)

    @app.get(HEALTH_PATH)
    async def health_check():
        return {"status": "ok", "server_type": server_type}

    return app
