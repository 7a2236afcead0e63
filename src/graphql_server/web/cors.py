"""
Permissive CORS handling for the GraphQL endpoints.

Every response is marked as readable from any origin and ``OPTIONS``
requests are answered directly without reaching the GraphQL routes.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": (
        "Accept, Authorization, Content-Type, Content-Length, Accept-Encoding"
    ),
}

# 24 hours
PREFLIGHT_MAX_AGE = "86400"


class DisableCorsMiddleware(BaseHTTPMiddleware):
    """Add open CORS headers and short-circuit pre-flight requests."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
            response.headers.update(CORS_HEADERS)
            response.headers["Access-Control-Max-Age"] = PREFLIGHT_MAX_AGE
            return response

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
