"""
graphql-server CLI - command line entry point for starting the server.
"""

from __future__ import annotations

from .main import main, app, start_server

__all__ = ["main", "app", "start_server"]
