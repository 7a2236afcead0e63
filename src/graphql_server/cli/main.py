#!/usr/bin/env python3
"""
graphql-server CLI - Main entry point.

Usage:
    graphql-server run -t SERVICE -p 4000   # Start the GraphQL server with Services
    graphql-server run -t KAFKA             # Start the GraphQL server with Kafka
    graphql-server version                  # Show build information

Unset flags are read from GS_-prefixed environment variables,
e.g. GS_SERVER_TYPE and GS_SERVER_PORT.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..core.config import DEFAULT_ENV_FILE, Settings, load_settings
from ..core.errors import GraphQLServerError
from ..server.base import ServerType
from ..server.builder import Built, get_builder
from ..server.manager import ServerManager
from ..version import VERSION, formatted_message

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def start_server(settings: Settings) -> None:
    """
    Build the server selected by settings and run it.

    Raises:
        InvalidServerTypeError: If settings.server_type is not supported
        GraphQLServerError: If the server cannot be built or run
    """
    server_type = ServerType.parse(settings.server_type)
    if server_type is ServerType.SERVICE:
        logger.info("Starting server with Services...")
    else:
        logger.info("Starting server with Kafka...")

    builder = get_builder(server_type)
    manager = ServerManager(builder)
    manager.create_server(settings)

    result = builder.get_result()
    if not isinstance(result, Built):
        raise GraphQLServerError(f"{server_type.value} server was not built")

    result.server.run()


def cmd_run(args: argparse.Namespace) -> int:
    """Start the GraphQL server."""
    try:
        settings = load_settings(
            {
                "server_type": args.server_type,
                "server_port": args.server_port,
                "host": args.host,
                "cors": args.cors,
                "log_level": args.log_level,
            },
            env_file=args.env_file,
        )
    except GraphQLServerError as e:
        _setup_logging("INFO")
        logger.error("%s", e)
        return 1

    _setup_logging(settings.log_level)

    try:
        start_server(settings)
    except GraphQLServerError as e:
        logger.error("%s", e)
        return 1
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Print build information."""
    print(formatted_message(), end="")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphql-server",
        description="A GraphQL server and Services API",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run
    run_parser = subparsers.add_parser(
        "run",
        aliases=["r"],
        help="Start the GraphQL server with Services or Kafka",
        description=(
            "The GraphQL server and the Services API server. The GraphQL server "
            "provides the query endpoints and the Services API provides the "
            "endpoints to save and update data."
        ),
    )
    run_parser.add_argument(
        "--server-type", "-t",
        help=f"Server type: {' or '.join(t.value for t in ServerType)} (env GS_SERVER_TYPE)",
    )
    run_parser.add_argument("--server-port", "-p", help="Server port (env GS_SERVER_PORT)")
    run_parser.add_argument("--host", help="Listen address (env GS_HOST)")
    run_parser.add_argument(
        "--cors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Allow cross-origin requests from any origin (env GS_CORS)",
    )
    run_parser.add_argument("--log-level", help="Logging level (env GS_LOG_LEVEL)")
    run_parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Dotenv file with GS_ variables (default: {DEFAULT_ENV_FILE})",
    )

    # version
    subparsers.add_parser("version", help="Show version and build information")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "r": cmd_run,
        "version": cmd_version,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
