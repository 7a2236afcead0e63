"""
Build information for graphql-server.

GIT_COMMIT and BUILD_TIME are placeholders that release builds overwrite.
"""

from __future__ import annotations

VERSION = "0.0.1"
GIT_COMMIT = "unknown-commit"
BUILD_TIME = "unknown-buildtime"

_VERSION_TEMPLATE = """graphql-server
  Version: {version}
  GitCommit: {git_commit}
  BuildTime: {build_time}
"""


def formatted_message() -> str:
    """Get the full formatted version message."""
    return _VERSION_TEMPLATE.format(
        version=VERSION,
        git_commit=GIT_COMMIT,
        build_time=BUILD_TIME,
    )
