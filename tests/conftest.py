"""Shared fixtures: isolate settings from the developer's environment."""

import os

import pytest

from graphql_server.core.config import ENV_PREFIX, load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Drop GS_ variables and run from an empty directory (no stray .env)."""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_settings():
    def _make(**overrides):
        return load_settings(overrides, env_file=None)
    return _make


@pytest.fixture
def service_settings(make_settings):
    return make_settings(server_type="SERVICE", server_port="4000", host="127.0.0.1")
