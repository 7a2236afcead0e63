"""Tests for server variants, builders and the server manager."""

import logging
import socket

import pytest

from graphql_server import (
    NOT_BUILT,
    Built,
    ConfigurationError,
    InvalidServerTypeError,
    KafkaServer,
    KafkaServerBuilder,
    NotBuilt,
    ServerBindError,
    ServerBuilder,
    ServerManager,
    ServerType,
    ServiceServer,
    ServiceServerBuilder,
    get_builder,
)
from graphql_server.server import service as service_module


class ExplodingServer(KafkaServer):
    def configure(self, settings):
        raise RuntimeError("boom")


class ExplodingServerBuilder(ServerBuilder):
    def _create_server(self):
        return ExplodingServer()


# ─────────────────────────────────────────────────────────────────────
# Server types
# ─────────────────────────────────────────────────────────────────────


class TestServerType:
    @pytest.mark.parametrize("value", ["SERVICE", "KAFKA"])
    def test_parse_supported(self, value):
        assert ServerType.parse(value).value == value

    @pytest.mark.parametrize("value", ["BOGUS", "service", "Kafka", "", None])
    def test_parse_rejects_everything_else(self, value):
        with pytest.raises(InvalidServerTypeError) as exc_info:
            ServerType.parse(value)
        assert exc_info.value.server_type == value
        assert exc_info.value.supported == ("SERVICE", "KAFKA")

    def test_get_builder_maps_variants(self):
        assert isinstance(get_builder("SERVICE"), ServiceServerBuilder)
        assert isinstance(get_builder(ServerType.KAFKA), KafkaServerBuilder)

    def test_get_builder_returns_fresh_builders(self):
        assert get_builder("KAFKA") is not get_builder("KAFKA")

    def test_get_builder_invalid(self):
        with pytest.raises(InvalidServerTypeError):
            get_builder("BOGUS")


# ─────────────────────────────────────────────────────────────────────
# Builders
# ─────────────────────────────────────────────────────────────────────


class TestBuilders:
    @pytest.mark.parametrize("builder_cls", [ServiceServerBuilder, KafkaServerBuilder])
    def test_result_before_build_is_not_built(self, builder_cls):
        builder = builder_cls()
        result = builder.get_result()
        assert result is NOT_BUILT
        assert isinstance(result, NotBuilt)
        assert not builder.built

    @pytest.mark.parametrize(
        "builder_cls, server_cls",
        [(ServiceServerBuilder, ServiceServer), (KafkaServerBuilder, KafkaServer)],
    )
    def test_build_produces_configured_server(self, builder_cls, server_cls, service_settings):
        builder = builder_cls()
        builder.build(service_settings)

        result = builder.get_result()
        assert isinstance(result, Built)
        assert isinstance(result.server, server_cls)
        assert builder.built

    @pytest.mark.parametrize("builder_cls", [ServiceServerBuilder, KafkaServerBuilder])
    def test_build_is_idempotent(self, builder_cls, make_settings):
        builder = builder_cls()
        builder.build(make_settings(server_port=4000))
        first = builder.get_result()

        builder.build(make_settings(server_port=5000))

        assert builder.get_result() is first
        assert builder.get_result().server is first.server

    def test_second_build_does_not_reconfigure(self, make_settings):
        builder = ServiceServerBuilder()
        builder.build(make_settings(server_port=4000))
        builder.build(make_settings(server_port=5000))
        assert builder.get_result().server.port == 4000

    def test_configure_failure_surfaces_as_configuration_error(self, service_settings):
        builder = ExplodingServerBuilder()
        with pytest.raises(ConfigurationError, match="boom") as exc_info:
            builder.build(service_settings)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert builder.get_result() is NOT_BUILT

    def test_schema_failure_leaves_builder_unbuilt(self, monkeypatch, service_settings):
        def broken_schema():
            raise ConfigurationError("Could not build GraphQL schema: bad type")

        monkeypatch.setattr(service_module, "build_schema", broken_schema)
        builder = ServiceServerBuilder()

        with pytest.raises(ConfigurationError, match="bad type"):
            builder.build(service_settings)
        assert not builder.built

    def test_build_can_be_retried_after_failure(self, monkeypatch, service_settings):
        calls = []

        def flaky_schema():
            calls.append(1)
            if len(calls) == 1:
                raise ConfigurationError("first attempt")
            return original()

        original = service_module.build_schema
        monkeypatch.setattr(service_module, "build_schema", flaky_schema)
        builder = ServiceServerBuilder()

        with pytest.raises(ConfigurationError):
            builder.build(service_settings)
        builder.build(service_settings)

        assert builder.built


# ─────────────────────────────────────────────────────────────────────
# Manager
# ─────────────────────────────────────────────────────────────────────


class RecordingBuilder(ServerBuilder):
    def __init__(self):
        super().__init__()
        self.build_calls = []

    def _create_server(self):
        return KafkaServer()

    def build(self, settings):
        self.build_calls.append(settings)
        super().build(settings)


class TestServerManager:
    def test_requires_builder(self):
        with pytest.raises(ConfigurationError):
            ServerManager(None)

    def test_create_server_delegates_to_builder(self, service_settings):
        builder = RecordingBuilder()
        ServerManager(builder).create_server(service_settings)

        assert builder.build_calls == [service_settings]
        assert isinstance(builder.get_result(), Built)

    def test_create_server_propagates_errors(self, service_settings):
        manager = ServerManager(ExplodingServerBuilder())
        with pytest.raises(ConfigurationError):
            manager.create_server(service_settings)


# ─────────────────────────────────────────────────────────────────────
# Variants
# ─────────────────────────────────────────────────────────────────────


class TestServiceServer:
    def test_configure_records_address(self, service_settings):
        server = ServiceServer()
        server.configure(service_settings)
        assert server.host == "127.0.0.1"
        assert server.port == 4000
        assert server.log_level == "info"
        assert server.app is not None

    def test_configure_accepts_uvicorn_log_level(self, make_settings):
        import uvicorn

        server = ServiceServer()
        server.configure(make_settings(log_level="warning"))
        config = uvicorn.Config(server.app, log_level=server.log_level)
        assert config.log_level == "warning"

    def test_run_before_configure(self):
        with pytest.raises(ConfigurationError):
            ServiceServer().run()

    def test_run_reports_bind_failure(self, make_settings):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
            blocker.bind(("127.0.0.1", 0))
            blocker.listen()
            port = blocker.getsockname()[1]

            server = ServiceServer()
            server.configure(make_settings(host="127.0.0.1", server_port=port))

            with pytest.raises(ServerBindError) as exc_info:
                server.run()

        assert exc_info.value.port == port
        assert exc_info.value.host == "127.0.0.1"

    def test_serves_hello_on_configured_app(self, service_settings):
        from fastapi.testclient import TestClient

        server = ServiceServer()
        server.configure(service_settings)
        response = TestClient(server.app).post("/graphql", json={"query": "{ hello }"})
        assert response.json() == {"data": {"hello": "world"}}


class TestKafkaServer:
    def test_run_returns_immediately(self, service_settings, caplog):
        caplog.set_level(logging.INFO)
        server = KafkaServer()
        server.configure(service_settings)

        assert server.run() is None
        assert "GraphQL Server Running with Kafka..." in caplog.text

    def test_server_type_tag(self):
        assert KafkaServer.server_type is ServerType.KAFKA
        assert ServiceServer.server_type is ServerType.SERVICE
