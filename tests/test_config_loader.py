"""Tests for connection configuration loading."""

import pytest

from post_connections import (
    AiohttpTransport,
    ConnectionObserver,
    create_connection,
    load_connection_config,
    parse_connection_config,
)
from post_connections.config_loader import ConnectionConfig
from tests.doubles import FakeTransport, RecordingObserver


class TestParseConnectionConfig:
    """Test schema validation."""

    def test_minimal_config_uses_defaults(self):
        config = parse_connection_config({"root_url": "https://example.com/api/"})

        assert config == ConnectionConfig(root_url="https://example.com/api/")
        assert config.retry_delay == 5.0
        assert config.request_timeout == 30.0
        assert config.default_parameters == {}
        assert config.verbose is False

    def test_full_config(self):
        config = parse_connection_config(
            {
                "root_url": "https://example.com/api/",
                "default_parameters": {"token": "abc", "version": 3},
                "retry_delay": "2.5",
                "request_timeout": 10,
                "verbose": True,
            }
        )

        assert config.default_parameters == {"token": "abc", "version": "3"}
        assert config.retry_delay == 2.5
        assert config.request_timeout == 10.0
        assert config.verbose is True

    def test_null_default_parameters(self):
        config = parse_connection_config(
            {"root_url": "https://example.com/", "default_parameters": None}
        )
        assert config.default_parameters == {}

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"root_url": ""},
            {"root_url": "https://example.com/", "retry_delay": -1},
            {"root_url": "https://example.com/", "request_timeout": 0},
            {"root_url": "https://example.com/", "unknown": 1},
        ],
    )
    def test_invalid_config_raises(self, data):
        with pytest.raises(ValueError, match="Invalid connection configuration"):
            parse_connection_config(data)

    def test_non_mapping_raises(self):
        with pytest.raises(ValueError, match="must be a mapping"):
            parse_connection_config(["root_url"])


class TestLoadConnectionConfig:
    """Test YAML loading."""

    def test_load_top_level(self, tmp_path):
        path = tmp_path / "connection.yaml"
        path.write_text(
            "root_url: https://example.com/api/\n"
            "default_parameters:\n"
            "  token: abc\n"
            "retry_delay: 1\n"
        )

        config = load_connection_config(path)

        assert config.root_url == "https://example.com/api/"
        assert config.default_parameters == {"token": "abc"}
        assert config.retry_delay == 1.0

    def test_load_nested_under_connection_key(self, tmp_path):
        path = tmp_path / "app.yaml"
        path.write_text("connection:\n  root_url: https://example.com/api/\n")

        assert load_connection_config(str(path)).root_url == "https://example.com/api/"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_connection_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ValueError, match="empty"):
            load_connection_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("root_url: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_connection_config(path)


class TestCreateConnection:
    """Test building a Connection from configuration."""

    def test_uses_config_values(self):
        config = ConnectionConfig(
            root_url="https://example.com/api/",
            default_parameters={"token": "abc"},
            retry_delay=2.0,
        )
        transport = FakeTransport()
        observer = RecordingObserver()

        connection = create_connection(config, observer=observer, transport=transport)

        assert connection.root_url == "https://example.com/api/"
        assert connection.default_parameters == {"token": "abc"}
        assert connection.retry_delay == 2.0
        assert connection.observer is observer
        assert connection.transport is transport

    def test_default_observer_and_transport(self):
        config = ConnectionConfig(
            root_url="https://example.com/api/", request_timeout=7.0, verbose=True
        )

        connection = create_connection(config)

        assert isinstance(connection.observer, ConnectionObserver)
        assert connection.observer.verbose is True
        assert isinstance(connection.transport, AiohttpTransport)
        assert connection.transport._timeout.total == 7.0
