"""Tests for server and client configuration loading."""

import os

import pytest

from app.client.config import DEFAULT_API_URL, ClientConfig, load_client_config
from app.server.config import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_PORT,
    ConfigError,
    ServerConfig,
    load_config,
)

pytestmark = pytest.mark.unit


def test_defaults_when_environment_is_empty():
    config = load_config(environ={})

    assert config.port == DEFAULT_PORT == 3000
    assert config.host == "0.0.0.0"
    assert config.environment == DEFAULT_ENVIRONMENT == "development"
    assert config.log_format == "console"


def test_port_and_environment_from_variables():
    config = load_config(environ={"PORT": "4000", "NODE_ENV": "production"})

    assert config.port == 4000
    assert config.environment == "production"


def test_environment_is_surfaced_verbatim():
    config = load_config(environ={"NODE_ENV": "QA Cluster 2"})

    assert config.environment == "QA Cluster 2"


def test_node_env_wins_over_app_env():
    config = load_config(environ={"NODE_ENV": "production", "APP_ENV": "staging"})

    assert config.environment == "production"


def test_app_env_used_when_node_env_unset():
    config = load_config(environ={"APP_ENV": "staging"})

    assert config.environment == "staging"


def test_empty_variables_count_as_unset():
    config = load_config(environ={"PORT": "", "NODE_ENV": ""})

    assert config.port == DEFAULT_PORT
    assert config.environment == DEFAULT_ENVIRONMENT


def test_overrides_win_over_environment():
    config = load_config(environ={"PORT": "4000"}, port=5000, environment=None)

    assert config.port == 5000
    assert config.environment == DEFAULT_ENVIRONMENT


@pytest.mark.parametrize("port", ["abc", "0", "70000"])
def test_invalid_port_raises_config_error(port):
    with pytest.raises(ConfigError, match="Invalid server configuration"):
        load_config(environ={"PORT": port})


def test_unknown_log_format_raises_config_error():
    with pytest.raises(ConfigError):
        load_config(environ={"LOG_FORMAT": "xml"})


def test_config_is_immutable():
    config = ServerConfig()

    with pytest.raises(Exception):
        config.port = 1  # type: ignore[misc]


def test_load_config_reads_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PORT=4100\nNODE_ENV=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    # load_dotenv writes into os.environ; give it a throwaway mapping
    monkeypatch.setattr(os, "environ", {})

    config = load_config()

    assert config.port == 4100
    assert config.environment == "from-dotenv"


def test_client_defaults_to_local_backend():
    config = load_client_config(environ={})

    assert config.api_url == DEFAULT_API_URL == "http://localhost:3000"
    assert config.timeout is None


def test_client_reads_api_url():
    config = load_client_config(environ={"API_URL": "http://localhost:4000"})

    assert config == ClientConfig(api_url="http://localhost:4000")


def test_client_rejects_non_positive_timeout():
    with pytest.raises(ConfigError, match="Invalid client configuration"):
        load_client_config(environ={}, timeout=0)
