"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pydantic
import pytest

from core.config import SearchConfig, _reset_config, get_config, get_search_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_with_dynamodb_endpoint():
    """Test that get_config reads DYNAMODB_ENDPOINT when set."""
    with patch.dict(os.environ, {"DYNAMODB_ENDPOINT": "http://localhost:8000"}):
        config = get_config()
        assert config.dynamodb_endpoint == "http://localhost:8000"


def test_get_config_without_dynamodb_endpoint():
    """Test that get_config returns None when DYNAMODB_ENDPOINT is not set."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.dynamodb_endpoint is None


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.saved_trips_table == "SavedTrips"
        assert config.search_api_url == ""
        assert config.search_api_key == ""
        assert config.search_timeout_seconds == 10.0
        assert config.client_api_key == ""
        assert config.environment == "local"


def test_search_provider_keys():
    env = {"API_URL": "https://provider.example/trips", "API_KEY": "provider-key"}
    with patch.dict(os.environ, env, clear=True):
        config = get_config()
        assert config.search_api_url == "https://provider.example/trips"
        assert config.search_api_key == "provider-key"


def test_search_timeout_string_coercion():
    with patch.dict(os.environ, {"SEARCH_TIMEOUT_SECONDS": "2.5"}, clear=False):
        config = get_config()
        assert config.search_timeout_seconds == 2.5


def test_get_config_is_cached():
    with patch.dict(os.environ, {"API_KEY": "first"}, clear=True):
        first = get_config()
    with patch.dict(os.environ, {"API_KEY": "second"}, clear=True):
        assert get_config() is first


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]


def test_get_search_config():
    env = {"API_URL": "http://mock-api.com", "API_KEY": "mock-api-key", "SEARCH_TIMEOUT_SECONDS": "3"}
    with patch.dict(os.environ, env, clear=True):
        search_config = get_search_config()
        assert search_config == SearchConfig(api_url="http://mock-api.com", api_key="mock-api-key", timeout_seconds=3)


def test_search_config_is_immutable():
    search_config = SearchConfig(api_url="http://mock-api.com", api_key="mock-api-key")
    with pytest.raises(pydantic.ValidationError):
        search_config.api_key = "other"  # type: ignore[misc]
