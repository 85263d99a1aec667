"""Tests for configuration loading."""

import pytest

from relay.config import DEFAULT_PRODUCTS_API_URL, REQUIRED_VARS, load_settings
from relay.errors import ConfigError


@pytest.fixture
def environ():
    """Minimal complete environment."""
    return {name: f"value-{name.lower()}" for name in REQUIRED_VARS}


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_required_values(self, environ):
        settings = load_settings(environ)

        assert settings.app_secret == "value-messenger_app_secret"
        assert settings.conversation_workspace == "value-conversation_workspace"
        assert settings.products_api_url == DEFAULT_PRODUCTS_API_URL
        assert settings.port == 5000
        assert settings.http_timeout == 10.0

    def test_optional_values(self, environ):
        environ.update(
            PORT="8080",
            HTTP_TIMEOUT_SECONDS="2.5",
            PRODUCTS_API_KEY="id",
            PRODUCTS_API_SECRET="secret",
            PRODUCTS_API_URL="https://products.example.com",
        )

        settings = load_settings(environ)

        assert settings.port == 8080
        assert settings.http_timeout == 2.5
        assert settings.products_api_key == "id"
        assert settings.products_api_url == "https://products.example.com"

    def test_missing_values_are_named(self, environ):
        del environ["MESSENGER_APP_SECRET"]
        environ["CONVERSATION_URL"] = ""

        with pytest.raises(ConfigError) as exc_info:
            load_settings(environ)

        message = str(exc_info.value)
        assert "MESSENGER_APP_SECRET" in message
        assert "CONVERSATION_URL" in message

    def test_invalid_port(self, environ):
        environ["PORT"] = "not-a-port"

        with pytest.raises(ConfigError):
            load_settings(environ)

    def test_reads_process_environment(self, environ, monkeypatch):
        for name, value in environ.items():
            monkeypatch.setenv(name, value)

        assert load_settings().validation_token == "value-messenger_validation_token"
