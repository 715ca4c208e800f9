"""
Unit tests for the shared error taxonomy, configuration and logging setup.
"""

import pytest
import httpx
import io
import sys
from unittest.mock import patch

from shared.config import get_config
from shared.logging import configure_logging
from shared.errors import (
    FetchError, InvalidPayloadError, InvalidRequestError, TransportError, TranslationsException
)


class TestFetchErrors:
    """Test cases for FetchError subclasses."""

    def test_hierarchy(self):
        for error in (
            InvalidRequestError(),
            TransportError(httpx.ConnectError("refused")),
            InvalidPayloadError("oops"),
        ):
            assert isinstance(error, FetchError)
            assert isinstance(error, TranslationsException)

    def test_status_codes(self):
        assert InvalidRequestError.status_code == 400
        assert TransportError.status_code == 502
        assert InvalidPayloadError.status_code == 502

    def test_transport_error_carries_cause(self):
        cause = httpx.ReadTimeout("timed out")
        error = TransportError(cause, details={"url": "https://api.example.com/translate"})

        assert error.cause is cause
        assert error.details["error"] == "timed out"
        assert error.details["url"] == "https://api.example.com/translate"
        assert "ReadTimeout" in error.message

    def test_transport_error_without_message(self):
        error = TransportError(httpx.ConnectTimeout(""))
        assert error.details["error"] == "ConnectTimeout"

    def test_generic_user_message(self):
        message = InvalidPayloadError("x").user_message("https://support.example.com/")

        assert message.startswith("An unexpected error occurred.")
        assert message.endswith("https://support.example.com/")

    def test_invalid_request_user_message(self):
        assert InvalidRequestError().user_message("https://support.example.com/") == "Invalid translation type."

    def test_to_response(self):
        response = InvalidPayloadError("not json").to_response()

        assert response.trace_id is None
        assert response.code == "INVALID_PAYLOAD"
        assert response.details == {"body": "not json"}

    def test_to_response_message_override(self):
        response = TransportError(httpx.ConnectError("refused")).to_response("Try again later")
        assert response.message == "Try again later"


class TestConfig:
    """Test cases for service configuration."""

    def test_defaults(self):
        config = get_config("translations", 8020)

        assert config.api_url == "https://api.example.com/translate"
        assert config.fetch_timeout_seconds == 30.0
        assert config.cache_ttl_seconds == 10800
        assert config.service_name == "translations"
        assert config.port == 8020

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSLATIONS_API_URL", "https://translate.internal/api")
        monkeypatch.setenv("TRANSLATIONS_HOST_VERSION", "6.5")
        monkeypatch.setenv("TRANSLATIONS_CACHE_BACKEND", "memory")

        config = get_config("translations", 8020)

        assert config.api_url == "https://translate.internal/api"
        assert config.host_version == "6.5"
        assert config.cache_backend == "memory"

    def test_explicit_overrides_win(self, monkeypatch):
        monkeypatch.setenv("TRANSLATIONS_LOG_LEVEL", "debug")

        config = get_config("translations", 8020, log_level="warning")

        assert config.log_level == "warning"


class TestLoggingSetup:
    """Test cases for configure_logging."""

    def test_defaults_to_stdout(self):
        with patch("shared.logging.logging.basicConfig") as basic_config:
            configure_logging("translations", "info")

        assert basic_config.call_args.kwargs["stream"] is sys.stdout

    def test_custom_stream(self):
        stream = io.StringIO()
        with patch("shared.logging.logging.basicConfig") as basic_config:
            configure_logging("translations", "debug", stream=stream)

        assert basic_config.call_args.kwargs["stream"] is stream
