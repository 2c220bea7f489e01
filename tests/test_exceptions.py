"""Tests for the exception hierarchy."""

import pytest

from taiga_selector.exceptions import (
    ConfigurationError,
    ProviderError,
    SessionError,
    TaigaSelectorError,
)


class TestTaigaSelectorError:
    """Tests for the base exception."""

    def test_message_without_context(self) -> None:
        error = TaigaSelectorError("Something broke")
        assert str(error) == "Something broke"
        assert error.retryable is False

    def test_message_with_context(self) -> None:
        error = TaigaSelectorError("Lookup failed", query="mobile", page=2)
        assert str(error) == "Lookup failed (query='mobile', page=2)"
        assert error.context == {"query": "mobile", "page": 2}


class TestSubclasses:
    """Tests for specific error types."""

    @pytest.mark.parametrize("error_type", [ProviderError, ConfigurationError, SessionError])
    def test_all_inherit_from_base(self, error_type) -> None:
        assert issubclass(error_type, TaigaSelectorError)

    def test_provider_error_defaults(self) -> None:
        error = ProviderError()
        assert error.message == "Search request failed"

    def test_provider_error_status_code(self) -> None:
        error = ProviderError("HTTP failure", status_code=502, retryable=True)
        assert error.context["status_code"] == 502
        assert error.retryable is True

    def test_configuration_error_setting(self) -> None:
        error = ConfigurationError("Bad value", setting="TAIGA_PAGE_SIZE")
        assert "setting='TAIGA_PAGE_SIZE'" in str(error)

    def test_session_error_path(self) -> None:
        error = SessionError(path="/tmp/session.json")
        assert error.context["path"] == "/tmp/session.json"
