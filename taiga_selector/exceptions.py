"""Custom exception hierarchy for taiga-selector.

Exception Hierarchy:
    TaigaSelectorError (base)
    ├── ProviderError - fetching a page of search results failed
    ├── ConfigurationError - invalid environment settings
    └── SessionError - the session file could not be written

Usage:
    from taiga_selector.exceptions import ProviderError

    try:
        response = requests.get(url, timeout=timeout)
    except requests.ConnectionError as e:
        raise ProviderError("Connection failed", retryable=True, page=page) from e
"""

from typing import Any


class TaigaSelectorError(Exception):
    """Base exception for all taiga-selector errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., query, page, path)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ProviderError(TaigaSelectorError):
    """A search provider failed to return a page.

    Network, timeout and server-side failures all collapse into this one kind.
    """

    def __init__(
        self,
        message: str = "Search request failed",
        *,
        status_code: int | None = None,
        **context: Any,
    ) -> None:
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, **context)


class ConfigurationError(TaigaSelectorError):
    """Invalid configuration or environment settings."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: str | None = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)


class SessionError(TaigaSelectorError):
    """The session file could not be written."""

    def __init__(
        self,
        message: str = "Failed to write session",
        *,
        path: str | None = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)
