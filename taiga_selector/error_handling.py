"""
Error handling at the CLI boundary.

Library code raises ``TaigaSelectorError`` subclasses; commands wrap
their body with ``safe_operation`` so errors are logged, shown as a
rich panel on stderr and turned into exit code 1.
"""

import functools
import logging
from typing import Any

import click
import typer
from rich.panel import Panel
from rich.text import Text

from .exceptions import ConfigurationError, ProviderError, SessionError, TaigaSelectorError
from .utils.output import error_console

logger = logging.getLogger(__name__)

SUGGESTIONS = {
    ProviderError: "Check TAIGA_API_URL and TAIGA_AUTH_TOKEN, then try again.",
    ConfigurationError: "Run 'taiga-selector config' to inspect your settings.",
    SessionError: "Check that the config directory is writable.",
}


def _suggestion_for(error: TaigaSelectorError) -> str | None:
    for error_type, suggestion in SUGGESTIONS.items():
        if isinstance(error, error_type):
            return suggestion
    return None


def display_error(error: TaigaSelectorError, show_details: bool = False) -> None:
    """Render an error panel on stderr."""
    message = Text()
    message.append(error.message, style="bold red")

    if show_details and error.context:
        details_text = "\n".join(f"- {k}: {v}" for k, v in error.context.items())
        message.append(f"\n\nDetails:\n{details_text}", style="dim red")

    suggestion = _suggestion_for(error)
    if suggestion:
        message.append(f"\n\nSuggestion: {suggestion}", style="cyan")

    title = type(error).__name__.replace("Error", " Error").strip()
    panel = Panel(
        message,
        title=f"[bold]{title}[/bold]",
        title_align="left",
        border_style="red",
        padding=(0, 1),
    )
    error_console.print(panel)


def handle_error(
    error: Exception,
    operation: str = "unknown",
    context: dict[str, Any] | None = None,
    show_details: bool = False,
) -> None:
    """Log and display ``error``, then exit with code 1.

    Raises:
        typer.Exit: always
    """
    context = context or {}

    if isinstance(error, TaigaSelectorError):
        logger.error(f"{operation}: {error}", extra={"operation": operation, **context})
        display_error(error, show_details)
    else:
        logger.error(f"Unexpected error during {operation}: {error}", exc_info=True)
        wrapped = TaigaSelectorError(
            f"An unexpected error occurred during {operation}",
            original_error=str(error),
            error_type=type(error).__name__,
        )
        display_error(wrapped, show_details=True)

    raise typer.Exit(1)


def safe_operation(operation_name: str, show_details: bool = False):
    """Decorator for CLI commands with standardized error handling.

    Args:
        operation_name: Name of the operation for logging
        show_details: Whether to show error context to the user
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (click.exceptions.Exit, click.ClickException, click.Abort):
                raise
            except Exception as e:
                handle_error(e, operation_name, show_details=show_details)
        return wrapper
    return decorator
