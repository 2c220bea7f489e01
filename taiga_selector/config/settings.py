"""Configuration utilities for taiga-selector."""

import os
from pathlib import Path

from ..exceptions import ConfigurationError
from .constants import CONFIG_DIR_NAME, ENV_VAR_DEFINITIONS, SESSION_FILE_NAME


def get_config_dir() -> Path:
    """Get the config directory, respecting TAIGA_SELECTOR_CONFIG_DIR.

    Tests point TAIGA_SELECTOR_CONFIG_DIR at a temp directory so the real
    session file is never touched.
    """
    override = os.environ.get("TAIGA_SELECTOR_CONFIG_DIR")
    if override:
        return Path(override)
    return Path.home() / ".config" / CONFIG_DIR_NAME


def get_session_path() -> Path:
    """Get the path of the session file (not created here)."""
    return get_config_dir() / SESSION_FILE_NAME


def validate_env_var(name: str, value: str | None) -> tuple[bool, str | None]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None  # Unknown vars are always valid

    definition = ENV_VAR_DEFINITIONS[name]

    # If not set, the default applies
    if value is None:
        return True, None

    value_type = definition.get("type")
    if value_type is not None:
        try:
            converted = value_type(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected a number"
        if converted <= 0:
            return False, f"Invalid value '{value}' for {name}. Must be positive"

    valid_values = definition.get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> list[str]:
    """Validate all taiga-selector environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        value = os.environ.get(name)
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> str | None:
    """Get an environment variable with optional validation.

    Args:
        name: The environment variable name.
        validate: Whether to validate the value against known definitions.

    Returns:
        The environment variable value, its default, or None.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_env_info() -> dict[str, dict]:
    """Get information about all taiga-selector environment variables.

    Returns:
        Dictionary mapping env var names to their description, current
        value (masked for sensitive vars), validity and default.
    """
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)

        # Mask sensitive values
        display_value = value
        if value and definition.get("sensitive"):
            display_value = value[:4] + "..." if len(value) > 4 else "***"

        info[name] = {
            "description": definition.get("description", ""),
            "value": display_value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
            "sensitive": definition.get("sensitive", False),
        }
    return info


def get_api_url() -> str:
    return get_env_var("TAIGA_API_URL").rstrip("/")


def get_auth_token() -> str | None:
    token = get_env_var("TAIGA_AUTH_TOKEN")
    return token.strip() or None if token else None


def get_page_size() -> int:
    return int(get_env_var("TAIGA_PAGE_SIZE"))


def get_http_timeout() -> float:
    return float(get_env_var("TAIGA_HTTP_TIMEOUT"))


def get_debounce_seconds() -> float:
    return int(get_env_var("TAIGA_SEARCH_DEBOUNCE_MS")) / 1000
