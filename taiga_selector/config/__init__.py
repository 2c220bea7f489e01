"""Configuration for taiga-selector: constants and environment settings."""

from .settings import (
    get_api_url,
    get_auth_token,
    get_config_dir,
    get_debounce_seconds,
    get_env_info,
    get_env_var,
    get_http_timeout,
    get_page_size,
    get_session_path,
    validate_all_env_vars,
)

__all__ = [
    "get_api_url",
    "get_auth_token",
    "get_config_dir",
    "get_debounce_seconds",
    "get_env_info",
    "get_env_var",
    "get_http_timeout",
    "get_page_size",
    "get_session_path",
    "validate_all_env_vars",
]
