"""
Centralized constants for taiga-selector.

Defaults for the Taiga API client, the paginated search and the
environment variables that override them.
"""

import sys

# =============================================================================
# PATHS
# =============================================================================

CONFIG_DIR_NAME = "taiga-selector"  # under ~/.config
SESSION_FILE_NAME = "session.json"

# =============================================================================
# TAIGA API
# =============================================================================

DEFAULT_API_URL = "https://api.taiga.io/api/v1"
DEFAULT_PAGE_SIZE = 20
DEFAULT_HTTP_TIMEOUT_SECONDS = 15.0

# =============================================================================
# SEARCH
# =============================================================================

# Upper bound used before an empty page reveals the real last page
UNBOUNDED_PAGE = sys.maxsize

DEFAULT_DEBOUNCE_MS = 300  # wait for user to stop typing
DEFAULT_ERROR_MESSAGE = "Failed to load results"

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "TAIGA_API_URL": {
        "description": "Base URL of the Taiga REST API",
        "default": DEFAULT_API_URL,
        "valid_values": None,
    },
    "TAIGA_AUTH_TOKEN": {
        "description": "Bearer token sent with API requests",
        "default": None,
        "valid_values": None,
        "sensitive": True,
    },
    "TAIGA_PAGE_SIZE": {
        "description": "Number of projects requested per page",
        "default": str(DEFAULT_PAGE_SIZE),
        "valid_values": None,
        "type": int,
    },
    "TAIGA_HTTP_TIMEOUT": {
        "description": "Seconds to wait for a single API request",
        "default": str(DEFAULT_HTTP_TIMEOUT_SECONDS),
        "valid_values": None,
        "type": float,
    },
    "TAIGA_SEARCH_DEBOUNCE_MS": {
        "description": "Delay before a typed query is searched",
        "default": str(DEFAULT_DEBOUNCE_MS),
        "valid_values": None,
        "type": int,
    },
    "TAIGA_SELECTOR_CONFIG_DIR": {
        "description": "Directory holding the session file",
        "default": None,  # ~/.config/taiga-selector
        "valid_values": None,
    },
}
