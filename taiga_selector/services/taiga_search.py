"""Project search against the Taiga REST API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from ..config import get_api_url, get_auth_token, get_http_timeout, get_page_size
from ..config.constants import DEFAULT_API_URL, DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_PAGE_SIZE
from ..exceptions import ProviderError
from ..models.projects import ProjectInSearch

logger = logging.getLogger(__name__)


class TaigaSearchProvider:
    """Search provider returning ``ProjectInSearch`` pages.

    Pages are 1-based. Taiga answers 404 for a page past the end, which
    is reported as an empty page.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        token: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http: requests.Session | None = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.page_size = page_size
        self.timeout = timeout
        self._http = http or requests.Session()

    @classmethod
    def from_env(cls) -> TaigaSearchProvider:
        """Build a provider from TAIGA_* environment settings."""
        return cls(
            api_url=get_api_url(),
            token=get_auth_token(),
            page_size=get_page_size(),
            timeout=get_http_timeout(),
        )

    async def search(self, query: str, page: int) -> list[ProjectInSearch]:
        """Fetch one page of projects matching ``query``.

        Args:
            query: Search text; empty lists all visible projects
            page: 1-based page number

        Returns:
            Projects on that page, empty past the last page

        Raises:
            ValueError: If page is below 1
            ProviderError: If the request fails or the payload is malformed
        """
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")
        # requests is blocking; keep the event loop free
        return await asyncio.to_thread(self._search_sync, query, page)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _params(self, query: str, page: int) -> dict[str, Any]:
        params: dict[str, Any] = {
            "order_by": "user_order",
            "slight": "true",
            "page": page,
            "page_size": self.page_size,
        }
        if query:
            params["q"] = query
        return params

    def _search_sync(self, query: str, page: int) -> list[ProjectInSearch]:
        url = f"{self.api_url}/projects"
        logger.debug(f"GET {url} q={query!r} page={page}")

        try:
            response = self._http.get(
                url,
                params=self._params(query, page),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise ProviderError(
                "Taiga API request timed out", retryable=True, page=page, timeout=self.timeout
            ) from e
        except requests.ConnectionError as e:
            raise ProviderError(
                "Could not connect to Taiga API", retryable=True, page=page, url=url
            ) from e
        except requests.RequestException as e:
            raise ProviderError(f"Taiga API request failed: {e}", page=page) from e

        if response.status_code == 404:
            logger.debug(f"Page {page} not found, treating as end of results")
            return []

        if not response.ok:
            raise ProviderError(
                f"Taiga API returned HTTP {response.status_code}",
                status_code=response.status_code,
                retryable=response.status_code >= 500,
                page=page,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError("Taiga API returned invalid JSON", page=page) from e

        if not isinstance(payload, list):
            raise ProviderError(
                "Unexpected Taiga API payload", page=page, payload_type=type(payload).__name__
            )

        try:
            return [ProjectInSearch.from_api(entry) for entry in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"Malformed project entry: {e}", page=page) from e
