"""
Search-as-you-type debouncing for the paginated search presenter.

Each keystroke calls ``submit``; the query only reaches the controller
once input has been quiet for ``delay`` seconds.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ...config import get_debounce_seconds
from .paginated_search import PaginatedSearchController

logger = logging.getLogger(__name__)


class QueryDebouncer:
    """Coalesces rapid query edits into one ``set_query`` + ``load_next_page``.

    Loading the next page is the same trigger the list uses when scrolled to
    the end, so an unchanged query loads one more page instead of resetting.
    """

    def __init__(
        self,
        controller: PaginatedSearchController[Any],
        delay: float | None = None,
    ):
        self._controller = controller
        self.delay = get_debounce_seconds() if delay is None else delay
        self._handle: asyncio.TimerHandle | None = None
        self._pending_query: str | None = None
        self.last_task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        """Whether a search is scheduled but not yet issued."""
        return self._handle is not None

    def submit(self, query: str) -> None:
        """Schedule a search for ``query``, replacing any pending one."""
        self.cancel()
        self._pending_query = query
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> asyncio.Task[None] | None:
        """Issue the pending search now (e.g. on Enter).

        Returns:
            The fetch task, or None if nothing was pending or started
        """
        if self._handle is None:
            return None
        self._handle.cancel()
        self._fire()
        return self.last_task

    def cancel(self) -> None:
        """Drop the pending search, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._pending_query = None

    def _fire(self) -> None:
        self._handle = None
        query, self._pending_query = self._pending_query, None
        if query is None or self._controller.is_disposed:
            return
        self._controller.set_query(query)
        self.last_task = self._controller.load_next_page()
        logger.debug(f"Debounced search for {query!r} issued")
