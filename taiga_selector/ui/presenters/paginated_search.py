"""
Presenter for incremental paginated search.

Drives page-by-page fetches from a search provider for the current
query, accumulates the pages in arrival order and publishes a
``ResultState`` after every transition:

    start()           -> Success([]) then Loading([]) and a fetch of page 1
    set_query(q)      -> Success([]) when the case-folded query changed
    load_next_page()  -> Loading(items) then Success(items + page) or Error(items)

An empty page marks the last page for the query; after that
``load_next_page`` does nothing until the query changes. Only one fetch
runs at a time.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any, Generic, TypeVar

from ...config.constants import DEFAULT_ERROR_MESSAGE
from ..observable import Observable
from ..protocols import SearchProvider, SessionSink
from ..viewmodels import PaginationCursor, ResultState

logger = logging.getLogger(__name__)

T = TypeVar("T")

Identify = Callable[[Any], tuple[Any, str]]


def normalize_query(query: str) -> str:
    """Case-fold a query; independent of the process locale."""
    return query.casefold()


def identify_by_attributes(item: Any) -> tuple[Any, str]:
    """Default identity: the item's ``id`` and ``name`` attributes."""
    return item.id, item.name


class PaginatedSearchController(Generic[T]):
    """Paginated search state machine.

    Collaborators are injected: ``provider`` fetches pages and ``session``
    records the selected item. Observers subscribe to ``results`` and
    ``is_selected``.
    """

    def __init__(
        self,
        provider: SearchProvider[T],
        session: SessionSink,
        identify: Identify | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ):
        """Initialize the controller.

        Args:
            provider: Fetches one page for (query, page)
            session: Receives the identifying fields of the selected item
            identify: Maps an item to its (id, name); defaults to attributes
            error_message: Message published with ERROR states
        """
        self._provider = provider
        self._session = session
        self._identify = identify or identify_by_attributes
        self._error_message = error_message

        self.results: Observable[ResultState[T]] = Observable(ResultState.idle())
        self.is_selected: Observable[bool] = Observable(False)

        self._cursor = PaginationCursor()
        self._task: asyncio.Task[None] | None = None
        self._in_flight = False
        # Bumped whenever a pending fetch must be ignored (reset, dispose)
        self._generation = 0
        self._disposed = False

    @property
    def cursor(self) -> PaginationCursor:
        """Copy of the paging position."""
        return replace(self._cursor)

    @property
    def items(self) -> tuple[T, ...]:
        return self.results.value.items

    @property
    def is_loading(self) -> bool:
        """Whether a fetch is in flight."""
        return self._in_flight

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def start(self) -> asyncio.Task[None] | None:
        """Reset everything and fetch page 1 of the empty query.

        Returns:
            The fetch task, or None if the controller is disposed
        """
        if self._disposed:
            return None

        self._drop_pending_fetch()
        self._cursor = PaginationCursor()
        self.results.value = ResultState.success()
        self.is_selected.value = False
        return self.load_next_page()

    def set_query(self, query: str) -> bool:
        """Switch to a new query without fetching.

        The caller follows up with ``load_next_page``. A fetch still
        running for the previous query is cancelled and its result dropped.

        Returns:
            True if the normalized query changed and the state was reset
        """
        if self._disposed:
            return False

        normalized = normalize_query(query)
        if normalized == self._cursor.query:
            return False

        logger.debug(f"Query changed: {self._cursor.query!r} -> {normalized!r}")
        self._drop_pending_fetch()
        self._cursor = PaginationCursor(query=normalized)
        self.results.value = ResultState.success()
        return True

    def load_next_page(self) -> asyncio.Task[None] | None:
        """Fetch the page after ``cursor.current_page``.

        Does nothing when the last page is known and reached, when a fetch
        is already in flight, or after ``dispose``. Must be called from a
        running event loop.

        Returns:
            The fetch task, or None if nothing was started
        """
        if self._disposed:
            return None
        if self._cursor.exhausted:
            logger.debug(
                f"No more pages for {self._cursor.query!r} "
                f"(max page {self._cursor.max_page})"
            )
            return None
        if self._in_flight:
            logger.debug("Fetch already in flight, ignoring load request")
            return None

        loop = asyncio.get_running_loop()

        self._cursor.current_page += 1
        self._in_flight = True
        task = loop.create_task(
            self._fetch(self._generation, self._cursor.query, self._cursor.current_page)
        )
        self._task = task

        # Subscribers may call back into the controller while Loading is
        # delivered; the fetch is already registered as in flight.
        self.results.value = ResultState.loading(self.results.value.items)
        return task

    async def _fetch(self, generation: int, query: str, page: int) -> None:
        """Run one provider call and merge its result."""
        try:
            new_items = list(await self._provider.search(query, page))
        except Exception as e:
            if generation != self._generation:
                return
            logger.warning(f"Failed to load page {page} for {query!r}: {e}")
            self._in_flight = False
            self.results.value = ResultState.failure(
                self.results.value.items, self._error_message, e
            )
            return

        if generation != self._generation:
            logger.debug(f"Dropping stale page {page} for {query!r}")
            return

        self._in_flight = False
        if not new_items:
            # Reached maximum page
            self._cursor.max_page = page

        logger.debug(f"Loaded {len(new_items)} items for {query!r} page {page}")
        self.results.value = ResultState.success(self.results.value.items + tuple(new_items))

    def select(self, item: T) -> None:
        """Record ``item`` in the session and mark the selection made.

        Each call writes to the session; callers guard against repeats.
        """
        if self._disposed:
            logger.debug("Ignoring selection on disposed controller")
            return

        item_id, name = self._identify(item)
        self._session.record_selection(item_id, name)
        logger.info(f"Selected {name!r} (id={item_id})")
        self.is_selected.value = True

    def dispose(self) -> None:
        """Cancel any pending fetch and stop publishing state."""
        if self._disposed:
            return
        self._disposed = True
        self._drop_pending_fetch()
        self.results.clear()
        self.is_selected.clear()

    def _drop_pending_fetch(self) -> None:
        self._generation += 1
        self._in_flight = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
