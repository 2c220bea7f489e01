"""
Protocols for the capabilities presenters depend on.

Presenters receive these through their constructor; concrete
implementations live in ``taiga_selector.services``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SearchProvider(Protocol[T_co]):
    """Returns one page of results for a query."""

    async def search(self, query: str, page: int) -> Sequence[T_co]:
        """Fetch a 1-based page; an empty sequence means no more results.

        Raises:
            ProviderError: if the page could not be fetched
        """
        ...


@runtime_checkable
class SessionSink(Protocol):
    """Records which item the user picked."""

    def record_selection(self, id: Any, name: str) -> None:
        ...
