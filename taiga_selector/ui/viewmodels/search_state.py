"""
ViewModels for paginated search results.

A ``ResultState`` is an immutable snapshot: every transition publishes a
new one, so subscribers can keep references without copying.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from ...config.constants import UNBOUNDED_PAGE

T = TypeVar("T")


class ResultStatus(Enum):
    """Lifecycle of the result list."""

    IDLE = "idle"  # nothing requested yet
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ResultState(Generic[T]):
    """Accumulated items plus the status of the latest fetch."""

    status: ResultStatus
    items: tuple[T, ...] = ()
    message: str | None = None  # user-facing, ERROR only
    error: BaseException | None = field(default=None, compare=False)

    @classmethod
    def idle(cls) -> ResultState[T]:
        return cls(ResultStatus.IDLE)

    @classmethod
    def loading(cls, items: Iterable[T] = ()) -> ResultState[T]:
        return cls(ResultStatus.LOADING, tuple(items))

    @classmethod
    def success(cls, items: Iterable[T] = ()) -> ResultState[T]:
        return cls(ResultStatus.SUCCESS, tuple(items))

    @classmethod
    def failure(
        cls,
        items: Iterable[T],
        message: str,
        error: BaseException | None = None,
    ) -> ResultState[T]:
        return cls(ResultStatus.ERROR, tuple(items), message=message, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status is ResultStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is ResultStatus.ERROR


@dataclass
class PaginationCursor:
    """Paging position for the current query.

    ``current_page`` is the last page requested (0 before the first fetch).
    ``max_page`` stays at ``UNBOUNDED_PAGE`` until an empty page is seen,
    then holds that page number for the rest of the query.
    """

    current_page: int = 0
    max_page: int = UNBOUNDED_PAGE
    query: str = ""

    @property
    def exhausted(self) -> bool:
        return self.current_page == self.max_page

    @property
    def has_known_end(self) -> bool:
        return self.max_page != UNBOUNDED_PAGE
