"""
ViewModels published by presenters.
"""

from .search_state import PaginationCursor, ResultState, ResultStatus

__all__ = [
    "PaginationCursor",
    "ResultState",
    "ResultStatus",
]
