"""
Presenters for taiga-selector.

Presenters hold the search state, call the injected collaborators and
publish immutable ViewModels through observables. They never render.
"""

from .debounce import QueryDebouncer
from .paginated_search import PaginatedSearchController, normalize_query
from .project_selector_presenter import ProjectSelectorPresenter

__all__ = [
    "PaginatedSearchController",
    "ProjectSelectorPresenter",
    "QueryDebouncer",
    "normalize_query",
]
