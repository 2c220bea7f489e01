"""
Presenter for choosing the current Taiga project.

A ``PaginatedSearchController`` over ``ProjectInSearch`` wired to the
Taiga API and the persisted session by default.
"""

from __future__ import annotations

from ...models.projects import ProjectInSearch
from ...services import Session, TaigaSearchProvider
from ..observable import Observable
from ..protocols import SearchProvider, SessionSink
from ..viewmodels import ResultState
from .paginated_search import PaginatedSearchController


class ProjectSelectorPresenter(PaginatedSearchController[ProjectInSearch]):
    """Project search and selection."""

    def __init__(
        self,
        provider: SearchProvider[ProjectInSearch] | None = None,
        session: SessionSink | None = None,
    ):
        super().__init__(
            provider if provider is not None else TaigaSearchProvider.from_env(),
            session if session is not None else Session(),
            error_message="Failed to load projects",
        )

    @property
    def projects(self) -> Observable[ResultState[ProjectInSearch]]:
        return self.results

    def select_project(self, project: ProjectInSearch) -> None:
        self.select(project)
