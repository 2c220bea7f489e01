"""Project search and selection commands for taiga-selector.

All project commands live under `taiga-selector projects <subcommand>`.
"""

import asyncio
from typing import Optional, Sequence

import typer
from rich.table import Table

from taiga_selector.error_handling import safe_operation
from taiga_selector.exceptions import ProviderError, TaigaSelectorError
from taiga_selector.models.projects import ProjectInSearch
from taiga_selector.services import Session
from taiga_selector.ui.presenters import ProjectSelectorPresenter
from taiga_selector.ui.viewmodels import ResultState
from taiga_selector.utils.output import console, print_json

app = typer.Typer(help="Search and select the current Taiga project")


def create_presenter() -> ProjectSelectorPresenter:
    """Build the presenter used by the commands (patched in tests)."""
    return ProjectSelectorPresenter()


def _raise_if_error(state: ResultState) -> None:
    if not state.is_error:
        return
    if isinstance(state.error, TaigaSelectorError):
        raise state.error
    raise ProviderError(state.message or "Failed to load projects", cause=str(state.error))


async def load_pages(
    presenter: ProjectSelectorPresenter, query: str, pages: int
) -> ResultState:
    """Start the presenter and load up to ``pages`` pages for ``query``.

    Stops early at the last page or on the first error.
    """
    task = presenter.start()
    if presenter.set_query(query):
        # The empty-query fetch from start() was dropped
        task = None

    fetched = 0
    while fetched < pages:
        if task is None:
            task = presenter.load_next_page()
        if task is None:
            break
        await task
        task = None
        fetched += 1
        if presenter.results.value.is_error:
            break

    return presenter.results.value


def _role(project: ProjectInSearch) -> str:
    if project.is_owner:
        return "owner"
    if project.is_admin:
        return "admin"
    if project.is_member:
        return "member"
    return ""


def render_projects(projects: Sequence[ProjectInSearch], start: int = 1) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Slug", style="dim")
    table.add_column("Role", style="green")

    for position, project in enumerate(projects, start=start):
        table.add_row(str(position), str(project.id), project.name, project.slug, _role(project))

    console.print(table)


@app.command("search")
@safe_operation("search projects")
def search(
    query: str = typer.Argument("", help="Text to search for (empty lists all projects)"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Number of pages to load"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Search projects, loading one or more pages."""
    presenter = create_presenter()
    try:
        state = asyncio.run(load_pages(presenter, query, pages))
    finally:
        presenter.dispose()

    projects: list[ProjectInSearch] = list(state.items)
    if json_output:
        print_json([p.to_dict() for p in projects])
    elif projects:
        render_projects(projects)
        if not presenter.cursor.exhausted:
            console.print("[dim]More results available, use --pages to load more[/dim]")
    elif not state.is_error:
        console.print("[yellow]No projects found[/yellow]")

    _raise_if_error(state)


async def choose_project(
    presenter: ProjectSelectorPresenter,
    query: str,
    index: int | None = None,
) -> ProjectInSearch | None:
    """Pick a project by 1-based ``index`` or by prompting.

    Pages are loaded on demand: until ``index`` is reached, or when the
    user answers 'm' at the prompt.
    """
    state = await load_pages(presenter, query, pages=1)

    if index is not None:
        while len(state.items) < index and not state.is_error:
            task = presenter.load_next_page()
            if task is None:
                break
            await task
            state = presenter.results.value
        _raise_if_error(state)
        if index > len(state.items):
            raise typer.BadParameter(
                f"No project at position {index} ({len(state.items)} found)",
                param_hint="--index",
            )
        return state.items[index - 1]

    shown = 0
    while True:
        _raise_if_error(state)
        if not state.items:
            console.print("[yellow]No projects found[/yellow]")
            return None

        if len(state.items) > shown:
            render_projects(state.items[shown:], start=shown + 1)
            shown = len(state.items)

        can_load_more = not presenter.cursor.exhausted
        prompt = "Project number"
        if can_load_more:
            prompt += ", 'm' for more"
        prompt += ", 'q' to quit"
        choice = typer.prompt(prompt).strip().lower()

        if choice == "q":
            return None
        if choice == "m":
            task = presenter.load_next_page() if can_load_more else None
            if task is not None:
                await task
                state = presenter.results.value
            if len(state.items) == shown and not state.is_error:
                console.print("[dim]No more projects[/dim]")
            continue
        if choice.isdigit() and 1 <= int(choice) <= len(state.items):
            return state.items[int(choice) - 1]

        console.print(f"[red]Invalid choice: {choice!r}[/red]")


@app.command("select")
@safe_operation("select project")
def select(
    query: str = typer.Argument("", help="Text to search for"),
    index: Optional[int] = typer.Option(
        None, "--index", "-i", min=1, help="Pick the project at this position without prompting"
    ),
):
    """Choose the current project."""
    presenter = create_presenter()
    try:
        project = asyncio.run(choose_project(presenter, query, index))
        if project is None:
            console.print("[dim]No project selected[/dim]")
            return
        presenter.select_project(project)
    finally:
        presenter.dispose()

    console.print(f"[green]Current project:[/green] [bold]{project.name}[/bold] (#{project.id})")


@app.command("current")
@safe_operation("show current project")
def current(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the current project."""
    session = Session()
    if json_output:
        print_json(session.to_dict())
        return
    if not session.has_project:
        console.print("[yellow]No project selected[/yellow]")
        return
    console.print(
        f"[bold]{session.current_project_name}[/bold] (#{session.current_project_id})"
    )


@app.command("clear")
@safe_operation("clear current project")
def clear():
    """Forget the current project."""
    Session().clear()
    console.print("[green]Current project cleared[/green]")
