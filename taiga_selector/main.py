#!/usr/bin/env python3
"""
Main CLI entry point for taiga-selector
"""

import typer

from taiga_selector import __version__
from taiga_selector.commands.config_cmd import config
from taiga_selector.commands.projects import app as projects_app
from taiga_selector.utils.logging import set_verbosity


def version():
    """Show taiga-selector version"""
    typer.echo(f"taiga-selector version {__version__}")


def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    taiga-selector - search your Taiga projects and pick the current one

    [bold]Examples:[/bold]

    List projects:
        [cyan]taiga-selector projects search[/cyan]

    Search and choose interactively:
        [cyan]taiga-selector projects select mobile[/cyan]

    Show the current project:
        [cyan]taiga-selector projects current[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    set_verbosity(verbose=verbose, quiet=quiet)


def create_app() -> typer.Typer:
    """Create and configure the main CLI application"""
    app = typer.Typer(
        name="taiga-selector",
        help="Search Taiga projects and choose the current one",
        rich_markup_mode="rich",
        no_args_is_help=True,
    )
    app.callback()(main)
    app.add_typer(projects_app, name="projects")
    app.command()(config)
    app.command()(version)
    return app


app = create_app()


def run():
    """Console script entry point"""
    app()


if __name__ == "__main__":
    run()
