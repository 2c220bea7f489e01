"""Show taiga-selector environment settings."""

import typer
from rich.table import Table

from taiga_selector.config import get_config_dir, get_env_info, validate_all_env_vars
from taiga_selector.utils.output import console, print_json


def config(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show environment settings (sensitive values are masked)."""
    info = get_env_info()

    if json_output:
        print_json({"config_dir": str(get_config_dir()), "env": info})
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Variable", style="bold")
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description", style="dim")

    for name, details in info.items():
        if details["is_set"]:
            style = "green" if details["valid"] else "red"
            value = f"[{style}]{details['value']}[/{style}]"
        else:
            value = "[dim]unset[/dim]"
        default = details["default"] if details["default"] is not None else ""
        table.add_row(name, value, str(default), details["description"])

    console.print(table)
    console.print(f"[dim]Config directory: {get_config_dir()}[/dim]")

    errors = validate_all_env_vars()
    for error in errors:
        console.print(f"[red]{error}[/red]")
    if errors:
        raise typer.Exit(1)
