"""Target command implementation."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from hubrowse.core.models import ProjectInfo
from hubrowse.utils.target import TARGET_ERRORS, resolve_target

console = Console()


def mask_token(token: str) -> str:
    """Hide all but the last four characters of a token."""
    if not token:
        return ""
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


def render_target(info: ProjectInfo) -> Table:
    table = Table(title="Resolved target", show_header=False, title_justify="left")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Domain", info.domain or "[dim]-[/dim]")
    table.add_row("Project", info.project or "[dim]-[/dim]")
    table.add_row("Branch", info.current_branch or "[dim]-[/dim]")
    table.add_row("Token", mask_token(info.token) or "[dim]-[/dim]")
    if info.domain:
        table.add_row("API", info.api_url())
    if info.domain and info.project:
        table.add_row("Repository", info.repository_url())
    return table


def command(
    project: Optional[str] = typer.Option(
        None, "--project", "-p", help="Project as owner/name (overrides git remote)"
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-P", help="Profile (domain) to use (overrides git remote)"
    ),
):
    """Show the domain, project and branch commands would work against."""
    try:
        info = resolve_target(project, profile)
    except TARGET_ERRORS as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(render_target(info))
