"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from hubrowse.core.config import Config, default_config_path

console = Console()


def command(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing configuration"
    ),
    show_config: bool = typer.Option(
        False, "--show", help="Show default configuration without creating"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Config file location (default: XDG config dir)"
    ),
):
    """Initialize hubrowse profile configuration (XDG-compliant).

    Creates ~/.config/hubrowse/config.yaml with a commented template.
    Profiles for domains found in git remotes are added automatically later.
    """
    target_file = Path(config_file).expanduser() if config_file else default_config_path()

    if show_config:
        console.print("\n[bold]Default configuration:[/bold]\n")
        syntax = Syntax(
            Config.get_default_config(), "yaml", theme="monokai", line_numbers=True
        )
        console.print(syntax)
        console.print(f"\n[dim]Would be created at: {target_file}[/dim]")
        return

    if target_file.exists() and not force:
        console.print(
            Panel(
                f"[yellow]Configuration already exists:[/yellow]\n"
                f"{target_file}\n\n"
                f"Use [bold]--force[/bold] to overwrite or [bold]--show[/bold] to view default config",
                title="⚠️  Config Exists",
                border_style="yellow",
            )
        )
        raise typer.Exit(code=1)

    try:
        if force and target_file.exists():
            target_file.unlink()
            console.print("[yellow]Removed existing config[/yellow]")

        config_path = Config(target_file).create_default()

        console.print(
            Panel(
                f"[green]✓[/green] Configuration created: [bold]{config_path}[/bold]\n\n"
                f"[dim]Add a profile per domain, or run any command inside a\n"
                f"repository to be asked for a token.[/dim]",
                title="✅ Hubrowse Initialized",
                border_style="green",
            )
        )
    except FileExistsError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[red]ERROR:[/red] Failed to create configuration: {e}")
        raise typer.Exit(code=1)
