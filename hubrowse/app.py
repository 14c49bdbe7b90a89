"""Main Typer application instance."""

import logging

import typer
from rich.logging import RichHandler

from hubrowse.commands import browse, init, target

app = typer.Typer(
    name="hubrowse",
    help="Browse issues, pull requests and releases of the project in the current repository",
    add_completion=False
)

issue_app = typer.Typer(help="Issues of the resolved project")
pr_app = typer.Typer(help="Pull requests of the resolved project")
release_app = typer.Typer(help="Releases of the resolved project")


def configure_logging(verbose: bool) -> None:
    """Route log records through rich, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_logging(verbose)


# Register commands
app.command(name="init")(init.command)
app.command(name="target")(target.command)
app.command(name="browse")(browse.repository_command)

issue_app.command(name="browse")(browse.issue_command)
pr_app.command(name="browse")(browse.pull_request_command)
release_app.command(name="browse")(browse.release_command)

app.add_typer(issue_app, name="issue")
app.add_typer(pr_app, name="pr")
app.add_typer(release_app, name="release")


def main():
    """Entry point for pip-installed command."""
    app()


if __name__ == "__main__":
    main()
