"""Browse command implementations.

Each command resolves the target once and opens one page of the project:
the issue, pull request or release list, a single item, or a file on the
current branch.
"""

from typing import Optional

import typer
from rich.console import Console

from hubrowse.core.models import ProjectInfo
from hubrowse.utils.browser import BrowserError, open_url
from hubrowse.utils.target import TARGET_ERRORS, resolve_target

console = Console()

PROJECT_OPTION = typer.Option(
    None, "--project", "-p", help="Project as owner/name (overrides git remote)"
)
PROFILE_OPTION = typer.Option(
    None, "--profile", "-P", help="Profile (domain) to use (overrides git remote)"
)
PRINT_ONLY_OPTION = typer.Option(
    False, "--print-only", help="Print the URL instead of opening a browser"
)


def issue_page(number: Optional[int] = None) -> str:
    return "issues" if number is None else f"issues/{number}"


def pull_request_page(number: Optional[int] = None) -> str:
    return "pulls" if number is None else f"pull/{number}"


def release_page(tag: Optional[str] = None) -> str:
    return "releases" if not tag else f"releases/tag/{tag}"


def _resolve(project: Optional[str], profile: Optional[str]) -> ProjectInfo:
    try:
        info = resolve_target(project, profile)
    except TARGET_ERRORS as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if not info.domain or not info.project:
        console.print(
            "[red]ERROR:[/red] No project resolved.\n"
            "[yellow]Hint:[/yellow] Run inside a repository, set a default_domain "
            "with a default_project, or pass --profile and --project"
        )
        raise typer.Exit(code=1)
    return info


def _open(url: str, print_only: bool) -> None:
    if print_only:
        console.print(url, soft_wrap=True, highlight=False)
        return

    try:
        open_url(url)
    except BrowserError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e
    console.print(f"[dim]Opened {url}[/dim]")


def issue_command(
    number: Optional[int] = typer.Argument(None, help="Issue number (default: issue list)"),
    project: Optional[str] = PROJECT_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    print_only: bool = PRINT_ONLY_OPTION,
):
    """Open an issue, or the issue list, in the browser."""
    info = _resolve(project, profile)
    _open(info.subpage_url(issue_page(number)), print_only)


def pull_request_command(
    number: Optional[int] = typer.Argument(
        None, help="Pull request number (default: pull request list)"
    ),
    project: Optional[str] = PROJECT_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    print_only: bool = PRINT_ONLY_OPTION,
):
    """Open a pull request, or the pull request list, in the browser."""
    info = _resolve(project, profile)
    _open(info.subpage_url(pull_request_page(number)), print_only)


def release_command(
    tag: Optional[str] = typer.Argument(None, help="Release tag (default: release list)"),
    project: Optional[str] = PROJECT_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    print_only: bool = PRINT_ONLY_OPTION,
):
    """Open a release, or the release list, in the browser."""
    info = _resolve(project, profile)
    _open(info.subpage_url(release_page(tag)), print_only)


def repository_command(
    path: Optional[str] = typer.Argument(None, help="File path in the repository"),
    line: Optional[int] = typer.Option(None, "--line", "-l", help="Line in the file"),
    branch: Optional[str] = typer.Option(
        None, "--branch", "-b", help="Branch (default: upstream of current branch)"
    ),
    project: Optional[str] = PROJECT_OPTION,
    profile: Optional[str] = PROFILE_OPTION,
    print_only: bool = PRINT_ONLY_OPTION,
):
    """Open the repository, or a file on a branch, in the browser."""
    info = _resolve(project, profile)
    explicit_branch = branch
    branch = branch or info.current_branch

    if line is not None and not path:
        console.print("[red]ERROR:[/red] --line requires a file path")
        raise typer.Exit(code=1)

    if not path:
        url = info.branch_url(explicit_branch) if explicit_branch else info.repository_url()
    elif not branch:
        console.print(
            "[red]ERROR:[/red] No branch known for this target.\n"
            "[yellow]Hint:[/yellow] Pass --branch when outside a repository"
        )
        raise typer.Exit(code=1)
    elif line is None:
        url = info.branch_path(branch, path)
    else:
        url = info.branch_file_with_line(branch, path, str(line))

    _open(url, print_only)
