"""Wiring of the target resolver for command handlers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from hubrowse.core.config import Config, ConfigError
from hubrowse.core.git import GitClient, GitError
from hubrowse.core.models import ProjectInfo
from hubrowse.core.prompts import ConsolePrompt
from hubrowse.core.resolver import ResolutionError, TargetResolver

# Errors a command reports as "ERROR: ..." with exit code 1
TARGET_ERRORS = (ConfigError, GitError, ResolutionError)


def resolve_target(
    project: Optional[str] = None,
    profile: Optional[str] = None,
    console: Optional[Console] = None,
    config_file: Optional[Path] = None,
    repo_path: Optional[str] = None,
) -> ProjectInfo:
    """Build a resolver for the current directory and resolve the target once.

    Args:
        project: Explicit "owner/name" project
        profile: Explicit profile (domain) name
        console: Console for notices and the token prompt (default: stderr)
        config_file: Profile store location (default: XDG location)
        repo_path: Directory to inspect (default: current directory)

    Returns:
        Resolved ProjectInfo

    Raises:
        ConfigError, GitError, ResolutionError: See TargetResolver.collect_target
    """
    resolver = TargetResolver(
        config=Config(config_file),
        git=GitClient(repo_path),
        prompt=ConsolePrompt(console),
    )
    return resolver.collect_target(project or "", profile or "")
