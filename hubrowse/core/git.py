"""Git inspection wrapper using subprocess for remote and branch discovery.

This module provides a GitClient class that answers the questions the target
resolver asks about the local repository: whether the working directory is a
worktree, which remotes it has, and which upstream branch is checked out.
"""

from __future__ import annotations

import logging
import re
import subprocess
from typing import List, Optional

from hubrowse.core.models import RemoteInfo

logger = logging.getLogger(__name__)

# git@host:owner/repo.git
_SCP_URL = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")
# ssh://git@host:22/owner/repo, https://user@host/owner/repo.git, git://host/owner/repo
_SCHEME_URL = re.compile(
    r"^(?:ssh|git|https?|git\+ssh)://(?:[^@/]+@)?(?P<host>[^:/]+)(?::\d+)?/(?P<path>.+)$"
)


class GitError(Exception):
    """Exception raised when git operations fail."""

    pass


def parse_remote_url(url: str) -> Optional[tuple]:
    """Split a remote URL into its domain and "owner/repo" project.

    Args:
        url: Remote URL as printed by `git remote -v`

    Returns:
        (domain, project) tuple, or None if the URL is not a hosted repository
    """
    match = _SCHEME_URL.match(url) or _SCP_URL.match(url)
    if not match:
        return None

    path = match.group("path").strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    segments = [s for s in path.split("/") if s]
    # Nested groups (group/sub/repo) have no owner/repo form
    if len(segments) != 2:
        return None

    return match.group("host").lower(), "/".join(segments)


class GitClient:
    """Wrapper for read-only git subprocess commands with proper error handling."""

    def __init__(self, repo_path: Optional[str] = None):
        """Initialize GitClient.

        Args:
            repo_path: Path inside the git repository. If None, uses current directory.
        """
        self.repo_path = repo_path

    def _run_git_command(
        self, args: List[str], check: bool = True
    ) -> subprocess.CompletedProcess:
        """Run a git command with proper error handling.

        Args:
            args: Git command arguments (e.g., ["git", "status"])
            check: Whether to raise exception on non-zero exit code

        Returns:
            CompletedProcess object with command results

        Raises:
            GitError: If git is missing, or the command fails and check=True
        """
        try:
            result = subprocess.run(
                args,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise GitError(f"Git executable not found: {e}") from e
        except OSError as e:
            raise GitError(f"Unexpected error running git command: {e}") from e

        if check and result.returncode != 0:
            raise GitError(
                f"Git command failed: {' '.join(args)}\n"
                f"Exit code: {result.returncode}\n"
                f"stderr: {result.stderr.strip()}"
            )
        return result

    def is_inside_work_tree(self) -> bool:
        """Check whether the working directory is inside a git worktree.

        Returns:
            True inside a worktree, False otherwise (including a bare repository)

        Raises:
            GitError: If git itself cannot be run
        """
        result = self._run_git_command(
            ["git", "rev-parse", "--is-inside-work-tree"], check=False
        )
        return result.returncode == 0 and result.stdout.strip() == "true"

    def list_remotes(self) -> List[RemoteInfo]:
        """List fetch remotes that point at a hosted repository.

        Remotes keep the order git prints them in. URLs that are not of the
        form host + owner/repo (local paths, for instance) are skipped.

        Returns:
            List of RemoteInfo

        Raises:
            GitError: If remotes cannot be listed
        """
        result = self._run_git_command(["git", "remote", "-v"])

        remotes: List[RemoteInfo] = []
        for line in result.stdout.splitlines():
            fields = line.split()
            if len(fields) < 2:
                continue
            if len(fields) >= 3 and fields[2] != "(fetch)":
                continue

            name, url = fields[0], fields[1]
            parsed = parse_remote_url(url)
            if parsed is None:
                logger.debug(f"Skipping remote {name}: unrecognised URL {url}")
                continue

            domain, project = parsed
            remotes.append(RemoteInfo(remote_name=name, domain=domain, project=project))

        return remotes

    def current_branch(self) -> str:
        """Return the checked out local branch name.

        Raises:
            GitError: If HEAD cannot be read or is detached
        """
        result = self._run_git_command(["git", "rev-parse", "--abbrev-ref", "HEAD"])
        branch = result.stdout.strip()
        if not branch or branch == "HEAD":
            raise GitError("Cannot read current branch: HEAD is detached")
        return branch

    def current_upstream_branch(self) -> str:
        """Return the upstream branch of the current branch without its remote.

        Falls back to the local branch name when no upstream is configured.

        Returns:
            Branch name, e.g. "main" for an upstream of "origin/main"

        Raises:
            GitError: If the current branch cannot be determined
        """
        branch = self.current_branch()

        result = self._run_git_command(
            ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
            check=False,
        )
        upstream = result.stdout.strip()
        if result.returncode != 0 or not upstream:
            logger.debug(f"No upstream for {branch}, using local branch name")
            return branch

        remote = self._run_git_command(
            ["git", "config", "--get", f"branch.{branch}.remote"], check=False
        ).stdout.strip()
        if remote and upstream.startswith(remote + "/"):
            return upstream[len(remote) + 1:]
        return upstream.split("/", 1)[-1]
