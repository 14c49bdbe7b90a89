"""Data models shared by the target resolver and the command layer.

Profiles are persisted per domain by the config store, remotes are read from
the local git repository on every invocation, and ProjectInfo is the resolved
target handed to every command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

HTTPS_SCHEME = "https://"
API_PATH = "api/v4"


@dataclass
class Profile:
    """Credential and default project stored for one domain."""

    token: str = ""
    default_project: str = ""


@dataclass(frozen=True)
class RemoteInfo:
    """A git remote pointing at a hosted repository."""

    remote_name: str
    domain: str
    project: str

    @property
    def owner(self) -> str:
        return self.project.split("/", 1)[0]

    @property
    def repository(self) -> str:
        return self.project.split("/", 1)[-1]


def is_project_name(project: str) -> bool:
    """Check that a project is "owner/name" with both parts present."""
    parts = project.split("/")
    return len(parts) == 2 and all(part.strip() for part in parts)


def join_url(*parts: str) -> str:
    """Join URL segments with exactly one slash between them.

    Leading and trailing slashes on each segment are dropped and empty
    segments are skipped.

    Args:
        *parts: URL segments, the first may carry a scheme

    Returns:
        Joined URL string
    """
    segments = [part.strip("/") for part in parts]
    return "/".join(segment for segment in segments if segment)


@dataclass(frozen=True)
class ProjectInfo:
    """Resolved domain, project and credential for one command invocation.

    Attributes:
        domain: Host name of the hosting service
        project: Repository in "owner/name" form
        token: Access token for the domain
        current_branch: Upstream branch of the checked out branch
        profile: Profile the domain and token were taken from
    """

    domain: str = ""
    project: str = ""
    token: str = ""
    current_branch: str = ""
    profile: Optional[Profile] = None

    @property
    def owner(self) -> str:
        return self.project.split("/", 1)[0] if self.project else ""

    @property
    def repository(self) -> str:
        return self.project.split("/", 1)[-1] if self.project else ""

    def base_url(self) -> str:
        return HTTPS_SCHEME + self.domain.strip("/")

    def api_url(self) -> str:
        return join_url(self.base_url(), API_PATH)

    def repository_url(self) -> str:
        return join_url(self.base_url(), self.project)

    def subpage_url(self, subpage: str) -> str:
        """URL of a page below the repository, e.g. "issues" or "releases/tag"."""
        return join_url(self.repository_url(), subpage)

    def branch_url(self, branch: str) -> str:
        return join_url(self.repository_url(), "tree", branch)

    def branch_path(self, branch: str, path: str) -> str:
        return join_url(self.branch_url(branch), path)

    def branch_file_with_line(self, branch: str, path: str, line: str) -> str:
        return join_url(self.branch_path(branch, path), str(line))
