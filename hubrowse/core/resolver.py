"""Target resolution: which domain, project and token a command works against.

The resolver layers three passes over an empty ProjectInfo, each one taking
precedence over the previous:

- Default config: the configured default domain and its default project
- Local repository: the hosted remote of the current git worktree
- Explicit arguments: --profile and --project given on the command line

The local repository pass may register unknown domains and ask for missing
tokens. Both are saved to the config store immediately, so running the same
command again neither re-registers nor re-prompts.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Protocol

from hubrowse.core.config import Config
from hubrowse.core.models import Profile, ProjectInfo, RemoteInfo, is_project_name
from hubrowse.core.prompts import InteractivePrompt, PromptError

logger = logging.getLogger(__name__)

# Remotes on domains starting with this prefix are accepted without a profile
HOSTED_DOMAIN_PREFIX = "github"
PREFERRED_REMOTE = "origin"
TOKEN_QUESTION = "Please enter GitHub private token"


class ResolutionError(Exception):
    """Raised when no usable target can be determined."""

    pass


class GitRemoteInspector(Protocol):
    """Read-only view of the local git repository."""

    def is_inside_work_tree(self) -> bool: ...

    def list_remotes(self) -> List[RemoteInfo]: ...

    def current_upstream_branch(self) -> str: ...


def filter_hosted_remotes(remotes: List[RemoteInfo], config: Config) -> List[RemoteInfo]:
    """Keep remotes on a hosted-brand domain or on a domain with a profile."""
    return [
        remote
        for remote in remotes
        if remote.domain.startswith(HOSTED_DOMAIN_PREFIX) or config.has_domain(remote.domain)
    ]


def select_remote_per_domain(remotes: List[RemoteInfo]) -> List[RemoteInfo]:
    """Reduce remotes to one per domain, sorted by domain name.

    Within a domain the remote named "origin" wins; otherwise the first one
    seen is kept.

    Args:
        remotes: Remotes in the order git lists them

    Returns:
        One RemoteInfo per distinct domain
    """
    by_domain: Dict[str, List[RemoteInfo]] = {}
    for remote in remotes:
        by_domain.setdefault(remote.domain, []).append(remote)

    selected = []
    for domain in sorted(by_domain):
        candidates = by_domain[domain]
        chosen = next(
            (r for r in candidates if r.remote_name == PREFERRED_REMOTE), candidates[0]
        )
        selected.append(chosen)
    return selected


class TargetResolver:
    """Combines config profiles, git remotes and operator input into a ProjectInfo.

    Attributes:
        config: Profile store, saved whenever the resolver changes it
        git: Inspector for the current working directory
        prompt: Channel for notices and the token question
    """

    def __init__(self, config: Config, git: GitRemoteInspector, prompt: InteractivePrompt):
        self.config = config
        self.git = git
        self.prompt = prompt

    def collect_target(self, project: str = "", profile: str = "") -> ProjectInfo:
        """Resolve the target for one command invocation.

        Args:
            project: Explicit "owner/name" project, overrides everything else
            profile: Explicit profile (domain) name, overrides everything else

        Returns:
            Composed ProjectInfo

        Raises:
            ConfigError: If the store is unreadable or the named profile is absent
            GitError: If the repository cannot be inspected
            ResolutionError: If no remote qualifies, no token can be obtained,
                the project is not "owner/name", or a project has no domain
        """
        info = ProjectInfo()

        is_git_dir = self.git.is_inside_work_tree()
        logger.debug(f"Inside git worktree: {is_git_dir}")

        info = self._collect_from_default_config(info)
        if is_git_dir:
            info = self._collect_from_local_repository(info)
        info = self._collect_from_args(info, project, profile)

        if info.domain and not info.token:
            # Default or explicit profile without a token
            self._ensure_token(info.domain)
            info = replace(info, token=self.config.get_token(info.domain))

        if info.project and not info.domain:
            raise ResolutionError(
                f"No domain for project [{info.project}]: pass a profile or set default_domain"
            )

        logger.info(f"Resolved target: domain={info.domain} project={info.project}")
        return info

    def _collect_from_default_config(self, info: ProjectInfo) -> ProjectInfo:
        """Seed domain, token and project from the configured default domain."""
        domain = self.config.default_domain
        if not domain:
            return info

        profile = self.config.get_default_profile()
        if profile is None:
            logger.warning(f"Default domain [{domain}] has no profile, ignoring it")
            return info

        info = replace(info, domain=domain, token=profile.token, profile=profile)
        if is_project_name(profile.default_project):
            info = replace(info, project=profile.default_project)
        elif profile.default_project:
            logger.warning(
                f"Ignoring default_project [{profile.default_project}] of {domain}: "
                "expected owner/name"
            )

        logger.debug(f"Default config selected domain {domain}")
        return info

    def _collect_from_local_repository(self, info: ProjectInfo) -> ProjectInfo:
        """Take domain, token, project and branch from the hosted git remote."""
        remotes = filter_hosted_remotes(self.git.list_remotes(), self.config)
        if not remotes:
            raise ResolutionError("No matching remote repository found")

        target = select_remote_per_domain(remotes)[0]
        domain = target.domain
        logger.debug(f"Using remote {target.remote_name} ({domain}/{target.project})")

        self._register_domain(domain)
        self._ensure_token(domain)

        profile = self.config.get_profile(domain)
        info = replace(
            info,
            profile=profile,
            domain=domain,
            token=profile.token,
            project=target.project,
        )

        return replace(info, current_branch=self.git.current_upstream_branch())

    def _collect_from_args(self, info: ProjectInfo, project: str, profile: str) -> ProjectInfo:
        """Apply the explicit profile and project, which win over everything else."""
        if profile:
            stored = self.config.get_profile(profile)
            info = replace(info, profile=stored, domain=profile, token=stored.token)

        if project:
            if not is_project_name(project):
                raise ResolutionError(
                    f"Invalid project [{project}]: expected owner/name"
                )
            info = replace(info, project=project)

        return info

    def _register_domain(self, domain: str) -> None:
        """Add an empty profile for a domain seen for the first time and save it."""
        if self.config.has_domain(domain):
            return

        self.prompt.notify(f"Domain [{domain}] is not configured yet, adding a profile.")
        self.config.set_profile(domain, Profile())
        self._persist()
        self.prompt.notify("Saved profile for new domain.")

    def _ensure_token(self, domain: str) -> None:
        """Ask for and save a token when the domain has none."""
        if self.config.get_token(domain):
            return

        self.prompt.notify(f"No private token stored for domain [{domain}].")
        try:
            token = self.prompt.ask(TOKEN_QUESTION)
        except PromptError as e:
            raise ResolutionError(f"Cannot read private token, {e}") from e
        if not token:
            raise ResolutionError("Cannot read private token, empty input")

        self.config.set_token(domain, token)
        self._persist()
        self.prompt.notify("Saved private token.")

    def _persist(self) -> None:
        """Write the store back to disk."""
        path = self.config.save()
        logger.info(f"Saved profiles to {path}")
