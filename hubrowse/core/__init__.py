"""Core business logic modules."""

from hubrowse.core.config import Config, ConfigError
from hubrowse.core.git import GitClient, GitError
from hubrowse.core.models import Profile, ProjectInfo, RemoteInfo
from hubrowse.core.prompts import ConsolePrompt, PromptError
from hubrowse.core.resolver import ResolutionError, TargetResolver

__all__ = [
    "Config",
    "ConfigError",
    "ConsolePrompt",
    "GitClient",
    "GitError",
    "Profile",
    "ProjectInfo",
    "PromptError",
    "RemoteInfo",
    "ResolutionError",
    "TargetResolver",
]
