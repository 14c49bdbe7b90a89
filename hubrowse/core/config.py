"""XDG-compliant profile store for hubrowse.

Profiles are keyed by domain and persisted as YAML. The store is loaded once
per invocation and written back as a whole on every save.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import yaml

from hubrowse.core.models import Profile

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HUBROWSE_CONFIG"


class ConfigError(Exception):
    """Raised when the profile store cannot be read or a profile is missing."""

    pass


def normalize_domain(domain: str) -> str:
    """Profile keys are host names, compared case-insensitively."""
    return str(domain).strip().lower()


def default_config_path() -> Path:
    """Return the config file path, honouring HUBROWSE_CONFIG and XDG_CONFIG_HOME."""
    explicit = os.getenv(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    xdg_config = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "hubrowse" / "config.yaml"


class Config:
    """Per-domain profile store backed by a YAML file.

    Attributes:
        config_file: Path to the YAML file
        default_domain: Domain used when nothing else selects one
        profiles: Mapping of domain to Profile
    """

    def __init__(self, config_file: Optional[Path] = None):
        """Load the store from disk.

        Args:
            config_file: Path to the YAML file (default: XDG location)

        Raises:
            ConfigError: If the file exists but cannot be parsed
        """
        self.config_file = Path(config_file) if config_file else default_config_path()
        self.config_dir = self.config_file.parent
        self.default_domain = ""
        self.profiles: Dict[str, Profile] = {}

        if self.config_file.exists():
            self._load()

    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_file.exists()

    def _load(self) -> None:
        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config {self.config_file}: {e}") from e

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError(
                f"Invalid config {self.config_file}: top level must be a mapping"
            )

        self.default_domain = normalize_domain(data.get("default_domain") or "")

        profiles = data.get("profiles") or {}
        if not isinstance(profiles, dict):
            raise ConfigError(
                f"Invalid config {self.config_file}: 'profiles' must be a mapping"
            )

        for domain, entry in profiles.items():
            entry = entry or {}
            if not isinstance(entry, dict):
                raise ConfigError(
                    f"Invalid config {self.config_file}: profile '{domain}' must be a mapping"
                )
            self.profiles[normalize_domain(domain)] = Profile(
                token=str(entry.get("token") or ""),
                default_project=str(entry.get("default_project") or ""),
            )

        logger.debug(f"Loaded {len(self.profiles)} profiles from {self.config_file}")

    def has_domain(self, domain: str) -> bool:
        return normalize_domain(domain) in self.profiles

    def get_profile(self, domain: str) -> Profile:
        """Return the profile stored for a domain.

        Raises:
            ConfigError: If no profile exists for the domain
        """
        try:
            return self.profiles[normalize_domain(domain)]
        except KeyError:
            raise ConfigError(f"Profile not found for domain [{domain}]") from None

    def get_default_profile(self) -> Optional[Profile]:
        if not self.default_domain:
            return None
        return self.profiles.get(normalize_domain(self.default_domain))

    def get_token(self, domain: str) -> str:
        """Return the token for a domain, or "" when the domain is unknown."""
        profile = self.profiles.get(normalize_domain(domain))
        return profile.token if profile else ""

    def set_profile(self, domain: str, profile: Profile) -> None:
        self.profiles[normalize_domain(domain)] = profile

    def set_token(self, domain: str, token: str) -> None:
        profile = self.profiles.setdefault(normalize_domain(domain), Profile())
        profile.token = token

    def to_dict(self) -> dict:
        return {
            "default_domain": self.default_domain,
            "profiles": {
                domain: {
                    "token": profile.token,
                    "default_project": profile.default_project,
                }
                for domain, profile in sorted(self.profiles.items())
            },
        }

    def save(self) -> Path:
        """Write the whole store back to disk atomically.

        Returns:
            Path of the written config file

        Raises:
            ConfigError: If the file cannot be written
        """
        temp_path = None
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)

            # Write atomically via temp file + rename
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=self.config_dir,
                delete=False,
                suffix=".yaml.tmp",
            ) as f:
                temp_path = f.name
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

            # Tokens live in this file
            os.chmod(temp_path, 0o600)
            Path(temp_path).replace(self.config_file)
        except (OSError, yaml.YAMLError) as e:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)
            raise ConfigError(f"Failed to save config {self.config_file}: {e}") from e

        logger.debug(f"Config saved to {self.config_file}")
        return self.config_file

    @staticmethod
    def get_default_config() -> str:
        """Return default configuration YAML template."""
        return """# Hubrowse Configuration
# Location: ~/.config/hubrowse/config.yaml
# Follows XDG Base Directory Specification

# Domain used when the current directory is not a git repository
# default_domain: github.com

profiles:
  # One entry per hosting domain. Domains found in git remotes are
  # registered here automatically and the token is asked for once.
  # github.com:
  #   token: ""
  #   default_project: owner/repository
"""

    def create_default(self) -> Path:
        """Create default configuration file.

        Returns:
            Path to created config file

        Raises:
            FileExistsError: If config already exists
        """
        if self.config_file.exists():
            raise FileExistsError(
                f"Configuration already exists: {self.config_file}\n"
                "Remove it first or use --force to overwrite"
            )

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(self.get_default_config())
        os.chmod(self.config_file, 0o600)

        return self.config_file
