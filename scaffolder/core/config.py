"""Scaffolder runtime configuration and settings."""
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from scaffolder.models.settings import SettingsFile

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "scaffolder" / "config.yml"

ENV_PREFIX = "SCAFFOLDER_"


class ConfigError(Exception):
    """Raised when the config file cannot be read or fails validation."""


@dataclass(frozen=True)
class ScaffolderConfig:
    """Runtime configuration for scaffolding runs.

    Attributes:
        cargo_bin: cargo executable used for project creation and dependency adds
        git_bin: git executable used to create the initial commit
        author_name: Author and committer name of the initial commit
        author_email: Author and committer email of the initial commit
        commit_message: Message of the initial commit
        log_file: Optional log file path (enables file logging when set)
        verbose: Log at DEBUG level without passing --verbose
    """

    cargo_bin: str = "cargo"
    git_bin: str = "git"
    author_name: str = "Rust Backend Scaffolder"
    author_email: str = "scaffolder@example.com"
    commit_message: str = "Initial commit: Scaffolded project"
    log_file: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_file(cls, path: Path, base: Optional["ScaffolderConfig"] = None) -> "ScaffolderConfig":
        """Overlay settings from a YAML file onto ``base`` (defaults if omitted)."""
        base = base or cls()
        try:
            with open(path) as f:
                raw = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        # Empty file means no overrides
        if raw is None:
            return base
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        try:
            settings = SettingsFile(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        overrides = settings.model_dump(exclude_none=True)
        return replace(base, **overrides)

    @classmethod
    def from_env(cls, base: Optional["ScaffolderConfig"] = None) -> "ScaffolderConfig":
        """Overlay environment variables onto ``base``.

        Environment variables:
            SCAFFOLDER_CARGO_BIN: cargo executable
            SCAFFOLDER_GIT_BIN: git executable
            SCAFFOLDER_AUTHOR_NAME: initial commit author name
            SCAFFOLDER_AUTHOR_EMAIL: initial commit author email
            SCAFFOLDER_COMMIT_MESSAGE: initial commit message
            SCAFFOLDER_LOG_FILE: log file path
            SCAFFOLDER_VERBOSE: debug logging ("true", "1", "yes")

        Returns:
            ScaffolderConfig instance with values from environment or ``base``

        Raises:
            ConfigError: If a variable fails the same checks as the config file
        """
        base = base or cls()
        overrides = {}
        for field in fields(cls):
            value = os.getenv(f"{ENV_PREFIX}{field.name.upper()}")
            if value:
                overrides[field.name] = value

        try:
            settings = SettingsFile(**overrides)
        except ValidationError as e:
            raise ConfigError(f"Invalid {ENV_PREFIX}* environment variable: {e}") from e
        return replace(base, **settings.model_dump(exclude_none=True))

    @classmethod
    def load(cls) -> "ScaffolderConfig":
        """Build config from defaults, config file, then environment."""
        config = cls()
        config_file = find_config_file()
        if config_file is not None:
            config = cls.from_file(config_file, base=config)
        return cls.from_env(base=config)


def find_config_file() -> Optional[Path]:
    """Locate the active config file, if any.

    ``SCAFFOLDER_CONFIG`` wins and must exist; otherwise the default
    location is used when present.
    """
    if env_config := os.environ.get(f"{ENV_PREFIX}CONFIG"):
        return Path(env_config)

    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE

    return None


# Global config instance (can be overridden)
_config: Optional[ScaffolderConfig] = None


def get_config() -> ScaffolderConfig:
    """Get the global scaffolder configuration.

    Returns:
        ScaffolderConfig instance (loaded on first use)
    """
    global _config
    if _config is None:
        _config = ScaffolderConfig.load()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
