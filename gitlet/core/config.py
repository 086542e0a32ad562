"""Configuration management for Gitlet.

This module provides a clean interface for reading and writing
both repository-local and global configuration files.
"""

import configparser
import logging
import os
import zlib
from pathlib import Path
from typing import Dict, Optional

DEFAULT_BRANCH = 'main'
DEFAULT_LOG_LEVEL = 'WARNING'


class Config:
    """
    Manages Gitlet configuration files.

    Configuration is stored in INI format:
    - Global config: ~/.gitletconfig
    - Repository config: .gitlet/config

    Repository config takes precedence over global config.
    Environment variables take highest precedence.
    """

    GLOBAL_CONFIG_PATH = Path.home() / '.gitletconfig'

    def __init__(self, repo_config_path: Optional[Path] = None):
        """
        Initialize Config manager.

        Args:
            repo_config_path: Path to repository config file, if in a repo
        """
        self.repo_config_path = repo_config_path
        self._global_config = None
        self._repo_config = None

    @property
    def global_config(self) -> configparser.ConfigParser:
        """Load and return global configuration."""
        if self._global_config is None:
            self._global_config = configparser.ConfigParser()
            if self.GLOBAL_CONFIG_PATH.exists():
                self._global_config.read(self.GLOBAL_CONFIG_PATH)
        return self._global_config

    @property
    def repo_config(self) -> Optional[configparser.ConfigParser]:
        """Load and return repository configuration."""
        if self._repo_config is None and self.repo_config_path:
            self._repo_config = configparser.ConfigParser()
            if self.repo_config_path.exists():
                self._repo_config.read(self.repo_config_path)
        return self._repo_config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Priority order (highest to lowest):
        1. Environment variables (GITLET_<SECTION>_<KEY>)
        2. Repository config
        3. Global config
        4. Fallback value

        Args:
            section: Config section (e.g., 'core', 'init')
            key: Config key (e.g., 'loglevel', 'defaultbranch')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        env_key = f"GITLET_{section.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        if self.repo_config and self.repo_config.has_option(section, key):
            return self.repo_config.get(section, key)

        if self.global_config.has_option(section, key):
            return self.global_config.get(section, key)

        return fallback

    def set(self, section: str, key: str, value: str, global_config: bool = False) -> None:
        """
        Set a configuration value.

        Args:
            section: Config section
            key: Config key
            value: Value to set
            global_config: If True, write to global config; otherwise repo config
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.repo_config_path:
                raise ValueError("No repository config path available")
            config = self.repo_config
            config_path = self.repo_config_path

        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(config_path, 'w') as f:
            config.write(f)

    def unset(self, section: str, key: str, global_config: bool = False) -> bool:
        """
        Remove a configuration value.

        Returns:
            True if value was removed, False if it didn't exist
        """
        if global_config:
            config = self.global_config
            config_path = self.GLOBAL_CONFIG_PATH
        else:
            if not self.repo_config:
                return False
            config = self.repo_config
            config_path = self.repo_config_path

        if not config.has_option(section, key):
            return False

        config.remove_option(section, key)

        if not config.options(section):
            config.remove_section(section)

        with open(config_path, 'w') as f:
            config.write(f)

        return True

    def list_all(self) -> Dict[str, Dict[str, str]]:
        """
        List all configuration values, repository values overriding global ones.

        Returns:
            Dict of sections to key-value dicts
        """
        result: Dict[str, Dict[str, str]] = {}

        for section in self.global_config.sections():
            result.setdefault(section, {}).update(self.global_config.items(section))

        if self.repo_config:
            for section in self.repo_config.sections():
                result.setdefault(section, {}).update(self.repo_config.items(section))

        return result

    def default_branch(self) -> str:
        """Branch created by init."""
        return self.get('init', 'defaultbranch', DEFAULT_BRANCH)

    def log_level(self) -> int:
        """Logging level from core.loglevel, as a logging module constant."""
        name = (self.get('core', 'loglevel', DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.WARNING

    def compression_level(self) -> int:
        """zlib level for new objects from core.compression."""
        value = self.get('core', 'compression')
        if value is None:
            return zlib.Z_DEFAULT_COMPRESSION
        try:
            level = int(value)
        except ValueError:
            return zlib.Z_DEFAULT_COMPRESSION
        return level if -1 <= level <= 9 else zlib.Z_DEFAULT_COMPRESSION


def split_key(dotted: str):
    """
    Split 'section.key' into its parts.

    Raises:
        ValueError: If there is no dot
    """
    section, sep, key = dotted.partition('.')
    if not sep or not section or not key:
        raise ValueError(f"Invalid config key: {dotted} (expected section.key)")
    return section, key


def get_config(repo=None) -> Config:
    """
    Get a Config instance.

    Args:
        repo: Repository instance, or None for global-only config

    Returns:
        Config instance
    """
    if repo:
        return Config(repo.config_file)
    return Config()
