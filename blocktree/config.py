"""
Configuration management for Blocktree.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage all settings and makes it easy to
modify behavior without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages configuration loading and access for Blocktree.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}

            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration root must be a mapping, got {type(loaded).__name__}")

            self._config = loaded
            logger.info(f"Configuration loaded from {self.config_path}")

        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load configuration: {e}")
            # Fall back to default configuration
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "file": None
            },
            "ids": {
                "generator": "uuid",
                "prefix": "id"
            },
            "import": {
                "default_path": ".",
                "state_file": "blocktree_last_state.json",
                "extension": ".md"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "ids.generator")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("logging.level")  # Returns "INFO"
            config.get("import.extension")  # Returns ".md"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return self.get("logging.level", "INFO")

    @property
    def log_format(self) -> str:
        """Get logging format string."""
        return self.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @property
    def log_filename(self) -> Optional[str]:
        """Get log file name, None to log to stdout only."""
        return self.get("logging.file")

    @property
    def id_generator_kind(self) -> str:
        """Get the identifier generator kind ("uuid" or "counter")."""
        return self.get("ids.generator", "uuid")

    @property
    def id_prefix(self) -> str:
        """Get the prefix used by counter identifiers."""
        return self.get("ids.prefix", "id")

    @property
    def import_path(self) -> str:
        """Get the default directory to import markdown from."""
        return self.get("import.default_path", ".")

    @property
    def state_filename(self) -> str:
        """Get change-detection state file name."""
        return self.get("import.state_file", "blocktree_last_state.json")

    @property
    def markdown_extension(self) -> str:
        """Get the extension of markdown files to import."""
        return self.get("import.extension", ".md")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
