"""Application context for CLI."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ...config import Config, ConfigError
from .exceptions import ConfigurationError


@dataclass
class DogwatchContext:
    """Shared application context passed through Click commands."""

    config: Config
    config_path: Path
    api_key: Optional[str] = None

    @classmethod
    def create(cls, config_path: Optional[str] = None, api_key: Optional[str] = None):
        """
        Factory method to create context from a config path.

        Args:
            config_path: Path to config file, or None for the default
            api_key: API key given on the command line or in the environment

        Returns:
            DogwatchContext instance

        Raises:
            ConfigurationError: If config is invalid
        """
        try:
            config = Config(config_path)
        except ConfigError as e:
            raise ConfigurationError(f"Failed to load configuration: {e}")

        return cls(
            config=config,
            config_path=config.config_path,
            api_key=api_key,
        )

    def resolve_api_key(self) -> str:
        """
        Resolve the API key: command line > environment > config file.

        Raises:
            ConfigurationError: If no API key is available
        """
        api_key = self.api_key or self.config.get("dognzb.api_key")
        if not api_key:
            raise ConfigurationError("missing required flag: -a, --api")
        return str(api_key)
