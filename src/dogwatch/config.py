"""Configuration management."""

import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_CONFIG_PATH = "config.yaml"


class ConfigError(Exception):
    """Configuration error."""
    pass


class Config:
    """Configuration container."""

    def __init__(self, config_path: Optional[str] = None):
        """Load configuration from YAML file.

        A missing file is only an error when its path was given explicitly;
        otherwise the configuration is empty and values come from flags and
        the environment.

        Args:
            config_path: Path to config.yaml, or None for the default

        Raises:
            ConfigError: If config is invalid
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH)
        self.data = {}

        if not self.config_path.exists():
            if config_path:
                raise ConfigError(f"Config file not found: {config_path}")
            return

        try:
            with open(self.config_path) as f:
                self.data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")

        self._validate()

    def _validate(self):
        """Validate configuration shape."""
        if not isinstance(self.data, dict):
            raise ConfigError("Config file must contain a mapping")

        dognzb = self.data.get("dognzb", {})
        if not isinstance(dognzb, dict):
            raise ConfigError("dognzb must be a mapping in config")

        timeout = dognzb.get("timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError("dognzb.timeout must be a positive number of seconds")

    def get(self, key: str, default=None):
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'dognzb.api_key')
            default: Default value if not found

        Returns:
            Config value or default
        """
        keys = key.split(".")
        value = self.data

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value


def setup_logging(config: Config, verbose: bool = False):
    """Setup logging configuration.

    Args:
        config: Config object
        verbose: Force debug output on the console
    """
    log_level_str = str(config.get("logging.level", "WARNING")).upper()
    log_level = logging.DEBUG if verbose else getattr(logging, log_level_str, logging.WARNING)
    log_file = config.get("logging.file")

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
