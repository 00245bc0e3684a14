"""Core CLI infrastructure."""

from .context import DogwatchContext
from .decorators import with_dognzb
from .exceptions import ConfigurationError, DogwatchError
from .plugin_loader import DogwatchGroup, WatchlistGroup

__all__ = [
    # Context
    "DogwatchContext",
    # Decorators
    "with_dognzb",
    # Exceptions
    "DogwatchError",
    "ConfigurationError",
    # Groups
    "DogwatchGroup",
    "WatchlistGroup",
]
