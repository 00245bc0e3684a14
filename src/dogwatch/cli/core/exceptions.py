"""Custom CLI exceptions."""


class DogwatchError(Exception):
    """Base exception for dogwatch CLI errors."""
    pass


class ConfigurationError(DogwatchError):
    """Raised when configuration is invalid or missing."""
    pass
