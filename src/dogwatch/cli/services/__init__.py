"""Service layer for API wrappers and resource management."""

from .dognzb import DogNZBService

__all__ = [
    "DogNZBService",
]
