"""Data models for DogNZB watchlist items and responses."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ResourceKind(Enum):
    """Kind of watchlist, valued by the query parameter carrying its item id."""
    MOVIE = "movieid"
    TV = "showid"

    @property
    def param(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return "movies" if self is ResourceKind.MOVIE else "tv"


@dataclass(frozen=True)
class WatchlistItem:
    """Item from a DogNZB watchlist."""
    title: str
    imdb_id: Optional[str] = None
    tvdb_id: Optional[str] = None
    fields: Mapping[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def identifier(self) -> Optional[str]:
        """Id to pass back to add/remove for this item."""
        return self.imdb_id or self.tvdb_id


@dataclass
class ListResult:
    """Decoded watchlist listing."""
    items: list[WatchlistItem] = field(default_factory=list)
    error_code: int = 0
    error_description: str = ""

    @property
    def failed(self) -> bool:
        return self.error_code != 0


@dataclass
class AddRemoveResult:
    """Acknowledgment returned by an add or remove request."""
    error_code: str = ""
    error_description: str = ""
    fields: dict = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return self.error_code != ""
