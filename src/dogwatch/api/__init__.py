"""DogNZB API access."""

from .dognzb import (
    DogNZBApi,
    DogNZBApiError,
    Getter,
    ParseError,
    ServiceError,
    TransportError,
    decode_add_remove,
    decode_list,
)
from .transport import SessionGetter

__all__ = [
    "DogNZBApi",
    "DogNZBApiError",
    "Getter",
    "ParseError",
    "ServiceError",
    "TransportError",
    "decode_add_remove",
    "decode_list",
    "SessionGetter",
]
